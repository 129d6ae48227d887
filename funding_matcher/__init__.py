"""Industry classification and semantic sub-domain matching for R&D funding programs."""

from .classifier import classify, classify_extended
from .relevance import relevance
from .semantic import semantic_match

__all__ = ["classify", "classify_extended", "relevance", "semantic_match"]
