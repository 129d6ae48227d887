"""Shared Pydantic models for the matching core - contract with ingestion, ranking and UI."""

from .industry import Industry
from .funding_program import FundingProgram, Organization
from .classification_result import ClassificationResult, ExtendedClassificationResult
from .semantic_match_result import MAX_SEMANTIC_SCORE, SemanticMatchResult, SemanticReason

__all__ = [
    "Industry",
    "FundingProgram",
    "Organization",
    "ClassificationResult",
    "ExtendedClassificationResult",
    "SemanticMatchResult",
    "SemanticReason",
    "MAX_SEMANTIC_SCORE",
]
