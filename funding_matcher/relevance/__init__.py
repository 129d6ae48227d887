"""Pairwise industry relevance."""

from .matrix import (
    INDUSTRY_RELEVANCE,
    SAME_INDUSTRY_RELEVANCE,
    UNKNOWN_ORG_RELEVANCE,
    UNRELATED_RELEVANCE,
    relevance,
)

__all__ = [
    "INDUSTRY_RELEVANCE",
    "SAME_INDUSTRY_RELEVANCE",
    "UNKNOWN_ORG_RELEVANCE",
    "UNRELATED_RELEVANCE",
    "relevance",
]
