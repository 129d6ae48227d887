"""SemanticMatchResult - Sub-domain compatibility between an organization and a program.

Ephemeral: computed on every match-generation pass and handed to the
composite ranking step, never persisted.
"""

from enum import Enum
from pydantic import BaseModel, Field, model_validator


class SemanticReason(str, Enum):
    """Outcome code of a semantic sub-domain comparison."""

    NO_SEMANTIC_DATA = "NO_SEMANTIC_DATA"
    SEMANTIC_MATCH = "SEMANTIC_MATCH"
    PARTIAL_MATCH = "PARTIAL_MATCH"
    ORGANISM_MISMATCH = "ORGANISM_MISMATCH"              # BIO_HEALTH: human vs animal vs plant
    MARKET_MISMATCH = "MARKET_MISMATCH"                  # ICT: consumer vs enterprise vs government
    ENERGY_SOURCE_MISMATCH = "ENERGY_SOURCE_MISMATCH"    # ENERGY: solar vs battery vs nuclear
    SECTOR_MISMATCH = "SECTOR_MISMATCH"                  # AGRICULTURE: crops vs livestock
    DOMAIN_MISMATCH = "DOMAIN_MISMATCH"                  # DEFENSE: land vs naval vs aerospace
    INFERRED_MARKET_MATCH = "INFERRED_MARKET_MATCH"
    INFERRED_MARKET_MISMATCH = "INFERRED_MARKET_MISMATCH"

    def __str__(self) -> str:
        return self.value


MAX_SEMANTIC_SCORE = 25


class SemanticMatchResult(BaseModel):
    """Bounded semantic sub-score with field-level evidence."""

    score: int = Field(default=0, ge=0, le=MAX_SEMANTIC_SCORE, description="0-25 points")
    reason: SemanticReason = Field(default=SemanticReason.NO_SEMANTIC_DATA)
    is_hard_filter: bool = Field(default=False, description="Match must be blocked entirely")
    matching_fields: list[str] = Field(default_factory=list)
    mismatched_fields: list[str] = Field(default_factory=list)
    explanation: str = Field(default="", description="Korean explanation for end users")

    @model_validator(mode="after")
    def check_invariants(self) -> "SemanticMatchResult":
        """A hard block scores zero and a field is never both matched and mismatched."""
        if self.is_hard_filter and self.score != 0:
            raise ValueError(f"Hard-filtered result must score 0, got {self.score}")
        overlap = set(self.matching_fields) & set(self.mismatched_fields)
        if overlap:
            raise ValueError(f"Fields both matched and mismatched: {sorted(overlap)}")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "score": 0,
                "reason": "ORGANISM_MISMATCH",
                "is_hard_filter": True,
                "matching_fields": [],
                "mismatched_fields": ["targetOrganism"],
                "explanation": "대상 생물 불일치: 기관은 동물, 과제는 인체 대상입니다.",
            }
        }
