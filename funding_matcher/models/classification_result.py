"""ClassificationResult - Industry assignment for a funding program.

Computed once per program at ingestion and persisted as ``category``.
"""

from pydantic import BaseModel, Field

from .industry import Industry


class ClassificationResult(BaseModel):
    """Industry classification with confidence and keyword evidence."""

    industry: Industry = Field(default=Industry.GENERAL, description="Assigned industry, never null")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0, description="0.0 - 1.0")
    matched_keywords: list[str] = Field(
        default_factory=list, description="Every matched keyword, in scan order"
    )
    ministry_based: bool = Field(default=False, description="Ministry agreed with the final industry")

    model_config = {
        "json_schema_extra": {
            "example": {
                "industry": "BIO_HEALTH",
                "confidence": 0.75,
                "matched_keywords": ["바이오", "의약품", "임상"],
                "ministry_based": True,
            }
        },
    }


class ExtendedClassificationResult(ClassificationResult):
    """Classification plus regional-restriction detection."""

    requires_regional_filter: bool = Field(
        default=False, description="Program is limited to companies in a specific region"
    )
    regional_keywords: list[str] = Field(default_factory=list, description="Regional keywords found")
