"""Organization and FundingProgram - Records consumed by the matching core.

Both records are populated by external collaborators (profile editor, NTIS
ingestion) and arrive with camelCase keys. Only the fields the core reads are
modelled; everything is optional so a sparse record never fails validation.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class Organization(BaseModel):
    """Organization profile fields used for matching."""

    id: Optional[str] = Field(None, description="Organization identifier")
    name: Optional[str] = Field(None, description="Display name")
    industry_sector: Optional[str] = Field(None, description="Industry category label (e.g. BIO_HEALTH)")
    semantic_sub_domain: Optional[dict[str, Any]] = Field(
        None, description="Category-specific attributes, scalar or multi-select"
    )

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "id": "org-001",
                "name": "씨티씨백",
                "industrySector": "BIO_HEALTH",
                "semanticSubDomain": {
                    "targetOrganism": "ANIMAL",
                    "applicationArea": ["VETERINARY_PHARMA", "BIO_MATERIAL"],
                },
            }
        },
    }


class FundingProgram(BaseModel):
    """Funding program fields used for classification and matching."""

    id: Optional[str] = Field(None, description="Program identifier")
    title: str = Field(default="", description="Announcement title")
    description: Optional[str] = Field(None, description="Announcement body or program name")
    ministry: Optional[str] = Field(None, description="Administering ministry (부처명)")
    category: Optional[str] = Field(None, description="Persisted industry classification")
    keywords: list[str] = Field(default_factory=list, description="Ordered keywords from ingestion")
    semantic_sub_domain: Optional[dict[str, Any]] = Field(
        None, description="Category-specific attributes, scalar or multi-select"
    )

    @field_validator("title", mode="before")
    @classmethod
    def none_title(cls, v: Any) -> Any:
        """Treat a missing title as empty text."""
        return "" if v is None else v

    @field_validator("keywords", mode="before")
    @classmethod
    def none_keywords(cls, v: Any) -> Any:
        """Drop null keyword lists and null entries."""
        if v is None:
            return []
        if isinstance(v, list):
            return [k for k in v if isinstance(k, str)]
        return v

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "id": "prog-2026-0142",
                "title": "2026년 동물의약품 품질관리 강화 사업",
                "ministry": "농림축산식품부",
                "category": "VETERINARY",
                "keywords": ["동물의약품", "품질관리"],
                "semanticSubDomain": {
                    "targetOrganism": "ANIMAL",
                    "applicationArea": "VETERINARY_PHARMA",
                },
            }
        },
    }
