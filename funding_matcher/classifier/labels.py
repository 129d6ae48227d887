"""Industry label normalisation and Korean display names."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..models.industry import Industry

# Legacy and free-form labels found on organization profiles
INDUSTRY_ALIASES: Mapping[str, Industry] = MappingProxyType({
    "BIOHEALTH": Industry.BIO_HEALTH,
    "BIO": Industry.BIO_HEALTH,
    "HEALTH": Industry.BIO_HEALTH,
    "IT": Industry.ICT,
    "SOFTWARE": Industry.ICT,
    "MANUFACTURE": Industry.MANUFACTURING,
    "ENV": Industry.ENVIRONMENT,
    "CONTENT": Industry.CULTURAL,
    "MARINE": Industry.MARINE_FISHERIES,
    "AGRI": Industry.AGRICULTURE,
    "VET": Industry.VETERINARY,
    "TRANSPORT": Industry.TRANSPORTATION,
    "OTHER": Industry.GENERAL,
})

INDUSTRY_KOREAN_LABELS: Mapping[Industry, str] = MappingProxyType({
    Industry.BIO_HEALTH: "바이오/헬스케어",
    Industry.ICT: "ICT/정보통신",
    Industry.MANUFACTURING: "제조업",
    Industry.ENERGY: "에너지",
    Industry.ENVIRONMENT: "환경",
    Industry.CONSTRUCTION: "건설",
    Industry.DEFENSE: "국방/방위",
    Industry.CULTURAL: "문화/콘텐츠",
    Industry.GENERAL: "일반/범용",
    Industry.MARINE_FISHERIES: "해양/수산",
    Industry.MARINE_SECURITY: "해양안전/경비",
    Industry.FORESTRY: "산림/임업",
    Industry.AGRICULTURE: "농업/축산",
    Industry.VETERINARY: "수의/동물의약",
    Industry.AEROSPACE: "우주항공",
    Industry.TRANSPORTATION: "교통/물류",
})


def canonical_label(label: Optional[str]) -> str:
    """Uppercase and unify separators (``bio-health`` → ``BIO_HEALTH``)."""
    if not isinstance(label, str) or not label:
        return ""
    return label.strip().upper().replace("-", "_").replace(" ", "_")


def normalize_industry(label: Optional[Union[str, Industry]]) -> Industry:
    """Map a category label onto the Industry enum. Unknown labels become GENERAL."""
    if isinstance(label, Industry):
        return label
    key = canonical_label(label)
    if key in Industry.__members__:
        return Industry[key]
    return INDUSTRY_ALIASES.get(key, Industry.GENERAL)


def industry_korean_label(industry: Union[str, Industry]) -> str:
    """Korean display name, falling back to the raw label."""
    if isinstance(industry, Industry):
        return INDUSTRY_KOREAN_LABELS[industry]
    key = canonical_label(industry)
    if key in Industry.__members__:
        return INDUSTRY_KOREAN_LABELS[Industry[key]]
    return industry
