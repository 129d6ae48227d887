"""Ministry → industry lookup.

Built from 450+ NTIS announcements (2025-2026) across 25 ministries. The
ministry alone determines most assignments in the Korean R&D ecosystem, so
ministries with neighbouring domains map to DISTINCT categories
(해양수산부 vs 해양경찰청, 농림축산식품부 vs 산림청).

Each entry is an ordered tuple: the first industry is the ministry's default,
every member counts as the ministry agreeing with a keyword winner.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..models.industry import Industry

MINISTRY_INDUSTRY_MAP: Mapping[str, tuple[Industry, ...]] = MappingProxyType({
    # Human health
    "보건복지부": (Industry.BIO_HEALTH,),
    "식품의약품안전처": (Industry.BIO_HEALTH,),
    "질병관리청": (Industry.BIO_HEALTH,),

    # Marine: fisheries vs security
    "해양수산부": (Industry.MARINE_FISHERIES,),
    "해양경찰청": (Industry.MARINE_SECURITY,),

    # Agriculture: farming vs forestry. VETERINARY is reached through keyword overrides.
    "농림축산식품부": (Industry.AGRICULTURE,),
    "농촌진흥청": (Industry.AGRICULTURE,),
    "산림청": (Industry.FORESTRY,),

    # Domain-specific
    "우주항공청": (Industry.AEROSPACE,),
    "기후에너지환경부": (Industry.ENVIRONMENT, Industry.ENERGY),
    "환경부": (Industry.ENVIRONMENT,),
    "원자력안전위원회": (Industry.ENERGY,),
    "문화체육관광부": (Industry.CULTURAL,),
    "국가유산청": (Industry.CULTURAL,),
    "문화재청": (Industry.CULTURAL,),

    # Cross-domain
    "과학기술정보통신부": (Industry.ICT, Industry.BIO_HEALTH),
    "산업통상자원부": (Industry.MANUFACTURING, Industry.ENERGY),
    "산업통상부": (Industry.MANUFACTURING, Industry.ENERGY),
    "국토교통부": (Industry.CONSTRUCTION, Industry.TRANSPORTATION),
    "교육부": (Industry.GENERAL,),

    # Government / defense
    "국방부": (Industry.DEFENSE,),
    "방위사업청": (Industry.DEFENSE,),
    "경찰청": (Industry.ICT,),
    "소방청": (Industry.CONSTRUCTION,),

    # Regulatory / policy
    "기상청": (Industry.ENVIRONMENT,),
    "기획재정부": (Industry.GENERAL,),
    "고용노동부": (Industry.GENERAL,),
    "개인정보보호위원회": (Industry.ICT,),
    "행정안전부": (Industry.ICT,),
})

# 중소벤처기업부 is intentionally absent: ~80% of its programs are
# cross-industry and get classified by keywords alone.

MINISTRY_CONFIDENCE = 0.3


def lookup_ministry(
    ministry: Optional[str],
    table: Mapping[str, tuple[Industry, ...]] = MINISTRY_INDUSTRY_MAP,
) -> tuple[Industry, ...]:
    """Return the ministry's industries, or an empty tuple if unknown."""
    if not isinstance(ministry, str) or not ministry:
        return ()
    return table.get(ministry.strip(), ())
