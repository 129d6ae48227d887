"""Per-category semantic sub-domain schema.

A broad category (BIO_HEALTH, ICT, ...) groups sub-niches that must never
match each other: a veterinary pharma company is not a candidate for a human
vaccine program. Each category declares its attribute fields, at most one
HARD FILTER field whose mismatch blocks the match outright, and Korean
display labels for explanations.

MANUFACTURING and ENVIRONMENT have no hard filter: matching there stays
flexible and mismatches only lower the score.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..classifier.labels import canonical_label
from ..models.industry import Industry
from ..models.semantic_match_result import SemanticReason


@dataclass(frozen=True)
class CategorySchema:
    """Semantic attribute layout of one industry category."""

    category: Industry
    fields: tuple[str, ...]
    hard_filter_field: Optional[str] = None
    mismatch_reason: Optional[SemanticReason] = None
    display_labels: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def label(self, field_name: str, value: str) -> str:
        return self.display_labels.get(field_name, {}).get(value, value)


def _labels(**by_field: dict[str, str]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType({name: MappingProxyType(labels) for name, labels in by_field.items()})


FIELD_NAMES_KO: Mapping[str, str] = MappingProxyType({
    "targetOrganism": "대상 생물",
    "targetMarket": "목표 시장",
    "targetIndustry": "대상 산업",
    "energySource": "에너지원",
    "targetSector": "대상 부문",
    "targetDomain": "운용 영역",
    "targetArea": "대상 환경 영역",
    "applicationArea": "적용 분야",
})

TARGET_ORGANISM_LABELS = {
    "HUMAN": "인체",
    "ANIMAL": "동물",
    "PLANT": "식물",
    "MICROBIAL": "미생물",
    "MARINE": "해양생물",
}

ICT_TARGET_MARKET_LABELS = {
    "CONSUMER": "일반 소비자",
    "ENTERPRISE": "기업 (B2B)",
    "GOVERNMENT": "공공기관",
    "INDUSTRIAL": "산업용",
}

ENERGY_SOURCE_LABELS = {
    "SOLAR": "태양광",
    "WIND": "풍력",
    "NUCLEAR": "원자력",
    "HYDROGEN": "수소",
    "BATTERY": "배터리/이차전지",
    "GRID": "전력망",
    "FOSSIL": "화석연료",
    "GEOTHERMAL": "지열",
    "HYDRO": "수력",
}

AGRICULTURE_SECTOR_LABELS = {
    "CROPS": "작물",
    "LIVESTOCK": "축산",
    "AQUACULTURE": "양식/수산",
    "FORESTRY": "임업",
    "FOOD_PROCESSING": "식품가공",
}

DEFENSE_DOMAIN_LABELS = {
    "LAND": "지상",
    "NAVAL": "해상",
    "AEROSPACE": "항공우주",
    "CYBER": "사이버",
    "SPACE": "우주",
}

FIELD_SCHEMAS: Mapping[Industry, CategorySchema] = MappingProxyType({
    Industry.BIO_HEALTH: CategorySchema(
        category=Industry.BIO_HEALTH,
        fields=("targetOrganism", "applicationArea"),
        hard_filter_field="targetOrganism",
        mismatch_reason=SemanticReason.ORGANISM_MISMATCH,
        display_labels=_labels(
            targetOrganism=TARGET_ORGANISM_LABELS,
            applicationArea={
                "PHARMA": "의약품",
                "MEDICAL_DEVICE": "의료기기",
                "DIAGNOSTICS": "진단",
                "DIGITAL_HEALTH": "디지털 헬스케어",
                "VETERINARY_PHARMA": "동물의약품",
                "VETERINARY_DEVICE": "동물의료기기",
                "BIO_MATERIAL": "바이오소재",
                "COSMETICS": "화장품/바이오코스메틱",
                "FOOD_HEALTH": "건강기능식품",
            },
        ),
    ),
    Industry.ICT: CategorySchema(
        category=Industry.ICT,
        fields=("targetMarket", "applicationArea"),
        hard_filter_field="targetMarket",
        mismatch_reason=SemanticReason.MARKET_MISMATCH,
        display_labels=_labels(
            targetMarket=ICT_TARGET_MARKET_LABELS,
            applicationArea={
                "SOFTWARE": "소프트웨어",
                "HARDWARE": "하드웨어",
                "PLATFORM": "플랫폼",
                "INFRASTRUCTURE": "인프라",
                "SECURITY": "보안",
                "AI_ML": "AI/머신러닝",
                "DATA_ANALYTICS": "데이터 분석",
                "CLOUD": "클라우드",
                "IOT": "IoT",
                "NETWORK": "네트워크/통신",
                "GAMING": "게임",
                "METAVERSE": "메타버스/XR",
            },
        ),
    ),
    Industry.MANUFACTURING: CategorySchema(
        category=Industry.MANUFACTURING,
        fields=("targetIndustry", "applicationArea"),
        display_labels=_labels(
            targetIndustry={
                "AUTOMOTIVE": "자동차",
                "AEROSPACE": "항공우주",
                "ELECTRONICS": "전자",
                "MATERIALS": "소재",
                "MACHINERY": "기계",
                "SHIPBUILDING": "조선",
                "SEMICONDUCTOR": "반도체",
                "DISPLAY": "디스플레이",
                "ROBOTICS": "로봇",
            },
            applicationArea={
                "PARTS": "부품",
                "SYSTEMS": "시스템",
                "EQUIPMENT": "장비",
                "MATERIALS": "소재",
                "PROCESS": "공정",
            },
        ),
    ),
    Industry.ENERGY: CategorySchema(
        category=Industry.ENERGY,
        fields=("energySource", "applicationArea"),
        hard_filter_field="energySource",
        mismatch_reason=SemanticReason.ENERGY_SOURCE_MISMATCH,
        display_labels=_labels(
            energySource=ENERGY_SOURCE_LABELS,
            applicationArea={
                "GENERATION": "발전",
                "STORAGE": "저장",
                "DISTRIBUTION": "배전",
                "EFFICIENCY": "효율",
                "ELECTRIC_VEHICLE": "전기차",
            },
        ),
    ),
    Industry.AGRICULTURE: CategorySchema(
        category=Industry.AGRICULTURE,
        fields=("targetSector", "applicationArea"),
        hard_filter_field="targetSector",
        mismatch_reason=SemanticReason.SECTOR_MISMATCH,
        display_labels=_labels(
            targetSector=AGRICULTURE_SECTOR_LABELS,
            applicationArea={
                "CULTIVATION": "재배",
                "BREEDING": "육종",
                "PROCESSING": "가공",
                "DISTRIBUTION": "유통",
                "SMART_FARM": "스마트팜",
            },
        ),
    ),
    Industry.DEFENSE: CategorySchema(
        category=Industry.DEFENSE,
        fields=("targetDomain", "applicationArea"),
        hard_filter_field="targetDomain",
        mismatch_reason=SemanticReason.DOMAIN_MISMATCH,
        display_labels=_labels(
            targetDomain=DEFENSE_DOMAIN_LABELS,
            applicationArea={
                "WEAPONS": "무기체계",
                "SYSTEMS": "체계/시스템",
                "LOGISTICS": "군수",
                "C4ISR": "지휘통제통신",
                "PROTECTION": "방호",
            },
        ),
    ),
    Industry.ENVIRONMENT: CategorySchema(
        category=Industry.ENVIRONMENT,
        fields=("targetArea", "applicationArea"),
        display_labels=_labels(
            targetArea={
                "AIR": "대기",
                "WATER": "수질",
                "SOIL": "토양",
                "WASTE": "폐기물",
                "CARBON": "탄소",
                "ECOSYSTEM": "생태계",
            },
            applicationArea={
                "MONITORING": "모니터링",
                "TREATMENT": "처리",
                "PREVENTION": "예방",
                "RESTORATION": "복원",
                "RECYCLING": "재활용",
            },
        ),
    ),
})


def resolve_category(*labels: Optional[Union[str, Industry]]) -> Optional[Industry]:
    """First non-empty label, uppercased, as an Industry. None if unresolvable."""
    for label in labels:
        if isinstance(label, Industry):
            return label
        key = canonical_label(label)
        if not key:
            continue
        return Industry[key] if key in Industry.__members__ else None
    return None


def get_schema(category: Optional[Industry]) -> Optional[CategorySchema]:
    if category is None:
        return None
    return FIELD_SCHEMAS.get(category)


def field_name_ko(field_name: str) -> str:
    return FIELD_NAMES_KO.get(field_name, field_name)
