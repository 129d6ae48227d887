"""Keyword → industry rule table.

Keywords were extracted from real NTIS announcement titles. Matching is a
plain substring scan; Korean has no case to normalise. Broad, frequently
co-occurring terms carry a reduced weight so they refine rather than decide.

Narrower industries that live inside a broader domain (VETERINARY in
BIO_HEALTH/AGRICULTURE, FORESTRY in AGRICULTURE, the two MARINE splits) win
over the broader default only through an explicit OverrideRule.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from ..models.industry import Industry


@dataclass(frozen=True)
class KeywordRule:
    """A single weighted keyword."""

    keyword: str
    weight: float = 1.0


@dataclass(frozen=True)
class OverrideRule:
    """Narrower industry that may displace a broader one.

    The narrow industry wins when it has at least ``min_matches`` distinct
    keyword hits or any one of its ``decisive_keywords``.
    """

    narrow: Industry
    broad: Industry
    min_matches: int = 2
    decisive_keywords: frozenset[str] = field(default_factory=frozenset)

    def is_satisfied(self, narrow_hits: Iterable[str]) -> bool:
        hits = set(narrow_hits)
        return len(hits) >= self.min_matches or bool(hits & self.decisive_keywords)


def _rules(*entries) -> tuple[KeywordRule, ...]:
    """Build rules from bare keywords (weight 1.0) or (keyword, weight) pairs."""
    built = []
    for entry in entries:
        if isinstance(entry, tuple):
            built.append(KeywordRule(*entry))
        else:
            built.append(KeywordRule(entry))
    return tuple(built)


# Scan order is table order; it also breaks score ties.
KEYWORD_RULES: Mapping[Industry, tuple[KeywordRule, ...]] = MappingProxyType({
    Industry.BIO_HEALTH: _rules(
        "바이오", "의료", "의료기기", "신약", "치료", "치료제", "진단", "백신",
        "세포", "줄기세포", "재생의료", "항암", "치매", "정밀의료", "헬스케어",
        "희귀질환", "간호", "중독", "재활", "감염병", "독성", "의약품", "임상",
        "임상시험", "유전체", "게놈", "뇌연구", "노화", "면역", "인체", "질병",
    ),
    Industry.ICT: _rules(
        "ICT", "AI", "인공지능", ("디지털", 0.5), "소프트웨어", "SW", "정보통신",
        ("데이터", 0.5), "빅데이터", "클라우드", "반도체", "양자", "양자컴퓨팅",
        "네트워크", "5G", "6G", "사이버", "사이버보안", "블록체인", "메타버스",
        "로봇", "자율주행", "초연결", "IoT", "개인정보", ("플랫폼", 0.5), "XR",
    ),
    Industry.MARINE_FISHERIES: _rules(
        ("해양", 0.5), "수산", "해안", "어업", "양식", "항만", "해운", "조선",
        "선박", "극지", "심해", "연안", "해저", "어선", "수중", "해초", "해조류",
    ),
    Industry.MARINE_SECURITY: _rules(
        "VTS", "해양재난", "선박충돌", "해양안전", "해양경비", "해양경찰",
        "수색구조", "해상교통", "유도선",
    ),
    Industry.AGRICULTURE: _rules(
        "농업", "농촌", "축산", "식품", "종자", "농기계", "스마트팜", "가축",
        "곡물", "원예", "작물", "비료", "농약", "육종", "영농", "품종",
        "수직농장", "마이크로바이옴", "그린바이오", "로컬푸드",
    ),
    Industry.VETERINARY: _rules(
        "반려동물", "동물의약품", "동물의료기기", "동물감염병", "수의사",
        "수의학", "가축질병", "경제동물", "난치성질환극복", "동물백신", "동물약품",
    ),
    Industry.FORESTRY: _rules(
        "산림", "임업", "목재", "목구조", "산불", "대형산불", "산사태", "임도",
        "임산물", "한국임업진흥원",
    ),
    Industry.AEROSPACE: _rules(
        "우주", "항공", "위성", "로켓", "발사체", "태양계", "드론", "UAM",
        "천문", "탐사",
    ),
    Industry.CONSTRUCTION: _rules(
        "건설", "건축", "주거", ("도시", 0.5), ("인프라", 0.5), "터널", "교량",
        "소방", "방재", "재난", "스마트시티",
    ),
    Industry.TRANSPORTATION: _rules(
        "도로", "철도", "교통", "물류", "고속도로", "지하철",
    ),
    Industry.ENVIRONMENT: _rules(
        "환경", "기후", "대기", "폐기물", "오염", "생태", "탄소", "탄소중립",
        "기상", "수질", "미세먼지", ("녹색", 0.5), "탄소감축",
    ),
    Industry.ENERGY: _rules(
        "에너지", "배터리", "수소", "태양광", "신재생", "원자력", "원전", "전력",
        "풍력", "핵융합",
    ),
    Industry.DEFENSE: _rules(
        "국방", "방위", "군사", "무기", "전투", "안보",
    ),
    Industry.CULTURAL: _rules(
        "문화", "콘텐츠", "관광", "체육", "스포츠", "유산", "문화재", "예술",
        "미디어", "방송", "게임", "K-콘텐츠", "K-뷰티", "뷰티",
    ),
    Industry.MANUFACTURING: _rules(
        "제조", "소재", "부품", ("장비", 0.5), "기계", "금속", "섬유", "화학",
        "플라스틱", "나노", "스마트공장", "중소제조", "제조산재", "산재예방",
        "제조기업", "제조혁신", "소부장",
    ),
})

_VETERINARY_DECISIVE = frozenset({
    "반려동물", "동물의약품", "동물의료기기", "동물백신", "동물약품",
    "수의사", "수의학", "가축질병", "동물감염병",
})

OVERRIDE_RULES: tuple[OverrideRule, ...] = (
    OverrideRule(Industry.VETERINARY, Industry.BIO_HEALTH, 2, _VETERINARY_DECISIVE),
    OverrideRule(Industry.VETERINARY, Industry.AGRICULTURE, 2, _VETERINARY_DECISIVE),
    OverrideRule(
        Industry.FORESTRY, Industry.AGRICULTURE, 2,
        frozenset({"산림", "임업", "임산물", "산불", "산사태"}),
    ),
    OverrideRule(
        Industry.MARINE_SECURITY, Industry.MARINE_FISHERIES, 2,
        frozenset({"VTS", "해양경찰", "해양안전", "해양재난", "수색구조"}),
    ),
    # Fisheries terms show up in enforcement programs too (불법 어업 단속),
    # so no single keyword is decisive here.
    OverrideRule(Industry.MARINE_FISHERIES, Industry.MARINE_SECURITY, 2),
)

# A keyword winner with no override rule needs this many distinct hits
# to beat the ministry's industry.
STRONG_KEYWORD_MIN = 3

KEYWORD_CONFIDENCE_STEP = 0.15
KEYWORD_CONFIDENCE_CAP = 0.7
UNCLASSIFIED_CONFIDENCE = 0.2

# Local venture / regional innovation programs: any industry, one region only
REGIONAL_KEYWORDS: tuple[str, ...] = (
    "로컬벤처",
    "로컬크리에이터",
    "로컬푸드",
    "지역자원",
    "지역기반",
    "지역특화",
    "지역혁신선도",
    "지역혁신",
    "지역주도",
)
