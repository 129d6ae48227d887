"""Keyword-based target-market inference for ICT programs.

Fallback for programs ingested without structured semantic data. The signal
is soft: an inferred mismatch scores zero but never hard-blocks a match.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence

from ..models.funding_program import FundingProgram
from ..models.industry import Industry
from ..models.semantic_match_result import SemanticMatchResult, SemanticReason
from .field_schema import ICT_TARGET_MARKET_LABELS
from .values import FieldValue, value_codes

logger = logging.getLogger(__name__)

TARGET_MARKET_FIELD = "targetMarket"
INFERRED_MATCH_SCORE = 10
MIN_SIGNAL_COUNT = 2

MARKET_SIGNALS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "CONSUMER": ("소비자", "B2C", "개인용", "개인 사용자", "일반인", "가정", "생활", "모바일 앱"),
    "ENTERPRISE": ("B2B", "기업용", "SaaS", "엔터프라이즈", "ERP", "업무", "협업", "기업 고객"),
    "GOVERNMENT": ("공공", "행정", "정부", "지자체", "지방자치", "민원"),
    "INDUSTRIAL": ("산업용", "제조", "공장", "설비", "산업현장", "IIoT", "스마트팩토리", "플랜트"),
})


def count_market_signals(title: Optional[str], keywords: Sequence[str] = ()) -> dict[str, int]:
    """Signal-term occurrences per market across the title and each keyword."""
    if not isinstance(keywords, (list, tuple)):
        keywords = ()
    segments = [s.lower() for s in [title, *keywords] if isinstance(s, str) and s]
    counts = {}
    for market, signals in MARKET_SIGNALS.items():
        counts[market] = sum(
            segment.count(signal.lower()) for segment in segments for signal in signals
        )
    return counts


def infer_target_market(title: Optional[str], keywords: Sequence[str] = ()) -> Optional[str]:
    """Market with at least two signals that strictly beats every other market.

    Ties and weak signals return None.
    """
    counts = count_market_signals(title, keywords)
    best_market, best_count = max(counts.items(), key=lambda item: item[1])
    if best_count < MIN_SIGNAL_COUNT:
        return None
    if any(count >= best_count for market, count in counts.items() if market != best_market):
        return None
    return best_market


def _market_label(code: str) -> str:
    return ICT_TARGET_MARKET_LABELS.get(code, code)


def infer_market_match(
    org_market: Optional[FieldValue],
    title: Optional[str],
    keywords: Sequence[str] = (),
) -> SemanticMatchResult:
    """Compare the organization's target market with the market inferred from text."""

    if org_market is None:
        return SemanticMatchResult(
            reason=SemanticReason.NO_SEMANTIC_DATA,
            explanation="기관의 목표 시장 정보가 없어 세부 분야를 비교할 수 없습니다.",
        )

    inferred = infer_target_market(title, keywords)
    if inferred is None:
        return SemanticMatchResult(
            reason=SemanticReason.NO_SEMANTIC_DATA,
            explanation="키워드 분석으로 과제의 목표 시장을 판단할 수 없습니다.",
        )

    org_codes = value_codes(org_market)
    logger.debug("Inferred ICT market %s (org markets %s)", inferred, org_codes)

    if inferred in org_codes:
        return SemanticMatchResult(
            score=INFERRED_MATCH_SCORE,
            reason=SemanticReason.INFERRED_MARKET_MATCH,
            matching_fields=[TARGET_MARKET_FIELD],
            explanation=(
                f"키워드 분석 결과 {_market_label(inferred)} 대상 과제로 추정되며, "
                "기관의 목표 시장과 일치합니다."
            ),
        )

    org_labels = ", ".join(_market_label(code) for code in org_codes)
    return SemanticMatchResult(
        score=0,
        reason=SemanticReason.INFERRED_MARKET_MISMATCH,
        is_hard_filter=False,
        mismatched_fields=[TARGET_MARKET_FIELD],
        explanation=(
            f"키워드 분석 결과 {_market_label(inferred)} 대상 과제로 추정되어 "
            f"기관의 목표 시장({org_labels})과 다릅니다. (추정 결과이므로 참고용)"
        ),
    )


def _infer_ict(org_fields: dict[str, FieldValue], program: FundingProgram) -> SemanticMatchResult:
    return infer_market_match(org_fields.get(TARGET_MARKET_FIELD), program.title, program.keywords)


# Categories with a text-inference fallback for missing semantic data
INFERENCE_STRATEGIES: Mapping[
    Industry, Callable[[dict[str, FieldValue], FundingProgram], SemanticMatchResult]
] = MappingProxyType({
    Industry.ICT: _infer_ict,
})
