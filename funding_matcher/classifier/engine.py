"""Deterministic industry classification for funding programs.

Ministry lookup plus weighted keyword rules. Every decision can be traced
back to the matched keywords.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..models.classification_result import ClassificationResult, ExtendedClassificationResult
from ..models.industry import Industry
from .keyword_rules import REGIONAL_KEYWORDS
from .rules import DEFAULT_RULES, ClassifierRules

logger = logging.getLogger(__name__)


@dataclass
class _KeywordScan:
    """Result of scanning program text against the keyword table."""

    matched: list[str] = field(default_factory=list)
    scores: dict[Industry, float] = field(default_factory=dict)
    hits: dict[Industry, list[str]] = field(default_factory=dict)


def classify(
    title: Optional[str],
    description: Optional[str] = None,
    ministry: Optional[str] = None,
    rules: ClassifierRules = DEFAULT_RULES,
) -> ClassificationResult:
    """Classify a funding program into an industry.

    Decision order:
    1. Ministry lookup gives the default industry (if the ministry is known)
    2. Keyword scan over title + description picks the keyword candidate
    3. Narrow-over-broad override rules refine the candidate
    4. Ministry and candidate are reconciled; GENERAL when nothing matched

    Args:
        title: Announcement title (may be empty)
        description: Optional description or program name
        ministry: Optional administering ministry (부처명)
        rules: Rule tables, defaults to the built-in tables

    Returns:
        ClassificationResult; never raises
    """

    text = _compose_text(title, description)
    ministry_industries = rules.lookup_ministry(ministry)
    if ministry and not ministry_industries:
        logger.debug("Unknown ministry %r, keyword-only classification", ministry)

    scan = _scan_keywords(text, rules)
    candidate = _keyword_candidate(scan, ministry_industries, rules)
    if candidate is not None:
        candidate = _apply_narrow_overrides(candidate, scan, rules)

    industry = _reconcile(candidate, scan, ministry_industries, rules)
    ministry_based = industry in ministry_industries

    if not ministry_industries and candidate is None:
        return ClassificationResult(
            industry=Industry.GENERAL,
            confidence=rules.unclassified_confidence,
            matched_keywords=[],
            ministry_based=False,
        )

    confidence = _confidence(industry, scan, ministry_based, rules)
    logger.debug(
        "Classified %r as %s (ministry=%s, candidate=%s, confidence=%.2f)",
        text[:60],
        industry.value,
        ministry_industries[0].value if ministry_industries else None,
        candidate.value if candidate else None,
        confidence,
    )

    return ClassificationResult(
        industry=industry,
        confidence=confidence,
        matched_keywords=scan.matched,
        ministry_based=ministry_based,
    )


def classify_extended(
    title: Optional[str],
    description: Optional[str] = None,
    ministry: Optional[str] = None,
    rules: ClassifierRules = DEFAULT_RULES,
) -> ExtendedClassificationResult:
    """Classify and flag programs restricted to a single region.

    Local venture programs (e.g. "2026년 강원 로컬벤처기업 육성사업") accept
    any industry but only companies from the named region.
    """

    base = classify(title, description, ministry, rules)
    regional = regional_keywords(title, description)
    return ExtendedClassificationResult(
        **base.model_dump(),
        requires_regional_filter=bool(regional),
        regional_keywords=regional,
    )


def regional_keywords(title: Optional[str], description: Optional[str] = None) -> list[str]:
    text = _compose_text(title, description).lower()
    return [keyword for keyword in REGIONAL_KEYWORDS if keyword.lower() in text]


def is_regional_program(title: Optional[str], description: Optional[str] = None) -> bool:
    """Check if a program requires regional filtering based on keywords."""
    return bool(regional_keywords(title, description))


def _compose_text(title: Optional[str], description: Optional[str]) -> str:
    parts = [part for part in (title, description) if isinstance(part, str) and part]
    return " ".join(parts)


def _occurrences(text: str, keyword: str) -> list[tuple[int, int]]:
    spans = []
    start = text.find(keyword)
    while start != -1:
        spans.append((start, start + len(keyword)))
        start = text.find(keyword, start + 1)
    return spans


def _scan_keywords(text: str, rules: ClassifierRules) -> _KeywordScan:
    """Substring scan of every industry's keywords.

    A keyword occurrence lying inside a longer matched keyword of ANOTHER
    industry is shadowed: still reported, but not scored ("의약품" inside
    "동물의약품" is evidence for VETERINARY, not BIO_HEALTH).
    """

    scan = _KeywordScan()
    if not text:
        return scan

    found: list[tuple[Industry, str, float, list[tuple[int, int]]]] = []
    for industry, keyword_rules in rules.keywords.items():
        for rule in keyword_rules:
            spans = _occurrences(text, rule.keyword)
            if spans:
                found.append((industry, rule.keyword, rule.weight, spans))
                if rule.keyword not in scan.matched:
                    scan.matched.append(rule.keyword)

    foreign_spans: list[tuple[Industry, int, int]] = [
        (industry, start, end)
        for industry, _, _, spans in found
        for start, end in spans
    ]

    for industry, keyword, weight, spans in found:
        unshadowed = [
            (start, end) for start, end in spans
            if not any(
                other != industry and o_start <= start and end <= o_end and (o_end - o_start) > (end - start)
                for other, o_start, o_end in foreign_spans
            )
        ]
        if not unshadowed:
            continue
        hits = scan.hits.setdefault(industry, [])
        if keyword not in hits:
            hits.append(keyword)
            scan.scores[industry] = scan.scores.get(industry, 0.0) + weight

    return scan


def _keyword_candidate(
    scan: _KeywordScan,
    ministry_industries: tuple[Industry, ...],
    rules: ClassifierRules,
) -> Optional[Industry]:
    """Highest keyword score; ties go to the ministry's industries, then table order."""
    if not scan.scores:
        return None

    def rank(industry: Industry) -> tuple:
        ministry_rank = (
            ministry_industries.index(industry)
            if industry in ministry_industries
            else len(ministry_industries)
        )
        return (-scan.scores[industry], ministry_rank, rules.industry_order(industry))

    return min(scan.scores, key=rank)


def _apply_narrow_overrides(
    candidate: Industry, scan: _KeywordScan, rules: ClassifierRules
) -> Industry:
    for rule in rules.narrow_overrides(candidate):
        narrow_hits = scan.hits.get(rule.narrow)
        if narrow_hits and rule.is_satisfied(narrow_hits):
            logger.debug(
                "Override: %s beats %s on %s", rule.narrow.value, candidate.value, narrow_hits
            )
            return rule.narrow
    return candidate


def _reconcile(
    candidate: Optional[Industry],
    scan: _KeywordScan,
    ministry_industries: tuple[Industry, ...],
    rules: ClassifierRules,
) -> Industry:
    if not ministry_industries:
        return candidate or Industry.GENERAL

    ministry_default = ministry_industries[0]
    if candidate is None or candidate in ministry_industries:
        return candidate or ministry_default

    candidate_hits = scan.hits.get(candidate, [])
    rule = rules.override_between(candidate, ministry_industries)
    if rule is not None:
        if rule.is_satisfied(candidate_hits):
            return candidate
        logger.debug(
            "Override %s over %s not met (%s), keeping ministry industry",
            candidate.value, rule.broad.value, candidate_hits,
        )
        return ministry_default

    if len(candidate_hits) >= rules.strong_keyword_min:
        return candidate
    return ministry_default


def _confidence(
    industry: Industry, scan: _KeywordScan, ministry_based: bool, rules: ClassifierRules
) -> float:
    """Additive: ministry agreement plus capped per-keyword evidence."""
    keyword_part = min(
        len(scan.hits.get(industry, [])) * rules.keyword_confidence_step,
        rules.keyword_confidence_cap,
    )
    ministry_part = rules.ministry_confidence if ministry_based else 0.0
    return round(min(keyword_part + ministry_part, 1.0), 2)
