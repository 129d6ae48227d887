"""Semantic sub-domain matching between an organization and a funding program.

Industry relevance alone cannot separate a veterinary pharma company from a
human vaccine program (both BIO_HEALTH). This module compares the structured
sub-domain attributes of both sides and produces a bounded 0-25 sub-score,
blocking the match outright when the category's hard-filter field disagrees.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..models.funding_program import FundingProgram, Organization
from ..models.semantic_match_result import (
    MAX_SEMANTIC_SCORE,
    SemanticMatchResult,
    SemanticReason,
)
from .field_schema import CategorySchema, field_name_ko, get_schema, resolve_category
from .market_inference import INFERENCE_STRATEGIES
from .values import FieldValue, normalize_sub_domain, value_codes, values_match

logger = logging.getLogger(__name__)

MATCH_POINTS = 12
MISMATCH_PENALTY = 3
# Per matching field, once at least two fields were compared
COVERAGE_BONUS = 1
COVERAGE_MIN_FIELDS = 2

ModelT = TypeVar("ModelT", bound=BaseModel)


def _coerce(model: type[ModelT], record: Union[ModelT, Mapping[str, Any], None]) -> ModelT:
    """Accept a model or a raw camelCase/snake_case mapping."""
    if isinstance(record, model):
        return record
    if isinstance(record, Mapping):
        try:
            return model.model_validate(dict(record))
        except ValidationError as e:
            logger.warning("Invalid %s record, treating as empty: %s", model.__name__, e)
    return model()


def _ordered_common_fields(
    org_fields: Mapping[str, FieldValue],
    program_fields: Mapping[str, FieldValue],
    schema: Optional[CategorySchema],
) -> list[str]:
    """Schema-declared fields first, then any other shared key in org order."""
    declared = list(schema.fields) if schema else []
    ordered = [name for name in declared if name in org_fields and name in program_fields]
    ordered += [
        name for name in org_fields
        if name in program_fields and name not in ordered
    ]
    return ordered


def _display(schema: Optional[CategorySchema], field_name: str, value: FieldValue) -> str:
    codes = value_codes(value)
    if schema is None:
        return ", ".join(codes)
    return ", ".join(schema.label(field_name, code) for code in codes)


def _score(matched: int, mismatched: int) -> int:
    compared = matched + mismatched
    score = matched * MATCH_POINTS - mismatched * MISMATCH_PENALTY
    if compared >= COVERAGE_MIN_FIELDS:
        score += matched * COVERAGE_BONUS
    return max(0, min(score, MAX_SEMANTIC_SCORE))


def semantic_match(
    organization: Union[Organization, Mapping[str, Any], None],
    program: Union[FundingProgram, Mapping[str, Any], None],
) -> SemanticMatchResult:
    """Compare semantic sub-domains of an organization and a program.

    Args:
        organization: Organization profile (model or raw record)
        program: Funding program (model or raw record)

    Returns:
        SemanticMatchResult; missing or malformed data degrades to
        NO_SEMANTIC_DATA instead of raising
    """

    org = _coerce(Organization, organization)
    prog = _coerce(FundingProgram, program)

    category = resolve_category(prog.category, org.industry_sector)
    schema = get_schema(category)

    org_fields = normalize_sub_domain(org.semantic_sub_domain)
    program_fields = normalize_sub_domain(prog.semantic_sub_domain)

    if not org_fields or not program_fields:
        strategy = INFERENCE_STRATEGIES.get(category) if category else None
        if strategy is not None and org_fields:
            logger.debug("No program semantic data, inferring for %s", category.value)
            return strategy(org_fields, prog)
        return SemanticMatchResult(
            reason=SemanticReason.NO_SEMANTIC_DATA,
            explanation="세부 분야 정보가 없어 비교하지 않았습니다.",
        )

    common = _ordered_common_fields(org_fields, program_fields, schema)
    if not common:
        return SemanticMatchResult(
            reason=SemanticReason.NO_SEMANTIC_DATA,
            explanation="기관과 과제에 공통으로 비교할 세부 분야 항목이 없습니다.",
        )

    hard_field = schema.hard_filter_field if schema else None
    matching: list[str] = []
    mismatched: list[str] = []

    for name in common:
        org_value, program_value = org_fields[name], program_fields[name]
        if values_match(org_value, program_value):
            matching.append(name)
            continue

        mismatched.append(name)
        if name == hard_field:
            org_label = _display(schema, name, org_value)
            program_label = _display(schema, name, program_value)
            logger.debug(
                "Hard filter on %s.%s: org=%s program=%s",
                category.value, name, value_codes(org_value), value_codes(program_value),
            )
            return SemanticMatchResult(
                score=0,
                reason=schema.mismatch_reason,
                is_hard_filter=True,
                matching_fields=matching,
                mismatched_fields=mismatched,
                explanation=(
                    f"{field_name_ko(name)} 불일치: 기관은 {org_label}, "
                    f"과제는 {program_label} 대상입니다."
                ),
            )

    score = _score(len(matching), len(mismatched))
    reason = (
        SemanticReason.SEMANTIC_MATCH
        if matching and score > 0
        else SemanticReason.PARTIAL_MATCH
    )

    matched_ko = ", ".join(
        f"{field_name_ko(name)}({_display(schema, name, program_fields[name])})"
        for name in matching
    )
    mismatched_ko = ", ".join(field_name_ko(name) for name in mismatched)
    if matching and not mismatched:
        explanation = f"세부 분야 일치: {matched_ko} 항목이 모두 일치합니다."
    elif matching:
        explanation = f"세부 분야 부분 일치: {matched_ko} 일치, {mismatched_ko} 불일치."
    else:
        explanation = f"세부 분야 불일치: {mismatched_ko} 항목이 서로 다릅니다."

    logger.debug(
        "Semantic match %s: score=%d matched=%s mismatched=%s",
        category.value if category else None, score, matching, mismatched,
    )

    return SemanticMatchResult(
        score=score,
        reason=reason,
        is_hard_filter=False,
        matching_fields=matching,
        mismatched_fields=mismatched,
        explanation=explanation,
    )
