"""Tagged semantic attribute values.

Profiles store each attribute either as one code ("HUMAN") or as a
multi-select list (["CONSUMER", "ENTERPRISE"]). The ambiguity is resolved
once, here, so the matcher only ever sees ``Scalar`` or ``MultiSelect``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class Scalar:
    value: str

    @property
    def codes(self) -> frozenset[str]:
        return frozenset((self.value,))


@dataclass(frozen=True)
class MultiSelect:
    values: tuple[str, ...]

    @property
    def codes(self) -> frozenset[str]:
        return frozenset(self.values)


FieldValue = Union[Scalar, MultiSelect]


def _code(raw: Any) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    code = raw.strip().upper()
    return code or None


def normalize_value(raw: Any) -> Optional[FieldValue]:
    """Convert a raw attribute value. None means "treat the field as absent"."""
    if isinstance(raw, str):
        code = _code(raw)
        return Scalar(code) if code else None

    if isinstance(raw, (list, tuple, set, frozenset)):
        codes: list[str] = []
        for item in raw:
            code = _code(item)
            if code and code not in codes:
                codes.append(code)
        if not codes:
            return None
        return MultiSelect(tuple(codes))

    return None


def normalize_sub_domain(raw: Optional[Mapping[str, Any]]) -> dict[str, FieldValue]:
    """Normalize a whole attribute map, dropping unusable fields."""
    if not isinstance(raw, Mapping):
        return {}
    normalized: dict[str, FieldValue] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not key.strip():
            continue
        field_value = normalize_value(value)
        if field_value is not None:
            normalized[key.strip()] = field_value
    return normalized


def values_match(org_value: FieldValue, program_value: FieldValue) -> bool:
    """Scalars match on equality; a multi-select matches on membership.

    Generalised as "the two code sets intersect", which covers scalar/scalar,
    multi-select org vs scalar program and the reverse.
    """
    return bool(org_value.codes & program_value.codes)


def value_codes(value: FieldValue) -> tuple[str, ...]:
    if isinstance(value, Scalar):
        return (value.value,)
    return value.values
