"""Semantic sub-domain matching and keyword market inference."""

from .field_schema import FIELD_SCHEMAS, CategorySchema, get_schema, resolve_category
from .market_inference import INFERENCE_STRATEGIES, infer_market_match, infer_target_market
from .matcher import semantic_match
from .values import MultiSelect, Scalar, normalize_value

__all__ = [
    "FIELD_SCHEMAS",
    "CategorySchema",
    "get_schema",
    "resolve_category",
    "INFERENCE_STRATEGIES",
    "infer_market_match",
    "infer_target_market",
    "semantic_match",
    "MultiSelect",
    "Scalar",
    "normalize_value",
]
