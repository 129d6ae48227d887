"""Ministry + keyword industry classification for funding programs."""

from .engine import classify, classify_extended, is_regional_program, regional_keywords
from .keyword_rules import KEYWORD_RULES, OVERRIDE_RULES, KeywordRule, OverrideRule
from .labels import industry_korean_label, normalize_industry
from .ministry_map import MINISTRY_INDUSTRY_MAP
from .rules import DEFAULT_RULES, ClassifierRules, load_rule_tables

__all__ = [
    "classify",
    "classify_extended",
    "is_regional_program",
    "regional_keywords",
    "KEYWORD_RULES",
    "OVERRIDE_RULES",
    "KeywordRule",
    "OverrideRule",
    "MINISTRY_INDUSTRY_MAP",
    "DEFAULT_RULES",
    "ClassifierRules",
    "load_rule_tables",
    "industry_korean_label",
    "normalize_industry",
]
