"""Classifier rule-table bundle and startup loader.

The built-in tables are the defaults. A deployment may replace any section
from a JSON/YAML file named by ``RULE_TABLES_PATH``; the file is read once at
startup and converted into the same read-only structures.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ..models.industry import Industry
from .keyword_rules import (
    KEYWORD_CONFIDENCE_CAP,
    KEYWORD_CONFIDENCE_STEP,
    KEYWORD_RULES,
    OVERRIDE_RULES,
    STRONG_KEYWORD_MIN,
    UNCLASSIFIED_CONFIDENCE,
    KeywordRule,
    OverrideRule,
)
from .ministry_map import MINISTRY_CONFIDENCE, MINISTRY_INDUSTRY_MAP, lookup_ministry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifierRules:
    """Immutable set of tables and constants driving ``classify``."""

    ministries: Mapping[str, tuple[Industry, ...]]
    keywords: Mapping[Industry, tuple[KeywordRule, ...]]
    overrides: tuple[OverrideRule, ...]
    ministry_confidence: float = MINISTRY_CONFIDENCE
    keyword_confidence_step: float = KEYWORD_CONFIDENCE_STEP
    keyword_confidence_cap: float = KEYWORD_CONFIDENCE_CAP
    unclassified_confidence: float = UNCLASSIFIED_CONFIDENCE
    strong_keyword_min: int = STRONG_KEYWORD_MIN
    version: str = "default"

    def lookup_ministry(self, ministry: Optional[str]) -> tuple[Industry, ...]:
        return lookup_ministry(ministry, self.ministries)

    def industry_order(self, industry: Industry) -> int:
        """Position of the industry in the keyword table (tie-break order)."""
        for idx, key in enumerate(self.keywords):
            if key == industry:
                return idx
        return len(self.keywords)

    def narrow_overrides(self, broad: Industry) -> list[OverrideRule]:
        return [rule for rule in self.overrides if rule.broad == broad]

    def override_between(
        self, narrow: Industry, broad_options: tuple[Industry, ...]
    ) -> Optional[OverrideRule]:
        for rule in self.overrides:
            if rule.narrow == narrow and rule.broad in broad_options:
                return rule
        return None


DEFAULT_RULES = ClassifierRules(
    ministries=MINISTRY_INDUSTRY_MAP,
    keywords=KEYWORD_RULES,
    overrides=OVERRIDE_RULES,
)


# --- File schema -----------------------------------------------------------

class KeywordRuleSpec(BaseModel):
    keyword: str = Field(..., min_length=1)
    weight: float = Field(default=1.0, gt=0)


class OverrideRuleSpec(BaseModel):
    narrow: Industry
    broad: Industry
    min_matches: int = Field(default=2, ge=1)
    decisive_keywords: list[str] = Field(default_factory=list)

    @field_validator("broad")
    @classmethod
    def distinct_pair(cls, v: Industry, info: ValidationInfo) -> Industry:
        if info.data.get("narrow") == v:
            raise ValueError(f"Override rule cannot map {v.value} onto itself")
        return v


class RuleTablesSpec(BaseModel):
    """Validated contents of a rule-table file. Omitted sections keep defaults."""

    version: str = "custom"
    ministries: Optional[dict[str, list[Industry]]] = None
    keywords: Optional[dict[Industry, list[Union[str, KeywordRuleSpec]]]] = None
    overrides: Optional[list[OverrideRuleSpec]] = None
    strong_keyword_min: int = Field(default=STRONG_KEYWORD_MIN, ge=1)

    @field_validator("ministries")
    @classmethod
    def non_empty_ministries(cls, v):
        if v is None:
            return v
        empty = [name for name, industries in v.items() if not industries]
        if empty:
            raise ValueError(f"Ministries without industries: {', '.join(empty)}")
        return v

    def to_rules(self) -> ClassifierRules:
        ministries = DEFAULT_RULES.ministries
        if self.ministries is not None:
            ministries = MappingProxyType({
                name.strip(): tuple(industries) for name, industries in self.ministries.items()
            })

        keywords = DEFAULT_RULES.keywords
        if self.keywords is not None:
            keywords = MappingProxyType({
                industry: tuple(
                    KeywordRule(entry) if isinstance(entry, str)
                    else KeywordRule(entry.keyword, entry.weight)
                    for entry in entries
                )
                for industry, entries in self.keywords.items()
            })

        overrides = DEFAULT_RULES.overrides
        if self.overrides is not None:
            overrides = tuple(
                OverrideRule(
                    narrow=spec.narrow,
                    broad=spec.broad,
                    min_matches=spec.min_matches,
                    decisive_keywords=frozenset(spec.decisive_keywords),
                )
                for spec in self.overrides
            )

        return ClassifierRules(
            ministries=ministries,
            keywords=keywords,
            overrides=overrides,
            strong_keyword_min=self.strong_keyword_min,
            version=self.version,
        )


def load_rule_tables(filepath: Optional[str] = None) -> ClassifierRules:
    """Load classifier rule tables from file or return defaults.

    Supports JSON and YAML formats.

    Args:
        filepath: Optional path to a rule-table file

    Returns:
        ClassifierRules instance

    Raises:
        FileNotFoundError: If filepath provided but doesn't exist
        ValueError: If the format is unsupported or the tables are invalid
    """

    if not filepath:
        return DEFAULT_RULES

    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Rule table file not found: {filepath}")

    if path.suffix == '.json':
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")

    if not isinstance(data, dict):
        raise ValueError(f"Rule table file must contain a mapping, got {type(data).__name__}")

    rules = RuleTablesSpec(**data).to_rules()
    logger.info(
        "Loaded rule tables %s from %s (%d ministries, %d industries, %d overrides)",
        rules.version,
        path,
        len(rules.ministries),
        len(rules.keywords),
        len(rules.overrides),
    )
    return rules
