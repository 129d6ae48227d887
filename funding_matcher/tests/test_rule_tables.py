"""Tests for loading classifier rule tables from file."""

import json

import pytest
from pydantic import ValidationError

from funding_matcher.classifier import DEFAULT_RULES, classify, load_rule_tables
from funding_matcher.models import Industry


def test_default_rules_without_path():
    assert load_rule_tables() is DEFAULT_RULES
    assert load_rule_tables("") is DEFAULT_RULES


def test_load_yaml(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text(
        "version: sme-2026\n"
        "ministries:\n"
        "  중소벤처기업부: [MANUFACTURING]\n",
        encoding="utf-8",
    )
    rules = load_rule_tables(str(path))

    assert rules.version == "sme-2026"
    assert rules.lookup_ministry("중소벤처기업부") == (Industry.MANUFACTURING,)
    # Omitted sections keep the built-in tables
    assert rules.keywords is DEFAULT_RULES.keywords
    assert rules.overrides is DEFAULT_RULES.overrides

    result = classify("", None, "중소벤처기업부", rules=rules)
    assert result.industry == Industry.MANUFACTURING
    assert result.ministry_based is True
    assert classify("", None, "중소벤처기업부").industry == Industry.GENERAL


def test_load_json_keywords(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({
        "keywords": {
            "ENERGY": ["수소", {"keyword": "연료전지", "weight": 2.0}],
        },
        "overrides": [],
        "strong_keyword_min": 1,
    }, ensure_ascii=False), encoding="utf-8")
    rules = load_rule_tables(str(path))

    assert [rule.keyword for rule in rules.keywords[Industry.ENERGY]] == ["수소", "연료전지"]
    assert rules.keywords[Industry.ENERGY][1].weight == 2.0
    assert rules.overrides == ()
    assert classify("연료전지 실증").industry == Industry.GENERAL
    assert classify("연료전지 실증", rules=rules).industry == Industry.ENERGY


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rule_tables(str(tmp_path / "missing.yaml"))


def test_unsupported_format(tmp_path):
    path = tmp_path / "rules.txt"
    path.write_text("version: x", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported file format"):
        load_rule_tables(str(path))


def test_file_must_hold_mapping(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_rule_tables(str(path))


@pytest.mark.parametrize("content", [
    {"ministries": {"보건복지부": ["NOT_AN_INDUSTRY"]}},
    {"ministries": {"보건복지부": []}},
    {"keywords": {"ICT": [{"keyword": "AI", "weight": -1}]}},
    {"overrides": [{"narrow": "VETERINARY", "broad": "VETERINARY"}]},
    {"strong_keyword_min": 0},
])
def test_invalid_tables_rejected(tmp_path, content):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(content), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_rule_tables(str(path))


def test_loaded_tables_are_read_only(tmp_path):
    path = tmp_path / "rules.yml"
    path.write_text("ministries:\n  산림청: [FORESTRY]\n", encoding="utf-8")
    rules = load_rule_tables(str(path))
    with pytest.raises(TypeError):
        rules.ministries["산림청"] = (Industry.AGRICULTURE,)
