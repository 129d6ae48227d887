"""Tests for the batch CLI."""

import json
import os
from unittest.mock import patch

import pytest

from funding_matcher.main import main


@pytest.fixture
def programs_file(tmp_path, sample_programs):
    path = tmp_path / "programs.json"
    path.write_text(json.dumps(sample_programs, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def org_file(tmp_path):
    path = tmp_path / "org.json"
    path.write_text(json.dumps({
        "id": "org-001",
        "name": "씨티씨백",
        "industrySector": "VETERINARY",
        "semanticSubDomain": {"targetOrganism": "ANIMAL", "applicationArea": "VETERINARY_PHARMA"},
    }, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env():
    with patch.dict(os.environ, {"LOG_LEVEL": "INFO", "RULE_TABLES_PATH": ""}):
        yield


def test_classify_command(programs_file, capsys):
    assert main(["classify", str(programs_file)]) == 0
    output = json.loads(capsys.readouterr().out)

    assert [row["id"] for row in output] == ["prog-human", "prog-animal", "prog-unclassified"]
    assert output[0]["industry"] == "BIO_HEALTH"
    assert output[1]["industry"] == "VETERINARY"
    assert output[2]["industry"] == "VETERINARY"
    assert output[2]["requires_regional_filter"] is False


def test_match_command_sorted(org_file, programs_file, capsys):
    assert main(["match", str(org_file), str(programs_file)]) == 0
    output = json.loads(capsys.readouterr().out)

    assert output[0]["id"] == "prog-animal"
    assert output[0]["semantic"]["score"] == 25
    # Unclassified program gets its category from the classifier
    unclassified = next(row for row in output if row["id"] == "prog-unclassified")
    assert unclassified["category"] == "VETERINARY"
    assert unclassified["relevance"] == 1.0
    human = next(row for row in output if row["id"] == "prog-human")
    assert human["semantic"]["is_hard_filter"] is True
    assert human["relevance"] == 0.5
    scores = [(row["semantic"]["score"], row["relevance"]) for row in output]
    assert scores == sorted(scores, reverse=True)


def test_missing_file_exits_1(tmp_path):
    assert main(["classify", str(tmp_path / "nope.json")]) == 1


def test_malformed_json_exits_1(tmp_path):
    path = tmp_path / "programs.json"
    path.write_text("{not json", encoding="utf-8")
    assert main(["classify", str(path)]) == 1


def test_invalid_config_exits_1(programs_file, caplog):
    with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}):
        assert main(["classify", str(programs_file)]) == 1
    assert "LOG_LEVEL" in caplog.text
