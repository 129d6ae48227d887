"""Tests for the cross-industry relevance matrix."""

import pytest

from funding_matcher.models import Industry
from funding_matcher.relevance import INDUSTRY_RELEVANCE, relevance


@pytest.mark.parametrize("industry", list(Industry))
def test_same_industry_is_full_match(industry):
    assert relevance(industry, industry) == 1.0
    assert relevance(industry.value, industry.value) == 1.0


@pytest.mark.parametrize("industry", list(Industry))
def test_unknown_org_industry_is_neutral(industry):
    assert relevance(None, industry) == 0.5
    assert relevance("", industry) == 0.5


@pytest.mark.parametrize("org,program,expected", [
    ("MARINE_FISHERIES", "MARINE_SECURITY", 0.3),
    ("VETERINARY", "AGRICULTURE", 0.7),
    ("FORESTRY", "AGRICULTURE", 0.4),
    ("BIO_HEALTH", "VETERINARY", 0.5),
])
def test_adjacent_domains(org, program, expected):
    assert relevance(org, program) == expected
    assert relevance(program, org) == expected


def test_unrelated_industries_default():
    assert relevance("DEFENSE", "CULTURAL") == 0.2


def test_general_programs_are_moderately_relevant():
    assert relevance("BIO_HEALTH", "GENERAL") == 0.55
    assert relevance("GENERAL", "ICT") == 0.55


def test_labels_are_normalized():
    assert relevance("bio_health", "BIO_HEALTH") == 1.0
    assert relevance("BIO", Industry.BIO_HEALTH) == 1.0
    assert relevance("vet", "AGRICULTURE") == 0.7


def test_matrix_symmetric_and_bounded():
    for pair, score in INDUSTRY_RELEVANCE.items():
        assert len(pair) == 2
        assert 0.0 <= score <= 1.0


@pytest.mark.parametrize("org", [7, 3.2, ["ICT"], {"sector": "ICT"}, "   "])
def test_malformed_org_industry_is_neutral(org):
    assert relevance(org, "ICT") == 0.5


def test_malformed_program_industry_treated_as_general():
    assert relevance("ICT", None) == 0.55
    assert relevance("ICT", 7) == 0.55
