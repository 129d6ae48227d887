"""Tests for ICT keyword market inference."""

import pytest

from funding_matcher.models import SemanticReason
from funding_matcher.semantic import infer_target_market, semantic_match
from funding_matcher.semantic.market_inference import count_market_signals


@pytest.mark.parametrize("title,keywords,expected", [
    ("B2B SaaS 기업용 협업 솔루션 개발", ["SaaS"], "ENTERPRISE"),
    ("공공기관 행정 민원 처리 시스템", ["전자정부"], "GOVERNMENT"),
    ("스마트팩토리 설비 예지보전", ["제조", "공장"], "INDUSTRIAL"),
    ("일반 소비자 대상 생활 서비스", [], "CONSUMER"),
])
def test_infers_market(title, keywords, expected):
    assert infer_target_market(title, keywords) == expected


@pytest.mark.parametrize("title,keywords", [
    ("인공지능 소프트웨어 개발 지원", []),    # no signal
    ("B2B 플랫폼 고도화", []),               # single signal
    ("B2B 기업용 공공 행정 서비스", []),      # tie
])
def test_weak_or_ambiguous_signal(title, keywords):
    assert infer_target_market(title, keywords) is None


def test_signals_are_case_insensitive():
    counts = count_market_signals("b2b saas", [])
    assert counts["ENTERPRISE"] == 2


def test_keywords_count_alongside_title():
    assert infer_target_market("클라우드 전환 지원", ["B2B", "기업용"]) == "ENTERPRISE"


class TestInferredMatch:

    def test_enterprise_program_matches_enterprise_org(self, make_org, make_program):
        result = semantic_match(
            make_org("ICT", targetMarket="ENTERPRISE"),
            make_program("ICT", title="B2B SaaS 기업용 협업 솔루션 개발", keywords=["SaaS"]),
        )
        assert result.reason == SemanticReason.INFERRED_MARKET_MATCH
        assert result.score == 10
        assert result.is_hard_filter is False
        assert "키워드 분석" in result.explanation

    def test_government_program_for_consumer_org(self, make_org, make_program):
        result = semantic_match(
            make_org("ICT", targetMarket="CONSUMER"),
            make_program("ICT", title="공공기관 행정 민원 처리 시스템", keywords=["전자정부"]),
        )
        assert result.reason == SemanticReason.INFERRED_MARKET_MISMATCH
        assert result.score == 0
        assert result.is_hard_filter is False
        assert "키워드 분석" in result.explanation

    def test_multi_select_org_market(self, make_org, make_program):
        result = semantic_match(
            make_org("ICT", targetMarket=["CONSUMER", "GOVERNMENT"]),
            make_program("ICT", title="공공기관 행정 민원 처리 시스템"),
        )
        assert result.reason == SemanticReason.INFERRED_MARKET_MATCH

    def test_ambiguous_signal_has_no_data(self, make_org, make_program):
        result = semantic_match(
            make_org("ICT", targetMarket="CONSUMER"),
            make_program("ICT", title="인공지능 소프트웨어 개발 지원"),
        )
        assert result.reason == SemanticReason.NO_SEMANTIC_DATA
        assert result.score == 0

    def test_org_without_market(self, make_org, make_program):
        result = semantic_match(
            make_org("ICT", applicationArea="SOFTWARE"),
            make_program("ICT", title="B2B SaaS 기업용 협업 솔루션 개발"),
        )
        assert result.reason == SemanticReason.NO_SEMANTIC_DATA

    def test_only_ict_programs_are_inferred(self, make_org, make_program):
        result = semantic_match(
            make_org("BIO_HEALTH", targetMarket="ENTERPRISE"),
            make_program("BIO_HEALTH", title="B2B SaaS 기업용 협업 솔루션 개발"),
        )
        assert result.reason == SemanticReason.NO_SEMANTIC_DATA


@pytest.mark.parametrize("keywords", [None, 5, "B2B"])
def test_malformed_keywords_are_ignored(keywords):
    assert infer_target_market("B2B SaaS", keywords) == "ENTERPRISE"


def test_missing_title():
    assert infer_target_market(None, ["B2B", "기업용"]) == "ENTERPRISE"
    assert infer_target_market(None, None) is None
