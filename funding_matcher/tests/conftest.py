"""Pytest configuration and fixtures."""

import pytest

from funding_matcher.models import FundingProgram, Organization


def _make_org(industry="BIO_HEALTH", **semantic):
    """Build an organization; keyword args become its semantic sub-domain."""
    return Organization(
        id="org-test",
        name="테스트기관",
        industry_sector=industry,
        semantic_sub_domain=semantic or None,
    )


def _make_program(category="BIO_HEALTH", title="", keywords=None, **semantic):
    """Build a program; keyword args become its semantic sub-domain."""
    return FundingProgram(
        id="prog-test",
        title=title,
        category=category,
        keywords=keywords or [],
        semantic_sub_domain=semantic or None,
    )


@pytest.fixture
def make_org():
    return _make_org


@pytest.fixture
def make_program():
    return _make_program


@pytest.fixture
def veterinary_org():
    """Animal-pharma company (the 씨티씨백 case)."""
    return Organization.model_validate({
        "id": "org-001",
        "name": "씨티씨백",
        "industrySector": "BIO_HEALTH",
        "semanticSubDomain": {
            "targetOrganism": "ANIMAL",
            "applicationArea": ["VETERINARY_PHARMA", "BIO_MATERIAL"],
        },
    })


@pytest.fixture
def sample_programs():
    """Raw program records as produced by NTIS ingestion."""
    return [
        {
            "id": "prog-human",
            "title": "희귀질환 치료제 임상시험 지원사업",
            "ministry": "보건복지부",
            "category": "BIO_HEALTH",
            "keywords": ["희귀질환", "임상시험"],
            "semanticSubDomain": {"targetOrganism": "HUMAN", "applicationArea": "PHARMA"},
        },
        {
            "id": "prog-animal",
            "title": "동물의약품 품질관리 강화 사업",
            "ministry": "농림축산식품부",
            "category": "BIO_HEALTH",
            "keywords": ["동물의약품"],
            "semanticSubDomain": {"targetOrganism": "ANIMAL", "applicationArea": "VETERINARY_PHARMA"},
        },
        {
            "id": "prog-unclassified",
            "title": "반려동물 동물의약품 개발 사업",
            "ministry": None,
            "keywords": None,
        },
    ]
