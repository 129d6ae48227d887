"""Cross-industry relevance matrix.

Used wherever an organization's industry has to be compared with a program's
classified industry. Pairs are stored once and looked up in either order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..classifier.labels import canonical_label, normalize_industry
from ..models.industry import Industry

SAME_INDUSTRY_RELEVANCE = 1.0
UNKNOWN_ORG_RELEVANCE = 0.5
UNRELATED_RELEVANCE = 0.2

# Cross-industry programs target company size/stage/region, not a domain
GENERAL_PROGRAM_RELEVANCE = 0.55

_PAIRS: tuple[tuple[Industry, Industry, float], ...] = (
    # Marine split
    (Industry.MARINE_FISHERIES, Industry.MARINE_SECURITY, 0.3),

    # Agriculture domain
    (Industry.FORESTRY, Industry.AGRICULTURE, 0.4),
    (Industry.FORESTRY, Industry.ENVIRONMENT, 0.5),
    (Industry.VETERINARY, Industry.AGRICULTURE, 0.7),
    (Industry.VETERINARY, Industry.BIO_HEALTH, 0.5),

    (Industry.CONSTRUCTION, Industry.TRANSPORTATION, 0.6),
    (Industry.ENERGY, Industry.ENVIRONMENT, 0.6),

    # ICT is cross-domain
    (Industry.ICT, Industry.MANUFACTURING, 0.5),
    (Industry.ICT, Industry.BIO_HEALTH, 0.4),
    (Industry.ICT, Industry.ENERGY, 0.4),
    (Industry.ICT, Industry.CONSTRUCTION, 0.4),
    (Industry.ICT, Industry.TRANSPORTATION, 0.5),
    (Industry.ICT, Industry.MARINE_FISHERIES, 0.2),
    (Industry.ICT, Industry.MARINE_SECURITY, 0.2),
    (Industry.ICT, Industry.AGRICULTURE, 0.3),
    (Industry.ICT, Industry.VETERINARY, 0.2),
    (Industry.ICT, Industry.FORESTRY, 0.2),
    (Industry.ICT, Industry.AEROSPACE, 0.4),
    (Industry.ICT, Industry.CULTURAL, 0.5),
    (Industry.ICT, Industry.ENVIRONMENT, 0.3),
    (Industry.ICT, Industry.DEFENSE, 0.3),

    (Industry.AEROSPACE, Industry.DEFENSE, 0.4),
    (Industry.AEROSPACE, Industry.MANUFACTURING, 0.5),
    (Industry.DEFENSE, Industry.MANUFACTURING, 0.4),
) + tuple(
    (Industry.GENERAL, industry, GENERAL_PROGRAM_RELEVANCE)
    for industry in Industry
    if industry is not Industry.GENERAL
)

INDUSTRY_RELEVANCE: Mapping[frozenset, float] = MappingProxyType({
    frozenset((a, b)): score for a, b, score in _PAIRS
})


def relevance(
    org_industry: Optional[Union[str, Industry]],
    program_industry: Union[str, Industry],
) -> float:
    """Get relevance score between two industries.

    Args:
        org_industry: Organization's industry sector (None, blank or non-text if unknown)
        program_industry: Program's classified industry

    Returns:
        1.0 for the same industry, 0.5 for an unknown organization industry,
        the matrix value for known adjacent domains, 0.2 otherwise
    """

    if not isinstance(org_industry, str) or not canonical_label(org_industry):
        return UNKNOWN_ORG_RELEVANCE

    if canonical_label(org_industry) == canonical_label(program_industry):
        return SAME_INDUSTRY_RELEVANCE

    org = normalize_industry(org_industry)
    program = normalize_industry(program_industry)
    if org == program:
        return SAME_INDUSTRY_RELEVANCE

    return INDUSTRY_RELEVANCE.get(frozenset((org, program)), UNRELATED_RELEVANCE)
