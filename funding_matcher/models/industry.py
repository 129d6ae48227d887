"""Industry - Fixed category enum shared by the classifier, relevance matrix and matcher."""

from enum import Enum


class Industry(str, Enum):
    """Industry categories a funding program can be classified into.

    GENERAL is the guaranteed fallback for cross-industry programs and for
    programs that carry no usable ministry or keyword signal.
    """

    BIO_HEALTH = "BIO_HEALTH"
    ICT = "ICT"
    MANUFACTURING = "MANUFACTURING"
    ENERGY = "ENERGY"
    ENVIRONMENT = "ENVIRONMENT"
    CONSTRUCTION = "CONSTRUCTION"
    DEFENSE = "DEFENSE"
    CULTURAL = "CULTURAL"
    GENERAL = "GENERAL"

    # Split out of broader domains so that similar ministries don't cross-match
    MARINE_FISHERIES = "MARINE_FISHERIES"
    MARINE_SECURITY = "MARINE_SECURITY"
    FORESTRY = "FORESTRY"
    VETERINARY = "VETERINARY"
    AGRICULTURE = "AGRICULTURE"
    AEROSPACE = "AEROSPACE"
    TRANSPORTATION = "TRANSPORTATION"

    def __str__(self) -> str:
        return self.value
