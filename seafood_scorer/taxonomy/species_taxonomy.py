"""
Seafood taxonomy: the closed vocabularies used across the scorer.

Dimensions describing a product and its score:
  - ``IucnStatus``        — conservation risk of the species (IUCN Red List)
  - ``SpeciesCategory``   — taxonomic / commercial grouping
  - ``ProductionMethod``  — wild catch vs aquaculture
  - ``ScoreBand``         — coarse user-facing class of a final score
  - ``ConfidenceLevel``   — how many independent signals were known
  - ``AlternativeReason`` — why an alternative is being suggested

This module has NO imports from any other ``seafood_scorer`` package.
"""

from enum import StrEnum


class IucnStatus(StrEnum):
    """IUCN Red List category."""

    LC = "LC"
    """Least Concern."""

    NT = "NT"
    """Near Threatened."""

    VU = "VU"
    """Vulnerable."""

    EN = "EN"
    """Endangered."""

    CR = "CR"
    """Critically Endangered."""

    EX = "EX"
    """Extinct (in the wild or globally)."""

    DD = "DD"
    """Data Deficient — assessed, but not enough data to classify."""

    NE = "NE"
    """Not Evaluated."""


class SpeciesCategory(StrEnum):
    """Commercial grouping used for display and catalog organisation."""

    WHITE_FISH = "white_fish"
    FATTY_FISH = "fatty_fish"
    SMALL_PELAGIC = "small_pelagic"
    LARGE_PELAGIC = "large_pelagic"
    SHELLFISH = "shellfish"
    BIVALVE = "bivalve"
    CEPHALOPOD = "cephalopod"


class ProductionMethod(StrEnum):
    """How the product was obtained."""

    WILD = "wild"
    FARMED = "farmed"
    UNKNOWN = "unknown"


class ScoreBand(StrEnum):
    """Display band for a final score.

    Inclusive boundaries: avoid [0,25], think [26,50], good [51,75],
    best [76,100].
    """

    AVOID = "avoid"
    THINK = "think"
    GOOD = "good"
    BEST = "best"


class ConfidenceLevel(StrEnum):
    """Number of known signals among IUCN status, fishing method and FAO area."""

    LOW = "low"
    """None of the three signals was supplied."""

    MEDIUM = "medium"
    """One or two signals were supplied."""

    HIGH = "high"
    """All three signals were supplied."""


class AlternativeReason(StrEnum):
    """Tag distinguishing the two kinds of alternative suggestion."""

    SAME_SPECIES_BETTER_METHOD = "same_species_better_method"
    """Same species, caught or raised with a better practice."""

    SAME_CATEGORY_HIGHER_SCORE = "same_category_higher_score"
    """A different, better-scoring species listed as a substitute."""


# Trawl gear keys that trigger a "same species, better gear" suggestion.
DAMAGING_TRAWL_METHODS: frozenset[str] = frozenset({"bottom_trawl", "midwater_trawl"})
