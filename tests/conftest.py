"""
Shared pytest fixtures for the seafood scorer test suite.

Provides:
  - ``catalog``: A small in-memory catalog built from dicts, with a fixed
    fishing-method and FAO-area table. Every scoring number asserted in the
    tests is derived from these values.
  - ``resolver``: A ``SynonymResolver`` over ``catalog``.
  - ``bundled_catalog`` / ``bundled_resolver``: The dataset shipped with the
    package, loaded once per session.
  - ``make_species``: Factory for one-off ``SpeciesRecord`` instances.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from seafood_scorer.catalog.catalog import SpeciesCatalog
from seafood_scorer.catalog.loader import (
    load_catalog,
    parse_fao_areas,
    parse_fishing_methods,
    parse_species_records,
)
from seafood_scorer.models.species import SpeciesRecord
from seafood_scorer.resolution.synonyms import SynonymResolver


# ── Raw fixture data ──────────────────────────────────────────────────────────

FIXTURE_SPECIES: list[dict[str, Any]] = [
    {
        "id": "merluza",
        "names": {
            "es": ["Merluza", "Pescadilla"],
            "en": ["European hake", "Hake"],
            "fr": ["Merlu"],
            "scientific": "Merluccius merluccius",
            "eu_commercial": "Merluza europea",
        },
        "iucnStatus": "LC",
        "defaultScore": 55,
        "scoreRange": [20, 75],
        "goodAlternatives": ["abadejo", "bacaladilla"],
        "category": "white_fish",
        "notes": "Prefiere merluza de palangre o anzuelo.",
    },
    {
        "id": "abadejo",
        "names": {
            "es": ["Abadejo"],
            "en": ["Pollack"],
            "fr": ["Lieu jaune"],
            "scientific": "Pollachius pollachius",
        },
        "iucnStatus": "LC",
        "defaultScore": 70,
        "scoreRange": [40, 85],
        "category": "white_fish",
    },
    {
        "id": "bacaladilla",
        "names": {
            "es": ["Bacaladilla"],
            "en": ["Blue whiting"],
            "fr": ["Merlan bleu"],
            "scientific": "Micromesistius poutassou",
        },
        "iucnStatus": "LC",
        "defaultScore": 62,
        "scoreRange": [35, 80],
        "category": "white_fish",
    },
    {
        "id": "dorada",
        "names": {
            "es": ["Dorada", "Orada"],
            "en": ["Gilt-head bream"],
            "fr": ["Daurade royale"],
            "scientific": "Sparus aurata",
        },
        "iucnStatus": "LC",
        "defaultScore": 60,
        "scoreRange": [40, 80],
        "goodAlternatives": ["mejillon"],
        "category": "white_fish",
    },
    {
        "id": "mejillon",
        "names": {
            "es": ["Mejillón"],
            "en": ["Mussel"],
            "fr": ["Moule"],
            "scientific": "Mytilus galloprovincialis",
        },
        "iucnStatus": "NE",
        "defaultScore": 88,
        "scoreRange": [60, 100],
        "category": "bivalve",
    },
    {
        "id": "atun_rojo",
        "names": {
            "es": ["Atún rojo"],
            "en": ["Atlantic bluefin tuna"],
            "fr": ["Thon rouge"],
            "scientific": "Thunnus thynnus",
        },
        "iucnStatus": "EN",
        "defaultScore": 15,
        "scoreRange": [0, 30],
        "goodAlternatives": ["caballa"],
        "category": "large_pelagic",
    },
    {
        "id": "caballa",
        "names": {
            "es": ["Caballa"],
            "en": ["Atlantic mackerel", "Mackerel"],
            "fr": ["Maquereau"],
            "scientific": "Scomber scombrus",
        },
        "iucnStatus": "LC",
        "defaultScore": 78,
        "scoreRange": [45, 95],
        "category": "fatty_fish",
    },
    {
        "id": "anguila",
        "names": {
            "es": ["Anguila"],
            "en": ["European eel"],
            "fr": ["Anguille"],
            "scientific": "Anguilla anguilla",
        },
        "iucnStatus": "CR",
        "defaultScore": 2,
        "scoreRange": [0, 15],
        "category": "white_fish",
        "notes": "Especie en peligro crítico.",
    },
]

FIXTURE_METHODS: dict[str, dict[str, Any]] = {
    "bottom_trawl":         {"name": "Arrastre de fondo", "name_en": "Bottom trawl", "modifier": -20},
    "midwater_trawl":       {"name": "Arrastre pelágico", "name_en": "Midwater trawl", "modifier": -10},
    "aquaculture_standard": {"name": "Acuicultura convencional", "name_en": "Standard aquaculture", "modifier": -5},
    "longline_demersal":    {"name": "Palangre de fondo", "name_en": "Demersal longline", "modifier": 0},
    "purse_seine":          {"name": "Cerco", "name_en": "Purse seine", "modifier": 3},
    "pole_and_line":        {"name": "Caña y sedal", "name_en": "Pole and line", "modifier": 15},
    "unknown":              {"name": "Desconocido", "name_en": "Unknown", "modifier": 0},
}

FIXTURE_AREAS: dict[str, dict[str, Any]] = {
    "27":   {"name": "Atlántico nordeste", "name_en": "Northeast Atlantic", "modifier": -3},
    "27.8": {"name": "Golfo de Vizcaya", "name_en": "Bay of Biscay", "modifier": 5},
    "37":   {"name": "Mediterráneo", "name_en": "Mediterranean", "modifier": -10},
    "37.1": {"name": "Mediterráneo occidental", "name_en": "Western Mediterranean", "modifier": -15},
}


# ── Catalog fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def catalog() -> SpeciesCatalog:
    """Small deterministic catalog shared by most unit tests."""
    return SpeciesCatalog.from_records(
        parse_species_records(FIXTURE_SPECIES),
        parse_fishing_methods(FIXTURE_METHODS),
        parse_fao_areas(FIXTURE_AREAS),
    )


@pytest.fixture
def resolver(catalog: SpeciesCatalog) -> SynonymResolver:
    return SynonymResolver(catalog)


@pytest.fixture(scope="session")
def bundled_catalog() -> SpeciesCatalog:
    """The dataset shipped under seafood_scorer/catalog/data/."""
    return load_catalog()


@pytest.fixture(scope="session")
def bundled_resolver(bundled_catalog: SpeciesCatalog) -> SynonymResolver:
    return SynonymResolver(bundled_catalog)


@pytest.fixture
def make_species() -> Callable[..., SpeciesRecord]:
    """Factory: ``make_species("x", score_range=(40, 74))`` → SpeciesRecord."""

    def _make(
        species_id: str,
        *,
        es: tuple[str, ...] = (),
        scientific: str = "Genus species",
        iucn_status: str = "LC",
        default_score: int = 50,
        score_range: tuple[int, int] = (0, 100),
        good_alternatives: tuple[str, ...] = (),
        category: str = "white_fish",
        notes: str = "",
    ) -> SpeciesRecord:
        return SpeciesRecord(
            id=species_id,
            names={"es": es or (species_id.capitalize(),), "scientific": scientific},
            iucn_status=iucn_status,
            default_score=default_score,
            score_range=score_range,
            good_alternatives=good_alternatives,
            category=category,
            notes=notes,
        )

    return _make
