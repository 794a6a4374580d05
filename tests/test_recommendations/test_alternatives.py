"""
Tests for seafood_scorer/recommendations/alternatives.py.

What we test
------------
build_alternatives():
  - Farmed → same species wild: +15 capped at species max; included only
    when the capped improvement is at least 15 (74 vs 75 max boundary).
  - Damaging trawl (bottom or midwater, gear codes included) → same species
    with better gear: +20 capped; same inclusion rule.
  - Cross-species: listed alternatives whose default score beats the
    current score by at least 15 (14 vs 15 boundary), in listed order.
  - At most three options, in generation order (not re-sorted by score).
  - Localised display names with practice hints.
reduce_consumption_message():
  - Title plus species notes; title alone without notes.
"""

from __future__ import annotations

from seafood_scorer.catalog.catalog import SpeciesCatalog
from seafood_scorer.recommendations.alternatives import (
    build_alternatives,
    reduce_consumption_message,
)
from seafood_scorer.taxonomy.species_taxonomy import AlternativeReason, ProductionMethod


# ── Same-species suggestions ──────────────────────────────────────────────────

class TestSameSpeciesWild:
    def test_farmed_included_when_improvement_reaches_fifteen(self, make_species) -> None:
        dorada = make_species("dorada", score_range=(40, 75))
        catalog = SpeciesCatalog.from_records([dorada])
        options = build_alternatives(catalog, dorada, 60, production_method="farmed")
        assert len(options) == 1
        option = options[0]
        assert option.species_id == "dorada"
        assert option.score == 75
        assert option.reason == AlternativeReason.SAME_SPECIES_BETTER_METHOD
        assert option.production_method_suggestion == ProductionMethod.WILD
        assert option.display_name == "Dorada (salvaje)"

    def test_farmed_excluded_when_cap_leaves_fourteen(self, make_species) -> None:
        dorada = make_species("dorada", score_range=(40, 74))
        catalog = SpeciesCatalog.from_records([dorada])
        assert build_alternatives(catalog, dorada, 60, production_method="farmed") == []

    def test_wild_product_gets_no_wild_suggestion(self, catalog) -> None:
        dorada = catalog.get("dorada")
        options = build_alternatives(catalog, dorada, 60, production_method="wild")
        assert all(o.reason != AlternativeReason.SAME_SPECIES_BETTER_METHOD for o in options)


class TestSameSpeciesBetterGear:
    def test_bottom_trawl(self, catalog) -> None:
        merluza = catalog.get("merluza")
        options = build_alternatives(catalog, merluza, 20, fishing_method="bottom_trawl")
        gear = options[0]
        assert gear.species_id == "merluza"
        assert gear.score == 40
        assert gear.display_name == "Merluza (mejor arte de pesca)"

    def test_gear_code_and_midwater_trawl_count(self, catalog) -> None:
        merluza = catalog.get("merluza")
        for method in ("OTB", "midwater_trawl", "Arrastre de fondo"):
            options = build_alternatives(catalog, merluza, 20, fishing_method=method)
            assert options[0].reason == AlternativeReason.SAME_SPECIES_BETTER_METHOD, method

    def test_selective_gear_gets_no_gear_suggestion(self, catalog) -> None:
        merluza = catalog.get("merluza")
        options = build_alternatives(catalog, merluza, 20, fishing_method="pole_and_line")
        assert [o.species_id for o in options] == ["abadejo", "bacaladilla"]

    def test_gear_capped_below_threshold(self, catalog) -> None:
        merluza = catalog.get("merluza")
        # min(65 + 20, 75) - 65 = 10 < 15
        options = build_alternatives(catalog, merluza, 65, fishing_method="bottom_trawl")
        assert options == []

    def test_english_hint(self, catalog) -> None:
        merluza = catalog.get("merluza")
        options = build_alternatives(catalog, merluza, 20, fishing_method="OTB", language="en")
        assert options[0].display_name == "European hake (better fishing gear)"
        assert options[1].display_name == "Pollack"


# ── Cross-species suggestions ─────────────────────────────────────────────────

class TestCrossSpecies:
    def test_improvement_of_exactly_fifteen_included(self, catalog) -> None:
        merluza = catalog.get("merluza")
        options = build_alternatives(catalog, merluza, 55)
        assert [o.species_id for o in options] == ["abadejo"]
        assert options[0].score == 70
        assert options[0].reason == AlternativeReason.SAME_CATEGORY_HIGHER_SCORE
        assert options[0].production_method_suggestion is None

    def test_improvement_of_fourteen_excluded(self, catalog) -> None:
        merluza = catalog.get("merluza")
        assert build_alternatives(catalog, merluza, 56) == []

    def test_listed_order_preserved(self, catalog) -> None:
        merluza = catalog.get("merluza")
        options = build_alternatives(catalog, merluza, 30)
        assert [o.species_id for o in options] == ["abadejo", "bacaladilla"]

    def test_species_without_alternatives(self, catalog) -> None:
        anguila = catalog.get("anguila")
        assert build_alternatives(catalog, anguila, 0) == []


# ── Cap and ordering ──────────────────────────────────────────────────────────

class TestCapAndOrder:
    def test_capped_at_three_in_generation_order(self, catalog) -> None:
        merluza = catalog.get("merluza")
        options = build_alternatives(
            catalog, merluza, 20, fishing_method="bottom_trawl", production_method="farmed"
        )
        assert len(options) == 3
        assert [o.display_name for o in options] == [
            "Merluza (salvaje)",
            "Merluza (mejor arte de pesca)",
            "Abadejo",
        ]

    def test_not_resorted_by_score(self, catalog) -> None:
        merluza = catalog.get("merluza")
        options = build_alternatives(catalog, merluza, 20, fishing_method="bottom_trawl")
        assert [o.score for o in options] == [40, 70, 62]

    def test_max_results_parameter(self, catalog) -> None:
        merluza = catalog.get("merluza")
        options = build_alternatives(catalog, merluza, 20, fishing_method="bottom_trawl", max_results=1)
        assert len(options) == 1


# ── Reduce-consumption message ────────────────────────────────────────────────

class TestReduceConsumptionMessage:
    def test_includes_notes(self, catalog) -> None:
        message = reduce_consumption_message(catalog.get("anguila"))
        assert message.startswith("No hay una alternativa claramente mejor.")
        assert message.endswith("Especie en peligro crítico.")

    def test_title_only_without_notes(self, catalog) -> None:
        message = reduce_consumption_message(catalog.get("abadejo"), "en")
        assert message == "There is no clearly better alternative. Eat it less often."
