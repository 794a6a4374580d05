"""
Tests for seafood_scorer/pipeline/assess.py.

What we test
------------
assess_label():
  - Resolves the species from the label (or explicit ``species_name``).
  - Unresolvable species → None.
  - Catalog IUCN status by default; valid override replaces it, invalid
    override is ignored.
  - Alternatives attached; reduce-consumption message only when none.
  - CO2 fallback by method; live override.
  - Production method defaults to ``unknown``; barcode echoed.
  - Display language.
"""

from __future__ import annotations

from seafood_scorer.models.label import ParsedLabel
from seafood_scorer.pipeline.assess import assess_label
from seafood_scorer.taxonomy.species_taxonomy import (
    IucnStatus,
    ProductionMethod,
    ScoreBand,
)


def _label(**kwargs) -> ParsedLabel:
    defaults = {"species_raw": "merluza", "fishing_method": "pole_and_line", "fao_area": "27.8"}
    defaults.update(kwargs)
    return ParsedLabel(**defaults)


class TestAssessLabel:
    def test_good_product_without_alternatives(self, catalog, resolver) -> None:
        result = assess_label(catalog, resolver, _label())
        assert result is not None
        assert result.species_id == "merluza"
        assert result.scientific_name == "Merluccius merluccius"
        assert result.display_name == "Merluza"
        assert result.iucn_status == IucnStatus.LC
        assert result.score.final_score == 70
        assert result.score.band == ScoreBand.GOOD
        assert result.alternatives == ()
        assert not result.has_alternative
        assert result.reduce_message is not None
        assert result.reduce_message.endswith("Prefiere merluza de palangre o anzuelo.")
        assert result.production_method == ProductionMethod.UNKNOWN

    def test_trawled_product_gets_alternatives(self, catalog, resolver) -> None:
        result = assess_label(catalog, resolver, _label(species_raw="Pescadilla", fishing_method="OTB", fao_area="37.1"))
        assert result.score.final_score == 20
        assert [o.species_id for o in result.alternatives] == ["merluza", "abadejo", "bacaladilla"]
        assert result.has_alternative
        assert result.reduce_message is None

    def test_unresolved_species_returns_none(self, catalog, resolver) -> None:
        assert assess_label(catalog, resolver, _label(species_raw="xqzwv")) is None
        assert assess_label(catalog, resolver, ParsedLabel()) is None

    def test_species_name_overrides_label(self, catalog, resolver) -> None:
        result = assess_label(catalog, resolver, _label(species_raw="xqzwv"), species_name="Sparus aurata")
        assert result.species_id == "dorada"

    def test_iucn_override(self, catalog, resolver) -> None:
        result = assess_label(catalog, resolver, _label(), iucn_override="VU")
        assert result.iucn_status == IucnStatus.VU
        assert result.score.iucn_base == 25

    def test_invalid_iucn_override_ignored(self, catalog, resolver) -> None:
        result = assess_label(catalog, resolver, _label(), iucn_override="ZZ")
        assert result.iucn_status == IucnStatus.LC
        assert result.score.iucn_base == 50

    def test_co2_fallback_by_method(self, catalog, resolver) -> None:
        result = assess_label(catalog, resolver, _label())
        assert result.co2.value == 1.8
        assert result.co2.source == "fallback"
        assert result.co2.comparison == "2.5x menos CO2 que el pollo"

    def test_co2_live_override(self, catalog, resolver) -> None:
        result = assess_label(catalog, resolver, _label(), co2_override=2.25)
        assert result.co2.value == 2.25
        assert result.co2.source == "live"

    def test_label_fields_carried_over(self, catalog, resolver) -> None:
        label = _label(
            species_raw="Dorada", fishing_method=None, fao_area=None,
            production_method="farmed", certifications=["ASC"],
        )
        result = assess_label(catalog, resolver, label, barcode="8410000000000")
        assert result.production_method == ProductionMethod.FARMED
        assert result.certifications == ("ASC",)
        assert result.barcode == "8410000000000"
        # 50 + 0 + 0 + 8
        assert result.score.final_score == 58

    def test_english_display(self, catalog, resolver) -> None:
        result = assess_label(catalog, resolver, _label(fishing_method="bottom_trawl"), language="en")
        assert result.display_name == "European hake"
        assert result.alternatives[0].display_name == "European hake (better fishing gear)"

    def test_result_is_deterministic(self, catalog, resolver) -> None:
        label = _label(certifications=["MSC", "IUU"])
        assert assess_label(catalog, resolver, label) == assess_label(catalog, resolver, label)
