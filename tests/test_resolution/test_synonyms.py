"""
Tests for seafood_scorer/resolution/synonyms.py.

What we test
------------
Index construction:
  - Exact index holds every name variant and the id, lowercased.
  - Partial index only holds tokens of length >= 4.
resolve():
  - Blank input → None.
  - Exact match on any locale, scientific or commercial name; case and
    surrounding whitespace ignored.
  - Substring match in both directions; first indexed name wins.
  - Fuzzy match within edit distance 3; nonsense → None.
search():
  - Exact beats prefix beats substring beats fuzzy.
  - The species id counts as a name variant.
  - Ties keep catalog order.
  - Token-level fuzzy matching on multi-word names.
  - Blank query → []; results capped.
levenshtein():
  - Plain edit distance.
"""

from __future__ import annotations

import pytest

from seafood_scorer.catalog.catalog import SpeciesCatalog
from seafood_scorer.resolution.synonyms import SEARCH_LIMIT, SynonymResolver, levenshtein


# ── Index construction ────────────────────────────────────────────────────────

class TestIndexes:
    def test_exact_index_contains_all_variants(self, resolver) -> None:
        index = resolver.exact_index
        for name in ("merluza", "pescadilla", "european hake", "hake", "merlu",
                     "merluccius merluccius", "merluza europea"):
            assert index[name] == "merluza"
        assert index["atun_rojo"] == "atun_rojo"

    def test_partial_index_skips_short_tokens(self, resolver) -> None:
        partial = resolver.partial_index
        assert "hake" in partial
        assert "rojo" in partial
        assert "atún" in partial
        assert "y" not in partial
        assert all(len(token) >= 4 for token in partial)

    def test_partial_index_maps_shared_tokens_to_every_species(self, resolver) -> None:
        # "atlantic" appears in the bluefin tuna and the mackerel names.
        assert resolver.partial_index["atlantic"] == ("atun_rojo", "caballa")

    def test_index_accessors_return_copies(self, resolver) -> None:
        resolver.exact_index["kraken"] = "kraken"
        assert "kraken" not in resolver.exact_index


# ── resolve() ─────────────────────────────────────────────────────────────────

class TestResolve:
    @pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
    def test_blank_input_returns_none(self, resolver, text) -> None:
        assert resolver.resolve(text) is None

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("orada", "dorada"),
            ("Sparus aurata", "dorada"),
            ("  SPARUS AURATA  ", "dorada"),
            ("hake", "merluza"),
            ("Merlu", "merluza"),
            ("Merluza europea", "merluza"),
            ("Thon rouge", "atun_rojo"),
            ("atun_rojo", "atun_rojo"),
            ("Mejillón", "mejillon"),
        ],
    )
    def test_exact_names(self, resolver, text, expected) -> None:
        assert resolver.resolve(text) == expected

    def test_input_containing_a_name(self, resolver) -> None:
        assert resolver.resolve("Filete de dorada") == "dorada"
        assert resolver.resolve("merluza de pincho") == "merluza"

    def test_input_contained_in_a_name(self, resolver) -> None:
        assert resolver.resolve("bluefin") == "atun_rojo"

    def test_short_input_resolves_to_first_indexed_species(self, resolver) -> None:
        # "mer" is inside merluza, bacaladilla ("merlan bleu") and mejillón
        # names; merluza is indexed first.
        assert resolver.resolve("mer") == "merluza"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("dorda", "dorada"),
            ("caballla", "caballa"),
            ("anguilq", "anguila"),
        ],
    )
    def test_typos_within_threshold(self, resolver, text, expected) -> None:
        assert resolver.resolve(text) == expected

    def test_nonsense_returns_none(self, resolver) -> None:
        assert resolver.resolve("xqzwv") is None

    def test_resolve_record(self, resolver) -> None:
        record = resolver.resolve_record("Gilt-head bream")
        assert record is not None
        assert record.id == "dorada"
        assert resolver.resolve_record("xqzwv") is None

    def test_resolution_is_deterministic(self, resolver) -> None:
        assert {resolver.resolve("mer") for _ in range(5)} == {"merluza"}


# ── search() ──────────────────────────────────────────────────────────────────

class TestSearch:
    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_blank_query_returns_empty(self, resolver, query) -> None:
        assert resolver.search(query) == []

    def test_exact_name_ranks_first(self, resolver) -> None:
        results = resolver.search("dorada")
        assert results[0].id == "dorada"

    def test_prefix_ties_keep_catalog_order(self, resolver) -> None:
        ids = [r.id for r in resolver.search("merl")]
        # merluza ("merluza", "merlu") and bacaladilla ("merlan bleu") score 80.
        assert ids[:2] == ["merluza", "bacaladilla"]

    def test_exact_beats_prefix(self, resolver) -> None:
        ids = [r.id for r in resolver.search("hake")]
        assert ids[0] == "merluza"

    def test_prefix_match(self, resolver) -> None:
        ids = [r.id for r in resolver.search("anguil")]
        assert ids[0] == "anguila"

    def test_substring_match(self, resolver) -> None:
        # "bluefin" is inside "Atlantic bluefin tuna"; "blue" is only a fuzzy hit.
        ids = [r.id for r in resolver.search("bluefin")]
        assert ids[0] == "atun_rojo"

    def test_fuzzy_token_match(self, resolver) -> None:
        # "whitng" is one edit from the "whiting" token of "Blue whiting".
        results = resolver.search("whitng")
        assert results
        assert results[0].id == "bacaladilla"

    def test_limit_caps_results(self, resolver) -> None:
        assert len(resolver.search("a", limit=3)) == 3

    def test_default_limit_on_bundled_catalog(self, bundled_resolver) -> None:
        assert len(bundled_resolver.search("a")) == SEARCH_LIMIT

    def test_no_match_returns_empty(self, resolver) -> None:
        assert resolver.search("xqzwvkk") == []


# ── Bundled catalog ───────────────────────────────────────────────────────────

class TestBundledResolution:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("orada", "dorada"),
            ("Sparus aurata", "dorada"),
            ("hake", "merluza"),
            ("Gadus morhua", "bacalao"),
            ("bonito del norte", "bonito_norte"),
        ],
    )
    def test_known_names(self, bundled_resolver, text, expected) -> None:
        assert bundled_resolver.resolve(text) == expected

    def test_search_dorada_first(self, bundled_resolver) -> None:
        assert bundled_resolver.search("dorada")[0].id == "dorada"

    def test_search_partial_merlu(self, bundled_resolver) -> None:
        ids = [r.id for r in bundled_resolver.search("merlu")]
        assert "merluza" in ids


# ── levenshtein() ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "a, b, expected",
    [("", "", 0), ("abc", "abc", 0), ("kitten", "sitting", 3), ("dorda", "dorada", 1), ("", "abc", 3)],
)
def test_levenshtein(a: str, b: str, expected: int) -> None:
    assert levenshtein(a, b) == expected


def test_search_query_equal_to_id_is_exact(make_species) -> None:
    catalog = SpeciesCatalog.from_records(
        [
            make_species("pez_limon", es=("Dorado del mar",), scientific="Seriola dumerili"),
            make_species("dorado", es=("Dorado pacífico",), scientific="Coryphaena hippurus"),
        ]
    )
    ids = [r.id for r in SynonymResolver(catalog).search("dorado")]
    # Both have a "dorado..." prefix name; only the second matches an id exactly.
    assert ids == ["dorado", "pez_limon"]
