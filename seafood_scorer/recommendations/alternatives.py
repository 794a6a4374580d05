"""
Alternative recommender: "choose a better option" suggestions.

Candidates are generated in a fixed order and the first three that qualify
are returned, without re-sorting by score:

1. Farmed product → the same species caught wild:
   ``min(current + 15, species max) - current >= 15``.
2. Bottom or midwater trawl → the same species caught with better gear:
   ``min(current + 20, species max) - current >= 15``.
3. Each id in ``species.good_alternatives``, in listed order, whose
   ``default_score - current >= 15``.

When nothing qualifies, callers show ``reduce_consumption_message()``
instead.
"""

from __future__ import annotations

from typing import Optional

from seafood_scorer.catalog.catalog import SpeciesCatalog
from seafood_scorer.models.score import AlternativeOption
from seafood_scorer.models.species import SpeciesRecord
from seafood_scorer.scoring.methods import resolve_method_key
from seafood_scorer.taxonomy.species_taxonomy import (
    DAMAGING_TRAWL_METHODS,
    AlternativeReason,
    ProductionMethod,
)

MIN_IMPROVEMENT = 15
WILD_CATCH_BONUS = 15
BETTER_GEAR_BONUS = 20
MAX_ALTERNATIVES = 3

_HINTS = {
    "wild": {"es": "salvaje", "en": "wild-caught"},
    "gear": {"es": "mejor arte de pesca", "en": "better fishing gear"},
}

_REDUCE_TITLE = {
    "es": "No hay una alternativa claramente mejor. Reduce su consumo.",
    "en": "There is no clearly better alternative. Eat it less often.",
}


def _hint(kind: str, language: str) -> str:
    return _HINTS[kind].get(language, _HINTS[kind]["es"])


def _same_species_option(
    species: SpeciesRecord,
    current_score: int,
    bonus: int,
    hint: str,
    language: str,
) -> Optional[AlternativeOption]:
    hypothetical = min(current_score + bonus, species.score_range[1])
    if hypothetical - current_score < MIN_IMPROVEMENT:
        return None
    return AlternativeOption(
        species_id=species.id,
        display_name=f"{species.display_name(language)} ({hint})",
        score=hypothetical,
        reason=AlternativeReason.SAME_SPECIES_BETTER_METHOD,
        production_method_suggestion=ProductionMethod.WILD,
    )


def build_alternatives(
    catalog: SpeciesCatalog,
    species: SpeciesRecord,
    current_score: int,
    fishing_method: Optional[str] = None,
    production_method: Optional[str] = None,
    language: str = "es",
    max_results: int = MAX_ALTERNATIVES,
) -> list[AlternativeOption]:
    """Return up to ``max_results`` better options for the scanned product.

    Args:
        catalog:           Loaded species catalog.
        species:           The scanned species.
        current_score:     Its final score.
        fishing_method:    Method text as supplied to the score engine.
        production_method: ``"wild"``, ``"farmed"`` or ``"unknown"``.
        language:          Display language for names.
        max_results:       Cap on returned options.

    Returns:
        Same-species suggestions first, then cross-species ones, in
        generation order.
    """
    options: list[AlternativeOption] = []

    if (production_method or "").strip().lower() == ProductionMethod.FARMED:
        option = _same_species_option(
            species, current_score, WILD_CATCH_BONUS, _hint("wild", language), language
        )
        if option is not None:
            options.append(option)

    if resolve_method_key(fishing_method, catalog.fishing_methods) in DAMAGING_TRAWL_METHODS:
        option = _same_species_option(
            species, current_score, BETTER_GEAR_BONUS, _hint("gear", language), language
        )
        if option is not None:
            options.append(option)

    for alt_id in species.good_alternatives:
        alt = catalog.get(alt_id)
        if alt is None:
            continue
        if alt.default_score - current_score >= MIN_IMPROVEMENT:
            options.append(
                AlternativeOption(
                    species_id=alt.id,
                    display_name=alt.display_name(language),
                    score=alt.default_score,
                    reason=AlternativeReason.SAME_CATEGORY_HIGHER_SCORE,
                )
            )

    return options[:max_results]


def reduce_consumption_message(species: SpeciesRecord, language: str = "es") -> str:
    """Fallback advice shown when no alternative qualifies."""
    title = _REDUCE_TITLE.get(language, _REDUCE_TITLE["es"])
    if species.notes:
        return f"{title} {species.notes}"
    return title
