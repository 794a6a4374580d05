"""
Assessment: one ``ParsedLabel`` → one ``SustainabilityResult``.

Steps
-----
1. Resolve the species from ``species_name`` or ``label.species_raw``.
   No match → ``None`` (the caller falls back to manual search).
2. IUCN status: a valid override from a live lookup, else the catalog
   default.
3. Score via the engine.
4. Build alternatives; when none qualify, attach the reduce-consumption
   message.
5. Attach the CO2 estimate and any species reference facts.

Pure and synchronous: no I/O, no clock, no globals.
"""

from __future__ import annotations

import logging
from typing import Optional

from seafood_scorer.catalog.catalog import SpeciesCatalog
from seafood_scorer.models.label import ParsedLabel
from seafood_scorer.models.score import SpeciesInfo, SustainabilityResult
from seafood_scorer.recommendations.alternatives import (
    build_alternatives,
    reduce_consumption_message,
)
from seafood_scorer.resolution.synonyms import SynonymResolver
from seafood_scorer.scoring.co2 import estimate_co2
from seafood_scorer.scoring.engine import score_label
from seafood_scorer.scoring.iucn import parse_iucn_status
from seafood_scorer.scoring.methods import resolve_method_key
from seafood_scorer.taxonomy.species_taxonomy import ProductionMethod

log = logging.getLogger(__name__)


def assess_label(
    catalog: SpeciesCatalog,
    resolver: SynonymResolver,
    label: ParsedLabel,
    *,
    species_name: Optional[str] = None,
    iucn_override: Optional[str] = None,
    co2_override: Optional[float] = None,
    species_info: Optional[SpeciesInfo] = None,
    language: str = "es",
    barcode: Optional[str] = None,
) -> Optional[SustainabilityResult]:
    """Score a label end to end.

    Args:
        catalog:       Loaded species catalog.
        resolver:      Resolver built over ``catalog``.
        label:         Normalised label fields.
        species_name:  Explicit species text; overrides ``label.species_raw``.
        iucn_override: Live IUCN status; invalid values are ignored.
        co2_override:  Live CO2 value (kg CO2e/kg).
        species_info:  Reference facts about the species, attached as is.
        language:      Display language for names and messages.
        barcode:       Scanned barcode, echoed into the result.

    Returns:
        ``SustainabilityResult``, or ``None`` if the species is not found.
    """
    species = resolver.resolve_record(species_name or label.species_raw)
    if species is None:
        log.info("Could not resolve species from %r.", species_name or label.species_raw)
        return None

    iucn_status = parse_iucn_status(iucn_override) or species.iucn_status
    breakdown = score_label(catalog, species.id, label, iucn_status=iucn_status)

    alternatives = build_alternatives(
        catalog,
        species,
        breakdown.final_score,
        fishing_method=label.fishing_method,
        production_method=label.production_method,
        language=language,
    )
    method_key = resolve_method_key(label.fishing_method, catalog.fishing_methods)

    return SustainabilityResult(
        species_id=species.id,
        scientific_name=species.names.scientific,
        display_name=species.display_name(language),
        iucn_status=iucn_status,
        score=breakdown,
        production_method=label.production_method or ProductionMethod.UNKNOWN,
        fao_area=label.fao_area,
        fishing_method=label.fishing_method,
        certifications=label.certifications,
        alternatives=tuple(alternatives),
        reduce_message=None if alternatives else reduce_consumption_message(species, language),
        co2=estimate_co2(species.id, method_key, co2_override, language),
        species_info=species_info,
        barcode=barcode,
    )
