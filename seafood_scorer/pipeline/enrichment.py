"""
Enrichment merge: run caller-supplied lookups concurrently, fulfilled-or-absent.

The scorer itself never performs I/O. Callers that want live data (an IUCN
status lookup, a CO2 estimate, species reference facts) pass async fetcher callables keyed by
source name. Each fetcher receives the species' scientific name and runs
under its own timeout. A fetcher that raises or times out yields ``None``
for its key and a warning in the log; it never aborts the assessment.

Usage
-----
    results = asyncio.run(
        gather_enrichment({"iucn": fetch_iucn, "co2": fetch_co2}, "Merluccius merluccius")
    )
    # {"iucn": "LC", "co2": None}   ← co2 lookup failed, caller uses fallback
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from pydantic import ValidationError

from seafood_scorer.catalog.catalog import SpeciesCatalog
from seafood_scorer.models.label import ParsedLabel
from seafood_scorer.models.score import SpeciesInfo, SustainabilityResult
from seafood_scorer.pipeline.assess import assess_label
from seafood_scorer.resolution.synonyms import SynonymResolver

log = logging.getLogger(__name__)

EnrichmentFetcher = Callable[[str], Awaitable[Any]]

IUCN_SOURCE = "iucn"
CO2_SOURCE = "co2"
SPECIES_SOURCE = "species"
KNOWN_SOURCES = frozenset({IUCN_SOURCE, CO2_SOURCE, SPECIES_SOURCE})
DEFAULT_TIMEOUT_SECONDS = 5.0


async def _run_fetcher(
    name: str,
    fetcher: EnrichmentFetcher,
    scientific_name: str,
    timeout_seconds: float,
) -> Any:
    try:
        return await asyncio.wait_for(fetcher(scientific_name), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        log.warning("Enrichment source '%s' timed out after %.1fs.", name, timeout_seconds)
    except Exception as exc:
        log.warning("Enrichment source '%s' failed: %s", name, exc)
    return None


async def gather_enrichment(
    fetchers: Mapping[str, EnrichmentFetcher],
    scientific_name: str,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """Run all fetchers concurrently; failed or slow sources map to ``None``.

    Args:
        fetchers:        Source name → async callable taking a scientific name.
        scientific_name: Binomial name passed to every fetcher.
        timeout_seconds: Per-source timeout.

    Returns:
        Dict with one entry per source name.
    """
    names = list(fetchers)
    results = await asyncio.gather(
        *(_run_fetcher(n, fetchers[n], scientific_name, timeout_seconds) for n in names)
    )
    return dict(zip(names, results))


def _as_float(value: Any) -> Optional[float]:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        log.warning("Discarding non-numeric CO2 value %r.", value)
        return None


def _as_species_info(value: Any) -> Optional[SpeciesInfo]:
    if value is None or isinstance(value, SpeciesInfo):
        return value
    try:
        return SpeciesInfo.model_validate(value)
    except ValidationError as exc:
        log.warning("Discarding invalid species info: %s", exc)
        return None


async def assess_label_async(
    catalog: SpeciesCatalog,
    resolver: SynonymResolver,
    label: ParsedLabel,
    fetchers: Optional[Mapping[str, EnrichmentFetcher]] = None,
    *,
    species_name: Optional[str] = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    language: str = "es",
    barcode: Optional[str] = None,
) -> Optional[SustainabilityResult]:
    """Resolve, enrich concurrently, then assess.

    Recognised sources are ``"iucn"`` (status string), ``"co2"`` (kg CO2e/kg)
    and ``"species"`` (mapping or ``SpeciesInfo`` with family, habitat, max
    length, trophic level and vulnerability). Missing or failed sources fall
    back to catalog defaults. Fetchers under any other name are skipped with
    a warning.
    Returns ``None`` when the species cannot be resolved.
    """
    species = resolver.resolve_record(species_name or label.species_raw)
    if species is None:
        return None

    known: dict[str, EnrichmentFetcher] = {}
    for name, fetcher in (fetchers or {}).items():
        if name in KNOWN_SOURCES:
            known[name] = fetcher
        else:
            log.warning("Skipping unrecognised enrichment source '%s'.", name)

    enrichment: dict[str, Any] = {}
    if known:
        enrichment = await gather_enrichment(known, species.names.scientific, timeout_seconds)

    return assess_label(
        catalog,
        resolver,
        label,
        species_name=species.id,
        iucn_override=enrichment.get(IUCN_SOURCE),
        co2_override=_as_float(enrichment.get(CO2_SOURCE)),
        species_info=_as_species_info(enrichment.get(SPECIES_SOURCE)),
        language=language,
        barcode=barcode,
    )
