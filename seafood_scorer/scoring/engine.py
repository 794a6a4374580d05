"""
Score engine: combines the four signal scorers into a ``ScoreBreakdown``.

Formula
-------
    raw   = iucn_base + method_modifier + area_modifier + origin_modifier
    final = clamp(raw, species.score_range)      # [0, 100] if species unknown

Components
----------
iucn_base (0–50):
    IUCN status lookup; missing/unknown → 30.
method_modifier (-20…+15):
    Fishing / production method table; unknown → 0.
area_modifier (-15…+5):
    FAO area table with hierarchical fallback; unknown → 0.
origin_modifier (-10…+10):
    Certifications, plus −5 for uncertified farmed products; clamped.

Confidence counts how many of IUCN status, fishing method and FAO area the
caller supplied (non-blank), whether or not the value was recognised:
3 → high, 1–2 → medium, 0 → low.

The engine is total: it never raises for typed input and never reads
anything but its arguments and the catalog. Identical inputs against the
same catalog always give an identical breakdown.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from seafood_scorer.catalog.catalog import SpeciesCatalog
from seafood_scorer.models.label import ParsedLabel
from seafood_scorer.models.score import ScoreBreakdown
from seafood_scorer.scoring.areas import get_area_modifier
from seafood_scorer.scoring.bands import get_score_band
from seafood_scorer.scoring.iucn import get_iucn_base
from seafood_scorer.scoring.methods import get_method_modifier
from seafood_scorer.scoring.origin import get_origin_modifier
from seafood_scorer.taxonomy.species_taxonomy import ConfidenceLevel

log = logging.getLogger(__name__)

GLOBAL_SCORE_MIN = 0
GLOBAL_SCORE_MAX = 100


def _is_supplied(value: Optional[str]) -> bool:
    return value is not None and bool(str(value).strip())


def get_confidence(
    iucn_status: Optional[str],
    fishing_method: Optional[str],
    fao_area: Optional[str],
) -> ConfidenceLevel:
    """Classify how many of the three independent signals were supplied."""
    known = sum(_is_supplied(v) for v in (iucn_status, fishing_method, fao_area))
    if known == 3:
        return ConfidenceLevel.HIGH
    if known >= 1:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def clamp_to_species_range(catalog: SpeciesCatalog, species_id: str, raw_score: int) -> int:
    """Clamp ``raw_score`` to the species range, or to [0, 100] if unknown."""
    species = catalog.get(species_id)
    if species is None:
        log.warning("Species '%s' not in catalog; clamping to [0, 100].", species_id)
        return max(GLOBAL_SCORE_MIN, min(GLOBAL_SCORE_MAX, raw_score))
    lo, hi = species.score_range
    return max(lo, min(hi, raw_score))


def compute_score(
    catalog: SpeciesCatalog,
    species_id: str,
    iucn_status: Optional[str] = None,
    fishing_method: Optional[str] = None,
    fao_area: Optional[str] = None,
    certifications: Optional[Iterable[str]] = None,
    production_method: Optional[str] = None,
) -> ScoreBreakdown:
    """Compute the full score breakdown for one product.

    Args:
        catalog:           Loaded species catalog (read only).
        species_id:        Resolved catalog species id.
        iucn_status:       IUCN category; ``None`` → DD/NE default base.
        fishing_method:    Method key, EU gear code or free text.
        fao_area:          Dot-separated FAO area code.
        certifications:    Free-text certification labels, any order.
        production_method: ``"wild"``, ``"farmed"`` or ``"unknown"``.

    Returns:
        ScoreBreakdown with all fields populated.
    """
    iucn_base = get_iucn_base(iucn_status)
    method_modifier = get_method_modifier(fishing_method, catalog.fishing_methods)
    area_modifier = get_area_modifier(fao_area, catalog.fao_areas)
    origin_modifier = get_origin_modifier(certifications, production_method)

    raw_score = iucn_base + method_modifier + area_modifier + origin_modifier
    final_score = clamp_to_species_range(catalog, species_id, raw_score)

    return ScoreBreakdown(
        iucn_base=iucn_base,
        method_modifier=method_modifier,
        area_modifier=area_modifier,
        origin_modifier=origin_modifier,
        raw_score=raw_score,
        final_score=final_score,
        band=get_score_band(final_score),
        confidence=get_confidence(iucn_status, fishing_method, fao_area),
    )


def score_label(
    catalog: SpeciesCatalog,
    species_id: str,
    label: ParsedLabel,
    iucn_status: Optional[str] = None,
) -> ScoreBreakdown:
    """``compute_score()`` with the signals taken from a ``ParsedLabel``."""
    return compute_score(
        catalog,
        species_id,
        iucn_status=iucn_status,
        fishing_method=label.fishing_method,
        fao_area=label.fao_area,
        certifications=label.certifications,
        production_method=label.production_method,
    )
