"""
Certification / origin modifier.

Each certification label is matched case-insensitively against the known
certification names (first known name contained in the label wins) and the
matched modifiers are summed. Uncertified aquaculture takes an extra −5.
The total is clamped to [-10, +10].

The result does not depend on the order of the labels.
"""

from __future__ import annotations

from typing import Iterable, Optional

from seafood_scorer.taxonomy.species_taxonomy import ProductionMethod

CERTIFICATION_MODIFIERS: dict[str, int] = {
    "MSC": 10,
    "ASC": 8,
    "GlobalGAP": 5,
    "Friend of Sea": 4,
    "EU origin": 2,
    "IUU": -10,
}

UNCERTIFIED_FARMED_PENALTY = -5
ORIGIN_MODIFIER_MIN = -10
ORIGIN_MODIFIER_MAX = 10


def match_certification(label: str) -> Optional[str]:
    """Return the known certification name contained in ``label``, if any."""
    lower = label.lower()
    for name in CERTIFICATION_MODIFIERS:
        if name.lower() in lower:
            return name
    return None


def get_origin_modifier(
    certifications: Optional[Iterable[str]] = None,
    production_method: Optional[str] = None,
) -> int:
    """Clamped certification + production-method modifier in [-10, 10]."""
    labels = [c for c in (certifications or ()) if c and c.strip()]

    modifier = 0
    for label in labels:
        name = match_certification(label)
        if name is not None:
            modifier += CERTIFICATION_MODIFIERS[name]

    is_farmed = (production_method or "").strip().lower() == ProductionMethod.FARMED
    if is_farmed and not labels:
        modifier += UNCERTIFIED_FARMED_PENALTY

    return max(ORIGIN_MODIFIER_MIN, min(ORIGIN_MODIFIER_MAX, modifier))
