"""
FAO catch-area modifier.

Codes are hierarchical and dot-separated (``"27"`` → ``"27.8"`` →
``"27.8.a"``). Lookup tries the full code, then strips the last segment
and retries until a match is found or no segments remain.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Optional

from seafood_scorer.models.species import FaoArea

_UNKNOWN_AREA = {"es": "Zona desconocida", "en": "Unknown area"}


def _candidate_codes(code: str) -> Iterator[str]:
    parts = code.strip().split(".")
    for i in range(len(parts), 0, -1):
        yield ".".join(parts[:i])


def find_area(code: Optional[str], areas: Mapping[str, FaoArea]) -> Optional[FaoArea]:
    """Return the most specific catalogued area for ``code``, or ``None``."""
    if not code or not code.strip():
        return None
    for candidate in _candidate_codes(code):
        area = areas.get(candidate)
        if area is not None:
            return area
    return None


def get_area_modifier(code: Optional[str], areas: Mapping[str, FaoArea]) -> int:
    """Signed modifier for an FAO area code; no match → 0."""
    area = find_area(code, areas)
    return area.modifier if area is not None else 0


def get_area_name(
    code: Optional[str],
    areas: Mapping[str, FaoArea],
    language: str = "es",
) -> str:
    """Display name for an FAO area, with the same prefix fallback.

    Missing code → "Zona desconocida" / "Unknown area". Uncatalogued code →
    the code itself.
    """
    if not code or not code.strip():
        return _UNKNOWN_AREA.get(language, _UNKNOWN_AREA["es"])
    area = find_area(code, areas)
    if area is None:
        return code.strip()
    if language == "en" and area.name_en:
        return area.name_en
    return area.name
