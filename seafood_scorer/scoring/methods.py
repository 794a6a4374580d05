"""
Fishing / production method modifier.

Lookup cascade (first hit wins)
-------------------------------
1. Normalised key: lowercase, spaces and hyphens → underscores
   (``"Pole-and-line"`` → ``"pole_and_line"``).
2. EU gear code (Regulation (EU) 404/2011 abbreviations such as ``OTB``),
   mapped to a method key.
3. Free text: the input is a substring of a method's Spanish or English
   display name, or the normalised input contains a method key.
4. Nothing matched → modifier 0 (unknown method).
"""

from __future__ import annotations

from typing import Mapping, Optional

from seafood_scorer.models.species import FishingMethod

UNKNOWN_METHOD_KEY = "unknown"

EU_GEAR_TO_METHOD: dict[str, str] = {
    "OTB": "bottom_trawl",
    "PTB": "bottom_trawl",
    "TBB": "beam_trawl",
    "DRB": "dredge",
    "DRH": "dredge",
    "OTM": "midwater_trawl",
    "PTM": "midwater_trawl",
    "PS": "purse_seine",
    "GN": "gillnet",
    "GNS": "gillnet",
    "GND": "gillnet",
    "LHP": "longline_pelagic",
    "LL": "longline_pelagic",
    "LLD": "longline_demersal",
    "LHM": "longline_demersal",
    "FPO": "trap_pot",
    "FYK": "trap_pot",
    "LTL": "pole_and_line",
    "LLS": "hook_and_line",
    "LHT": "hook_and_line",
}


def normalize_method_key(method: str) -> str:
    """``"Bottom trawl"`` / ``"bottom-trawl"`` → ``"bottom_trawl"``."""
    return "_".join(method.strip().lower().replace("-", " ").split())


def find_method(
    method: Optional[str],
    methods: Mapping[str, FishingMethod],
) -> Optional[FishingMethod]:
    """Return the catalogued method for ``method`` text, or ``None``."""
    if not method or not method.strip():
        return None

    key = normalize_method_key(method)
    if key in methods:
        return methods[key]

    gear_key = EU_GEAR_TO_METHOD.get(method.strip().upper())
    if gear_key is not None and gear_key in methods:
        return methods[gear_key]

    text = " ".join(method.strip().lower().split())
    for entry in methods.values():
        if text in entry.name.lower() or text in entry.name_en.lower() or entry.key in key:
            return entry
    return None


def get_method_modifier(method: Optional[str], methods: Mapping[str, FishingMethod]) -> int:
    """Signed modifier for a method key, gear code or free text; no match → 0."""
    entry = find_method(method, methods)
    return entry.modifier if entry is not None else 0


def resolve_method_key(method: Optional[str], methods: Mapping[str, FishingMethod]) -> str:
    """Canonical method key for ``method``, or ``"unknown"``."""
    entry = find_method(method, methods)
    return entry.key if entry is not None else UNKNOWN_METHOD_KEY
