"""
Score bands and their display attributes.

Inclusive boundaries::

    avoid  0–25
    think 26–50
    good  51–75
    best  76–100
"""

from __future__ import annotations

from seafood_scorer.taxonomy.species_taxonomy import ScoreBand

_BAND_LABELS: dict[ScoreBand, dict[str, str]] = {
    ScoreBand.BEST:  {"es": "Mejor opción", "en": "Best choice"},
    ScoreBand.GOOD:  {"es": "Buena opción", "en": "Good choice"},
    ScoreBand.THINK: {"es": "Piénsatelo",   "en": "Think twice"},
    ScoreBand.AVOID: {"es": "Evitar",       "en": "Avoid"},
}

_BAND_COLORS: dict[ScoreBand, str] = {
    ScoreBand.BEST:  "#106c72",
    ScoreBand.GOOD:  "#80b8a2",
    ScoreBand.THINK: "#b97f5f",
    ScoreBand.AVOID: "#ef4444",
}


def get_score_band(score: int) -> ScoreBand:
    """Map a final score to its band."""
    if score >= 76:
        return ScoreBand.BEST
    if score >= 51:
        return ScoreBand.GOOD
    if score >= 26:
        return ScoreBand.THINK
    return ScoreBand.AVOID


def get_band_label(band: ScoreBand, language: str = "es") -> str:
    labels = _BAND_LABELS[ScoreBand(band)]
    return labels.get(language, labels["es"])


def get_band_color(band: ScoreBand) -> str:
    """Hex colour used by the gauge for ``band``."""
    return _BAND_COLORS[ScoreBand(band)]
