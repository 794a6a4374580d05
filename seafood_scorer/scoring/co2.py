"""
Carbon footprint estimate (kg CO2e per kg of product).

A live value supplied by an enrichment source wins. Otherwise the fallback
tables are used, most specific first: per species, per fishing method, then
the global seafood average. The estimate never affects the sustainability
score; it is shown alongside it.

Comparison text
---------------
Chicken (4.5 kg CO2e/kg) is the reference when the product is at least
twice as efficient; otherwise beef (27 kg CO2e/kg).
"""

from __future__ import annotations

from typing import Optional

from seafood_scorer.models.score import Co2Estimate

GLOBAL_AVERAGE_SEAFOOD = 3.5
CHICKEN_CO2 = 4.5
BEEF_CO2 = 27.0

CO2_BY_SPECIES: dict[str, float] = {
    "mejillon":         0.3,
    "ostra":            0.4,
    "almeja":           0.6,
    "sardina":          0.9,
    "boqueron":         0.9,
    "caballa":          1.2,
    "jurel":            1.3,
    "bacaladilla":      1.6,
    "listado":          2.1,
    "salmon_atlantico": 5.1,
    "panga":            4.0,
    "atun_rojo":        9.0,
    "langostino":      11.0,
    "cigala":          12.0,
}

CO2_BY_METHOD: dict[str, float] = {
    "purse_seine":           1.0,
    "midwater_trawl":        1.5,
    "pole_and_line":         1.8,
    "hook_and_line":         2.0,
    "gillnet":               2.0,
    "jig":                   2.5,
    "longline_demersal":     2.5,
    "longline_pelagic":      3.0,
    "dredge":                4.0,
    "aquaculture_certified": 4.0,
    "trap_pot":              4.5,
    "aquaculture_standard":  5.0,
    "bottom_trawl":          6.0,
    "beam_trawl":            8.0,
}

_COMPARISONS = {
    "chicken": {
        "es": "{ratio:.1f}x menos CO2 que el pollo",
        "en": "{ratio:.1f}x less CO2 than chicken",
    },
    "beef": {
        "es": "{ratio:.0f}x menos CO2 que la ternera",
        "en": "{ratio:.0f}x less CO2 than beef",
    },
}


def build_co2_comparison(value: float, language: str = "es") -> str:
    """Human-readable comparison of ``value`` against chicken or beef."""
    lang = language if language in ("es", "en") else "es"
    ratio = CHICKEN_CO2 / value
    if ratio >= 2:
        return _COMPARISONS["chicken"][lang].format(ratio=ratio)
    return _COMPARISONS["beef"][lang].format(ratio=BEEF_CO2 / value)


def estimate_co2(
    species_id: str,
    method_key: Optional[str] = None,
    live_value: Optional[float] = None,
    language: str = "es",
) -> Co2Estimate:
    """Return the CO2 estimate for a product.

    Args:
        species_id: Catalog species id.
        method_key: Canonical fishing method key, if known.
        live_value: Value from an enrichment source; ignored unless positive.
        language:   Language of the comparison text.
    """
    if live_value is not None and live_value > 0:
        value, source = float(live_value), "live"
    else:
        value = CO2_BY_SPECIES.get(species_id) or CO2_BY_METHOD.get(method_key or "") or GLOBAL_AVERAGE_SEAFOOD
        source = "fallback"
    return Co2Estimate(
        value=value,
        source=source,
        comparison=build_co2_comparison(value, language),
    )
