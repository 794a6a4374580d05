"""
ASCII terminal formatters for CLI commands.

All formatters accept model instances and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Breakdown layout
----------------
``format_breakdown()`` shows each signed contribution on its own row so the
reader can see exactly where the score came from::

  IUCN base          +50
  Method             +15
  Area                +5
  Origin              +0
  ----------------------
  Raw                 70
  Final               70   [GOOD] Buena opción   (confidence: high)
"""

from __future__ import annotations

from typing import Sequence

from seafood_scorer.models.score import AlternativeOption, ScoreBreakdown, SustainabilityResult
from seafood_scorer.models.species import SpeciesRecord
from seafood_scorer.scoring.bands import get_band_label


# ── Score breakdown ──────────────────────────────────────────────────────────


def format_breakdown(breakdown: ScoreBreakdown, language: str = "es") -> str:
    """Return the signed component table for one breakdown."""
    rows = [
        ("IUCN base", breakdown.iucn_base),
        ("Method", breakdown.method_modifier),
        ("Area", breakdown.area_modifier),
        ("Origin", breakdown.origin_modifier),
    ]
    lines = [f"  {label:<16} {value:>+5d}" for label, value in rows]
    lines.append("  " + "-" * 22)
    lines.append(f"  {'Raw':<16} {breakdown.raw_score:>5d}")
    lines.append(
        f"  {'Final':<16} {breakdown.final_score:>5d}   "
        f"[{breakdown.band.upper()}] {get_band_label(breakdown.band, language)}   "
        f"(confidence: {breakdown.confidence})"
    )
    return "\n".join(lines)


# ── Alternatives ─────────────────────────────────────────────────────────────


def format_alternatives(
    alternatives: Sequence[AlternativeOption],
    reduce_message: str | None = None,
) -> str:
    """Numbered list of alternatives, or the reduce-consumption message."""
    if not alternatives:
        return f"  {reduce_message}" if reduce_message else "  (no alternatives)"

    lines = [f"  {'#':>2}  {'Option':<40}  {'Score':>5}  Reason"]
    lines.append("  " + "-" * (len(lines[0]) + 24))
    for idx, option in enumerate(alternatives, start=1):
        lines.append(
            f"  {idx:>2}  {option.display_name[:40]:<40}  {option.score:>5d}  {option.reason}"
        )
    return "\n".join(lines)


# ── Search results ───────────────────────────────────────────────────────────


def format_search_results(
    query: str,
    results: Sequence[SpeciesRecord],
    language: str = "es",
) -> str:
    """Ranked search matches, one species per row."""
    lines = [f"=== Search: {query!r} ==="]
    if not results:
        lines.append("  (no matches)")
        return "\n".join(lines)

    for rank, record in enumerate(results, start=1):
        lines.append(
            f"  {rank:>2}  {record.id:<18}  {record.display_name(language):<28}  "
            f"{record.names.scientific}"
        )
    return "\n".join(lines)


# ── Full assessment ──────────────────────────────────────────────────────────


def format_assessment(result: SustainabilityResult, language: str = "es") -> str:
    """Header, breakdown, alternatives and CO2 for one assessed product."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== {result.display_name} ({result.scientific_name}) ===")
    lines.append(f"  Species id:   {result.species_id}")
    lines.append(f"  IUCN status:  {result.iucn_status}")
    lines.append(f"  Production:   {result.production_method}")
    lines.append(f"  Method:       {result.fishing_method or '-'}")
    lines.append(f"  FAO area:     {result.fao_area or '-'}")
    if result.certifications:
        lines.append(f"  Certified:    {', '.join(result.certifications)}")
    if result.barcode:
        lines.append(f"  Barcode:      {result.barcode}")

    lines.append("")
    lines.append(format_breakdown(result.score, language))

    lines.append("")
    lines.append("  Alternatives:")
    lines.append(format_alternatives(result.alternatives, result.reduce_message))

    if result.co2 is not None:
        lines.append("")
        lines.append(
            f"  CO2: {result.co2.value:.1f} kg CO2e/kg ({result.co2.source}), "
            f"{result.co2.comparison}"
        )

    info = result.species_info
    if info is not None:
        lines.append("")
        lines.append("  Species info:")
        lines.append(f"    Family:         {info.family or '-'}")
        lines.append(f"    Habitat:        {info.habitat or '-'}")
        if info.max_length_cm is not None:
            lines.append(f"    Max length:     {info.max_length_cm:g} cm")
        if info.trophic_level is not None:
            lines.append(f"    Trophic level:  {info.trophic_level:.1f}")
        if info.vulnerability is not None:
            lines.append(f"    Vulnerability:  {info.vulnerability:.0f}/100")
    return "\n".join(lines)
