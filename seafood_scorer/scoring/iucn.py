"""IUCN Red List status → base score."""

from __future__ import annotations

from typing import Optional

from seafood_scorer.taxonomy.species_taxonomy import IucnStatus

IUCN_BASE_SCORES: dict[IucnStatus, int] = {
    IucnStatus.LC: 50,
    IucnStatus.NT: 40,
    IucnStatus.VU: 25,
    IucnStatus.EN: 10,
    IucnStatus.CR: 0,
    IucnStatus.EX: 0,
    IucnStatus.DD: 30,
    IucnStatus.NE: 30,
}

# Missing or unrecognised status is scored like DD/NE: moderate risk.
DEFAULT_IUCN_BASE = 30


def parse_iucn_status(status: Optional[str]) -> Optional[IucnStatus]:
    """Return the ``IucnStatus`` for ``status`` (case-insensitive), or ``None``."""
    if not status or not str(status).strip():
        return None
    try:
        return IucnStatus(str(status).strip().upper())
    except ValueError:
        return None


def get_iucn_base(status: Optional[str]) -> int:
    """Base score (0–50) for an IUCN status; unknown or missing → 30."""
    parsed = parse_iucn_status(status)
    if parsed is None:
        return DEFAULT_IUCN_BASE
    return IUCN_BASE_SCORES[parsed]
