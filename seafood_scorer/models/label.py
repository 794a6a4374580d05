"""
Parsed label model — the normalised per-scan input to the scorer.

A ``ParsedLabel`` is produced by whatever collaborator read the product
(barcode lookup, label photo, chat extraction, manual entry). Every field
is independently optional; the scorer degrades gracefully as fields are
missing.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from seafood_scorer.taxonomy.species_taxonomy import ProductionMethod


class ParsedLabel(BaseModel):
    """Normalised label data for one scan.

    Attributes:
        species_raw: Free-text species name as printed or spoken.
        fao_area: Dot-separated FAO catch-area code, e.g. ``"27.8.a"``.
        fishing_method: Canonical method key, EU gear code, or free text.
        origin: Free-text origin (country or region), if printed.
        production_method: ``wild``, ``farmed`` or ``unknown``.
        certifications: Free-text certification labels (unordered).
    """

    model_config = ConfigDict(frozen=True)

    species_raw: Optional[str] = None
    fao_area: Optional[str] = None
    fishing_method: Optional[str] = None
    origin: Optional[str] = None
    production_method: Optional[ProductionMethod] = None
    certifications: tuple[str, ...] = ()

    @field_validator("species_raw", "fao_area", "fishing_method", "origin")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("certifications", mode="before")
    @classmethod
    def normalise_certifications(cls, v):
        if v is None:
            return ()
        # Sets arrive unordered; sort so equal labels compare equal.
        return tuple(sorted(str(c).strip() for c in v if c and str(c).strip()))
