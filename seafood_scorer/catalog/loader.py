"""
Catalog loader: bundled JSON → validated ``SpeciesCatalog``.

Responsibilities
----------------
1. Read the species, fishing-method and FAO-area JSON files (bundled under
   ``seafood_scorer/catalog/data/`` unless overridden).
2. Validate every record through the pydantic models.
3. Enforce cross-record rules the models cannot see on their own.
4. Build one immutable ``SpeciesCatalog``.

File formats
------------
``species.json``          — array of species objects (camelCase keys).
``fishing_methods.json``  — object keyed by method key:
                            ``{"name", "name_en", "modifier"}``.
``fao_areas.json``        — object keyed by FAO code:
                            ``{"name", "name_en", "modifier", "description"}``.

Validation rules
----------------
- Duplicate species ids are rejected.
- ``goodAlternatives`` must reference ids present in the catalog and must not
  reference the species itself.
- ``scoreRange`` must satisfy ``0 <= min <= max <= 100`` (model validator).
- Exact-name collisions between two species (the same lowercased name used
  by both) are rejected when ``strict_names`` is true. Otherwise they are
  logged and the later species wins exact lookups.

Usage
-----
    from seafood_scorer.catalog.loader import load_catalog

    catalog = load_catalog()
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from seafood_scorer.catalog.catalog import SpeciesCatalog
from seafood_scorer.models.species import FaoArea, FishingMethod, SpeciesRecord

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_SPECIES_PATH = DATA_DIR / "species.json"
DEFAULT_METHODS_PATH = DATA_DIR / "fishing_methods.json"
DEFAULT_AREAS_PATH = DATA_DIR / "fao_areas.json"


class CatalogValidationError(ValueError):
    """Raised when reference data fails load-time validation."""


# ── Raw file access ───────────────────────────────────────────────────────────

def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogValidationError(f"{path}: invalid JSON ({exc}).") from exc


# ── Species ───────────────────────────────────────────────────────────────────

def parse_species_records(raw_records: list[dict[str, Any]]) -> list[SpeciesRecord]:
    """Validate raw species dicts and return model instances in input order.

    Entries without an ``id`` key whose keys all start with ``_comment`` are
    skipped.

    Raises:
        CatalogValidationError: On the first invalid or duplicate record.
    """
    records: list[SpeciesRecord] = []
    seen_ids: set[str] = set()
    for i, raw in enumerate(raw_records):
        if "id" not in raw and all(k.startswith("_comment") for k in raw):
            continue
        try:
            record = SpeciesRecord.model_validate(raw)
        except ValidationError as exc:
            ident = raw.get("id", f"index {i}")
            raise CatalogValidationError(f"Species '{ident}' is invalid:\n{exc}") from exc
        if record.id in seen_ids:
            raise CatalogValidationError(f"Duplicate species id '{record.id}' at index {i}.")
        seen_ids.add(record.id)
        records.append(record)
    return records


def _validate_alternatives(records: list[SpeciesRecord]) -> None:
    """Raise if any ``good_alternatives`` entry is unknown or self-referencing."""
    known = {r.id for r in records}
    for record in records:
        for alt_id in record.good_alternatives:
            if alt_id == record.id:
                raise CatalogValidationError(
                    f"Species '{record.id}' lists itself as a good alternative."
                )
            if alt_id not in known:
                raise CatalogValidationError(
                    f"Species '{record.id}' references unknown alternative '{alt_id}'."
                )


# ── Reference tables ──────────────────────────────────────────────────────────

def parse_fishing_methods(raw: dict[str, dict[str, Any]]) -> list[FishingMethod]:
    """Validate the fishing-method table (object keyed by method key)."""
    methods: list[FishingMethod] = []
    for key, entry in raw.items():
        try:
            methods.append(FishingMethod(key=key, **entry))
        except (ValidationError, TypeError) as exc:
            raise CatalogValidationError(f"Fishing method '{key}' is invalid:\n{exc}") from exc
    return methods


def parse_fao_areas(raw: dict[str, dict[str, Any]]) -> list[FaoArea]:
    """Validate the FAO-area table (object keyed by area code)."""
    areas: list[FaoArea] = []
    for code, entry in raw.items():
        try:
            areas.append(FaoArea(code=code, **entry))
        except (ValidationError, TypeError) as exc:
            raise CatalogValidationError(f"FAO area '{code}' is invalid:\n{exc}") from exc
    return areas


# ── Top-level entry point ─────────────────────────────────────────────────────

def build_catalog(
    species: list[SpeciesRecord],
    fishing_methods: list[FishingMethod],
    fao_areas: list[FaoArea],
    strict_names: bool = True,
) -> SpeciesCatalog:
    """Run cross-record validation and assemble the catalog.

    Args:
        species:         Validated species records, in catalog order.
        fishing_methods: Validated fishing methods.
        fao_areas:       Validated FAO areas.
        strict_names:    Reject exact-name collisions instead of warning.

    Returns:
        Immutable ``SpeciesCatalog``.
    """
    _validate_alternatives(species)
    catalog = SpeciesCatalog.from_records(species, fishing_methods, fao_areas)

    for collision in catalog.name_collisions:
        message = (
            f"Name '{collision.name}' is shared by species '{collision.shadowed_id}' "
            f"and '{collision.winning_id}'; exact lookups resolve to '{collision.winning_id}'."
        )
        if strict_names:
            raise CatalogValidationError(message)
        log.warning(message)

    return catalog


def load_catalog(
    species_path: Optional[Path] = None,
    methods_path: Optional[Path] = None,
    areas_path: Optional[Path] = None,
    strict_names: bool = True,
) -> SpeciesCatalog:
    """Load, validate and build the species catalog.

    Args:
        species_path: Species JSON file. Defaults to the bundled dataset.
        methods_path: Fishing methods JSON file. Defaults to the bundled table.
        areas_path:   FAO areas JSON file. Defaults to the bundled table.
        strict_names: Reject exact-name collisions between species.

    Returns:
        Immutable ``SpeciesCatalog``.

    Raises:
        FileNotFoundError: If any given path does not exist.
        CatalogValidationError: If any record or cross-record rule fails.
    """
    species_path = Path(species_path) if species_path else DEFAULT_SPECIES_PATH
    methods_path = Path(methods_path) if methods_path else DEFAULT_METHODS_PATH
    areas_path = Path(areas_path) if areas_path else DEFAULT_AREAS_PATH

    for path in (species_path, methods_path, areas_path):
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

    log.info("Loading species catalog from %s", species_path)
    raw_species = _read_json(species_path)
    if not isinstance(raw_species, list):
        raise CatalogValidationError(f"{species_path}: expected a JSON array of species.")
    species = parse_species_records(raw_species)

    raw_methods = _read_json(methods_path)
    raw_areas = _read_json(areas_path)
    if not isinstance(raw_methods, dict) or not isinstance(raw_areas, dict):
        raise CatalogValidationError("Fishing method and FAO area files must be JSON objects.")

    catalog = build_catalog(
        species,
        parse_fishing_methods(raw_methods),
        parse_fao_areas(raw_areas),
        strict_names=strict_names,
    )
    log.info(
        "Catalog ready: %d species, %d fishing methods, %d FAO areas.",
        len(catalog), len(catalog.fishing_methods), len(catalog.fao_areas),
    )
    return catalog
