"""
Immutable in-memory species catalog.

``SpeciesCatalog`` holds the three reference tables every scoring call
reads: species records (in catalog order), fishing methods and FAO areas.
It is built once at startup and passed explicitly to the resolver, the
score engine and the recommender. Nothing mutates it after construction;
lookups are exposed through read-only mappings, so concurrent callers can
share one instance without synchronisation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from seafood_scorer.models.species import FaoArea, FishingMethod, SpeciesRecord


@dataclass(frozen=True)
class NameCollision:
    """One exact name shared by two different species.

    Attributes:
        name: The normalised (lowercased, trimmed) colliding name.
        shadowed_id: Species indexed first, hidden from exact lookup.
        winning_id: Species indexed later, returned by exact lookup.
    """

    name: str
    shadowed_id: str
    winning_id: str


def normalise_name(name: str) -> str:
    """Lowercase and trim a name for case-insensitive matching."""
    return name.strip().lower()


def iter_index_names(record: SpeciesRecord) -> Iterator[str]:
    """Yield every name variant of ``record`` that goes into the exact index.

    Order: locale names, scientific name, commercial name, then the id.
    """
    yield from record.names.all_names()
    yield record.id


def find_name_collisions(records: Iterable[SpeciesRecord]) -> list[NameCollision]:
    """Return exact-name collisions across different species, in index order.

    Names repeated within one species (e.g. "Turbot" in English and French)
    are not collisions.
    """
    owner: dict[str, str] = {}
    collisions: list[NameCollision] = []
    for record in records:
        for raw in iter_index_names(record):
            name = normalise_name(raw)
            if not name:
                continue
            previous = owner.get(name)
            if previous is not None and previous != record.id:
                collisions.append(NameCollision(name, previous, record.id))
            owner[name] = record.id
    return collisions


class SpeciesCatalog:
    """Read-only container for species, fishing methods and FAO areas."""

    def __init__(
        self,
        species: tuple[SpeciesRecord, ...],
        fishing_methods: Mapping[str, FishingMethod],
        fao_areas: Mapping[str, FaoArea],
    ) -> None:
        self._species = species
        self._by_id: Mapping[str, SpeciesRecord] = MappingProxyType(
            {record.id: record for record in species}
        )
        self._fishing_methods = MappingProxyType(dict(fishing_methods))
        self._fao_areas = MappingProxyType(dict(fao_areas))
        self._collisions = tuple(find_name_collisions(species))

    @classmethod
    def from_records(
        cls,
        species: Iterable[SpeciesRecord],
        fishing_methods: Iterable[FishingMethod] = (),
        fao_areas: Iterable[FaoArea] = (),
    ) -> "SpeciesCatalog":
        """Build a catalog from already-validated model instances."""
        return cls(
            species=tuple(species),
            fishing_methods={m.key: m for m in fishing_methods},
            fao_areas={a.code: a for a in fao_areas},
        )

    # ── Species access ────────────────────────────────────────────────────────

    def get(self, species_id: str) -> Optional[SpeciesRecord]:
        return self._by_id.get(species_id)

    def __contains__(self, species_id: object) -> bool:
        return species_id in self._by_id

    def __iter__(self) -> Iterator[SpeciesRecord]:
        return iter(self._species)

    def __len__(self) -> int:
        return len(self._species)

    @property
    def species(self) -> tuple[SpeciesRecord, ...]:
        """All species in catalog order."""
        return self._species

    # ── Reference tables ──────────────────────────────────────────────────────

    @property
    def fishing_methods(self) -> Mapping[str, FishingMethod]:
        return self._fishing_methods

    @property
    def fao_areas(self) -> Mapping[str, FaoArea]:
        return self._fao_areas

    @property
    def name_collisions(self) -> tuple[NameCollision, ...]:
        """Exact-name collisions found when the catalog was built."""
        return self._collisions
