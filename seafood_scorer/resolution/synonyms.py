"""
Synonym resolution: free-text species names → canonical catalog ids.

Two indexes are built once, when the resolver is constructed:

exact index
    Every name variant of every species (Spanish, English and French common
    names, scientific name, commercial name and the id itself), lowercased
    and trimmed, mapped to the species id. When two species share a name
    the later one in catalog order wins; the loader reports such collisions.

partial index
    Every whitespace-separated token of length >= 4 from any name variant,
    mapped to the species ids that use it. Only ``search()`` reads it.

``resolve()`` cascade (first hit wins)
--------------------------------------
1. Blank input                → ``None``.
2. Exact name                 → id.
3. Substring, either direction → id of the FIRST indexed name that matches,
   in index insertion order. Not ranked by specificity: a very short input
   contained in several names resolves to whichever species was indexed
   first.
4. Levenshtein distance against names whose length is within 5 characters
   of the input; the first minimum wins if it is <= 3, else ``None``.

``search()`` ranking
--------------------
Each species is scored by its best name variant, id included: exact 100,
prefix 80, substring 60, else ``40 - 10 * distance`` when the edit distance to the
name (or to one of its indexed tokens) is <= 3. Stable sort by score,
capped at 8 results.

Both operations scan the whole index, O(catalog size) per call. That is fine
for a few hundred species; a trie or n-gram index would be the upgrade path
for a much larger catalog.
"""

from __future__ import annotations

import logging
from typing import Optional

from rapidfuzz.distance import Levenshtein

from seafood_scorer.catalog.catalog import SpeciesCatalog, iter_index_names, normalise_name
from seafood_scorer.models.species import SpeciesRecord

log = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 4
MAX_LENGTH_DELTA = 5
MAX_EDIT_DISTANCE = 3
SEARCH_LIMIT = 8

_SCORE_EXACT = 100
_SCORE_PREFIX = 80
_SCORE_SUBSTRING = 60
_SCORE_FUZZY_BASE = 40


def levenshtein(a: str, b: str) -> int:
    """Edit distance (insertions, deletions, substitutions) between two strings."""
    return Levenshtein.distance(a, b)


class SynonymResolver:
    """Name → species id resolver and ranked species search over one catalog."""

    def __init__(self, catalog: SpeciesCatalog) -> None:
        self._catalog = catalog
        self._exact: dict[str, str] = {}
        self._partial: dict[str, list[str]] = {}
        self._tokens_by_species: dict[str, tuple[str, ...]] = {}

        for record in catalog:
            tokens: list[str] = []
            for raw in iter_index_names(record):
                name = normalise_name(raw)
                if not name:
                    continue
                self._exact[name] = record.id
                for token in name.split():
                    if len(token) < MIN_TOKEN_LENGTH:
                        continue
                    ids = self._partial.setdefault(token, [])
                    if record.id not in ids:
                        ids.append(record.id)
                    if token not in tokens:
                        tokens.append(token)
            self._tokens_by_species[record.id] = tuple(tokens)

        log.debug(
            "Resolver indexed %d names and %d tokens for %d species.",
            len(self._exact), len(self._partial), len(catalog),
        )

    @property
    def exact_index(self) -> dict[str, str]:
        return dict(self._exact)

    @property
    def partial_index(self) -> dict[str, tuple[str, ...]]:
        return {token: tuple(ids) for token, ids in self._partial.items()}

    # ── Resolution ────────────────────────────────────────────────────────────

    def resolve(self, text: Optional[str]) -> Optional[str]:
        """Return the species id for ``text``, or ``None`` when nothing is close."""
        if not text or not text.strip():
            return None
        query = normalise_name(text)

        species_id = self._exact.get(query)
        if species_id is not None:
            return species_id

        for name, species_id in self._exact.items():
            if name in query or query in name:
                return species_id

        best_id: Optional[str] = None
        best_distance = MAX_EDIT_DISTANCE + 1
        for name, species_id in self._exact.items():
            if abs(len(name) - len(query)) > MAX_LENGTH_DELTA:
                continue
            distance = levenshtein(query, name)
            if distance < best_distance:
                best_distance = distance
                best_id = species_id

        if best_id is None:
            log.debug("No species match for %r.", text)
        return best_id

    def resolve_record(self, text: Optional[str]) -> Optional[SpeciesRecord]:
        """Like ``resolve()`` but return the catalog record."""
        species_id = self.resolve(text)
        return self._catalog.get(species_id) if species_id else None

    # ── Search ────────────────────────────────────────────────────────────────

    def search(self, query: Optional[str], limit: int = SEARCH_LIMIT) -> list[SpeciesRecord]:
        """Rank catalog species against ``query`` for interactive pickers.

        Returns at most ``limit`` records (default 8), best first; ties keep
        catalog order. A blank query returns an empty list.
        """
        if not query or not query.strip():
            return []
        q = normalise_name(query)

        scored: list[tuple[SpeciesRecord, int]] = []
        for record in self._catalog:
            best = self._score_record(record, q)
            if best > 0:
                scored.append((record, best))

        scored.sort(key=lambda pair: pair[1], reverse=True)
        return [record for record, _ in scored[:limit]]

    def _score_record(self, record: SpeciesRecord, q: str) -> int:
        best = 0
        for raw in iter_index_names(record):
            name = normalise_name(raw)
            if not name:
                continue
            if name == q:
                return _SCORE_EXACT
            if name.startswith(q):
                best = max(best, _SCORE_PREFIX)
            elif q in name:
                best = max(best, _SCORE_SUBSTRING)
            else:
                best = max(best, _fuzzy_score(q, name))

        if best < _SCORE_FUZZY_BASE:
            for token in self._tokens_by_species.get(record.id, ()):
                best = max(best, _fuzzy_score(q, token))
        return best


def _fuzzy_score(query: str, candidate: str) -> int:
    distance = levenshtein(query, candidate)
    if distance <= MAX_EDIT_DISTANCE:
        return _SCORE_FUZZY_BASE - 10 * distance
    return 0
