"""
Species catalog models.

``SpeciesRecord`` is one immutable row of the bundled reference catalog.
Its ``score_range`` is the species-specific clamp applied to every final
score: a species known to be generally healthy can never be shown as
"avoid", and an endangered one can never reach "best", whatever the
label modifiers say.

``FishingMethod`` and ``FaoArea`` are the two reference tables behind the
method and catch-area modifiers.

JSON field names follow the bundled dataset (camelCase); the Python
attributes are snake_case. Both spellings are accepted on input.
"""

from __future__ import annotations

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from seafood_scorer.taxonomy.species_taxonomy import IucnStatus, SpeciesCategory

VALID_LANGUAGES = frozenset({"es", "en"})


class SpeciesNames(BaseModel):
    """Multilingual name set for one species.

    Attributes:
        es: Spanish common names, preferred first.
        en: English common names, preferred first.
        fr: French common names.
        scientific: Binomial name, e.g. ``"Merluccius merluccius"``.
        eu_commercial: Regulatory commercial designation used on EU labels.
    """

    model_config = ConfigDict(frozen=True)

    es: tuple[str, ...] = ()
    en: tuple[str, ...] = ()
    fr: tuple[str, ...] = ()
    scientific: str
    eu_commercial: str = ""

    def all_names(self) -> Iterator[str]:
        """Yield every non-empty name variant in index order."""
        yield from (n for n in self.es if n)
        yield from (n for n in self.en if n)
        yield from (n for n in self.fr if n)
        if self.scientific:
            yield self.scientific
        if self.eu_commercial:
            yield self.eu_commercial


class SpeciesRecord(BaseModel):
    """A canonical catalog species.

    Attributes:
        id: Stable unique key, lowercase, no spaces (e.g. ``"merluza"``).
        names: Multilingual names, scientific and commercial names.
        iucn_status: Catalog default IUCN status.
        default_score: Baseline score used to compare alternatives cheaply.
        score_range: Inclusive ``(min, max)`` clamp for final scores.
        good_alternatives: Ordered ids of viable substitute species.
        category: Commercial grouping.
        notes: Free text shown in the "reduce consumption" message.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    names: SpeciesNames
    iucn_status: IucnStatus = Field(alias="iucnStatus")
    default_score: int = Field(alias="defaultScore")
    score_range: tuple[int, int] = Field(alias="scoreRange")
    good_alternatives: tuple[str, ...] = Field(default=(), alias="goodAlternatives")
    category: SpeciesCategory
    notes: str = ""

    @field_validator("id")
    @classmethod
    def validate_id_format(cls, v: str) -> str:
        if not v or " " in v or v != v.lower():
            raise ValueError(f"Species id '{v}' must be non-empty, lowercase, with no spaces.")
        return v

    @field_validator("default_score")
    @classmethod
    def validate_default_score(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"defaultScore must be in [0, 100], got {v}.")
        return v

    @model_validator(mode="after")
    def validate_score_range(self) -> "SpeciesRecord":
        lo, hi = self.score_range
        if not 0 <= lo <= hi <= 100:
            raise ValueError(
                f"Species '{self.id}': scoreRange {list(self.score_range)} must satisfy "
                "0 <= min <= max <= 100."
            )
        return self

    def display_name(self, language: str = "es") -> str:
        """Return the preferred common name in ``language``.

        Falls back to the first Spanish name, then the commercial name,
        then the scientific name.
        """
        preferred = self.names.en if language == "en" else self.names.es
        for candidates in (preferred, self.names.es):
            if candidates:
                return candidates[0]
        return self.names.eu_commercial or self.names.scientific


class FishingMethod(BaseModel):
    """A catalogued gear or production method and its score modifier."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    name_en: str
    modifier: int

    @field_validator("modifier")
    @classmethod
    def validate_modifier(cls, v: int) -> int:
        if not -20 <= v <= 15:
            raise ValueError(f"Fishing method modifier must be in [-20, 15], got {v}.")
        return v


class FaoArea(BaseModel):
    """An FAO major fishing area or sub-area and its score modifier."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    name_en: Optional[str] = None
    modifier: int
    description: Optional[str] = None

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        if not v or not all(part for part in v.split(".")):
            raise ValueError(f"FAO area code '{v}' must be dot-separated non-empty segments.")
        return v

    @field_validator("modifier")
    @classmethod
    def validate_modifier(cls, v: int) -> int:
        if not -15 <= v <= 5:
            raise ValueError(f"FAO area modifier must be in [-15, 5], got {v}.")
        return v
