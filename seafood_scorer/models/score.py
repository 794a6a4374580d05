"""
Score output models.

``ScoreBreakdown`` is the explainable result of one scoring call: the four
signed signal contributions, their sum, the clamped final score, its band
and a confidence level. It is never authoritative state: identical
inputs against an unchanged catalog always produce an identical breakdown.

``AlternativeOption`` is one "choose a better option" suggestion.

``SustainabilityResult`` bundles everything a caller displays for one
product: species identity, breakdown, alternatives and CO2 estimate.
``SpeciesInfo`` carries optional reference facts merged in by enrichment.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from seafood_scorer.taxonomy.species_taxonomy import (
    AlternativeReason,
    ConfidenceLevel,
    IucnStatus,
    ProductionMethod,
    ScoreBand,
)


class ScoreBreakdown(BaseModel):
    """Signal contributions and final classification for one product.

    Attributes:
        iucn_base: Base score from the IUCN status (0–50).
        method_modifier: Fishing / production method modifier.
        area_modifier: FAO catch-area modifier.
        origin_modifier: Certification / origin modifier, clamped to [-10, 10].
        raw_score: Sum of the four contributions (unclamped).
        final_score: ``raw_score`` clamped to the species score range.
        band: Display band of ``final_score``.
        confidence: How many of IUCN/method/area were supplied.
    """

    model_config = ConfigDict(frozen=True)

    iucn_base: int
    method_modifier: int
    area_modifier: int
    origin_modifier: int
    raw_score: int
    final_score: int
    band: ScoreBand
    confidence: ConfidenceLevel


class AlternativeOption(BaseModel):
    """A candidate substitute for the scanned product.

    Attributes:
        species_id: Target species id (equal to the scanned species for
            same-species suggestions).
        display_name: Localised name, with a practice hint for same-species
            suggestions.
        score: Hypothetical or default score of the alternative.
        reason: Which kind of suggestion this is.
        production_method_suggestion: Suggested production method, if any.
    """

    model_config = ConfigDict(frozen=True)

    species_id: str
    display_name: str
    score: int
    reason: AlternativeReason
    production_method_suggestion: Optional[ProductionMethod] = None


class Co2Estimate(BaseModel):
    """Carbon footprint estimate in kg CO2e per kg of product."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: str = "kg_co2_per_kg"
    source: str
    comparison: str


class SpeciesInfo(BaseModel):
    """Biological facts about a species from an external reference source.

    Accepts snake_case or camelCase keys, so a reference-database payload
    can be validated directly. Every field is optional.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    family: Optional[str] = None
    habitat: Optional[str] = None
    max_length_cm: Optional[float] = Field(
        default=None, ge=0, validation_alias=AliasChoices("max_length_cm", "maxLength", "max_length"),
    )
    trophic_level: Optional[float] = Field(
        default=None, ge=0, validation_alias=AliasChoices("trophic_level", "trophicLevel"),
    )
    vulnerability: Optional[float] = Field(default=None, ge=0, le=100)


class SustainabilityResult(BaseModel):
    """Full assessment of one scanned product."""

    model_config = ConfigDict(frozen=True)

    species_id: str
    scientific_name: str
    display_name: str
    iucn_status: IucnStatus
    score: ScoreBreakdown
    production_method: ProductionMethod = ProductionMethod.UNKNOWN
    fao_area: Optional[str] = None
    fishing_method: Optional[str] = None
    certifications: tuple[str, ...] = ()
    alternatives: tuple[AlternativeOption, ...] = ()
    reduce_message: Optional[str] = None
    co2: Optional[Co2Estimate] = None
    species_info: Optional[SpeciesInfo] = None
    barcode: Optional[str] = None

    @property
    def has_alternative(self) -> bool:
        return bool(self.alternatives)
