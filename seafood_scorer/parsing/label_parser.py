"""
Label parsing: raw label text / product records → ``ParsedLabel``.

EU Regulation 1379/2013 requires fishery labels to show the commercial and
scientific name, production method, catch area and gear category. This
module extracts those fields from OCR text or a product-database record.
Extraction is keyword based and intentionally conservative: a field that
cannot be found is left empty rather than guessed.

Functions
---------
parse_eu_label(text)           : OCR'd label text → ParsedLabel.
parse_barcode_product(product) : product-database record → ParsedLabel.
infer_fao_area_from_country(s) : country name (es/en) → major FAO area code.
parse_extraction_response(r)   : structured vision/chat reply → ParsedLabel.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from seafood_scorer.models.label import ParsedLabel
from seafood_scorer.taxonomy.species_taxonomy import ProductionMethod

log = logging.getLogger(__name__)

_FAO_CODE = r"(\d{2}(?:\.(?:\d+|[a-z]))*)"

FAO_AREA_PATTERN = re.compile(
    r"(?:\bFAO|\bzona|\barea|\bcatch area)\s*(?:FAO\s*)?(?:n[ºo°.]?\s*)?" + _FAO_CODE,
    re.IGNORECASE,
)
BARE_FAO_PATTERN = re.compile(r"(?:FAO\s*)?\b" + _FAO_CODE + r"\b", re.IGNORECASE)
ORIGIN_PATTERN = re.compile(r"\b(?:origen|origin|país|country)\s*[:\-]\s*([^\n,;.]+)", re.IGNORECASE)

# Ordered: more specific phrases first.
METHOD_KEYWORDS: dict[str, str] = {
    "arrastre pelágico": "midwater_trawl",
    "arrastre de fondo": "bottom_trawl",
    "arrastre de vara": "beam_trawl",
    "midwater trawl": "midwater_trawl",
    "pelagic trawl": "midwater_trawl",
    "beam trawl": "beam_trawl",
    "bottom trawl": "bottom_trawl",
    "arrastre": "bottom_trawl",
    "trawl": "bottom_trawl",
    "palangre de fondo": "longline_demersal",
    "demersal longline": "longline_demersal",
    "palangre": "longline_pelagic",
    "longline": "longline_pelagic",
    "cerco": "purse_seine",
    "purse seine": "purse_seine",
    "enmalle": "gillnet",
    "gillnet": "gillnet",
    "anzuelo": "hook_and_line",
    "hook and line": "hook_and_line",
    "caña": "pole_and_line",
    "pole and line": "pole_and_line",
    "potera": "jig",
    "jig": "jig",
    "nasa": "trap_pot",
    "trap": "trap_pot",
    "pot": "trap_pot",
    "draga": "dredge",
    "dredge": "dredge",
}

FARMED_KEYWORDS = ("acuicultura", "aquaculture", "cultivado", "criado", "farmed")
WILD_KEYWORDS = ("salvaje", "silvestre", "wild", "capturado", "caught")

# Pattern → canonical certification label.
CERTIFICATION_PATTERNS: dict[str, str] = {
    r"\bMSC\b": "MSC",
    r"\bASC\b": "ASC",
    r"\bGlobal\s?G\.?A\.?P": "GlobalGAP",
    r"\bFriend\s+of\s+(?:the\s+)?Sea\b": "Friend of Sea",
    r"\bBRC\b": "BRC",
    r"\bIFS\b": "IFS",
}

COUNTRY_TO_FAO: dict[str, str] = {
    # Northeast Atlantic
    "norway": "27", "noruega": "27",
    "iceland": "27", "islandia": "27",
    "uk": "27", "reino unido": "27",
    "ireland": "27", "irlanda": "27",
    "scotland": "27", "escocia": "27",
    "faroe islands": "27", "islas feroe": "27",
    "spain": "27.9", "españa": "27.9",
    "portugal": "27.9",
    "france": "27.8", "francia": "27.8",
    # Eastern Central Atlantic
    "morocco": "34", "marruecos": "34",
    "mauritania": "34",
    "senegal": "34",
    # Northwest Atlantic
    "canada": "21", "canadá": "21",
    "usa": "21", "eeuu": "21",
    # Southwest Atlantic / Southeast Pacific
    "argentina": "41",
    "chile": "87",
    "peru": "87", "perú": "87",
    # Mediterranean
    "italy": "37", "italia": "37",
    "greece": "37", "grecia": "37",
    "turkey": "37", "turquía": "37",
    "croatia": "37", "croacia": "37",
    # Pacific
    "japan": "61", "japón": "61",
    "china": "61",
    "thailand": "71", "tailandia": "71",
    "vietnam": "71",
    "philippines": "71", "filipinas": "71",
    "indonesia": "57",
    # Indian Ocean
    "india": "51",
    "maldives": "51", "maldivas": "51",
    "sri lanka": "57",
}


def _find_word(text: str, phrase: str) -> Optional[re.Match]:
    return re.search(r"\b" + re.escape(phrase) + r"\b", text, re.IGNORECASE)


def _contains_word(text: str, phrase: str) -> bool:
    return _find_word(text, phrase) is not None


def infer_fao_area_from_country(country: Optional[str]) -> Optional[str]:
    """Major FAO area for a country named in ``country`` (Spanish or English).

    Exact names are tried first, then the country name appearing earliest as
    a whole word inside the text ("Pescado en Noruega" → ``"27"``). Names
    starting at the same position prefer the longer one.
    """
    if not country or not country.strip():
        return None
    lower = country.strip().lower()
    if lower in COUNTRY_TO_FAO:
        return COUNTRY_TO_FAO[lower]

    best: Optional[tuple[int, int, str]] = None
    for name in COUNTRY_TO_FAO:
        match = _find_word(lower, name)
        if match is None:
            continue
        candidate = (match.start(), -len(name), name)
        if best is None or candidate < best:
            best = candidate
    return COUNTRY_TO_FAO[best[2]] if best is not None else None


def extract_certifications(text: str) -> list[str]:
    """Canonical certification labels mentioned in ``text``."""
    return [
        label for pattern, label in CERTIFICATION_PATTERNS.items()
        if re.search(pattern, text, re.IGNORECASE)
    ]


def _extract_method(text: str) -> Optional[str]:
    for keyword, method in METHOD_KEYWORDS.items():
        if _contains_word(text, keyword):
            return method
    return None


def _extract_production(text: str) -> Optional[ProductionMethod]:
    if any(_contains_word(text, k) for k in FARMED_KEYWORDS):
        return ProductionMethod.FARMED
    if any(_contains_word(text, k) for k in WILD_KEYWORDS):
        return ProductionMethod.WILD
    return None


def parse_eu_label(text: str) -> ParsedLabel:
    """Extract label fields from OCR'd EU fishery label text.

    The species text is the first non-empty line (or comma/semicolon
    separated segment). Farmed products without a recognised gear get the
    aquaculture method (certified when ASC or GlobalGAP is present).
    """
    if not text or not text.strip():
        return ParsedLabel()

    fao_area: Optional[str] = None
    match = FAO_AREA_PATTERN.search(text)
    if match:
        fao_area = match.group(1)

    origin: Optional[str] = None
    origin_match = ORIGIN_PATTERN.search(text)
    if origin_match:
        origin = origin_match.group(1).strip()
        if fao_area is None:
            fao_area = infer_fao_area_from_country(origin)

    certifications = extract_certifications(text)
    production = _extract_production(text)
    method = _extract_method(text)
    if method is None and production == ProductionMethod.FARMED:
        certified = any(c in ("ASC", "GlobalGAP") for c in certifications)
        method = "aquaculture_certified" if certified else "aquaculture_standard"

    segments = [s.strip() for s in re.split(r"[\n,;]+", text) if s.strip()]

    return ParsedLabel(
        species_raw=segments[0] if segments else None,
        fao_area=fao_area,
        fishing_method=method,
        origin=origin,
        production_method=production,
        certifications=certifications,
    )


def parse_barcode_product(product: Mapping[str, Any]) -> ParsedLabel:
    """Map a product-database record (Open Food Facts layout) to a label.

    Fields read: ``species``, ``product_name``, ``product_name_es``,
    ``origin``/``origins``, ``labels``.
    """
    species_raw = next(
        (
            str(product[key]) for key in ("species", "product_name", "product_name_es")
            if product.get(key)
        ),
        None,
    )

    origin = str(product.get("origin") or product.get("origins") or "").strip() or None
    fao_area: Optional[str] = None
    if origin:
        code_match = BARE_FAO_PATTERN.search(origin)
        fao_area = code_match.group(1) if code_match else infer_fao_area_from_country(origin)

    labels = product.get("labels") or ""
    if isinstance(labels, (list, tuple)):
        labels = ", ".join(str(item) for item in labels)
    certifications = extract_certifications(str(labels))

    return ParsedLabel(
        species_raw=species_raw,
        fao_area=fao_area,
        origin=origin,
        certifications=certifications,
    )


def _coerce_production(value: Any) -> Optional[ProductionMethod]:
    if value is None or not str(value).strip():
        return None
    try:
        return ProductionMethod(str(value).strip().lower())
    except ValueError:
        log.debug("Ignoring unrecognised production method %r.", value)
        return None


def parse_extraction_response(response: Mapping[str, Any]) -> ParsedLabel:
    """Map a structured extraction reply (label photo or chat) to a label.

    Keys read: ``species``, ``area``, ``method``, ``production_method`` and
    ``certifications`` (list or comma-separated string). Unrecognised
    production methods become ``None``.
    """
    certifications = response.get("certifications") or ()
    if isinstance(certifications, str):
        certifications = certifications.split(",")

    def text(key: str) -> Optional[str]:
        value = response.get(key)
        return str(value) if value is not None else None

    return ParsedLabel(
        species_raw=text("species"),
        fao_area=text("area"),
        fishing_method=text("method"),
        production_method=_coerce_production(response.get("production_method")),
        certifications=certifications,
    )
