"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``SEAFOOD_SCORER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

Only the CLI layer reads configuration. The scoring core receives explicit
arguments (catalog, language, timeouts) and never looks anything up itself.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from seafood_scorer.models.species import VALID_LANGUAGES

# ── Sub-config models ─────────────────────────────────────────────────────────


class CatalogConfig(BaseModel):
    """Dataset locations and load policy.

    Empty paths select the dataset bundled with the package.
    """

    model_config = ConfigDict(frozen=True)

    species_file: str = ""
    methods_file: str = ""
    areas_file: str = ""
    strict_names: bool = True


class DisplayConfig(BaseModel):
    """User-facing text settings."""

    model_config = ConfigDict(frozen=True)

    language: str = "es"

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in VALID_LANGUAGES:
            raise ValueError(f"language must be one of {sorted(VALID_LANGUAGES)}, got '{v}'.")
        return v


class EnrichmentConfig(BaseModel):
    """Caller-side live-data lookups."""

    model_config = ConfigDict(frozen=True)

    timeout_seconds: float = 5.0

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()``, which merges TOML + .env + env vars.
    """

    model_config = ConfigDict(frozen=True)

    catalog: CatalogConfig = CatalogConfig()
    display: DisplayConfig = DisplayConfig()
    enrichment: EnrichmentConfig = EnrichmentConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config PATH."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists() and local_config_path != config_path:
        with open(local_config_path, "rb") as f:
            raw = _deep_merge(raw, tomllib.load(f))

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply SEAFOOD_SCORER_* env vars to the raw config dict.

    Supported overrides:
      SEAFOOD_SCORER_LOG_LEVEL     → raw["logging"]["level"]
      SEAFOOD_SCORER_LANGUAGE      → raw["display"]["language"]
      SEAFOOD_SCORER_SPECIES_FILE  → raw["catalog"]["species_file"]
      SEAFOOD_SCORER_DEBUG         → raw["debug"]
    """
    if log_level := os.environ.get("SEAFOOD_SCORER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if language := os.environ.get("SEAFOOD_SCORER_LANGUAGE"):
        raw.setdefault("display", {})["language"] = language

    if species_file := os.environ.get("SEAFOOD_SCORER_SPECIES_FILE"):
        raw.setdefault("catalog", {})["species_file"] = species_file

    if debug := os.environ.get("SEAFOOD_SCORER_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        catalog=CatalogConfig(**raw.get("catalog", {})),
        display=DisplayConfig(**raw.get("display", {})),
        enrichment=EnrichmentConfig(**raw.get("enrichment", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", False),
    )
