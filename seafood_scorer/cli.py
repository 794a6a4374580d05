"""
Seafood Sustainability Scorer — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load the species catalog (bundled or configured paths).
  4. Execute the action (resolve, search, score, parse).
  5. Report the result to stdout.

Install and run::

    pip install -e .
    seafood-scorer --help
    seafood-scorer validate-config
    seafood-scorer validate-catalog
    seafood-scorer resolve orada
    seafood-scorer search merlu
    seafood-scorer score --species merluza --iucn LC --method pole_and_line --area 27.8
    seafood-scorer parse-label "Merluza, Merluccius merluccius. Capturado con arrastre. FAO 27.8"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from seafood_scorer.taxonomy.species_taxonomy import ProductionMethod

app = typer.Typer(
    name="seafood-scorer",
    help="Seafood sustainability scorer — offline species scoring CLI.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from seafood_scorer.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from seafood_scorer.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_catalog_or_exit(config):
    """Load the catalog named by ``config.catalog``; exit 1 on any data error."""
    from seafood_scorer.catalog.loader import CatalogValidationError, load_catalog

    try:
        return load_catalog(
            species_path=config.catalog.species_file or None,
            methods_path=config.catalog.methods_file or None,
            areas_path=config.catalog.areas_file or None,
            strict_names=config.catalog.strict_names,
        )
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except CatalogValidationError as exc:
        typer.echo(f"[ERROR] Catalog validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _setup(config_path: Optional[str]):
    """Config + logging + catalog + resolver, in that order."""
    from seafood_scorer.resolution.synonyms import SynonymResolver

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    catalog = _load_catalog_or_exit(config)
    return config, catalog, SynonymResolver(catalog)


def _echo_result(result, language: str, as_json: bool) -> None:
    from seafood_scorer.reporting.formatters import format_assessment

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        typer.echo(format_assessment(result, language))


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Species file:     {config.catalog.species_file or '(bundled)'}")
    typer.echo(f"  Methods file:     {config.catalog.methods_file or '(bundled)'}")
    typer.echo(f"  Areas file:       {config.catalog.areas_file or '(bundled)'}")
    typer.echo(f"  Strict names:     {config.catalog.strict_names}")
    typer.echo(f"  Language:         {config.display.language}")
    typer.echo(f"  Enrich timeout:   {config.enrichment.timeout_seconds}s")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config is valid.")


@app.command("validate-catalog")
def validate_catalog(
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Load and validate the species catalog, then print record counts.

    Exits with code 1 on duplicate ids, bad score ranges, unknown
    alternatives, or (in strict mode) exact-name collisions.
    """
    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    catalog = _load_catalog_or_exit(config)

    typer.echo(f"  Species:          {len(catalog)}")
    typer.echo(f"  Fishing methods:  {len(catalog.fishing_methods)}")
    typer.echo(f"  FAO areas:        {len(catalog.fao_areas)}")
    if catalog.name_collisions:
        typer.echo(f"  Name collisions:  {len(catalog.name_collisions)}")
        for collision in catalog.name_collisions:
            typer.echo(
                f"    '{collision.name}': {collision.shadowed_id} -> {collision.winning_id}"
            )
    typer.echo("[OK] Catalog is valid.")


@app.command("resolve")
def resolve(
    name: str = typer.Argument(..., help="Species name in any supported form."),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Resolve a free-text species name to its catalog id."""
    config, _catalog, resolver = _setup(config_path)

    record = resolver.resolve_record(name)
    if record is None:
        typer.echo(f"[ERROR] Species not found: {name!r}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{record.id}\t{record.display_name(config.display.language)}\t{record.names.scientific}")


@app.command("search")
def search(
    query: str = typer.Argument(..., help="Search text (prefix, partial or misspelt)."),
    limit: int = typer.Option(8, "--limit", min=1, help="Maximum results."),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """List species ranked by how well their names match ``query``."""
    from seafood_scorer.reporting.formatters import format_search_results

    config, _catalog, resolver = _setup(config_path)
    results = resolver.search(query, limit=limit)
    typer.echo(format_search_results(query, results, config.display.language))


@app.command("score")
def score(
    species: str = typer.Option(..., "--species", help="Species name or id."),
    iucn: Optional[str] = typer.Option(None, "--iucn", help="IUCN status override (LC, VU, ...)."),
    method: Optional[str] = typer.Option(None, "--method", help="Method key, EU gear code or text."),
    area: Optional[str] = typer.Option(None, "--area", help="FAO area code, e.g. 27.8.c."),
    certs: Optional[list[str]] = typer.Option(None, "--cert", help="Certification (repeatable)."),
    production: Optional[ProductionMethod] = typer.Option(
        None, "--production", help="Production method.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON."),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Score one product and suggest better alternatives.

    When ``--iucn`` is omitted the catalog's default status is used.
    """
    from seafood_scorer.models.label import ParsedLabel
    from seafood_scorer.pipeline.assess import assess_label
    from seafood_scorer.scoring.iucn import parse_iucn_status

    config, catalog, resolver = _setup(config_path)

    if iucn and parse_iucn_status(iucn) is None:
        typer.echo(f"[ERROR] Unknown IUCN status: {iucn!r}", err=True)
        raise typer.Exit(code=1)

    label = ParsedLabel(
        species_raw=species,
        fao_area=area,
        fishing_method=method,
        production_method=production,
        certifications=certs or (),
    )
    result = assess_label(
        catalog,
        resolver,
        label,
        iucn_override=iucn,
        language=config.display.language,
    )
    if result is None:
        typer.echo(f"[ERROR] Species not found: {species!r}", err=True)
        raise typer.Exit(code=1)

    _echo_result(result, config.display.language, as_json)


@app.command("parse-label")
def parse_label(
    text: str = typer.Argument(..., help="Label text (OCR output or typed)."),
    as_json: bool = typer.Option(False, "--json", help="Emit label and result as JSON."),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Parse EU fishery label text, then score the product it describes."""
    from seafood_scorer.parsing.label_parser import parse_eu_label
    from seafood_scorer.pipeline.assess import assess_label

    config, catalog, resolver = _setup(config_path)

    label = parse_eu_label(text)
    result = assess_label(catalog, resolver, label, language=config.display.language)

    if as_json:
        typer.echo(json.dumps(
            {
                "label": label.model_dump(mode="json"),
                "result": result.model_dump(mode="json") if result else None,
            },
            indent=2,
            ensure_ascii=False,
        ))
    else:
        typer.echo("Parsed label:")
        for field, value in label.model_dump().items():
            if isinstance(value, tuple):
                value = ", ".join(value)
            typer.echo(f"  {field:<18} {value if value not in (None, '') else '-'}")
        if result is not None:
            _echo_result(result, config.display.language, as_json=False)

    if result is None:
        typer.echo(f"[ERROR] Could not resolve species from label: {label.species_raw!r}", err=True)
        raise typer.Exit(code=1)


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
