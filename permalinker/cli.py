"""Command-line interface for permalinker.

Responsibilities:
- Expose slug, classification, listing, and resolution commands.
- Convert CLI arguments and catalog files into a configured `PermalinkResolver`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Annotated

import typer

from .cli_rendering import echo_permalink_rows, echo_resolution, exit_with_command_error
from .config import ConfigLoader, ResolverConfig
from .errors import CommandStageError
from .io.catalog import load_catalog
from .parsing import normalize_request_path
from .routing.patterns import classify_path
from .routing.resolver import PermalinkResolver
from .telemetry.logger import ResolutionLogger
from .text.slug import build_slug

app = typer.Typer(
    name="permalinker",
    no_args_is_help=True,
    help="Permalink generation and resolution CLI.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Optional YAML resolver config."),
]
CatalogOption = Annotated[
    Path,
    typer.Option("--catalog", help="YAML or JSON catalog with a blog and its entries."),
]


def _load_config(config_path: Path | None) -> ResolverConfig:
    """Load a YAML config when requested, otherwise read the environment."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix `PERMALINKER_*` variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _build_resolver(catalog_path: Path, config: ResolverConfig) -> PermalinkResolver:
    """Load the catalog and bind a resolver to its blog."""

    try:
        catalog = load_catalog(catalog_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="catalog",
            detail=f"Catalog file not found: `{catalog_path}`.",
            hint="Provide an existing path via `--catalog <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="catalog",
            detail=f"Invalid catalog file `{catalog_path}`: {exc}",
            hint="Fix catalog schema/values and rerun.",
        ) from exc

    return PermalinkResolver(
        catalog.blog,
        catalog.entries,
        catalog.archive,
        config=config,
        run_logger=ResolutionLogger(sink=sys.stderr, level=config.log_level),
    )


@app.command("slug")
def slug_command(
    title: Annotated[str, typer.Argument(help="Entry title to convert.")],
    fallback: Annotated[
        str,
        typer.Option("--fallback", help="Entry id used when no slug survives."),
    ] = "",
) -> None:
    """Print the slug for a title."""

    try:
        slug = build_slug(title, fallback)
        if not slug:
            raise CommandStageError(
                stage="slug",
                detail=f"Title `{title}` produces an empty slug.",
                hint="Pass `--fallback <entry id>`.",
            )
    except Exception as exc:
        exit_with_command_error("slug", exc)
    typer.echo(slug)


@app.command("classify")
def classify_command(
    path: Annotated[str, typer.Argument(help="Request path relative to the blog root.")],
    config_file: ConfigOption = None,
) -> None:
    """Print `entry`, `month`, `day`, or `unknown` for a request path."""

    try:
        config = _load_config(config_file)
    except Exception as exc:
        exit_with_command_error("classify", exc)

    bare_path = normalize_request_path(path, strip_html_suffix=config.strip_html_suffix)
    typer.echo(classify_path(bare_path).value)


@app.command("permalinks")
def permalinks_command(
    catalog_file: CatalogOption,
    config_file: ConfigOption = None,
) -> None:
    """Print every entry id with its permalink, oldest first."""

    try:
        config = _load_config(config_file)
        resolver = _build_resolver(catalog_file, config)
    except Exception as exc:
        exit_with_command_error("permalinks", exc)

    echo_permalink_rows(resolver.entry_permalinks())


@app.command("resolve")
def resolve_command(
    path: Annotated[str, typer.Argument(help="Request path relative to the blog root.")],
    catalog_file: CatalogOption,
    config_file: ConfigOption = None,
) -> None:
    """Resolve a request path to an entry or archive node."""

    try:
        config = _load_config(config_file)
        resolver = _build_resolver(catalog_file, config)
        bare_path = normalize_request_path(path, strip_html_suffix=config.strip_html_suffix)
        resolved = resolver.resolve(bare_path)
        if resolved is None:
            raise CommandStageError(
                stage="resolve",
                detail=f"No content found for `{path}`.",
                hint="Check the path with `permalinker permalinks --catalog <file>`.",
            )
    except Exception as exc:
        exit_with_command_error("resolve", exc)

    echo_resolution(resolved)


def main() -> None:
    """Run the Typer application."""

    app()
