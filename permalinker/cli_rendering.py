"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
resolved content, and entry permalink listings.
"""

from __future__ import annotations

from typing import NoReturn, Sequence

import typer

from .errors import CommandStageError
from .models.datatypes import DayArchive, Entry, MonthArchive


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_resolution(resolved: Entry | MonthArchive | DayArchive) -> None:
    """Print one resolved entry or archive node."""

    if isinstance(resolved, Entry):
        typer.echo(f"entry id={resolved.id} title={resolved.title or ''}")
    elif isinstance(resolved, DayArchive):
        typer.echo(
            f"day {resolved.year:04d}/{resolved.month:02d}/{resolved.day:02d} "
            f"entries={len(resolved.entry_ids)}"
        )
    else:
        typer.echo(f"month {resolved.year:04d}/{resolved.month:02d} days={len(resolved.days)}")


def echo_permalink_rows(rows: Sequence[tuple[Entry, str]]) -> None:
    """Print `<entry id>\\t<permalink>` rows in the given order."""

    for entry, permalink in rows:
        typer.echo(f"{entry.id}\t{permalink}")
