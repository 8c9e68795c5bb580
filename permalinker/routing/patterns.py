"""Permalink path shapes and fixed-width date handling.

Responsibilities:
- Classify bare request paths as day, month, or entry permalinks.
- Extract year/month/day from date paths at fixed offsets.
- Format archive permalinks with zero-padded components.

Shapes are tested most specific first: every day path starts with a month path.
"""

from __future__ import annotations

from datetime import date
import re

from ..models.datatypes import PathKind

DAY_PERMALINK_PATTERN = re.compile(r"/\d\d\d\d/\d\d/\d\d", re.ASCII)
MONTH_PERMALINK_PATTERN = re.compile(r"/\d\d\d\d/\d\d", re.ASCII)
ENTRY_PERMALINK_PATTERN = re.compile(r"/[\w-]*", re.ASCII)

_YEAR_SLICE = slice(1, 5)
_MONTH_SLICE = slice(6, 8)
_DAY_SLICE = slice(9, 11)


def is_day_permalink(path: str | None) -> bool:
    """Return whether `path` is exactly `/yyyy/MM/dd`."""

    return path is not None and DAY_PERMALINK_PATTERN.fullmatch(path) is not None


def is_month_permalink(path: str | None) -> bool:
    """Return whether `path` is exactly `/yyyy/MM`."""

    return path is not None and MONTH_PERMALINK_PATTERN.fullmatch(path) is not None


def is_entry_permalink(path: str | None) -> bool:
    """Return whether `path` is `/` followed by word characters or dashes."""

    return path is not None and ENTRY_PERMALINK_PATTERN.fullmatch(path) is not None


def classify_path(path: str | None) -> PathKind:
    """Classify a bare path, first matching shape wins."""

    if is_day_permalink(path):
        return PathKind.DAY
    if is_month_permalink(path):
        return PathKind.MONTH
    if is_entry_permalink(path):
        return PathKind.ENTRY
    return PathKind.UNKNOWN


def extract_month(path: str) -> tuple[int, int]:
    """Read `(year, month)` from a path already known to be a month or day shape."""

    return int(path[_YEAR_SLICE]), int(path[_MONTH_SLICE])


def extract_day(path: str) -> tuple[int, int, int]:
    """Read `(year, month, day)` from a path already known to be a day shape."""

    year, month = extract_month(path)
    return year, month, int(path[_DAY_SLICE])


def format_month_permalink(year: int, month: int) -> str:
    """Format `/yyyy/MM.html` for a month archive.

    Raises:
        ValueError: If `month` is not a calendar month or `year` is out of range.
    """

    validated = date(year, month, 1)
    return f"/{validated.year:04d}/{validated.month:02d}.html"


def format_day_permalink(year: int, month: int, day: int) -> str:
    """Format `/yyyy/MM/dd.html` for a day archive.

    Raises:
        ValueError: If the values do not form a calendar date.
    """

    validated = date(year, month, day)
    return f"/{validated.year:04d}/{validated.month:02d}/{validated.day:02d}.html"
