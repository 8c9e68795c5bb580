"""Core datatypes shared across permalinker modules.

Responsibilities:
- Represent blogs, entries, and the date archive nodes resolved from paths.
- Keep the path classification result explicit as an enum.

Key types:
- `Blog`, `Entry`, `YearArchive`, `MonthArchive`, `DayArchive`, and `PathKind`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping


class PathKind(str, Enum):
    """Shape of an inbound request path."""

    ENTRY = "entry"
    MONTH = "month"
    DAY = "day"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Blog:
    """Blog context that owns entries and archive nodes.

    Attributes:
        id: Stable blog identifier.
        name: Human-readable blog name.
        url: Base URL prepended to entry permalinks to form local permalinks.
    """

    id: str
    name: str = ""
    url: str = ""


@dataclass(slots=True)
class Entry:
    """A published blog entry.

    Attributes:
        id: Opaque identifier assigned once at publication.
        title: Optional title; may change after publication.
        published: Publication timestamp.
        comments_enabled: Whether new comments are accepted.
        trackbacks_enabled: Whether new trackbacks are accepted.
        original_permalink: Permalink at the source site for aggregated entries.
    """

    id: str
    title: str | None
    published: datetime
    comments_enabled: bool = True
    trackbacks_enabled: bool = True
    original_permalink: str | None = None


@dataclass(frozen=True, slots=True)
class DayArchive:
    """Archive node for one calendar day.

    Attributes:
        year: Four-digit year.
        month: 1-based month.
        day: 1-based day of month.
        entry_ids: Ids of entries published that day, newest first.
    """

    year: int
    month: int
    day: int
    entry_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class MonthArchive:
    """Archive node for one calendar month."""

    year: int
    month: int
    days: Mapping[int, DayArchive] = field(default_factory=dict)

    def day(self, day: int) -> DayArchive | None:
        """Return the day node, or `None` when nothing was published that day."""

        return self.days.get(day)


@dataclass(frozen=True, slots=True)
class YearArchive:
    """Archive node for one calendar year."""

    year: int
    months: Mapping[int, MonthArchive] = field(default_factory=dict)

    def month(self, month: int) -> MonthArchive | None:
        """Return the month node, or `None` when nothing was published that month."""

        return self.months.get(month)
