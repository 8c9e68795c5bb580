"""Entry and archive lookup collaborators.

Responsibilities:
- Define the lookup protocols the permalink resolver depends on.
- Provide thread-safe in-memory implementations used by the CLI and tests.

Key types:
- `EntryDirectory`, `ArchiveIndex`: collaborator protocols.
- `InMemoryEntryDirectory`: append-only entry store, enumerated newest first.
- `InMemoryArchiveIndex`: year/month/day nodes derived from a directory on demand.
"""

from __future__ import annotations

from collections import defaultdict
import threading
from typing import Protocol, Sequence

from ..errors import ArchiveLookupError, EntryLookupError
from ..models.datatypes import Blog, DayArchive, Entry, MonthArchive, YearArchive


class EntryDirectory(Protocol):
    """Enumerates the entries of a blog."""

    def list_entries(self, blog: Blog) -> Sequence[Entry]:
        """Return all entries of `blog`, newest first.

        Raises:
            EntryLookupError: If the entries cannot be enumerated.
        """


class ArchiveIndex(Protocol):
    """Looks up date archive nodes for a blog."""

    def find_archive_year(self, blog: Blog, year: int) -> YearArchive | None:
        """Return the year node, or `None` when nothing was published that year.

        Raises:
            ArchiveLookupError: If the index cannot be queried.
        """


class InMemoryEntryDirectory:
    """Append-only entry store keyed by blog id.

    Entries keep their publication position; re-putting an existing id updates
    it in place without reordering.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""

        self._lock = threading.Lock()
        self._entries: dict[str, list[Entry]] = {}

    def register_blog(self, blog: Blog) -> None:
        """Make `blog` known so enumeration succeeds before its first entry."""

        with self._lock:
            self._entries.setdefault(blog.id, [])

    def put_entry(self, blog: Blog, entry: Entry) -> None:
        """Publish `entry` as the newest entry of `blog`, or replace it by id."""

        with self._lock:
            entries = self._entries.setdefault(blog.id, [])
            for position, existing in enumerate(entries):
                if existing.id == entry.id:
                    entries[position] = entry
                    return
            entries.append(entry)

    def list_entries(self, blog: Blog) -> list[Entry]:
        """Return a snapshot of all entries for `blog`, newest first."""

        with self._lock:
            if blog.id not in self._entries:
                raise EntryLookupError(f"Unknown blog `{blog.id}`.")
            return list(reversed(self._entries[blog.id]))

    def get_entry(self, blog: Blog, entry_id: str) -> Entry | None:
        """Return the entry with `entry_id`, or `None` when absent."""

        for entry in self.list_entries(blog):
            if entry.id == entry_id:
                return entry
        return None


class InMemoryArchiveIndex:
    """Date archive index computed from an entry directory on every lookup."""

    def __init__(self, directory: EntryDirectory) -> None:
        """Initialize the index over `directory`."""

        self._directory = directory

    def find_archive_year(self, blog: Blog, year: int) -> YearArchive | None:
        """Build the year node from the entries published in `year`."""

        try:
            entries = self._directory.list_entries(blog)
        except EntryLookupError as exc:
            raise ArchiveLookupError(exc.detail) from exc

        day_entries: dict[int, dict[int, list[str]]] = defaultdict(lambda: defaultdict(list))
        for entry in entries:
            if entry.published.year != year:
                continue
            day_entries[entry.published.month][entry.published.day].append(entry.id)

        if not day_entries:
            return None

        months = {
            month: MonthArchive(
                year=year,
                month=month,
                days={
                    day: DayArchive(year=year, month=month, day=day, entry_ids=tuple(ids))
                    for day, ids in sorted(days.items())
                },
            )
            for month, days in sorted(day_entries.items())
        }
        return YearArchive(year=year, months=months)
