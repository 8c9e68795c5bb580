"""Bidirectional mapping between permalinks and blog content.

Responsibilities:
- Generate entry permalinks from titles, disambiguating repeated titles by id.
- Generate month and day archive permalinks.
- Classify inbound paths and resolve them to entries or archive nodes.

Lookups always go to the collaborators; nothing is cached. Collaborator lookup
failures never leave this module: generation degrades to the plain slug form
and resolution degrades to `None`.
"""

from __future__ import annotations

from collections import Counter
import threading
from typing import Iterator, Sequence

from ..config import ResolverConfig
from ..errors import CollaboratorLookupError
from ..io.services import ArchiveIndex, EntryDirectory
from ..models.datatypes import (
    Blog,
    DayArchive,
    Entry,
    MonthArchive,
    PathKind,
    YearArchive,
)
from ..telemetry.logger import ResolutionLogger
from ..text.slug import SlugBuilder
from . import patterns

Resolution = Entry | MonthArchive | DayArchive

_GENERATION_LOCKS: dict[str, threading.Lock] = {}
_GENERATION_LOCKS_GUARD = threading.Lock()


def _generation_lock(blog_id: str) -> threading.Lock:
    """Return the process-wide generation lock for one blog."""

    with _GENERATION_LOCKS_GUARD:
        lock = _GENERATION_LOCKS.get(blog_id)
        if lock is None:
            lock = threading.Lock()
            _GENERATION_LOCKS[blog_id] = lock
        return lock


def count_earlier_title_matches(entries: Sequence[Entry], entry: Entry) -> int:
    """Count entries published before `entry` that share its exact title.

    `entries` is newest first, so the scan walks from the oldest entry and stops
    at the first entry carrying `entry.id`. If `entry` is absent, every entry
    with the same title counts.
    """

    count = 0
    for candidate in reversed(entries):
        if candidate.id == entry.id:
            break
        if candidate.title == entry.title:
            count += 1
    return count


class PermalinkResolver:
    """Generates and resolves permalinks for one blog."""

    def __init__(
        self,
        blog: Blog,
        entries: EntryDirectory,
        archive: ArchiveIndex,
        *,
        config: ResolverConfig | None = None,
        slug_builder: SlugBuilder | None = None,
        run_logger: ResolutionLogger | None = None,
    ) -> None:
        """Bind the resolver to a blog and its lookup collaborators."""

        self._blog = blog
        self._entries = entries
        self._archive = archive
        self._config = config or ResolverConfig()
        self._slug_builder = slug_builder or SlugBuilder()
        self._logger = run_logger or ResolutionLogger()

    @property
    def blog(self) -> Blog:
        """Blog this resolver is bound to."""

        return self._blog

    # Generation

    def permalink_for_entry(self, entry: Entry) -> str:
        """Return `/<slug>`, or `/<slug>_<id>` when earlier entries share the title."""

        if self._config.serialize_generation:
            with _generation_lock(self._blog.id):
                return self._build_entry_permalink(entry)
        return self._build_entry_permalink(entry)

    def permalink_for_month(self, year: int, month: int) -> str:
        """Return `/yyyy/MM.html`."""

        return patterns.format_month_permalink(year, month)

    def permalink_for_day(self, year: int, month: int, day: int) -> str:
        """Return `/yyyy/MM/dd.html`."""

        return patterns.format_day_permalink(year, month, day)

    def local_permalink(self, entry: Entry) -> str:
        """Return the blog URL joined with the entry permalink."""

        return self._blog.url.rstrip("/") + self.permalink_for_entry(entry)

    def _build_entry_permalink(self, entry: Entry) -> str:
        path = "/" + self._slug_builder.slug(entry.title, entry.id)
        if not entry.title:
            return path

        try:
            entries = self._entries.list_entries(self._blog)
        except CollaboratorLookupError as exc:
            self._logger.log_lookup_failure(
                "permalink_for_entry", exc.source, type(exc).__name__
            )
            return path

        count = count_earlier_title_matches(entries, entry)
        if count == 0:
            return path
        self._logger.log_collision(entry.id, count)
        return f"{path}_{entry.id}"

    # Classification

    def is_day_permalink(self, path: str | None) -> bool:
        """Return whether `path` is a day archive path."""

        return patterns.is_day_permalink(path)

    def is_month_permalink(self, path: str | None) -> bool:
        """Return whether `path` is a month archive path."""

        return patterns.is_month_permalink(path)

    def is_entry_permalink(self, path: str | None) -> bool:
        """Return whether `path` has the entry permalink shape."""

        return patterns.is_entry_permalink(path)

    def classify(self, path: str | None) -> PathKind:
        """Classify a bare path as day, month, entry, or unknown."""

        return patterns.classify_path(path)

    # Resolution

    def resolve(self, path: str | None) -> Resolution | None:
        """Resolve a bare path to an entry or archive node, or `None`."""

        kind = self.classify(path)
        if kind is PathKind.DAY:
            return self.day_from_path(path)
        if kind is PathKind.MONTH:
            return self.month_from_path(path)
        if kind is PathKind.ENTRY:
            return self.entry_from_path(path)
        self._logger.log_malformed_path("resolve", str(path))
        return None

    def day_from_path(self, path: str) -> DayArchive | None:
        """Return the day node for `/yyyy/MM/dd`, or `None`."""

        if not patterns.is_day_permalink(path):
            self._logger.log_malformed_path("day_from_path", str(path))
            return None

        year, month, day = patterns.extract_day(path)
        month_node = self._find_month(year, month)
        day_node = month_node.day(day) if month_node is not None else None
        if day_node is None:
            self._logger.log_not_found("day_from_path", path)
        return day_node

    def month_from_path(self, path: str) -> MonthArchive | None:
        """Return the month node for `/yyyy/MM`, or `None`."""

        if not patterns.is_month_permalink(path):
            self._logger.log_malformed_path("month_from_path", str(path))
            return None

        year, month = patterns.extract_month(path)
        month_node = self._find_month(year, month)
        if month_node is None:
            self._logger.log_not_found("month_from_path", path)
        return month_node

    def entry_from_path(self, path: str) -> Entry | None:
        """Return the first entry whose local permalink ends with `path`, or `None`."""

        try:
            entries = self._entries.list_entries(self._blog)
        except CollaboratorLookupError as exc:
            self._logger.log_lookup_failure("entry_from_path", exc.source, type(exc).__name__)
            return None

        base_url = self._blog.url.rstrip("/")
        local_permalinks = {
            entry.id: base_url + permalink
            for entry, permalink in self._iter_entry_permalinks(entries)
        }
        for entry in entries:
            if local_permalinks[entry.id].endswith(path):
                return entry

        self._logger.log_not_found("entry_from_path", path)
        return None

    def entry_permalinks(self) -> list[tuple[Entry, str]]:
        """Return `(entry, permalink)` pairs for every entry, oldest first."""

        try:
            entries = self._entries.list_entries(self._blog)
        except CollaboratorLookupError as exc:
            self._logger.log_lookup_failure("entry_permalinks", exc.source, type(exc).__name__)
            return []
        return list(self._iter_entry_permalinks(entries))

    def _iter_entry_permalinks(self, entries: Sequence[Entry]) -> Iterator[tuple[Entry, str]]:
        """Yield `(entry, permalink)` oldest first from one enumeration.

        Matches `permalink_for_entry` for each entry against the same snapshot
        without re-enumerating per entry.
        """

        seen_titles: Counter[str] = Counter()
        for entry in reversed(entries):
            path = "/" + self._slug_builder.slug(entry.title, entry.id)
            if entry.title:
                if seen_titles[entry.title]:
                    path = f"{path}_{entry.id}"
                seen_titles[entry.title] += 1
            yield entry, path

    def _find_month(self, year: int, month: int) -> MonthArchive | None:
        year_node = self._find_year(year)
        if year_node is None:
            return None
        return year_node.month(month)

    def _find_year(self, year: int) -> YearArchive | None:
        try:
            return self._archive.find_archive_year(self._blog, year)
        except CollaboratorLookupError as exc:
            self._logger.log_lookup_failure("archive_lookup", exc.source, type(exc).__name__)
            return None
