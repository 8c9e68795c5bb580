"""Unit tests for classifying and resolving inbound paths."""

from __future__ import annotations

from datetime import datetime

from permalinker.errors import ArchiveLookupError, EntryLookupError
from permalinker.io.services import InMemoryArchiveIndex, InMemoryEntryDirectory
from permalinker.models.datatypes import (
    Blog,
    DayArchive,
    Entry,
    MonthArchive,
    PathKind,
    YearArchive,
)
from permalinker.routing.resolver import PermalinkResolver


class _FailingArchive:
    """Archive index whose lookups always fail."""

    def find_archive_year(self, blog: Blog, year: int) -> YearArchive | None:
        raise ArchiveLookupError("index offline")


class _FailingDirectory:
    """Entry directory whose enumeration always fails."""

    def list_entries(self, blog: Blog) -> list[Entry]:
        raise EntryLookupError("storage offline")


def test_unique_title_round_trips(resolver: PermalinkResolver, publish) -> None:
    """A generated entry permalink classifies as an entry and resolves back to it."""

    publish("1", "First Post")
    entry = publish("2", "Hello Wörld")

    permalink = resolver.permalink_for_entry(entry)

    assert permalink == "/hello-world"
    assert resolver.classify(permalink) is PathKind.ENTRY
    assert resolver.resolve(permalink) is entry


def test_disambiguated_permalinks_resolve_to_their_entries(
    resolver: PermalinkResolver, publish
) -> None:
    """Plain and id-suffixed forms of one title resolve to different entries."""

    first = publish("1", "Hello")
    second = publish("2", "Hello")

    assert resolver.resolve("/hello") is first
    assert resolver.resolve("/hello_2") is second


def test_entry_lookup_matches_local_permalink_suffix(
    resolver: PermalinkResolver, publish
) -> None:
    """Lookup matches the end of the blog-prefixed permalink."""

    entry = publish("1", "Hello")

    assert resolver.entry_from_path("/blog/hello") is entry
    assert resolver.entry_from_path("https://example.org/blog/hello") is entry
    assert resolver.entry_from_path("/other/hello") is None


def test_entry_lookup_returns_first_match_in_enumeration_order(
    resolver: PermalinkResolver, publish
) -> None:
    """When several permalinks share a suffix, the newest entry wins."""

    publish("1", "Say Hello")
    newer = publish("2", "Hello")

    assert resolver.entry_from_path("hello") is newer


def test_entry_lookup_uses_current_titles(resolver: PermalinkResolver, publish) -> None:
    """A renamed entry is found under its new slug and not its old one."""

    entry = publish("1", "Before")
    entry.title = "After"

    assert resolver.resolve("/after") is entry
    assert resolver.resolve("/before") is None


def test_unknown_entry_path_is_not_found(resolver: PermalinkResolver, publish) -> None:
    """Entry-shaped paths without a matching entry resolve to `None`."""

    publish("1", "Hello")

    assert resolver.resolve("/missing") is None


def test_entry_lookup_failure_is_not_found(blog: Blog) -> None:
    """Enumeration failures during resolution are reported as not found."""

    resolver = PermalinkResolver(blog, _FailingDirectory(), InMemoryArchiveIndex(_FailingDirectory()))

    assert resolver.entry_from_path("/hello") is None
    assert resolver.entry_permalinks() == []


def test_day_path_resolves_to_day_node(resolver: PermalinkResolver, publish) -> None:
    """Day paths look up year, then month, then day."""

    publish("1", "Morning", datetime(2011, 9, 3, 8, 0))
    publish("2", "Evening", datetime(2011, 9, 3, 20, 0))
    publish("3", "Next day", datetime(2011, 9, 4, 8, 0))

    assert resolver.is_day_permalink("/2011/09/03")
    assert not resolver.is_month_permalink("/2011/09/03")

    node = resolver.resolve("/2011/09/03")

    assert node == DayArchive(year=2011, month=9, day=3, entry_ids=("2", "1"))
    assert resolver.day_from_path("/2011/09/03") == node


def test_month_path_resolves_to_month_node(resolver: PermalinkResolver, publish) -> None:
    """Month paths look up year, then month."""

    publish("1", "September", datetime(2011, 9, 3))
    publish("2", "October", datetime(2011, 10, 1))

    node = resolver.resolve("/2011/09")

    assert isinstance(node, MonthArchive)
    assert (node.year, node.month) == (2011, 9)
    assert sorted(node.days) == [3]
    assert resolver.month_from_path("/2011/10").month == 10


def test_missing_archive_levels_are_not_found(resolver: PermalinkResolver, publish) -> None:
    """A missing year, month, or day yields `None` without partial results."""

    publish("1", "Only", datetime(2011, 9, 3))

    assert resolver.day_from_path("/2010/09/03") is None
    assert resolver.day_from_path("/2011/08/03") is None
    assert resolver.day_from_path("/2011/09/04") is None
    assert resolver.month_from_path("/2011/08") is None
    assert resolver.month_from_path("/2011/00") is None


def test_archive_lookup_failure_is_not_found(blog: Blog) -> None:
    """Archive collaborator failures are reported as not found."""

    directory = InMemoryEntryDirectory()
    directory.register_blog(blog)
    resolver = PermalinkResolver(blog, directory, _FailingArchive())

    assert resolver.resolve("/2011/09/03") is None
    assert resolver.resolve("/2011/09") is None


def test_malformed_paths_are_rejected_before_extraction(resolver: PermalinkResolver) -> None:
    """Extractors refuse paths that do not match their shape."""

    assert resolver.day_from_path("/2011/9/3") is None
    assert resolver.day_from_path("/2011/09") is None
    assert resolver.month_from_path("/2011/09/03") is None
    assert resolver.month_from_path("/20x1/09") is None


def test_resolve_unknown_shapes_returns_none(resolver: PermalinkResolver) -> None:
    """Paths matching no shape resolve to `None`."""

    assert resolver.classify("/a/b/c") is PathKind.UNKNOWN
    assert resolver.resolve("/a/b/c") is None
    assert resolver.resolve(None) is None
