"""Unit tests for in-memory entry and archive collaborators."""

from __future__ import annotations

from datetime import datetime

import pytest

from permalinker.errors import ArchiveLookupError, EntryLookupError
from permalinker.io.services import InMemoryArchiveIndex, InMemoryEntryDirectory
from permalinker.models.datatypes import Blog, Entry


def _entry(entry_id: str, title: str, published: datetime) -> Entry:
    return Entry(id=entry_id, title=title, published=published)


def test_directory_lists_newest_first_by_publication_position(blog: Blog) -> None:
    """Enumeration order follows publication position, not timestamps."""

    directory = InMemoryEntryDirectory()
    directory.put_entry(blog, _entry("1", "A", datetime(2012, 1, 1)))
    directory.put_entry(blog, _entry("2", "B", datetime(2011, 1, 1)))

    assert [entry.id for entry in directory.list_entries(blog)] == ["2", "1"]


def test_directory_replaces_existing_entry_in_place(blog: Blog) -> None:
    """Re-putting an id updates the entry without moving it."""

    directory = InMemoryEntryDirectory()
    directory.put_entry(blog, _entry("1", "A", datetime(2011, 1, 1)))
    directory.put_entry(blog, _entry("2", "B", datetime(2011, 1, 2)))
    directory.put_entry(blog, _entry("1", "A2", datetime(2011, 1, 1)))

    entries = directory.list_entries(blog)

    assert [entry.id for entry in entries] == ["2", "1"]
    assert entries[1].title == "A2"
    assert directory.get_entry(blog, "1").title == "A2"
    assert directory.get_entry(blog, "3") is None


def test_directory_snapshot_is_independent(blog: Blog, directory: InMemoryEntryDirectory) -> None:
    """Mutating a returned list does not affect the store."""

    directory.put_entry(blog, _entry("1", "A", datetime(2011, 1, 1)))

    directory.list_entries(blog).clear()

    assert len(directory.list_entries(blog)) == 1


def test_directory_rejects_unknown_blog() -> None:
    """Unknown blogs raise the declared lookup error."""

    with pytest.raises(EntryLookupError, match="Unknown blog `ghost`"):
        InMemoryEntryDirectory().list_entries(Blog(id="ghost"))


def test_registered_blog_without_entries_lists_nothing(directory: InMemoryEntryDirectory, blog: Blog) -> None:
    """A registered blog enumerates successfully before its first entry."""

    assert directory.list_entries(blog) == []


def test_archive_index_groups_entries_by_date(blog: Blog, directory: InMemoryEntryDirectory) -> None:
    """Year nodes expose months and days that have entries."""

    directory.put_entry(blog, _entry("1", "A", datetime(2011, 9, 3, 8)))
    directory.put_entry(blog, _entry("2", "B", datetime(2011, 9, 3, 9)))
    directory.put_entry(blog, _entry("3", "C", datetime(2011, 12, 24)))
    directory.put_entry(blog, _entry("4", "D", datetime(2012, 1, 1)))
    index = InMemoryArchiveIndex(directory)

    year = index.find_archive_year(blog, 2011)

    assert year is not None
    assert sorted(year.months) == [9, 12]
    assert year.month(9).day(3).entry_ids == ("2", "1")
    assert year.month(12).day(24).entry_ids == ("3",)
    assert year.month(10) is None
    assert year.month(9).day(4) is None
    assert index.find_archive_year(blog, 2010) is None


def test_archive_index_reflects_new_entries(blog: Blog, directory: InMemoryEntryDirectory) -> None:
    """Nodes are rebuilt on each lookup."""

    index = InMemoryArchiveIndex(directory)
    assert index.find_archive_year(blog, 2011) is None

    directory.put_entry(blog, _entry("1", "A", datetime(2011, 9, 3)))

    assert index.find_archive_year(blog, 2011) is not None


def test_archive_index_wraps_entry_lookup_failures() -> None:
    """Enumeration failures surface as archive lookup failures."""

    index = InMemoryArchiveIndex(InMemoryEntryDirectory())

    with pytest.raises(ArchiveLookupError, match="Unknown blog"):
        index.find_archive_year(Blog(id="ghost"), 2011)
