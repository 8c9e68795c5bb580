"""Shared pytest fixtures for the full permalinker test suite."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterator

import pytest
from loguru import logger

from permalinker.io.services import InMemoryArchiveIndex, InMemoryEntryDirectory
from permalinker.models.datatypes import Blog, Entry
from permalinker.routing.resolver import PermalinkResolver

EntryFactory = Callable[..., Entry]


@pytest.fixture
def blog() -> Blog:
    """Provide a blog with a base URL so local permalinks carry a host prefix."""

    return Blog(id="main", name="Example", url="https://example.org/blog/")


@pytest.fixture
def directory(blog: Blog) -> InMemoryEntryDirectory:
    """Provide an empty entry directory that already knows the blog."""

    store = InMemoryEntryDirectory()
    store.register_blog(blog)
    return store


@pytest.fixture
def archive(directory: InMemoryEntryDirectory) -> InMemoryArchiveIndex:
    """Provide an archive index derived from the shared directory."""

    return InMemoryArchiveIndex(directory)


@pytest.fixture
def resolver(
    blog: Blog, directory: InMemoryEntryDirectory, archive: InMemoryArchiveIndex
) -> PermalinkResolver:
    """Provide a resolver over the shared collaborators."""

    return PermalinkResolver(blog, directory, archive)


@pytest.fixture
def publish(blog: Blog, directory: InMemoryEntryDirectory) -> EntryFactory:
    """Publish entries into the shared directory, newest last."""

    def _publish(
        entry_id: str,
        title: str | None,
        published: datetime = datetime(2011, 9, 3, 10, 0),
    ) -> Entry:
        entry = Entry(id=entry_id, title=title, published=published)
        directory.put_entry(blog, entry)
        return entry

    return _publish


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Drop sinks added by a test and silence the package logger again."""

    yield
    logger.remove()
    logger.disable("permalinker")
