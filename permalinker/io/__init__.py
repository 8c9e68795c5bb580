"""Lookup collaborators and catalog file loading."""

from .catalog import Catalog, load_catalog
from .services import (
    ArchiveIndex,
    EntryDirectory,
    InMemoryArchiveIndex,
    InMemoryEntryDirectory,
)

__all__ = [
    "ArchiveIndex",
    "Catalog",
    "EntryDirectory",
    "InMemoryArchiveIndex",
    "InMemoryEntryDirectory",
    "load_catalog",
]
