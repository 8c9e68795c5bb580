"""Shared typed data models for permalinker.

This package contains dataclasses used across routing, storage, and CLI
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    Blog,
    DayArchive,
    Entry,
    MonthArchive,
    PathKind,
    YearArchive,
)

__all__ = [
    "Blog",
    "DayArchive",
    "Entry",
    "MonthArchive",
    "PathKind",
    "YearArchive",
]
