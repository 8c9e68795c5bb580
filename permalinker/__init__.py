"""Top-level package for permalinker.

This package maps blog entries and date archives to stable permalinks and
resolves inbound request paths back to them. The main entry point is
`PermalinkResolver`.
"""

from loguru import logger

from .models.datatypes import Blog, DayArchive, Entry, MonthArchive, PathKind, YearArchive
from .routing.resolver import PermalinkResolver
from .text.slug import SlugBuilder, build_slug

logger.disable(__name__)

__all__ = [
    "Blog",
    "DayArchive",
    "Entry",
    "MonthArchive",
    "PathKind",
    "PermalinkResolver",
    "SlugBuilder",
    "YearArchive",
    "build_slug",
    "__version__",
]

__version__ = "0.1.0"
