"""Permalink generation, path classification, and resolution."""

from .patterns import classify_path
from .resolver import PermalinkResolver, count_earlier_title_matches

__all__ = ["PermalinkResolver", "classify_path", "count_earlier_title_matches"]
