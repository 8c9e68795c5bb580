"""Text normalization helpers for permalink slugs."""

from .slug import CHARACTER_SUBSTITUTIONS, SlugBuilder, build_slug

__all__ = ["CHARACTER_SUBSTITUTIONS", "SlugBuilder", "build_slug"]
