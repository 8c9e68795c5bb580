"""Deterministic slug construction for entry permalinks.

Responsibilities:
- Turn free-form entry titles into URL-safe `[a-z0-9-]` slugs.
- Transliterate Latin-1 supplement letters to plain ASCII instead of dropping them.
- Fall back to the entry id when nothing alphanumeric survives.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# Latin-1 supplement transliterations. The division sign (U+00F7) is left out
# on purpose and is stripped with the other unmapped characters.
CHARACTER_SUBSTITUTIONS: Mapping[str, str] = MappingProxyType(
    {
        "²": "2",
        "³": "3",
        "À": "A",
        "Á": "A",
        "Â": "A",
        "Ã": "A",
        "Ä": "A",
        "Å": "A",
        "Æ": "AE",
        "Ç": "C",
        "È": "E",
        "É": "E",
        "Ê": "E",
        "Ë": "E",
        "Ì": "I",
        "Í": "I",
        "Î": "I",
        "Ï": "I",
        "Ð": "D",
        "Ñ": "N",
        "Ò": "O",
        "Ó": "O",
        "Ô": "O",
        "Õ": "O",
        "Ö": "O",
        "×": "x",
        "Ø": "O",
        "Ù": "U",
        "Ú": "U",
        "Û": "U",
        "Ü": "U",
        "Ý": "Y",
        "Þ": "P",
        "ß": "ss",
        "à": "a",
        "á": "a",
        "â": "a",
        "ã": "a",
        "ä": "a",
        "å": "a",
        "æ": "ae",
        "ç": "c",
        "è": "e",
        "é": "e",
        "ê": "e",
        "ë": "e",
        "ì": "i",
        "í": "i",
        "î": "i",
        "ï": "i",
        "ð": "d",
        "ñ": "n",
        "ò": "o",
        "ó": "o",
        "ô": "o",
        "õ": "o",
        "ö": "o",
        "ø": "o",
        "ù": "u",
        "ú": "u",
        "û": "u",
        "ü": "u",
        "ý": "y",
        "þ": "p",
        "ÿ": "y",
    }
)

_SEPARATOR_PATTERN = re.compile(r"[. ,;/\\_]")
_DISALLOWED_PATTERN = re.compile(r"[^a-z0-9-]")
_DASH_RUN_PATTERN = re.compile(r"-{2,}")
_DEFAULT_TRANSLATION = str.maketrans(dict(CHARACTER_SUBSTITUTIONS))


def _slugify(title: str | None, fallback: object, translation: dict[int, str]) -> str:
    """Apply the slug pipeline with a prepared `str.translate` table."""

    if not title:
        return str(fallback)

    text = title.lower()
    text = _SEPARATOR_PATTERN.sub("-", text)
    text = text.translate(translation)
    text = _DISALLOWED_PATTERN.sub("", text)
    text = _DASH_RUN_PATTERN.sub("-", text)
    text = text.strip("-")
    return text or str(fallback)


def build_slug(title: str | None, fallback: object) -> str:
    """Return the URL-safe slug for a title.

    Args:
        title: Entry title; `None` or empty selects the fallback.
        fallback: Value whose string form is used when no slug survives,
            normally the entry id.

    Returns:
        Slug restricted to `[a-z0-9-]` with no dash runs and no edge dashes.
    """

    return _slugify(title, fallback, _DEFAULT_TRANSLATION)


class SlugBuilder:
    """Title to slug transform bound to one substitution table."""

    def __init__(self, substitutions: Mapping[str, str] | None = None) -> None:
        """Initialize the builder, defaulting to the Latin-1 table."""

        if substitutions is None:
            self._translation = _DEFAULT_TRANSLATION
        else:
            self._translation = str.maketrans(dict(substitutions))

    def slug(self, title: str | None, fallback: object) -> str:
        """Return the slug for `title`, or `str(fallback)` when none survives."""

        return _slugify(title, fallback, self._translation)
