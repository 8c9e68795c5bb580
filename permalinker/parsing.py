"""Shared parsing helpers for config values and inbound request paths."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_HTML_SUFFIX = ".html"


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def normalize_request_path(uri: str, *, strip_html_suffix: bool = True) -> str:
    """Reduce an inbound request URI to the bare path used for classification.

    Query strings and fragments are dropped. When `strip_html_suffix` is set, a
    trailing `.html` is removed so archive permalinks (`/2011/09.html`) match
    the bare date shapes (`/2011/09`).

    Args:
        uri: Request URI relative to the blog root.
        strip_html_suffix: Whether to remove one trailing `.html`.

    Returns:
        Bare path string. Leading `/` is added when missing.
    """

    path = uri.strip()
    for separator in ("#", "?"):
        path = path.split(separator, 1)[0]
    if strip_html_suffix and path.endswith(_HTML_SUFFIX):
        path = path[: -len(_HTML_SUFFIX)]
    if not path.startswith("/"):
        path = "/" + path
    return path
