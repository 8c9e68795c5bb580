"""Catalog file loading for CLI-driven permalink resolution.

Responsibilities:
- Read a YAML (or JSON) catalog describing one blog and its entries.
- Populate in-memory entry and archive collaborators in publication order.

Catalog layout:

    blog:
      id: main
      name: Example
      url: https://example.org/blog
    entries:
      - id: "1"
        title: Hello
        published: 2011-09-03T10:15:00
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..models.datatypes import Blog, Entry
from ..parsing import normalize_optional_string, parse_permissive_boolean
from .services import InMemoryArchiveIndex, InMemoryEntryDirectory

_SUPPORTED_ENTRY_KEYS = frozenset(
    {
        "id",
        "title",
        "published",
        "comments_enabled",
        "trackbacks_enabled",
        "original_permalink",
    }
)


@dataclass(frozen=True, slots=True)
class Catalog:
    """A blog with populated lookup collaborators."""

    blog: Blog
    entries: InMemoryEntryDirectory
    archive: InMemoryArchiveIndex


def load_catalog(path: Path) -> Catalog:
    """Load a catalog file.

    Entries may appear in any order in the file; they are published oldest
    first by `published`, keeping file order for equal timestamps.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ValueError: If the catalog structure or values are invalid.
    """

    payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(payload, Mapping):
        raise ValueError(f"Catalog `{path}` must contain a top-level mapping/object.")
    return build_catalog(payload, source_label=f"Catalog `{path}`")


def build_catalog(payload: Mapping[str, Any], source_label: str = "Catalog") -> Catalog:
    """Build a catalog from an already-parsed mapping."""

    blog = _parse_blog(payload.get("blog"), source_label)
    raw_entries = payload.get("entries")
    if raw_entries is None:
        raw_entries = []
    if not isinstance(raw_entries, list):
        raise ValueError(f"{source_label} field `entries` must be a list.")

    entries = [
        _parse_entry(raw_entry, f"{source_label} entry #{position}")
        for position, raw_entry in enumerate(raw_entries, start=1)
    ]
    seen_ids: set[str] = set()
    for entry in entries:
        if entry.id in seen_ids:
            raise ValueError(f"{source_label} contains duplicate entry id `{entry.id}`.")
        seen_ids.add(entry.id)

    aware = {entry.published.utcoffset() is not None for entry in entries}
    if len(aware) > 1:
        raise ValueError(
            f"{source_label} mixes `published` timestamps with and without a UTC offset."
        )

    directory = InMemoryEntryDirectory()
    directory.register_blog(blog)
    for entry in sorted(entries, key=lambda item: item.published):
        directory.put_entry(blog, entry)

    return Catalog(blog=blog, entries=directory, archive=InMemoryArchiveIndex(directory))


def _parse_blog(raw: object, source_label: str) -> Blog:
    """Parse the `blog` mapping."""

    if not isinstance(raw, Mapping):
        raise ValueError(f"{source_label} requires a `blog` mapping/object.")
    blog_id = normalize_optional_string(raw.get("id"))
    if blog_id is None:
        raise ValueError(f"{source_label} requires non-empty `blog.id`.")
    return Blog(
        id=blog_id,
        name=normalize_optional_string(raw.get("name")) or "",
        url=normalize_optional_string(raw.get("url")) or "",
    )


def _parse_entry(raw: object, source_label: str) -> Entry:
    """Parse one entry mapping."""

    if not isinstance(raw, Mapping):
        raise ValueError(f"{source_label} must be a mapping/object.")

    unknown = sorted(set(raw).difference(_SUPPORTED_ENTRY_KEYS))
    if unknown:
        key_list = ", ".join(str(key) for key in unknown)
        raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    return Entry(
        id=_parse_entry_id(raw.get("id"), source_label),
        title=_parse_title(raw.get("title"), source_label),
        published=_parse_published(raw.get("published"), source_label),
        comments_enabled=_optional_boolean(raw, "comments_enabled", source_label),
        trackbacks_enabled=_optional_boolean(raw, "trackbacks_enabled", source_label),
        original_permalink=normalize_optional_string(raw.get("original_permalink")),
    )


def _parse_entry_id(raw: object, source_label: str) -> str:
    """Read the entry id; YAML integers are accepted, other scalars are not."""

    if raw is not None and (isinstance(raw, bool) or not isinstance(raw, (str, int))):
        raise ValueError(f"{source_label} field `id` must be a string or an integer.")
    entry_id = normalize_optional_string(raw)
    if entry_id is None:
        raise ValueError(f"{source_label} requires non-empty `id`.")
    return entry_id


def _parse_title(raw: object, source_label: str) -> str | None:
    """Read the optional title exactly as written."""

    if raw is None or isinstance(raw, str):
        return raw
    raise ValueError(
        f"{source_label} field `title` must be a string; quote values such as `010` or `yes`."
    )


def _parse_published(raw: object, source_label: str) -> datetime:
    """Parse an ISO-8601 publication timestamp; YAML may already decode it."""

    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, date):
        return datetime(raw.year, raw.month, raw.day)
    text = normalize_optional_string(raw)
    if text is None:
        raise ValueError(f"{source_label} requires non-empty `published`.")
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(
            f"{source_label} field `published` must be an ISO-8601 timestamp."
        ) from exc


def _optional_boolean(raw: Mapping[str, Any], key: str, source_label: str) -> bool:
    """Read an optional boolean flag that defaults to enabled."""

    if key not in raw:
        return True
    parsed = parse_permissive_boolean(raw[key])
    if parsed is None:
        raise ValueError(f"{source_label} field `{key}` must be a boolean value.")
    return parsed
