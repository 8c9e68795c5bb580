"""Structured resolution logging utilities.

Responsibilities:
- Emit concise, deterministic `key=value` lines for permalink operations.
- Report swallowed collaborator failures without leaking their payloads.
"""

from __future__ import annotations

from typing import TextIO

from loguru import logger as _loguru_logger

_PACKAGE_NAME = "permalinker"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class ResolutionLogger:
    """Emit deterministic log lines for permalink generation and resolution.

    The package logger is disabled on import; passing a `sink` re-enables it and
    routes all package output to that sink at `level`.
    """

    def __init__(self, sink: TextIO | None = None, level: str = "WARNING") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        if sink is not None:
            _loguru_logger.remove()
            _loguru_logger.add(sink, format="{message}", level=level, colorize=False)
            _loguru_logger.enable(_PACKAGE_NAME)

    def _emit(self, level: str, event: str, operation: str, **context: object) -> None:
        """Emit one structured log line."""

        line = f"[permalink] level={level} op={operation} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_lookup_failure(self, operation: str, source: str, error_type: str) -> None:
        """Emit a swallowed collaborator failure."""

        self._emit("WARNING", "lookup_failure", operation, source=source, error_type=error_type)

    def log_not_found(self, operation: str, path: str) -> None:
        """Emit a well-formed lookup that matched no content."""

        self._emit("DEBUG", "not_found", operation, path=path)

    def log_malformed_path(self, operation: str, path: str) -> None:
        """Emit a path rejected before fixed-width extraction."""

        self._emit("DEBUG", "malformed_path", operation, path=path)

    def log_collision(self, entry_id: str, count: int) -> None:
        """Emit a title collision that forces the disambiguated permalink form."""

        self._emit("DEBUG", "collision", "permalink_for_entry", count=count, entry_id=entry_id)
