"""Domain exceptions for collaborator lookups and CLI diagnostics."""

from __future__ import annotations


class CollaboratorLookupError(RuntimeError):
    """Raised by an entry or archive collaborator that cannot serve a lookup."""

    def __init__(self, *, source: str, detail: str) -> None:
        """Initialize a lookup error tagged with the failing collaborator."""

        super().__init__(detail)
        self.source = source
        self.detail = detail


class EntryLookupError(CollaboratorLookupError):
    """Raised when blog entries cannot be enumerated."""

    def __init__(self, detail: str) -> None:
        super().__init__(source="entries", detail=detail)


class ArchiveLookupError(CollaboratorLookupError):
    """Raised when the date archive index cannot be queried."""

    def __init__(self, detail: str) -> None:
        super().__init__(source="archive", detail=detail)


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
