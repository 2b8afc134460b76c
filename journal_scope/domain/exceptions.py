"""Domain exceptions for the journal scope engine.

Selection-time conditions (stale ids, invalid levels, ambiguous terminals,
click races) are absorbed as no-ops and never raised. These exceptions cover
input that cannot be turned into a usable tree or query.
"""


class JournalScopeError(Exception):
    """Base class for journal scope errors."""


class InvalidJournalTreeError(JournalScopeError):
    """Raised when tree input cannot be indexed."""


class UnknownRecordKindError(JournalScopeError, ValueError):
    """Raised when a scoped record query names an unsupported kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown record kind: {kind}")
        self.kind = kind


__all__ = [
    "JournalScopeError",
    "InvalidJournalTreeError",
    "UnknownRecordKindError",
]
