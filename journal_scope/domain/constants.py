"""Domain constants for journal selection."""

ROOT_JOURNAL_ID = "__ROOT__"

DEFAULT_CLICK_WINDOW_MS = 200

DEFAULT_ROOT_FILTER = ("affected",)

RECORD_KINDS = (
    "partners",
    "goods",
    "documents",
)


__all__ = [
    "ROOT_JOURNAL_ID",
    "DEFAULT_CLICK_WINDOW_MS",
    "DEFAULT_ROOT_FILTER",
    "RECORD_KINDS",
]
