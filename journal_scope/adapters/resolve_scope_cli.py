"""CLI adapter replaying journal clicks and printing the resulting scope.

Clicks are read from ``JOURNAL_SCOPE_CLICKS`` as ``level:id`` pairs separated
by commas, for example ``0:6,1:61``. Each pair is applied as a single click.
"""

import os

from journal_scope.application.use_cases.get_journal_tree import (
    GetJournalTreeUseCase,
)
from journal_scope.infrastructure.container import (
    build_journal_tree_repository,
    build_selection_session,
)
from journal_scope.infrastructure.logging.logger import get_app_logger


def _parse_clicks(raw_value: str, logger) -> list[tuple[int, str]]:
    """Parse ``level:id`` pairs, skipping malformed entries.

    Args:
        raw_value: Comma separated click list.
        logger: Logger used for warnings.

    Returns:
        list[tuple[int, str]]: Clicks in replay order.
    """
    clicks: list[tuple[int, str]] = []
    for chunk in raw_value.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        level_part, sep, journal_id = chunk.partition(":")
        if not sep or not journal_id.strip():
            logger.warning(f"Skipping malformed click {chunk!r}")
            continue
        try:
            level_index = int(level_part)
        except ValueError:
            logger.warning(f"Skipping click with invalid level {chunk!r}")
            continue
        clicks.append((level_index, journal_id.strip()))
    return clicks


def main() -> None:
    """Load the journal tree, replay clicks and print the scope."""
    logger = get_app_logger()
    use_case = GetJournalTreeUseCase(
        repository=build_journal_tree_repository(),
        logger=logger,
    )
    tree = use_case.execute()
    session = build_selection_session(tree)

    clicks = _parse_clicks(os.getenv("JOURNAL_SCOPE_CLICKS", ""), logger)
    for level_index, journal_id in clicks:
        session.handle_level_selection(level_index, journal_id)

    effective_ids = ", ".join(session.effective_ids) or "-"
    print(f"Effective journals: {effective_ids}")
    print(f"Terminal journal: {session.selected_terminal_id or '-'}")


if __name__ == "__main__":  # pragma: no cover
    main()
