"""Engine access for the journal database.

The engine is created lazily from ``JOURNAL_DB_URL`` (``.env`` is honoured)
and shared by every repository of the process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from journal_scope.application.ports.database import DatabaseEnginePort


_journal_engine: Optional[Engine] = None


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` first.

    Raises:
        RuntimeError: If ``name`` is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def get_journal_engine() -> Engine:
    """Return the process-wide journal engine, creating it on first use."""
    global _journal_engine
    if _journal_engine is None:
        _journal_engine = _create_engine(_get_env_var("JOURNAL_DB_URL"))
    return _journal_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Hands the shared journal engine to repositories."""

    def get_journal_engine(self) -> Engine:
        return get_journal_engine()


__all__ = ["get_journal_engine", "SqlAlchemyDatabaseEngineAdapter"]
