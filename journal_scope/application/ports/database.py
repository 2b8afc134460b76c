"""Database ports for the journal scope engine.

This module defines the application-layer protocol for accessing the
journal database engine. Infrastructure implementations provide concrete
adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine for the journal database."""

    def get_journal_engine(self) -> Engine:
        """Get the engine for the journal database.

        Returns:
            Engine: SQLAlchemy engine connected to the journal backend.
        """


__all__ = ["DatabaseEnginePort"]
