"""Forward-only schema migrations for the task database.

Each migration runs inside an explicit transaction together with the row
that records it in ``schema_version``; a failed step leaves the database at
the previous version.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from datetime import UTC, datetime

logger = logging.getLogger(__name__)

_CREATE_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY,
    description TEXT NOT NULL,
    applied_at DATETIME NOT NULL
)
"""


class Migration(ABC):
    """One numbered schema step."""

    version: int
    description: str

    @abstractmethod
    def up(self, connection: sqlite3.Connection) -> None:
        """Apply the step. The runner commits; ``up`` must not."""


class MigrationRunner:
    """Brings a task database up to the newest known schema."""

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection
        self.connection.execute(_CREATE_VERSION_TABLE)
        self.connection.commit()

    def current_version(self) -> int:
        """Highest applied version, 0 for a fresh database."""
        (version,) = self.connection.execute(
            "SELECT MAX(version) FROM schema_version"
        ).fetchone()
        return version or 0

    def run_migrations(self, migrations: list[Migration]) -> int:
        """Apply every migration newer than the current version, oldest first.

        Returns:
            Number of migrations applied

        Raises:
            RuntimeError: If a migration fails; it is rolled back and later
                ones are not attempted
        """
        current = self.current_version()
        pending = sorted(
            (m for m in migrations if m.version > current), key=lambda m: m.version
        )
        for migration in pending:
            self._apply(migration)
        return len(pending)

    def _apply(self, migration: Migration) -> None:
        try:
            self.connection.execute("BEGIN")
            migration.up(self.connection)
            self.connection.execute(
                "INSERT INTO schema_version (version, description, applied_at) "
                "VALUES (?, ?, ?)",
                (migration.version, migration.description, datetime.now(UTC).isoformat()),
            )
            self.connection.commit()
        except sqlite3.Error as e:
            self.connection.rollback()
            raise RuntimeError(f"Migration {migration.version} failed: {e}") from e

        logger.info("Applied migration %s: %s", migration.version, migration.description)
