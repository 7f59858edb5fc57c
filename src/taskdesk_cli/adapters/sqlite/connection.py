"""Database connection management for the local SQLite task file.

``DatabaseConnection`` owns the single connection a process uses. It is
constructed explicitly, opened once and closed once; use it as a context
manager so the handle is released on every exit path.
"""

from __future__ import annotations

import logging
import os
import sqlite3
import time
from pathlib import Path
from types import TracebackType

from taskdesk_cli.adapters.sqlite.migrations import ALL_MIGRATIONS, MigrationRunner

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Connection owner for the task database.

    Provides:
    - WAL mode
    - Automatic directory creation
    - Owner-only permissions on newly created files
    - Schema migrations on open
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self._connection: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> sqlite3.Connection:
        """The open connection.

        Raises:
            RuntimeError: If ``open()`` has not been called
        """
        if self._connection is None:
            raise RuntimeError(f"Database {self.db_path} is not open")
        return self._connection

    def open(self) -> sqlite3.Connection:
        """Open the database, creating and migrating it if needed."""
        if self._connection is not None:
            return self._connection

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not self.db_path.exists()

        connection = sqlite3.connect(str(self.db_path), timeout=30.0)
        try:
            connection.row_factory = sqlite3.Row
            connection.execute("PRAGMA journal_mode = WAL")

            if is_new_database:
                os.chmod(self.db_path, 0o600)

            applied = MigrationRunner(connection).run_migrations(ALL_MIGRATIONS)
        except Exception:
            connection.close()
            raise

        self._connection = connection
        logger.info(
            "Database opened path=%s new=%s migrations_applied=%s",
            self.db_path,
            is_new_database,
            applied,
        )
        return connection

    def close(self) -> None:
        """Close the connection; safe to call more than once."""
        if self._connection is None:
            return
        try:
            self._connection.close()
        finally:
            self._connection = None
            logger.info("Database closed path=%s", self.db_path)

    def __enter__(self) -> sqlite3.Connection:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def execute_with_retry(
    connection: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
    max_retries: int = 3,
) -> sqlite3.Cursor:
    """Execute SQL with retry logic for database locked errors.

    Raises:
        sqlite3.OperationalError: If database remains locked after retries
    """
    for attempt in range(max_retries):
        try:
            if params:
                return connection.execute(sql, params)
            return connection.execute(sql)
        except sqlite3.OperationalError as e:
            if "database is locked" in str(e) and attempt < max_retries - 1:
                # Exponential backoff: 0.1s, 0.2s, 0.4s
                time.sleep(0.1 * (2**attempt))
                continue
            raise

    raise sqlite3.OperationalError("Max retries exceeded")
