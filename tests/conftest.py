"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, log and data
directories, plus a real SQLite task database in a temp directory.
"""

from __future__ import annotations

import logging
import logging.handlers
import sqlite3
from datetime import date
from unittest.mock import patch

import pytest

from taskdesk_cli.adapters.sqlite import DatabaseConnection, SqliteTaskRepository
from taskdesk_cli.models import Task, TaskCreate


# ---------------------------------------------------------------------------
# Directory isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point config, data and log directories at *tmp_path*.

    Also clears the cached ConfigService and the logger singleton so every
    test starts from defaults.
    """
    import taskdesk_cli.utils.logger as logger_mod
    from taskdesk_cli.services.config_service import get_config_service

    monkeypatch.delenv("TASKDESK_DB", raising=False)
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    logger_mod._logger = None
    with (
        patch("taskdesk_cli.services.config_service.user_config_dir", return_value=str(config_dir)),
        patch("taskdesk_cli.services.config_service.user_data_dir", return_value=str(data_dir)),
        patch("taskdesk_cli.utils.logger.user_log_dir", return_value=str(log_dir)),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    logger_mod._logger = None
    app_logger = logging.getLogger("taskdesk_cli")
    for handler in list(app_logger.handlers):
        if not isinstance(handler, logging.handlers.RotatingFileHandler):
            continue
        handler.close()
        app_logger.removeHandler(handler)


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "tasks.db"


@pytest.fixture
def connection(db_path):
    """An open, migrated connection that is closed after the test."""
    db = DatabaseConnection(db_path)
    conn = db.open()
    yield conn
    db.close()


@pytest.fixture
def repo(connection):
    return SqliteTaskRepository(connection)


@pytest.fixture
def make_task(repo):
    """Create a stored task and return it."""

    def _make(title: str = "Buy milk", deadline: date = date(2099, 1, 1)) -> Task:
        outcome = repo.add(TaskCreate(title=title, deadline=deadline))
        return outcome.value

    return _make


@pytest.fixture
def stored_tasks(db_path):
    """Read back what a command left in the database."""

    def _read() -> list[Task]:
        with DatabaseConnection(db_path) as conn:
            return SqliteTaskRepository(conn).list_all().value

    return _read


@pytest.fixture
def seed(db_path):
    """Insert tasks before invoking a command; returns the stored records."""

    def _seed(*items: tuple[str, date] | tuple[str, date, bool]) -> list[Task]:
        created = []
        with DatabaseConnection(db_path) as conn:
            repo = SqliteTaskRepository(conn)
            for title, deadline, *rest in items:
                task = repo.add(TaskCreate(title=title, deadline=deadline)).value
                if rest and rest[0]:
                    task = repo.update(task.model_copy(update={"completed": True})).value
                created.append(task)
        return created

    return _seed


class _SelectsFailAfterCommit:
    """Real connection whose SELECTs fail once anything has been committed."""

    def __init__(self, connection):
        self._connection = connection
        self.committed = False

    def execute(self, sql, *args):
        if self.committed and sql.lstrip().upper().startswith("SELECT"):
            raise sqlite3.OperationalError("disk I/O error")
        return self._connection.execute(sql, *args)

    def commit(self):
        self._connection.commit()
        self.committed = True

    def rollback(self):
        self._connection.rollback()


@pytest.fixture
def flaky_repo(connection):
    """Repository over the test database whose reads fail after a commit."""
    return SqliteTaskRepository(_SelectsFailAfterCommit(connection))
