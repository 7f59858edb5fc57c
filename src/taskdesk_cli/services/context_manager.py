"""Storage bootstrap for commands.

Usage Pattern:
    from taskdesk_cli.services.context_manager import open_task_service

    with open_task_service(db) as task_service:
        outcome = task_service.list_tasks()

The database handle is opened on entry and closed on exit, including when
the body raises ``typer.Exit`` or any other exception.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from taskdesk_cli.adapters.sqlite import DatabaseConnection, SqliteTaskRepository
from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.services.task_service import TaskService


@contextmanager
def open_task_service(db_path: str | Path | None = None) -> Iterator[TaskService]:
    """Open the configured task database and yield a TaskService over it.

    Args:
        db_path: Optional explicit database path (``--db``)
    """
    path = get_config_service().resolve_db_path(db_path)
    with DatabaseConnection(path) as connection:
        yield TaskService(SqliteTaskRepository(connection))
