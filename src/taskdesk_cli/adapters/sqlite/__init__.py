"""SQLite adapter module - Local database storage implementation."""

from taskdesk_cli.adapters.sqlite.connection import DatabaseConnection
from taskdesk_cli.adapters.sqlite.task_repository import SqliteTaskRepository

__all__ = [
    "DatabaseConnection",
    "SqliteTaskRepository",
]
