"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import logging
import sqlite3

from taskdesk_cli.adapters.sqlite.connection import execute_with_retry
from taskdesk_cli.adapters.sqlite.utils import parse_date
from taskdesk_cli.models import (
    Invalid,
    NotFound,
    Ok,
    StorageFault,
    Task,
    TaskCreate,
)
from taskdesk_cli.repositories import TaskRepository

logger = logging.getLogger(__name__)


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of task repository.

    The repository does not own the connection; whoever opened it (usually a
    ``DatabaseConnection`` context) closes it.
    """

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection

    def add(self, task_data: TaskCreate) -> Ok[Task] | Invalid | StorageFault:
        """Create a new task."""
        title = task_data.title.strip()
        if not title:
            return Invalid("Title cannot be empty")

        try:
            cursor = execute_with_retry(
                self.connection,
                "INSERT INTO tasks (title, deadline, is_completed) VALUES (?, ?, ?)",
                (title, task_data.deadline.isoformat(), False),
            )
            task_id = cursor.lastrowid
            self.connection.commit()
        except sqlite3.Error as e:
            return self._fault("add", e)

        if task_id is None:
            return StorageFault("SQLite did not return an id for the new task")

        logger.debug("Task added id=%s deadline=%s", task_id, task_data.deadline)
        # The row is committed; report what was written rather than re-reading.
        return Ok(Task(id=task_id, title=title, deadline=task_data.deadline))

    def list_all(self) -> Ok[list[Task]] | StorageFault:
        """List all tasks in insertion order."""
        try:
            rows = self.connection.execute("SELECT * FROM tasks ORDER BY id").fetchall()
            tasks = [self._row_to_task(row) for row in rows]
        except (sqlite3.Error, ValueError) as e:
            return self._fault("list_all", e)
        return Ok(tasks)

    def get(self, task_id: int) -> Ok[Task] | NotFound | StorageFault:
        """Get a specific task by ID."""
        try:
            row = self.connection.execute(
                "SELECT * FROM tasks WHERE id = ?", (task_id,)
            ).fetchone()
            if row is None:
                return NotFound(task_id)
            task = self._row_to_task(row)
        except (sqlite3.Error, ValueError) as e:
            return self._fault("get", e)
        return Ok(task)

    def update(self, task: Task) -> Ok[Task] | NotFound | Invalid | StorageFault:
        """Replace every field of an existing task."""
        title = task.title.strip()
        if not title:
            return Invalid("Title cannot be empty")

        try:
            cursor = execute_with_retry(
                self.connection,
                "UPDATE tasks SET title = ?, deadline = ?, is_completed = ? WHERE id = ?",
                (title, task.deadline.isoformat(), task.completed, task.id),
            )
            if cursor.rowcount == 0:
                self.connection.rollback()
                return NotFound(task.id)
            self.connection.commit()
        except sqlite3.Error as e:
            return self._fault("update", e)

        logger.debug("Task updated id=%s completed=%s", task.id, task.completed)
        return Ok(task.model_copy(update={"title": title}))

    def delete(self, task_id: int) -> Ok[int] | NotFound | StorageFault:
        """Delete a task (hard delete)."""
        try:
            cursor = execute_with_retry(
                self.connection, "DELETE FROM tasks WHERE id = ?", (task_id,)
            )
            if cursor.rowcount == 0:
                self.connection.rollback()
                return NotFound(task_id)
            self.connection.commit()
        except sqlite3.Error as e:
            return self._fault("delete", e)

        logger.debug("Task deleted id=%s", task_id)
        return Ok(task_id)

    def count(self) -> Ok[int] | StorageFault:
        try:
            (n,) = self.connection.execute("SELECT COUNT(*) FROM tasks").fetchone()
        except sqlite3.Error as e:
            return self._fault("count", e)
        return Ok(int(n))

    def _fault(self, operation: str, error: Exception) -> StorageFault:
        """Roll back the pending transaction and report a storage fault.

        Undecodable rows (bad dates, empty titles written by other tools) are
        reported the same way as SQLite errors.
        """
        logger.exception("Storage fault during %s", operation)
        try:
            self.connection.rollback()
        except sqlite3.Error:
            logger.warning("Rollback after failed %s also failed", operation)
        return StorageFault(f"Storage error during {operation}: {error}")

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"]),
            deadline=parse_date(row["deadline"]),
            completed=bool(row["is_completed"]),
        )
