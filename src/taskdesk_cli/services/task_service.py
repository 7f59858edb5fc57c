"""Task service - Business logic for task operations.

This service layer sits between commands and the repository. It parses raw
command input at the boundary and returns outcome values; it never prints.
"""

from __future__ import annotations

from datetime import date

from taskdesk_cli.models import (
    Invalid,
    NotFound,
    Ok,
    StorageFault,
    Task,
    TaskCreate,
)
from taskdesk_cli.repositories import TaskRepository
from taskdesk_cli.services.edit_session import EditSession
from taskdesk_cli.utils.dates import parse_deadline

TASK_STATUSES = ("all", "active", "completed")


class TaskService:
    """Service for task business logic."""

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    def list_tasks(self, *, status: str = "all") -> Ok[list[Task]] | Invalid | StorageFault:
        """List tasks, optionally only active or only completed ones.

        Args:
            status: "all", "active" or "completed"
        """
        if status not in TASK_STATUSES:
            return Invalid(
                f"Unknown status '{status}'. Choose from: {', '.join(TASK_STATUSES)}"
            )
        outcome = self.repository.list_all()
        if not isinstance(outcome, Ok) or status == "all":
            return outcome
        want_completed = status == "completed"
        return Ok([t for t in outcome.value if t.completed == want_completed])

    def get_task(self, task_id: int) -> Ok[Task] | NotFound | StorageFault:
        return self.repository.get(task_id)

    def add_task(
        self, title: str, deadline: str | date
    ) -> Ok[Task] | Invalid | StorageFault:
        """Create a new task from raw input.

        Args:
            title: Task title (required, non-blank)
            deadline: ``YYYY-MM-DD`` text or a date
        """
        if not title or not title.strip():
            return Invalid("Title cannot be empty")
        parsed = parse_deadline(deadline)
        if not isinstance(parsed, Ok):
            return parsed
        return self.repository.add(TaskCreate(title=title.strip(), deadline=parsed.value))

    def delete_task(self, task_id: int) -> Ok[int] | NotFound | StorageFault:
        return self.repository.delete(task_id)

    def open_edit(self, task_id: int) -> Ok[EditSession] | NotFound | StorageFault:
        """Start an edit session on a task."""
        return EditSession.open(task_id, self.repository)

    def set_completed(
        self, task_id: int, completed: bool
    ) -> Ok[Task] | NotFound | Invalid | StorageFault:
        """Mark a task done or not done through a one-field edit session."""
        opened = self.open_edit(task_id)
        if not isinstance(opened, Ok):
            return opened
        session = opened.value
        session.stage_completed(completed)
        if not session.has_changes:
            session.discard()
            return Ok(session.original)
        return self.commit_edit(session)

    def commit_edit(
        self, session: EditSession
    ) -> Ok[Task] | NotFound | Invalid | StorageFault:
        """Commit a session opened by ``open_edit`` against this repository."""
        return session.commit(self.repository)

    def count_tasks(self) -> Ok[int] | StorageFault:
        return self.repository.count()
