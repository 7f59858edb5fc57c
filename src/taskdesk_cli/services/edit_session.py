"""Edit sessions: stage changes to one task, then commit or discard.

A session loads a task once, keeps the loaded value as ``original`` and works
on a ``staged`` copy. Staging never touches storage. ``commit`` pushes the
staged copy with a single ``TaskRepository.update``; if that fails the
session falls back to ``original``. ``discard`` drops the staged copy
without any storage call.
"""

from __future__ import annotations

import logging
from datetime import date
from enum import StrEnum
from typing import Any

from taskdesk_cli.models import Invalid, NotFound, Ok, StorageFault, Task
from taskdesk_cli.repositories import TaskRepository
from taskdesk_cli.utils.dates import parse_deadline

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("title", "deadline", "completed")


class SessionState(StrEnum):
    """Lifecycle of an edit session."""

    OPEN = "open"
    COMMITTED = "committed"
    DISCARDED = "discarded"
    FAILED = "failed"


class EditSession:
    """Staged edit of a single task."""

    def __init__(self, original: Task):
        self.target_id = original.id
        self.original = original.model_copy(deep=True)
        self.staged = original.model_copy(deep=True)
        self.state = SessionState.OPEN

    @classmethod
    def open(
        cls, task_id: int, repository: TaskRepository
    ) -> Ok[EditSession] | NotFound | StorageFault:
        """Load ``task_id`` and start a session on it."""
        outcome = repository.get(task_id)
        if not isinstance(outcome, Ok):
            return outcome
        logger.debug("Edit session opened id=%s", task_id)
        return Ok(cls(outcome.value))

    @property
    def is_open(self) -> bool:
        return self.state is SessionState.OPEN

    @property
    def current(self) -> Task:
        """The value the caller should treat as the task's state."""
        if self.state in (SessionState.OPEN, SessionState.COMMITTED):
            return self.staged
        return self.original

    def stage_title(self, text: str) -> Ok[Task] | Invalid:
        if not self.is_open:
            return self._closed()
        title = (text or "").strip()
        if not title:
            return Invalid("Title cannot be empty")
        return self._stage(title=title)

    def stage_deadline(self, value: date | str) -> Ok[Task] | Invalid:
        """Stage a new deadline given as a date or ``YYYY-MM-DD`` text."""
        if not self.is_open:
            return self._closed()
        parsed = parse_deadline(value)
        if not isinstance(parsed, Ok):
            return parsed
        return self._stage(deadline=parsed.value)

    def stage_completed(self, completed: bool) -> Ok[Task] | Invalid:
        if not self.is_open:
            return self._closed()
        return self._stage(completed=bool(completed))

    def changes(self) -> dict[str, tuple[Any, Any]]:
        """Fields whose staged value differs from the original, as (old, new)."""
        diff = {}
        for field in _EDITABLE_FIELDS:
            old = getattr(self.original, field)
            new = getattr(self.staged, field)
            if old != new:
                diff[field] = (old, new)
        return diff

    @property
    def has_changes(self) -> bool:
        return bool(self.changes())

    def commit(
        self, repository: TaskRepository
    ) -> Ok[Task] | NotFound | Invalid | StorageFault:
        """Write the staged task with one update call.

        On success the stored value becomes ``current``. On failure the
        staged copy is replaced by ``original`` and the failure is returned;
        nothing is written back, so a task deleted meanwhile stays deleted.
        """
        if not self.is_open:
            return self._closed()

        outcome = repository.update(self.staged)
        if isinstance(outcome, Ok):
            self.staged = outcome.value
            self.state = SessionState.COMMITTED
            logger.info("Edit session committed id=%s", self.target_id)
            return outcome

        self.staged = self.original.model_copy(deep=True)
        self.state = SessionState.FAILED
        logger.warning(
            "Edit session rolled back id=%s reason=%s", self.target_id, outcome.message
        )
        return outcome

    def discard(self) -> Task:
        """Drop staged changes and return the original task."""
        if self.is_open:
            self.staged = self.original.model_copy(deep=True)
            self.state = SessionState.DISCARDED
            logger.info("Edit session discarded id=%s", self.target_id)
        return self.original

    def _stage(self, **updates: Any) -> Ok[Task]:
        self.staged = self.staged.model_copy(update=updates)
        return Ok(self.staged)

    def _closed(self) -> Invalid:
        return Invalid(f"Edit session for task {self.target_id} is {self.state.value}")
