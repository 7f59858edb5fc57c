"""Repository abstraction layer for TaskDesk CLI.

This module defines the abstract base class (interface) for task storage,
following the Ports & Adapters pattern. Business logic depends on this
contract, not on SQLite.

Every method returns an outcome value (see ``taskdesk_cli.models.outcome``)
instead of raising for missing records, bad input or storage failures.
Mutating methods are durable by the time they return ``Ok``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from taskdesk_cli.models import (
    Invalid,
    NotFound,
    Ok,
    StorageFault,
    Task,
    TaskCreate,
)


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    def add(self, task_data: TaskCreate) -> Ok[Task] | Invalid | StorageFault:
        """Create a new task.

        Args:
            task_data: TaskCreate object with title and deadline

        Returns:
            Ok with the stored Task (fresh id, ``completed=False``),
            Invalid for an empty title, or StorageFault
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    def list_all(self) -> Ok[list[Task]] | StorageFault:
        """Return every stored task in insertion order.

        An empty store yields ``Ok([])``.
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def get(self, task_id: int) -> Ok[Task] | NotFound | StorageFault:
        """Get a specific task by ID."""
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    def update(self, task: Task) -> Ok[Task] | NotFound | Invalid | StorageFault:
        """Replace title, deadline and completion of ``task.id`` atomically.

        Returns:
            Ok with the stored Task, NotFound if the id does not exist,
            Invalid for an empty title, or StorageFault
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def delete(self, task_id: int) -> Ok[int] | NotFound | StorageFault:
        """Delete a task; afterwards ``get(task_id)`` returns NotFound."""
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    def count(self) -> Ok[int] | StorageFault:
        """Number of stored tasks."""
        raise NotImplementedError("TaskRepository.count() must be implemented by adapter")
