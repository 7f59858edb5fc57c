"""Task data models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """Task model representing one persisted task record.

    Instances are frozen; a changed copy comes from ``model_copy(update=...)``
    and reaches storage only through ``TaskRepository.update``.

    Attributes:
        id: Identifier assigned by the store, never reused
        title: Non-empty task title
        deadline: Calendar date the task is due
        completed: Whether the task is done
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str = Field(min_length=1)
    deadline: date
    completed: bool = False


class TaskCreate(BaseModel):
    """Model for creating a new task.

    The title is checked by the repository, which answers ``Invalid`` for an
    empty or whitespace-only value instead of raising.

    Attributes:
        title: Task title
        deadline: Due date
    """

    title: str
    deadline: date
