"""Presentation policy: ordering and overdue status derived from task records.

Every function here is pure. Inputs are never mutated and nothing touches
storage, so the same snapshot can be rendered any number of times.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from taskdesk_cli.models import Task
from taskdesk_cli.utils.dates import as_date

STATUS_DONE = "done"
STATUS_OVERDUE = "overdue"
STATUS_OPEN = "in progress"


def sort_for_display(tasks: Iterable[Task]) -> list[Task]:
    """Return a new list with incomplete tasks first, then by deadline.

    ``sorted`` is stable, so tasks with equal keys keep their input order.
    """
    return sorted(tasks, key=lambda t: (t.completed, t.deadline))


def is_overdue(task: Task, now: date | datetime | None = None) -> bool:
    """True iff the task is incomplete and its deadline is before ``now``."""
    return not task.completed and task.deadline < as_date(now)


def overdue_days(task: Task, now: date | datetime | None = None) -> int:
    """Whole days elapsed since the deadline; 0 when the task is not overdue."""
    today = as_date(now)
    if not is_overdue(task, today):
        return 0
    return (today - task.deadline).days


def warn_past_deadline(deadline: date, today: date | datetime | None = None) -> bool:
    """Advisory check used before accepting a past-dated deadline."""
    return deadline < as_date(today)


def status_label(task: Task, now: date | datetime | None = None) -> str:
    if task.completed:
        return STATUS_DONE
    if is_overdue(task, now):
        return STATUS_OVERDUE
    return STATUS_OPEN
