"""Command 'add' of taskdesk - create a task."""

from __future__ import annotations

import typer

from taskdesk_cli.models import Task
from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.services.context_manager import open_task_service
from taskdesk_cli.services.presentation import warn_past_deadline
from taskdesk_cli.services.task_service import TaskService
from taskdesk_cli.utils import exit_codes
from taskdesk_cli.utils.dates import parse_deadline
from taskdesk_cli.utils.ui.formatters import format_info, format_success, format_warning

from .decorators import AppError, command_wrapper, expect

app = typer.Typer()


def create_task(
    task_service: TaskService, title: str, deadline: str, *, confirm_past: bool
) -> Task | None:
    """Validate input, confirm a past deadline if asked to, then create the task.

    Returns:
        The created task, or None when the user declined
    """
    if not title or not title.strip():
        raise AppError("Title cannot be empty", exit_code=exit_codes.ERROR_INVALID_ARGS)
    parsed = expect(parse_deadline(deadline))

    if confirm_past and warn_past_deadline(parsed):
        format_warning(f"Deadline {parsed.isoformat()} is in the past.")
        if not typer.confirm("Create it anyway?", default=False):
            format_info("Cancelled")
            return None

    task = expect(task_service.add_task(title, parsed))
    format_success(f"Task created: #{task.id} {task.title}")
    return task


@app.command("add")
@command_wrapper
def add_command(
    title: str = typer.Argument(..., help="Task title"),
    deadline: str = typer.Option(
        ..., "--deadline", "-d", prompt="Deadline (YYYY-MM-DD)", help="Deadline (YYYY-MM-DD)"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the past-deadline confirmation"),
    db: str | None = typer.Option(None, "--db", help="Path to the task database"),
) -> None:
    """Add a task.

    Examples:
      taskdesk add "Buy milk" --deadline 2026-11-01
      taskdesk add "File taxes" -d 2026-04-15 --yes
    """
    confirm_past = not yes and get_config_service().config.ui.warn_past_deadline
    with open_task_service(db) as task_service:
        create_task(task_service, title, deadline, confirm_past=confirm_past)
