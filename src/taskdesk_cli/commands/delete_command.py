"""Command 'delete' of taskdesk - delete a task."""

from __future__ import annotations

import typer

from taskdesk_cli.services.context_manager import open_task_service
from taskdesk_cli.services.task_service import TaskService
from taskdesk_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper, expect

app = typer.Typer()


def delete_task(task_service: TaskService, task_id: int, *, confirm: bool) -> bool:
    """Delete a task after an optional confirmation. Returns True if deleted."""
    task = expect(task_service.get_task(task_id))

    if confirm and not typer.confirm(f"Delete task '{task.title}'?"):
        format_info("Cancelled")
        return False

    expect(task_service.delete_task(task_id))
    format_success(f"Task deleted: #{task_id}")
    return True


@app.command("delete")
@command_wrapper
def delete_command(
    task_id: int = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    db: str | None = typer.Option(None, "--db", help="Path to the task database"),
) -> None:
    """Delete a task."""
    with open_task_service(db) as task_service:
        delete_task(task_service, task_id, confirm=not yes)
