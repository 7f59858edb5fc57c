"""Command 'reopen' of taskdesk - mark a completed task as not done."""

from __future__ import annotations

import typer

from taskdesk_cli.services.context_manager import open_task_service
from taskdesk_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper, expect

app = typer.Typer()


@app.command("reopen")
@command_wrapper
def reopen_command(
    task_id: int = typer.Argument(..., help="Task ID"),
    db: str | None = typer.Option(None, "--db", help="Path to the task database"),
) -> None:
    """Reopen a completed task."""
    with open_task_service(db) as task_service:
        task = expect(task_service.set_completed(task_id, False))
    format_success(f"Reopened: {task.title}")
