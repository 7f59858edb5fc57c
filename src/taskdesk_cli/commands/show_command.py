"""Command 'show' of taskdesk - show one task."""

from __future__ import annotations

import typer

from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.services.context_manager import open_task_service
from taskdesk_cli.utils.ui.formatters import format_task

from .decorators import command_wrapper, expect
from .list_command import resolve_output

app = typer.Typer()


@app.command("show")
@command_wrapper
def show_command(
    task_id: int = typer.Argument(..., help="Task ID"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
    db: str | None = typer.Option(None, "--db", help="Path to the task database"),
) -> None:
    """Show a task."""
    fmt = resolve_output(output)
    date_format = get_config_service().config.ui.date_format

    with open_task_service(db) as task_service:
        task = expect(task_service.get_task(task_id))

    format_task(task, fmt, date_format=date_format)
