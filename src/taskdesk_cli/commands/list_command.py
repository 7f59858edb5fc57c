"""Command 'list' of taskdesk - list tasks sorted for display."""

from __future__ import annotations

import typer

from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.services.context_manager import open_task_service
from taskdesk_cli.utils import exit_codes
from taskdesk_cli.utils.ui.formatters import OUTPUT_FORMATS, format_tasks

from .decorators import AppError, command_wrapper, expect

app = typer.Typer()


def resolve_output(output: str | None) -> str:
    """Pick the requested output format, falling back to the configured one."""
    fmt = output or get_config_service().config.output.format
    if fmt not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{fmt}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            exit_code=exit_codes.ERROR_INVALID_ARGS,
        )
    return fmt


@app.command("list")
@command_wrapper
def list_command(
    status: str = typer.Option("all", "--status", "-s", help="all, active or completed"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON (alias for --output json)"),
    db: str | None = typer.Option(None, "--db", help="Path to the task database"),
) -> None:
    """List tasks: unfinished first, then by deadline. Overdue tasks are flagged."""
    fmt = "json" if json_opt else resolve_output(output)
    date_format = get_config_service().config.ui.date_format

    with open_task_service(db) as task_service:
        tasks = expect(task_service.list_tasks(status=status))

    format_tasks(tasks, fmt, date_format=date_format)
