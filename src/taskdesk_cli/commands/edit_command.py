"""Command 'edit' of taskdesk - edit a task interactively or via flags."""

from __future__ import annotations

import typer

from taskdesk_cli.models import Ok, Task
from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.services.context_manager import open_task_service
from taskdesk_cli.services.edit_session import EditSession
from taskdesk_cli.services.task_service import TaskService
from taskdesk_cli.utils.ui.console import get_console
from taskdesk_cli.utils.ui.formatters import (
    format_changes,
    format_error,
    format_info,
    format_success,
    format_task,
)

from .decorators import command_wrapper, expect

app = typer.Typer()
console = get_console()

_YES = ("y", "yes")
_NO = ("n", "no")


def _prompt_field(label: str, current: str) -> str | None:
    """Prompt for a field value; return None to keep current."""
    value = typer.prompt(
        f"  {label} [{current}]",
        default="",
        show_default=False,
    )
    return value if value.strip() != "" else None


def stage_interactively(session: EditSession, date_format: str = "%Y-%m-%d") -> None:
    """Prompt for each field and stage what the user typed.

    Invalid input for one field is reported and that field keeps its value.
    """
    task = session.original
    console.print(f"\n[bold cyan]Editing:[/bold cyan] {task.title}")
    console.print("[dim](Press Enter to keep current value, type a value to change)[/dim]\n")
    format_task(task, date_format=date_format)
    console.print()

    raw_title = _prompt_field("Title", task.title)
    if raw_title is not None:
        staged = session.stage_title(raw_title)
        if not isinstance(staged, Ok):
            format_error(f"{staged.message}. Keeping current value.")

    raw_deadline = _prompt_field("Deadline (YYYY-MM-DD)", task.deadline.isoformat())
    if raw_deadline is not None:
        staged = session.stage_deadline(raw_deadline)
        if not isinstance(staged, Ok):
            format_error(f"{staged.message}. Keeping current value.")

    raw_done = _prompt_field("Done? (y/n)", "y" if task.completed else "n")
    if raw_done is not None:
        answer = raw_done.strip().lower()
        if answer in _YES:
            session.stage_completed(True)
        elif answer in _NO:
            session.stage_completed(False)
        else:
            format_error(f"Invalid answer '{raw_done}'. Keeping current value.")


def apply_session(
    task_service: TaskService, session: EditSession, *, confirm: bool
) -> Task | None:
    """Show the staged diff, optionally confirm, then commit or discard.

    Returns:
        The stored task after a successful commit, or None if nothing was
        written
    """
    changes = session.changes()
    if not changes:
        session.discard()
        console.print("[yellow]No changes made.[/yellow]")
        return None

    format_changes(changes)
    if confirm and not typer.confirm("Apply changes?", default=True):
        session.discard()
        format_info("Changes discarded")
        return None

    updated = expect(task_service.commit_edit(session))
    format_success(f"Updated: {updated.title}")
    return updated


@app.command("edit")
@command_wrapper
def edit_command(
    task_id: int = typer.Argument(..., help="Task ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    deadline: str | None = typer.Option(None, "--deadline", "-d", help="New deadline (YYYY-MM-DD)"),
    done: bool | None = typer.Option(None, "--done/--not-done", help="Set completion"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Apply without confirmation"),
    db: str | None = typer.Option(None, "--db", help="Path to the task database"),
) -> None:
    """Edit a task interactively or via flags.

    If no flags are given, prompts for each field in turn (press Enter to
    keep), shows the changes and asks before saving.

    Examples:
      taskdesk edit 3 --title "Buy bread" --done
      taskdesk edit 3 --deadline 2026-12-01
      taskdesk edit 3          # interactive
    """
    config = get_config_service().config
    flag_mode = any(x is not None for x in [title, deadline, done])

    with open_task_service(db) as task_service:
        session = expect(task_service.open_edit(task_id))

        if flag_mode:
            staged_outcomes = []
            if title is not None:
                staged_outcomes.append(session.stage_title(title))
            if deadline is not None:
                staged_outcomes.append(session.stage_deadline(deadline))
            if done is not None:
                staged_outcomes.append(session.stage_completed(done))
            for outcome in staged_outcomes:
                if not isinstance(outcome, Ok):
                    session.discard()
                    expect(outcome)
            confirm = False
        else:
            stage_interactively(session, config.ui.date_format)
            confirm = not yes and config.ui.confirm_changes

        apply_session(task_service, session, confirm=confirm)
