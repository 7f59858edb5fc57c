"""Command 'menu' of taskdesk - numbered interactive menu.

The database is opened once when the menu starts and closed when it exits.
A failed action prints its error and returns to the menu.
"""

from __future__ import annotations

import typer

from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.services.context_manager import open_task_service
from taskdesk_cli.services.task_service import TaskService
from taskdesk_cli.utils.ui.console import get_console
from taskdesk_cli.utils.ui.formatters import format_error, format_tasks

from .add_command import create_task
from .decorators import AppError, command_wrapper, expect
from .delete_command import delete_task
from .edit_command import apply_session, stage_interactively

app = typer.Typer()
console = get_console()

MENU = """
[bold]1.[/bold] Add task
[bold]2.[/bold] List tasks
[bold]3.[/bold] Update task
[bold]4.[/bold] Delete task
[bold]5.[/bold] Exit
"""


def _show_tasks(task_service: TaskService, date_format: str) -> bool:
    """Print the task list; returns False when there is nothing to show."""
    if expect(task_service.count_tasks()) == 0:
        console.print("[yellow]No tasks yet.[/yellow]")
        return False
    format_tasks(expect(task_service.list_tasks()), "table", date_format=date_format)
    return True


def _prompt_task_id(action: str) -> int | None:
    raw = typer.prompt(f"Task ID to {action}")
    try:
        return int(raw)
    except ValueError:
        format_error(f"Invalid ID '{raw}'")
        return None


def _add(task_service: TaskService) -> None:
    config = get_config_service().config
    title = typer.prompt("Title")
    deadline = typer.prompt("Deadline (YYYY-MM-DD)")
    create_task(task_service, title, deadline, confirm_past=config.ui.warn_past_deadline)


def _update(task_service: TaskService) -> None:
    config = get_config_service().config
    if not _show_tasks(task_service, config.ui.date_format):
        return
    task_id = _prompt_task_id("edit")
    if task_id is None:
        return
    session = expect(task_service.open_edit(task_id))
    stage_interactively(session, config.ui.date_format)
    apply_session(task_service, session, confirm=config.ui.confirm_changes)


def _delete(task_service: TaskService) -> None:
    if not _show_tasks(task_service, get_config_service().config.ui.date_format):
        return
    task_id = _prompt_task_id("delete")
    if task_id is None:
        return
    delete_task(task_service, task_id, confirm=True)


@app.command("menu")
@command_wrapper
def menu_command(
    db: str | None = typer.Option(None, "--db", help="Path to the task database"),
) -> None:
    """Run the interactive menu."""
    date_format = get_config_service().config.ui.date_format
    actions = {
        "1": _add,
        "2": lambda service: _show_tasks(service, date_format),
        "3": _update,
        "4": _delete,
    }

    with open_task_service(db) as task_service:
        while True:
            console.print(MENU)
            try:
                choice = typer.prompt("Choose an option").strip()
            except typer.Abort:
                console.print()
                break

            if choice == "5":
                break
            action = actions.get(choice)
            if action is None:
                format_error(f"Unknown option '{choice}'")
                continue

            try:
                action(task_service)
            except AppError as e:
                format_error(str(e))
            except typer.Abort:
                console.print("\n[yellow]Cancelled.[/yellow]")
