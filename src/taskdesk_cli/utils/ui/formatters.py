"""Output formatters for different formats."""

import json
from datetime import date
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from taskdesk_cli.models import Task
from taskdesk_cli.services.presentation import (
    STATUS_DONE,
    STATUS_OPEN,
    STATUS_OVERDUE,
    is_overdue,
    overdue_days,
    sort_for_display,
    status_label,
)
from taskdesk_cli.utils.ui.console import get_console

console = get_console()

STATUS_ICONS = {
    STATUS_DONE: "✓",
    STATUS_OVERDUE: "⏱",
    STATUS_OPEN: "○",
}

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")


def task_to_dict(task: Task, today: date | None = None) -> dict[str, Any]:
    """Serialise a task with its derived status for machine output."""
    data = task.model_dump(mode="json")
    data["status"] = status_label(task, today)
    data["overdue_days"] = overdue_days(task, today)
    return data


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display plain data (dicts, lists) based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_tasks(
    tasks: list[Task],
    output_format: str = "pretty",
    today: date | None = None,
    date_format: str = "%Y-%m-%d",
) -> None:
    """Render a task snapshot, sorted for display."""
    ordered = sort_for_display(tasks)
    if output_format in ("json", "yaml"):
        format_output([task_to_dict(t, today) for t in ordered], output_format)
    elif output_format == "table":
        format_tasks_table(ordered, today, date_format)
    else:
        format_tasks_pretty(ordered, today, date_format)


def format_task(
    task: Task,
    output_format: str = "pretty",
    today: date | None = None,
    date_format: str = "%Y-%m-%d",
) -> None:
    """Render a single task."""
    if output_format in ("json", "yaml"):
        format_output(task_to_dict(task, today), output_format)
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("ID", str(task.id))
    table.add_row("Title", task.title)
    table.add_row("Deadline", task.deadline.strftime(date_format))
    table.add_row("Status", _status_text(task, today))
    console.print(table)


def format_tasks_table(
    tasks: list[Task], today: date | None = None, date_format: str = "%Y-%m-%d"
) -> None:
    """Format tasks as a table."""
    if not tasks:
        console.print("[yellow]No tasks to display[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Deadline")
    table.add_column("Status")

    for task in tasks:
        table.add_row(
            str(task.id),
            task.title,
            task.deadline.strftime(date_format),
            _status_text(task, today),
        )

    console.print(table)


def format_tasks_pretty(
    tasks: list[Task], today: date | None = None, date_format: str = "%Y-%m-%d"
) -> None:
    """Format tasks in pretty format."""
    if not tasks:
        console.print("[yellow]No tasks to display[/yellow]")
        return

    active = [t for t in tasks if not t.completed]
    overdue = [t for t in active if is_overdue(t, today)]

    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(active)} active", style="dim")
    if overdue:
        header.append(f", {len(overdue)} overdue", style="dim red")
    header.append(")", style="dim")
    console.print(header)
    console.print()

    for task in tasks:
        format_task_item(task, today, date_format, indent="  ")
    console.print()


def format_task_item(
    task: Task,
    today: date | None = None,
    date_format: str = "%Y-%m-%d",
    indent: str = "",
) -> None:
    """Format a single task line."""
    status = status_label(task, today)
    icon = STATUS_ICONS[status]
    title = Text(task.title, style="dim" if task.completed else "")

    line = Text(f"{indent}{icon} ")
    line.append(f"#{task.id} ", style="dim")
    line.append_text(title)

    due = task.deadline.strftime(date_format)
    if status == STATUS_OVERDUE:
        line.append(
            f" • {due} ({overdue_days(task, today)}d overdue)", style="bold red"
        )
    else:
        line.append(f" • {due}", style="cyan")

    console.print(line)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted_key = key.replace("_", " ").title()
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(formatted_key, formatted_value)

    console.print(table)


def format_changes(changes: dict[str, tuple[Any, Any]]) -> None:
    """Show staged field changes as old -> new."""
    table = Table(show_header=True, header_style="bold magenta", box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Current")
    table.add_column("New", style="bold")
    for field, (old, new) in changes.items():
        table.add_row(field.title(), _display_value(old), _display_value(new))
    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def _status_text(task: Task, today: date | None) -> str:
    status = status_label(task, today)
    if status == STATUS_DONE:
        return "[green]done[/green]"
    if status == STATUS_OVERDUE:
        return f"[bold red]overdue {overdue_days(task, today)}d[/bold red]"
    return "in progress"


def _display_value(value: Any) -> str:
    if isinstance(value, bool):
        return "done" if value else "in progress"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
