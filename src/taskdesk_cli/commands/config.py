"""Configuration management commands."""

from __future__ import annotations

import typer

from taskdesk_cli.services.config_service import get_config_service, parse_config_value
from taskdesk_cli.utils import exit_codes
from taskdesk_cli.utils.ui.console import get_console
from taskdesk_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _unknown_key(key: str) -> AppError:
    return AppError(
        f"Configuration key '{key}' not found", exit_code=exit_codes.ERROR_INVALID_ARGS
    )


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show the current configuration and the resolved database path."""
    config_service = get_config_service()
    data = config_service.config.model_dump()
    data["resolved_db_path"] = str(config_service.resolve_db_path())
    format_output(data, output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., ui.date_format)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise _unknown_key(key) from e
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.db_path)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        stored = get_config_service().set(key, parse_config_value(value))
    except KeyError as e:
        raise _unknown_key(key) from e
    except ValueError as e:
        raise AppError(str(e), exit_code=exit_codes.ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{stored}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration (or one key) to defaults."""
    target = key or "all settings"
    if not yes and not typer.confirm(f"Reset {target} to defaults?"):
        format_info("Cancelled")
        raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise _unknown_key(key) from e
    format_success(f"Reset {target} to defaults")
