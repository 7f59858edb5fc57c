"""Decorators and helpers shared by command functions."""

import functools
import sqlite3
import time
import traceback
from collections.abc import Callable
from typing import TypeVar

import typer

from taskdesk_cli.models import Ok
from taskdesk_cli.models.outcome import Failure
from taskdesk_cli.utils import exit_codes
from taskdesk_cli.utils.logger import get_logger
from taskdesk_cli.utils.ui.formatters import format_error

T = TypeVar("T")


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def expect(outcome: Ok[T] | Failure) -> T:
    """Return the value of an ``Ok`` or raise AppError for a failure."""
    if isinstance(outcome, Ok):
        return outcome.value
    raise AppError(outcome.message, exit_code=outcome.exit_code)


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with logging and uniform error reporting."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except (typer.Exit, typer.Abort):
            raise

        except (sqlite3.Error, OSError) as e:
            # Opening or creating the database file failed.
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"Storage error: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_STORAGE) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
