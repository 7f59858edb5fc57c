"""TaskDesk CLI - a local task list with staged edits."""

__version__ = "1.0.0"
