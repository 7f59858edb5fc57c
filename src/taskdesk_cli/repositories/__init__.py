"""Repository interfaces for the TaskDesk CLI.

Implementations (Adapters) are in ``taskdesk_cli.adapters.sqlite``.
"""

from .repository import TaskRepository

__all__ = [
    "TaskRepository",
]
