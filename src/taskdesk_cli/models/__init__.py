"""TaskDesk CLI domain models.

This package contains the Pydantic models for task records and
configuration, and the tagged outcome values returned by the core.
"""

from .config_models import AppConfig
from .outcome import Failure, Invalid, NotFound, Ok, Outcome, StorageFault
from .task import Task, TaskCreate

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    # Outcomes
    "Ok",
    "NotFound",
    "Invalid",
    "StorageFault",
    "Failure",
    "Outcome",
    # Config models
    "AppConfig",
]
