"""Tagged outcome values returned by fallible core operations.

Store, session and parsing calls never raise for expected failures. They
return ``Ok`` or one of the failure variants, and the caller decides how to
render it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

from taskdesk_cli.utils import exit_codes

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class NotFound:
    """The referenced task id does not exist."""

    task_id: int

    ok: ClassVar[bool] = False
    exit_code: ClassVar[int] = exit_codes.ERROR_NOT_FOUND

    @property
    def message(self) -> str:
        return f"Task not found: {self.task_id}"


@dataclass(frozen=True, slots=True)
class Invalid:
    """Input was rejected before reaching storage."""

    message: str

    ok: ClassVar[bool] = False
    exit_code: ClassVar[int] = exit_codes.ERROR_INVALID_ARGS


@dataclass(frozen=True, slots=True)
class StorageFault:
    """The underlying database read or write failed."""

    message: str

    ok: ClassVar[bool] = False
    exit_code: ClassVar[int] = exit_codes.ERROR_STORAGE


Failure = Union[NotFound, Invalid, StorageFault]
Outcome = Union[Ok[T], NotFound, Invalid, StorageFault]
