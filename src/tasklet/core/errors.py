# src/tasklet/core/errors.py

"""
Typed failures produced while interpreting a command.

Every failure is local and recoverable: the interpreter returns it to the
caller as a value, and the connector turns it into a single line of text.
Each class carries just enough data to rebuild its message, so tests and
callers can match on fields instead of parsing strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class FailureCategory:
    """Prefixes used by the connector when it renders a failure."""

    EMPTY_DESCRIPTION = "Empty description error"
    FORMAT = "Format error"
    TASK_NUMBER = "Invalid task number"
    COMMAND = "Invalid command"
    GENERIC = "Oops!"


@dataclass(frozen=True, slots=True)
class CommandFailure(Exception):
    """Base class of every user-facing failure."""

    category: ClassVar[str] = FailureCategory.GENERIC

    @property
    def message(self) -> str:
        return "Something went wrong."

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class EmptyDescription(CommandFailure):
    """The description (or search keyword) of `kind` is blank after trimming."""

    kind: str

    category: ClassVar[str] = FailureCategory.EMPTY_DESCRIPTION

    @property
    def message(self) -> str:
        return f"The description of a {self.kind} cannot be empty."


@dataclass(frozen=True, slots=True)
class InvalidFormat(CommandFailure):
    """A required delimiter is missing or a required piece is empty."""

    usage: str

    category: ClassVar[str] = FailureCategory.FORMAT

    @property
    def message(self) -> str:
        return f"Please use the format: {self.usage}"


@dataclass(frozen=True, slots=True)
class InvalidDateFormat(CommandFailure):
    raw: str
    expected: str = "yyyy-MM-dd"

    category: ClassVar[str] = FailureCategory.FORMAT

    @property
    def message(self) -> str:
        return f"Invalid date/time '{self.raw}'. Expected {self.expected}."


@dataclass(frozen=True, slots=True)
class InvalidEventOrder(CommandFailure):
    category: ClassVar[str] = FailureCategory.FORMAT

    @property
    def message(self) -> str:
        return "Event end time cannot be before start time."


@dataclass(frozen=True, slots=True)
class MissingArgument(CommandFailure):
    usage: str

    category: ClassVar[str] = FailureCategory.FORMAT

    @property
    def message(self) -> str:
        return f"Please use the format: {self.usage}"


@dataclass(frozen=True, slots=True)
class NotANumber(CommandFailure):
    usage: str

    category: ClassVar[str] = FailureCategory.FORMAT

    @property
    def message(self) -> str:
        return f"Please use the format: {self.usage} (must be a number)"


@dataclass(frozen=True, slots=True)
class IndexOutOfRange(CommandFailure):
    """Position outside [1, size]; `size` is the list size at the time of the call."""

    size: int

    category: ClassVar[str] = FailureCategory.TASK_NUMBER

    @property
    def message(self) -> str:
        if self.size == 0:
            return "Your list is empty, there is no task to pick."
        return f"Please enter a valid task number between 1 and {self.size}"


@dataclass(frozen=True, slots=True)
class UnknownCommand(CommandFailure):
    command: str

    category: ClassVar[str] = FailureCategory.COMMAND

    @property
    def message(self) -> str:
        return "Sorry, I don't know what that means. Type 'help' for commands."


@dataclass(frozen=True, slots=True)
class DuplicateTask(CommandFailure):
    @property
    def message(self) -> str:
        return "You already have this task in your task list!"


class StorageError(Exception):
    """Raised by the task store when the data file cannot be read or written."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
