# src/tasklet/tasks/task_models.py

"""
Task entities.

Three variants share one capability set: display text, persisted record,
mark/unmark, and equality for duplicate detection.

Key invariants:
- description is non-empty after trimming (it is stored trimmed),
- only `done` is mutable after construction,
- an event never ends before it starts,
- equality is full-field per variant and ignores `done`.

No filesystem access happens here; see task_store.py for the record reader.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Final

from ..core.errors import CommandFailure, EmptyDescription, InvalidDateFormat, InvalidEventOrder

DATE_FORMAT_HINT: Final[str] = "yyyy-MM-dd"
DATETIME_FORMAT_HINT: Final[str] = "ISO date-time, e.g. 2015-02-20T06:30"

_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_DATETIME_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2})?", re.ASCII)

RECORD_SEPARATOR: Final[str] = " | "


class TaskKind(StrEnum):
    """Variant tag; the value is the letter used in persisted records."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def label(self) -> str:
        return f"[{self.value}]"


# ---------------------------------------------------------------------
# Canonical machine formats
# ---------------------------------------------------------------------

def parse_date(text: str) -> date:
    """Parse `YYYY-MM-DD`; anything else raises InvalidDateFormat."""
    raw = text.strip()
    if not _DATE_SHAPE.fullmatch(raw):
        raise InvalidDateFormat(raw=raw, expected=DATE_FORMAT_HINT)
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        raise InvalidDateFormat(raw=raw, expected=DATE_FORMAT_HINT) from e


def parse_datetime(text: str) -> datetime:
    """Parse `YYYY-MM-DDTHH:MM` with optional `:SS`."""
    raw = text.strip()
    if not _DATETIME_SHAPE.fullmatch(raw):
        raise InvalidDateFormat(raw=raw, expected=DATETIME_FORMAT_HINT)
    try:
        return datetime.fromisoformat(raw)
    except ValueError as e:
        raise InvalidDateFormat(raw=raw, expected=DATETIME_FORMAT_HINT) from e


def format_datetime_record(value: datetime) -> str:
    # Seconds are written only when present, so "2015-02-20T06:30" stays as typed.
    timespec = "minutes" if value.second == 0 else "seconds"
    return value.isoformat(timespec=timespec)


def _human_date(value: date) -> str:
    # "Aug 29 2025": abbreviated month, unpadded day, four-digit year.
    return f"{value:%b} {value.day} {value.year:04d}"


def _human_datetime(value: datetime) -> str:
    return f"{_human_date(value)} {value:%H:%M}"


# ---------------------------------------------------------------------
# Task variants
# ---------------------------------------------------------------------

@dataclass(slots=True)
class Task:
    """Shared state of every variant. Not instantiated directly."""

    description: str
    done: bool = field(default=False, compare=False, kw_only=True)

    kind: TaskKind = field(init=False, repr=False, compare=False, default=TaskKind.TODO)

    def __post_init__(self) -> None:
        self.description = _require_description(self.description, self.kind)

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "[X]" if self.done else "[ ]"

    def to_display(self) -> str:
        return f"{self.kind.label}{self.status_icon} {self.description}{self._display_suffix()}"

    def to_record(self) -> str:
        fields = [self.kind.value, "1" if self.done else "0", self.description]
        fields.extend(self._record_fields())
        return RECORD_SEPARATOR.join(fields)

    def _display_suffix(self) -> str:
        return ""

    def _record_fields(self) -> list[str]:
        return []

    def __str__(self) -> str:
        return self.to_display()


@dataclass(slots=True)
class Todo(Task):
    kind: TaskKind = field(init=False, repr=False, compare=False, default=TaskKind.TODO)

    @classmethod
    def create(cls, description: str) -> Todo | CommandFailure:
        try:
            return cls(description)
        except CommandFailure as failure:
            return failure


@dataclass(slots=True)
class Deadline(Task):
    """A task due on a calendar date (no time of day)."""

    due: date = field(kw_only=True)

    kind: TaskKind = field(init=False, repr=False, compare=False, default=TaskKind.DEADLINE)

    @classmethod
    def from_text(cls, description: str, due_text: str, *, done: bool = False) -> Deadline:
        """Build from raw command/record text; the description is checked first."""
        description = _require_description(description, TaskKind.DEADLINE)
        return cls(description, due=parse_date(due_text), done=done)

    @classmethod
    def create(cls, description: str, due_text: str) -> Deadline | CommandFailure:
        try:
            return cls.from_text(description, due_text)
        except CommandFailure as failure:
            return failure

    def _display_suffix(self) -> str:
        return f" (by: {_human_date(self.due)})"

    def _record_fields(self) -> list[str]:
        return [self.due.isoformat()]


@dataclass(slots=True)
class Event(Task):
    """
    A task spanning a date-time range.

    `end == start` is allowed; only an end strictly before the start is rejected.
    """

    start: datetime = field(kw_only=True)
    end: datetime = field(kw_only=True)

    kind: TaskKind = field(init=False, repr=False, compare=False, default=TaskKind.EVENT)

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        if self.end < self.start:
            raise InvalidEventOrder()

    @classmethod
    def from_text(
        cls,
        description: str,
        start_text: str,
        end_text: str,
        *,
        done: bool = False,
    ) -> Event:
        description = _require_description(description, TaskKind.EVENT)
        start = parse_datetime(start_text)
        end = parse_datetime(end_text)
        return cls(description, start=start, end=end, done=done)

    @classmethod
    def create(cls, description: str, start_text: str, end_text: str) -> Event | CommandFailure:
        try:
            return cls.from_text(description, start_text, end_text)
        except CommandFailure as failure:
            return failure

    def _display_suffix(self) -> str:
        return f" (from: {_human_datetime(self.start)} to: {_human_datetime(self.end)})"

    def _record_fields(self) -> list[str]:
        return [format_datetime_record(self.start), format_datetime_record(self.end)]


_KIND_NAMES: Final[dict[TaskKind, str]] = {
    TaskKind.TODO: "todo",
    TaskKind.DEADLINE: "deadline",
    TaskKind.EVENT: "event",
}


def _require_description(description: str, kind: TaskKind) -> str:
    text = (description or "").strip()
    if not text:
        raise EmptyDescription(kind=_KIND_NAMES[kind])
    return text
