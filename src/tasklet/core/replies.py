# src/tasklet/core/replies.py

"""
Success payloads returned by the command interpreter.

A Reply is plain data: the connector decides how to render it, the
assistant decides whether it needs a save.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_models import Task


class ReplyKind(StrEnum):
    NOOP = "noop"
    GREETING = "greeting"
    FAREWELL = "farewell"
    HELP = "help"
    LISTING = "listing"
    ADDED = "added"
    DELETED = "deleted"
    MARKED = "marked"
    UNMARKED = "unmarked"
    FOUND = "found"


_MUTATING = frozenset({ReplyKind.ADDED, ReplyKind.DELETED, ReplyKind.MARKED, ReplyKind.UNMARKED})


@dataclass(frozen=True, slots=True)
class Reply:
    kind: ReplyKind
    task: Task | None = None
    # Snapshot for LISTING / FOUND; later mutations of the list do not leak in.
    tasks: tuple[Task, ...] = ()
    # List size after the operation (ADDED / DELETED).
    count: int = 0
    keyword: str = ""
    lines: tuple[str, ...] = ()

    @property
    def mutates(self) -> bool:
        return self.kind in _MUTATING

    @property
    def ends_session(self) -> bool:
        return self.kind is ReplyKind.FAREWELL
