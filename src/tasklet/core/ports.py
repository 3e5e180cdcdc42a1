# src/tasklet/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The assistant depends on a Protocol instead of the concrete flat-file store,
so tests can swap in an in-memory repo or one that fails on purpose.
"""

from typing import Protocol

from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    """Persistence collaborator: whole-list load/save, raising StorageError on I/O failure."""

    def load(self) -> TaskList: ...
    def save(self, tasks: TaskList) -> None: ...
