# src/tasklet/tasks/task_list.py

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from ..core.errors import IndexOutOfRange
from .task_models import Task


class TaskList:
    """
    Ordered in-memory task collection.

    Insertion order is both display and persistence order.
    Positions are 1-based (as typed by the user); the conversion to a
    0-based index happens here and nowhere else.

    The list has no internal locking: a host serving several clients must
    serialize calls (see AppState.lock).
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __contains__(self, task: object) -> bool:
        return any(existing == task for existing in self._tasks)

    def __repr__(self) -> str:
        return f"TaskList(size={len(self._tasks)})"

    @property
    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def get(self, position: int) -> Task:
        return self._tasks[self._index(position)]

    def filter(self, predicate: Callable[[Task], bool]) -> TaskList:
        """Return a new TaskList with the matching tasks, order preserved."""
        return TaskList(t for t in self._tasks if predicate(t))

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    # ---- mutations ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, position: int) -> Task:
        return self._tasks.pop(self._index(position))

    def _index(self, position: int) -> int:
        index = position - 1
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfRange(size=len(self._tasks))
        return index
