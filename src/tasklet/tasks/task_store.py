# src/tasklet/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from ..core.errors import CommandFailure, StorageError
from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

# type letter -> number of fields in the record (type, done, description, ...)
_RECORD_WIDTH: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


class TaskStore:
    """
    Flat-file task store, one pipe-delimited record per line.

    Loading is forgiving:
    - a missing file (and its directory) is created, the result is empty
    - blank lines are skipped
    - unknown type letters and malformed records are skipped with a warning

    Saving writes a temp file and replaces the target, so a crash mid-write
    never leaves a truncated list behind.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- public API ----

    def load(self) -> TaskList:
        self._ensure_file()
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(str(self._path), f"Cannot read file: {e}") from e

        tasks = TaskList()
        skipped = 0
        for lineno, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                continue
            task = self._record_to_task(line, lineno)
            if task is None:
                skipped += 1
                continue
            tasks.add(task)

        logger.info("TaskStore loaded path=%s total=%d skipped=%d", self._path, len(tasks), skipped)
        return tasks

    def save(self, tasks: TaskList) -> None:
        payload = "".join(task.to_record() + "\n" for task in tasks)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(str(self._path), f"Cannot write file: {e}") from e
        logger.debug("TaskStore saved path=%s total=%d", self._path, len(tasks))

    # ---- low-level helpers ----

    def _ensure_file(self) -> None:
        if self._path.exists():
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()
        except OSError as e:
            raise StorageError(str(self._path), f"Cannot create file: {e}") from e
        logger.info("TaskStore created empty data file %s", self._path)

    def _record_to_task(self, line: str, lineno: int) -> Task | None:
        # Type and done flag come from the left, dates from the right; whatever
        # lies between is the description, so it may itself contain "|".
        head = [p.strip() for p in line.split("|", 2)]

        try:
            kind = TaskKind(head[0])
        except ValueError:
            logger.warning("Skipping line %d: unknown task type %r", lineno, head[0])
            return None

        width = _RECORD_WIDTH[kind]
        parts = head[:2]
        if len(head) == 3:
            parts.extend(p.strip() for p in head[2].rsplit("|", width - 3))
        if len(parts) != width:
            logger.warning("Skipping line %d: expected %d fields, got %d", lineno, width, len(parts))
            return None

        done = parts[1] == "1"
        description = parts[2]

        try:
            if kind is TaskKind.TODO:
                return Todo(description, done=done)
            if kind is TaskKind.DEADLINE:
                return Deadline.from_text(description, parts[3], done=done)
            return Event.from_text(description, parts[3], parts[4], done=done)
        except CommandFailure as failure:
            logger.warning("Skipping line %d: %s", lineno, failure)
            return None
