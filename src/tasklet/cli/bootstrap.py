# src/tasklet/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the flat-file TaskStore into AppState and loads the saved list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load the saved task list.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    An unreadable data file is logged and the session starts with an empty list.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    try:
        tasks = store.load()
    except StorageError:
        logger.exception("Failed to load tasks from %s; starting with an empty list.", store.path)
        tasks = TaskList()

    return AppState(settings=settings, task_store=store, tasks=tasks)


def save_tasks(state: AppState) -> bool:
    """Persist the current list (best-effort, used on shutdown)."""
    try:
        with state.lock:
            state.task_store.save(state.tasks)
    except StorageError:
        logger.exception("Failed to save tasks on shutdown.")
        return False
    return True
