# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklet.core.state import AppState
from tasklet.tasks.task_list import TaskList

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the composition root.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasklet",
        log_level="WARNING",
        log_to_file=False,
        console_enabled=True,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
    )


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def state(settings: SimpleNamespace, repo: FakeTaskRepo) -> AppState:
    """AppState wired with an in-memory repo (no filesystem access)."""
    return AppState(settings=settings, task_store=repo, tasks=repo.load())
