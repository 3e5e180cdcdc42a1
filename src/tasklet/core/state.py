# src/tasklet/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (tasklet.config.Settings or a test double).
    settings: object

    task_store: TaskRepo
    tasks: TaskList = field(default_factory=TaskList)

    # Serializes interpret + save when more than one connector shares the list.
    lock: threading.Lock = field(default_factory=threading.Lock)

    # Set when the user says "bye"; connectors stop reading input.
    finished: bool = False
