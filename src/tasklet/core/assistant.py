# src/tasklet/core/assistant.py

"""
One conversational turn.

Transport-agnostic: a connector hands in a raw line, gets back what
happened, and decides how to show it.

Key invariants:
- interpret + save run under state.lock, so the list has one writer at a time,
- the list is saved only after a mutating command succeeded,
- a failed save never rolls back or corrupts the in-memory list; the
  session keeps working and the error is reported with the turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cli.commands import interpret
from .errors import CommandFailure, StorageError
from .replies import Reply
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Turn:
    outcome: Reply | CommandFailure
    save_error: StorageError | None = None

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Reply)


def handle_line(state: AppState, line: str) -> Turn:
    with state.lock:
        outcome = interpret(line, state.tasks)

        if not isinstance(outcome, Reply):
            return Turn(outcome)

        if outcome.ends_session:
            state.finished = True

        if not outcome.mutates:
            return Turn(outcome)

        try:
            state.task_store.save(state.tasks)
        except StorageError as e:
            logger.error("Failed to save tasks: %s", e)
            return Turn(outcome, save_error=e)

    return Turn(outcome)
