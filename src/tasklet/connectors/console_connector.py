# src/tasklet/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.assistant import Turn, handle_line
from ..core.errors import CommandFailure, FailureCategory
from ..core.replies import Reply, ReplyKind
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

HORIZONTAL_LINE = "_" * 60

Reader = Callable[[str], str]
Writer = Callable[[str], None]


# ---------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------

def _numbered(tasks: Iterable[Task], indent: str = "") -> list[str]:
    return [f"{indent}{i}.{task.to_display()}" for i, task in enumerate(tasks, start=1)]


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def render_reply(reply: Reply, app_name: str = "tasklet") -> str | None:
    """Text for a successful command; None means "print nothing"."""
    kind = reply.kind

    if kind is ReplyKind.NOOP:
        return None

    if kind is ReplyKind.GREETING:
        return f"Hello! I'm {app_name}, your friendly task manager!\nWhat can I do for you?"

    if kind is ReplyKind.FAREWELL:
        return "Bye. Hope to see you again soon!"

    if kind is ReplyKind.HELP:
        lines = ["Here are the commands you can use:"]
        lines.extend(f"  {line}" for line in reply.lines)
        return "\n".join(lines)

    if kind is ReplyKind.LISTING:
        if not reply.tasks:
            return "Your list is empty! Add some tasks first."
        return "\n".join(["Here are the tasks in your list:", *_numbered(reply.tasks)])

    if kind is ReplyKind.FOUND:
        if not reply.tasks:
            return f"No tasks found containing: {reply.keyword}"
        return "\n".join(["Here are the matching tasks in your list:", *_numbered(reply.tasks, " ")])

    if reply.task is None:
        raise ValueError(f"{kind} reply without a task")
    shown = f"  {reply.task.to_display()}"

    if kind is ReplyKind.ADDED:
        return "\n".join(["Got it. I've added this task:", shown, _count_line(reply.count)])

    if kind is ReplyKind.DELETED:
        return "\n".join(["Noted. I've removed this task:", shown, _count_line(reply.count)])

    if kind is ReplyKind.MARKED:
        return "\n".join(["Nice! I've marked this task as done:", shown])

    if kind is ReplyKind.UNMARKED:
        return "\n".join(["OK, I've marked this task as not done yet:", shown])

    raise ValueError(f"Unhandled reply kind: {kind}")


def render_failure(failure: CommandFailure) -> str:
    if failure.category == FailureCategory.GENERIC:
        return f"{failure.category} {failure.message}"
    return f"{failure.category}: {failure.message}"


def render_turn(turn: Turn, app_name: str = "tasklet") -> str | None:
    if isinstance(turn.outcome, CommandFailure):
        text: str | None = render_failure(turn.outcome)
    else:
        text = render_reply(turn.outcome, app_name)

    if turn.save_error is not None:
        note = f"Error saving tasks: {turn.save_error.message}"
        text = note if text is None else f"{text}\n{note}"

    return text


def respond(state: AppState, line: str) -> str | None:
    """Handle one line and return the framed response text (None for blank input)."""
    app_name = str(getattr(state.settings, "app_name", "tasklet"))
    text = render_turn(handle_line(state, line), app_name)
    if text is None:
        return None
    return f"{HORIZONTAL_LINE}\n{text}\n{HORIZONTAL_LINE}"


# ---------------------------------------------------------------------
# REPL
# ---------------------------------------------------------------------

def run_console_loop(
    state: AppState,
    *,
    read: Reader = input,
    write: Writer = print,
) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    greeting = respond(state, "hi")
    if greeting:
        write(greeting)
    write("Type 'help' to see what I can do.\n")

    while not state.finished:
        try:
            user_input = read("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        try:
            response = respond(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            write(response)

    logger.info("Console connector finished.")
