# tests/test_assistant.py

from __future__ import annotations

import pytest

from tasklet.connectors.console_connector import (
    HORIZONTAL_LINE,
    render_failure,
    render_reply,
    respond,
    run_console_loop,
)
from tasklet.core.assistant import handle_line
from tasklet.core.errors import DuplicateTask, IndexOutOfRange, UnknownCommand
from tasklet.core.replies import Reply, ReplyKind
from tasklet.core.state import AppState
from tasklet.tasks.task_models import Todo

from .fakes import FailingTaskRepo, FakeTaskRepo


def test_mutating_commands_are_saved(state: AppState, repo: FakeTaskRepo) -> None:
    handle_line(state, "todo read book")
    handle_line(state, "mark 1")
    assert repo.saves == 2
    assert repo.records == ["T | 1 | read book"]


def test_queries_and_failures_are_not_saved(state: AppState, repo: FakeTaskRepo) -> None:
    for line in ("list", "find x", "help", "", "nonsense", "mark 3"):
        handle_line(state, line)
    assert repo.saves == 0


def test_bye_finishes_the_session(state: AppState) -> None:
    turn = handle_line(state, "bye")
    assert turn.ok
    assert state.finished is True


def test_save_failure_keeps_the_in_memory_list(settings) -> None:
    repo = FailingTaskRepo()
    state = AppState(settings=settings, task_store=repo)

    turn = handle_line(state, "todo read book")
    assert turn.ok
    assert turn.save_error is not None
    assert len(state.tasks) == 1

    handle_line(state, "todo exercise")
    assert len(state.tasks) == 2

    text = respond(state, "delete 1")
    assert text is not None
    assert "Noted. I've removed this task:" in text
    assert "Error saving tasks:" in text
    assert len(state.tasks) == 1


def test_respond_frames_confirmations(state: AppState) -> None:
    text = respond(state, "todo read book")
    assert text == "\n".join(
        [
            HORIZONTAL_LINE,
            "Got it. I've added this task:",
            "  [T][ ] read book",
            "Now you have 1 task in the list.",
            HORIZONTAL_LINE,
        ]
    )
    assert respond(state, "   ") is None


def test_render_listing_and_search() -> None:
    a, b = Todo("read book"), Todo("exercise")

    assert render_reply(Reply(ReplyKind.LISTING)) == "Your list is empty! Add some tasks first."
    assert render_reply(Reply(ReplyKind.LISTING, tasks=(a, b))) == (
        "Here are the tasks in your list:\n1.[T][ ] read book\n2.[T][ ] exercise"
    )
    assert render_reply(Reply(ReplyKind.FOUND, tasks=(a,), keyword="book")) == (
        "Here are the matching tasks in your list:\n 1.[T][ ] read book"
    )
    assert render_reply(Reply(ReplyKind.FOUND, keyword="gym")) == "No tasks found containing: gym"
    assert render_reply(Reply(ReplyKind.NOOP)) is None


def test_render_counts_and_status_changes() -> None:
    t = Todo("read book", done=True)
    assert render_reply(Reply(ReplyKind.DELETED, task=t, count=2)).endswith(
        "Now you have 2 tasks in the list."
    )
    assert render_reply(Reply(ReplyKind.MARKED, task=t)) == (
        "Nice! I've marked this task as done:\n  [T][X] read book"
    )
    assert render_reply(Reply(ReplyKind.GREETING), app_name="Pip").startswith("Hello! I'm Pip")


def test_render_task_reply_without_a_task_raises() -> None:
    with pytest.raises(ValueError):
        render_reply(Reply(ReplyKind.ADDED, count=1))


def test_render_failure_prefixes() -> None:
    assert render_failure(IndexOutOfRange(size=3)) == (
        "Invalid task number: Please enter a valid task number between 1 and 3"
    )
    assert render_failure(UnknownCommand(command="blah")).startswith("Invalid command: ")
    assert render_failure(DuplicateTask()) == "Oops! You already have this task in your task list!"


def test_console_loop_runs_until_bye(state: AppState, repo: FakeTaskRepo) -> None:
    lines = iter(["todo read book", "list", "bye", "todo never read"])
    out: list[str] = []

    run_console_loop(state, read=lambda _prompt: next(lines), write=out.append)

    assert len(state.tasks) == 1
    assert any("1.[T][ ] read book" in chunk for chunk in out)
    assert "Bye. Hope to see you again soon!" in out[-1]


def test_console_loop_stops_on_eof(state: AppState) -> None:
    def read(_prompt: str) -> str:
        raise EOFError

    out: list[str] = []
    run_console_loop(state, read=read, write=out.append)
    assert state.finished is False
    assert out and out[0].startswith(HORIZONTAL_LINE)
