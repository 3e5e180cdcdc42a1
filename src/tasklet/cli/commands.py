# src/tasklet/cli/commands.py

"""
Command interpreter.

Turns one line of text into exactly one operation on a TaskList and
returns either a Reply or a typed CommandFailure. Nothing raised by a
handler escapes `interpret()`; the list is only touched once every
argument has been validated, so each call is all-or-nothing.

Grammar notes:
- keywords match case-insensitively,
- a command matches when the line equals the keyword or starts with
  keyword + one space,
- delimiters (/by, /from, /to) split on their FIRST occurrence, so a
  description containing "/by" is cut there.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import (
    CommandFailure,
    DuplicateTask,
    EmptyDescription,
    InvalidFormat,
    MissingArgument,
    NotANumber,
    UnknownCommand,
)
from ..core.replies import Reply, ReplyKind
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo

CommandHandler = Callable[[TaskList, str], Reply]

logger = logging.getLogger(__name__)

DELIMITER_BY = "/by"
DELIMITER_FROM = "/from"
DELIMITER_TO = "/to"

DEADLINE_USAGE = "deadline <description> /by <yyyy-MM-dd>"
EVENT_USAGE = "event <description> /from <yyyy-MM-ddTHH:mm> /to <yyyy-MM-ddTHH:mm>"

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class _Command:
    name: str
    handler: CommandHandler
    help_text: str
    # Exact commands take no arguments ("list", "bye").
    exact: bool


class CommandRegistry:
    """Keyword -> handler table used by the interpreter (todo, list, mark, ...)."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        exact: bool = False,
    ) -> None:
        key = name.lower()
        self._commands[key] = _Command(name=key, handler=handler, help_text=help_text, exact=exact)

    def resolve(self, line: str) -> tuple[_Command, str] | None:
        """
        Find the command for an already-stripped line.
        Returns (command, argument text) or None when nothing matches.
        """
        keyword, sep, rest = line.partition(" ")
        command = self._commands.get(keyword.lower())
        if command is None:
            return None
        if command.exact and sep:
            return None
        return command, rest

    def interpret(self, line: str, tasks: TaskList) -> Reply | CommandFailure:
        """
        Handle one raw input line against `tasks`.
        Blank lines are a no-op.
        """
        text = line.strip()
        if not text:
            return Reply(ReplyKind.NOOP)

        resolved = self.resolve(text)
        if resolved is None:
            return UnknownCommand(command=text.split(" ", 1)[0])

        command, args = resolved
        try:
            reply = command.handler(tasks, args)
        except CommandFailure as failure:
            logger.debug("Command %r rejected: %s", command.name, failure)
            return failure

        logger.debug("Command %r -> %s (size=%d)", command.name, reply.kind, len(tasks))
        return reply

    def build_help(self) -> tuple[str, ...]:
        return tuple(c.help_text for c in self._commands.values())


registry = CommandRegistry()


def interpret(line: str, tasks: TaskList) -> Reply | CommandFailure:
    return registry.interpret(line, tasks)


# ---------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------

def _require_text(args: str, kind: str) -> str:
    text = args.strip()
    if not text:
        raise EmptyDescription(kind=kind)
    return text


def _split_once(text: str, delimiter: str, usage: str) -> tuple[str, str]:
    head, sep, tail = text.partition(delimiter)
    if not sep:
        raise InvalidFormat(usage=usage)
    return head.strip(), tail.strip()


def _parse_position(args: str, usage: str) -> int:
    """
    Position argument of mark/unmark/delete.
    `args` is whatever followed the keyword and its space ("" if nothing did).
    """
    if not args:
        raise MissingArgument(usage=usage)
    token = args.strip()
    if not _INTEGER.fullmatch(token):
        raise NotANumber(usage=usage)
    return int(token)


def _unwrap(result: Task | CommandFailure) -> Task:
    if isinstance(result, CommandFailure):
        raise result
    return result


def _append(tasks: TaskList, task: Task) -> Reply:
    if task in tasks:
        raise DuplicateTask()
    tasks.add(task)
    return Reply(ReplyKind.ADDED, task=task, count=len(tasks))


# ---------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------

def cmd_hi(tasks: TaskList, args: str) -> Reply:
    return Reply(ReplyKind.GREETING)


def cmd_bye(tasks: TaskList, args: str) -> Reply:
    return Reply(ReplyKind.FAREWELL)


def cmd_help(tasks: TaskList, args: str) -> Reply:
    return Reply(ReplyKind.HELP, lines=registry.build_help())


def cmd_list(tasks: TaskList, args: str) -> Reply:
    return Reply(ReplyKind.LISTING, tasks=tasks.snapshot(), count=len(tasks))


def cmd_todo(tasks: TaskList, args: str) -> Reply:
    description = _require_text(args, "todo")
    return _append(tasks, _unwrap(Todo.create(description)))


def cmd_deadline(tasks: TaskList, args: str) -> Reply:
    """
    deadline <description> /by <yyyy-MM-dd>

    Empty pieces are reported before the date is parsed.
    """
    text = _require_text(args, "deadline")
    description, due = _split_once(text, DELIMITER_BY, DEADLINE_USAGE)
    if not description:
        raise EmptyDescription(kind="deadline")
    if not due:
        raise InvalidFormat(usage=f"{DEADLINE_USAGE} (time cannot be empty)")
    return _append(tasks, _unwrap(Deadline.create(description, due)))


def cmd_event(tasks: TaskList, args: str) -> Reply:
    """
    event <description> /from <start> /to <end>

    "/from" is split first, then "/to" inside the remainder.
    """
    text = _require_text(args, "event")
    description, span = _split_once(text, DELIMITER_FROM, EVENT_USAGE)
    start, end = _split_once(span, DELIMITER_TO, EVENT_USAGE)
    if not description:
        raise EmptyDescription(kind="event")
    if not start or not end:
        raise InvalidFormat(usage=f"{EVENT_USAGE} (times cannot be empty)")
    return _append(tasks, _unwrap(Event.create(description, start, end)))


def cmd_mark(tasks: TaskList, args: str) -> Reply:
    task = tasks.get(_parse_position(args, "mark <task-number>"))
    task.mark_done()
    return Reply(ReplyKind.MARKED, task=task)


def cmd_unmark(tasks: TaskList, args: str) -> Reply:
    task = tasks.get(_parse_position(args, "unmark <task-number>"))
    task.mark_not_done()
    return Reply(ReplyKind.UNMARKED, task=task)


def cmd_delete(tasks: TaskList, args: str) -> Reply:
    task = tasks.remove(_parse_position(args, "delete <task-number>"))
    return Reply(ReplyKind.DELETED, task=task, count=len(tasks))


def cmd_find(tasks: TaskList, args: str) -> Reply:
    keyword = _require_text(args, "find")
    needle = keyword.lower()
    matches = tasks.filter(lambda t: needle in t.to_display().lower())
    return Reply(ReplyKind.FOUND, tasks=matches.snapshot(), count=len(matches), keyword=keyword)


registry.register("hi", cmd_hi, help_text="hi - Say hello", exact=True)
registry.register("todo", cmd_todo, help_text="todo <description> - Add a todo task")
registry.register("deadline", cmd_deadline, help_text=f"{DEADLINE_USAGE} - Add a task with deadline")
registry.register("event", cmd_event, help_text=f"{EVENT_USAGE} - Add an event")
registry.register("list", cmd_list, help_text="list - Show all your tasks", exact=True)
registry.register("mark", cmd_mark, help_text="mark <number> - Mark a task as done")
registry.register("unmark", cmd_unmark, help_text="unmark <number> - Mark a task as not done")
registry.register("delete", cmd_delete, help_text="delete <number> - Delete a task")
registry.register("find", cmd_find, help_text="find <keyword> - Search for tasks containing keyword")
registry.register("help", cmd_help, help_text="help - Show this list of commands", exact=True)
registry.register("bye", cmd_bye, help_text="bye - Exit the application", exact=True)
