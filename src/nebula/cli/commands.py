# src/nebula/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Deadline, Event, ToDo
from . import messages
from .parser import Command, CommandKind

CommandHandler = Callable[[AppState, Command], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps each command kind to its handler and its line in the help text."""

    def __init__(self) -> None:
        self._handlers: dict[CommandKind, CommandHandler] = {}
        self._help: dict[CommandKind, tuple[str, str]] = {}

    def register(
        self,
        kind: CommandKind,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
    ) -> None:
        self._handlers[kind] = handler
        self._help[kind] = (usage or str(kind), help_text)

    def handle(self, state: AppState, command: Command) -> str:
        """
        Apply an already validated command to the state.
        Returns the reply to print.
        """
        handler = self._handlers.get(command.kind)
        if handler is None:
            # Every CommandKind is registered below; reaching this is a programming error.
            raise KeyError(f"No handler registered for {command.kind!r}")
        logger.debug("Dispatching %s", command.kind)
        return handler(state, command)

    def build_help(self) -> str:
        width = max((len(usage) for usage, _ in self._help.values()), default=0)
        lines = ["Available commands:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _require(value, name: str):
    if value is None:
        raise ValueError(f"command is missing {name}")
    return value


def cmd_bye(state: AppState, command: Command) -> str:
    return messages.goodbye()


def cmd_list(state: AppState, command: Command) -> str:
    return state.tasks.render()


def cmd_help(state: AppState, command: Command) -> str:
    return registry.build_help()


def cmd_mark(state: AppState, command: Command) -> str:
    return state.tasks.mark(_require(command.index, "index"))


def cmd_unmark(state: AppState, command: Command) -> str:
    return state.tasks.unmark(_require(command.index, "index"))


def cmd_delete(state: AppState, command: Command) -> str:
    return state.tasks.delete(_require(command.index, "index"))


def cmd_find(state: AppState, command: Command) -> str:
    return state.tasks.find(_require(command.keyword, "keyword"))


def cmd_todo(state: AppState, command: Command) -> str:
    return state.tasks.add(ToDo(_require(command.description, "description")))


def cmd_deadline(state: AppState, command: Command) -> str:
    task = Deadline(
        _require(command.description, "description"),
        by=_require(command.by, "due date"),
    )
    return state.tasks.add(task)


def cmd_event(state: AppState, command: Command) -> str:
    task = Event(
        _require(command.description, "description"),
        start=_require(command.start, "start"),
        end=_require(command.end, "end"),
    )
    return state.tasks.add(task)


registry.register(CommandKind.TODO, cmd_todo, "Add a to-do.", usage="todo <description>")
registry.register(
    CommandKind.DEADLINE,
    cmd_deadline,
    "Add a task with a due date.",
    usage="deadline <description> /by <date>",
)
registry.register(
    CommandKind.EVENT,
    cmd_event,
    "Add an event with a start and an end.",
    usage="event <description> /from <date> /to <date>",
)
registry.register(CommandKind.LIST, cmd_list, "Show all tasks.")
registry.register(CommandKind.MARK, cmd_mark, "Mark task N as done.", usage="mark <N>")
registry.register(CommandKind.UNMARK, cmd_unmark, "Mark task N as not done.", usage="unmark <N>")
registry.register(CommandKind.DELETE, cmd_delete, "Remove task N.", usage="delete <N>")
registry.register(
    CommandKind.FIND, cmd_find, "Show tasks whose description contains KEYWORD.", usage="find <KEYWORD>"
)
registry.register(CommandKind.HELP, cmd_help, "Show this help.")
registry.register(CommandKind.BYE, cmd_bye, "Save and exit.")
