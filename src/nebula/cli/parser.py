# src/nebula/cli/parser.py

"""
Command-line grammar.

Turns one raw input line into a validated `Command`. All format and range
checks happen here so that dispatching a `Command` never fails half-way.
The number of tasks is passed in explicitly for index validation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import CommandError, InvalidDateError
from ..tasks.task_models import TimePoint, parse_time_point
from . import messages

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"

# Plain ASCII digits only; int() alone also takes "1_0", "+3" and other scripts.
INDEX_SHAPE = re.compile(r"-?[0-9]+")


class CommandKind(StrEnum):
    BYE = "bye"
    LIST = "list"
    HELP = "help"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


NO_ARG_KINDS = frozenset({CommandKind.BYE, CommandKind.LIST, CommandKind.HELP})
INDEX_KINDS = frozenset({CommandKind.MARK, CommandKind.UNMARK, CommandKind.DELETE})


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    index: int | None = None  # 1-based
    description: str | None = None
    keyword: str | None = None
    by: TimePoint | None = None
    start: TimePoint | None = None
    end: TimePoint | None = None


def parse_command(line: str, task_count: int) -> Command:
    """
    Parse `line` into a Command, or raise CommandError with a message for the user.

    Checks run in a fixed order: empty input, unknown command word, then the
    per-command argument rules.
    """
    text = line.strip()
    if not text:
        raise CommandError(messages.EMPTY_COMMAND)

    head, *tail = text.split(maxsplit=1)
    rest = tail[0].strip() if tail else ""
    try:
        kind = CommandKind(head.lower())
    except ValueError:
        raise CommandError(messages.UNKNOWN_COMMAND) from None

    if kind in NO_ARG_KINDS:
        if rest:
            raise CommandError(messages.UNKNOWN_COMMAND)
        return Command(kind)

    if kind in INDEX_KINDS:
        return Command(kind, index=_parse_index(rest, task_count))

    if kind is CommandKind.FIND:
        return Command(kind, keyword=_parse_keyword(rest))

    if not rest:
        raise CommandError(messages.MISSING_DESCRIPTION)

    if kind is CommandKind.TODO:
        return Command(kind, description=_clean_description(rest))
    if kind is CommandKind.DEADLINE:
        return _parse_deadline(rest)
    return _parse_event(rest)


def _parse_index(raw: str, task_count: int) -> int:
    if INDEX_SHAPE.fullmatch(raw) is None:
        raise CommandError(messages.NOT_A_NUMBER)
    number = int(raw)
    if not 0 <= number - 1 < task_count:
        raise CommandError(messages.TASK_DOES_NOT_EXIST)
    return number


def _parse_keyword(raw: str) -> str:
    tokens = raw.split()
    if not tokens:
        raise CommandError(messages.MISSING_KEYWORD)
    if len(tokens) > 1:
        raise CommandError(messages.TOO_MANY_KEYWORDS)
    return tokens[0]


def _clean_description(raw: str) -> str:
    text = raw.strip()
    if not text:
        raise CommandError(messages.MISSING_DESCRIPTION)
    if "|" in text:
        raise CommandError(messages.BAD_CHARACTER)
    return text


def _parse_date(raw: str) -> TimePoint:
    try:
        return parse_time_point(raw)
    except InvalidDateError:
        raise CommandError(messages.BAD_DATE) from None


def _parse_deadline(rest: str) -> Command:
    if BY_MARKER not in rest:
        raise CommandError(messages.BAD_DEADLINE_FORMAT)
    before, _, after = rest.partition(BY_MARKER)
    description = _clean_description(before)
    return Command(CommandKind.DEADLINE, description=description, by=_parse_date(after))


def _parse_event(rest: str) -> Command:
    from_pos = rest.find(FROM_MARKER)
    if from_pos == -1:
        raise CommandError(messages.BAD_EVENT_FORMAT)
    to_pos = rest.find(TO_MARKER, from_pos + len(FROM_MARKER))
    if to_pos == -1:
        raise CommandError(messages.BAD_EVENT_FORMAT)

    description = _clean_description(rest[:from_pos])
    start = _parse_date(rest[from_pos + len(FROM_MARKER) : to_pos])
    end = _parse_date(rest[to_pos + len(TO_MARKER) :])
    return Command(CommandKind.EVENT, description=description, start=start, end=end)
