# src/nebula/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import ClassVar, assert_never

from ..core.errors import InvalidDateError

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT = "%Y-%m-%d"

# Tried in order; the first one that parses wins.
INPUT_FORMATS: tuple[str, ...] = (DATE_TIME_FORMAT, DATE_FORMAT)

# strptime alone would take "2024-9-1" or "9:5"; fields must be zero-padded.
DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}(?: \d{2}:\d{2})?", re.ASCII)


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value is the single-letter type marker used both on screen
    ("[T] [ ] read book") and in the data file ("0 | T | read book").
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_marker(cls, raw: str) -> TaskKind | None:
        marker = raw.strip().strip("[]").strip().upper()
        try:
            return cls(marker)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class TimePoint:
    """
    A parsed date or date-time.

    `raw` keeps the text exactly as typed (trimmed) so the data file stores
    what the user entered, not the display form.
    """

    raw: str
    value: datetime

    def display(self) -> str:
        v = self.value
        return f"{v:%B} {v.day}, {v:%Y %H:%M}"


def parse_time_point(raw: str) -> TimePoint:
    text = raw.strip()
    if DATE_SHAPE.fullmatch(text) is None:
        raise InvalidDateError(_invalid(text))
    for fmt in INPUT_FORMATS:
        try:
            return TimePoint(raw=text, value=datetime.strptime(text, fmt))
        except ValueError:
            continue
    raise InvalidDateError(_invalid(text))


def _invalid(text: str) -> str:
    return f"Invalid date: {text!r} (expected yyyy-mm-dd HH:mm or yyyy-mm-dd)."


@dataclass(slots=True)
class ToDo:
    kind: ClassVar[TaskKind] = TaskKind.TODO

    description: str
    done: bool = False


@dataclass(slots=True)
class Deadline:
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    description: str
    by: TimePoint
    done: bool = False


@dataclass(slots=True)
class Event:
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    description: str
    start: TimePoint
    end: TimePoint
    done: bool = False


Task = ToDo | Deadline | Event


def format_task(task: Task) -> str:
    """Render a task the way the list shows it: `[D] [X] report (by: ...)`."""
    head = f"[{task.kind}] [{'X' if task.done else ' '}] {task.description}"
    match task:
        case ToDo():
            return head
        case Deadline(by=by):
            return f"{head} (by: {by.display()})"
        case Event(start=start, end=end):
            return f"{head} (from: {start.display()} to: {end.display()})"
        case _:
            assert_never(task)
