# src/nebula/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import assert_never

from ..core.errors import InvalidDateError
from .task_models import (
    Deadline,
    Event,
    Task,
    TaskKind,
    TimePoint,
    ToDo,
    parse_time_point,
)

logger = logging.getLogger(__name__)

FIELD_SEP = "|"


class TaskFileStore:
    """
    Flat text file store, one task per line:

        1 | T | read book
        0 | D | submit report | 2024-12-01 18:00
        0 | E | team sync | 2024-09-12 09:00-2024-09-12 10:00

    Loading is lenient (bad lines are skipped with a warning).
    Saving rewrites the whole file; I/O errors propagate to the caller.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding ----

    @staticmethod
    def serialize_task(task: Task) -> str:
        fields = ["1" if task.done else "0", str(task.kind), task.description]
        match task:
            case ToDo():
                pass
            case Deadline(by=by):
                fields.append(by.raw)
            case Event(start=start, end=end):
                fields.append(f"{start.raw}-{end.raw}")
            case _:
                assert_never(task)
        return f" {FIELD_SEP} ".join(fields)

    @staticmethod
    def parse_line(line: str, *, lineno: int = 0) -> Task | None:
        parts = [p.strip() for p in line.split(FIELD_SEP)]
        if len(parts) < 3:
            return None

        done = parts[0] == "1"
        kind = TaskKind.from_marker(parts[1])
        description = parts[2]

        if kind is None:
            logger.warning("Skipping line %d: unknown task type %r", lineno, parts[1])
            return None
        if not description:
            logger.warning("Skipping line %d: task without description", lineno)
            return None

        task: Task
        try:
            match kind:
                case TaskKind.TODO:
                    task = ToDo(description)
                case TaskKind.DEADLINE:
                    if len(parts) < 4 or not parts[3]:
                        logger.warning("Skipping line %d: deadline without due date", lineno)
                        return None
                    task = Deadline(description, by=parse_time_point(parts[3]))
                case TaskKind.EVENT:
                    if len(parts) < 4 or not parts[3]:
                        logger.warning("Skipping line %d: event without dates", lineno)
                        return None
                    span = _split_event_range(parts[3])
                    if span is None:
                        logger.warning("Skipping line %d: malformed event range %r", lineno, parts[3])
                        return None
                    task = Event(description, start=span[0], end=span[1])
                case _:
                    assert_never(kind)
        except InvalidDateError as e:
            logger.warning("Skipping line %d: %s", lineno, e)
            return None

        task.done = done
        return task

    # ---- file I/O ----

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        tasks: list[Task] = []
        with self._path.open("rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    logger.warning("Skipping line %d: not valid UTF-8", lineno)
                    continue
                if not line.strip():
                    continue
                task = self.parse_line(line.rstrip("\r\n"), lineno=lineno)
                if task is not None:
                    tasks.append(task)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        lines = [self.serialize_task(t) for t in tasks]
        with self._path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        logger.info("Saved %d tasks to %s", len(lines), self._path)


def _split_event_range(raw: str) -> tuple[TimePoint, TimePoint] | None:
    """
    Split `<start>-<end>`.

    Dates contain '-' themselves, so try every '-' and keep the first split
    where both halves parse.
    """
    pos = raw.find("-")
    while pos != -1:
        left, right = raw[:pos].strip(), raw[pos + 1 :].strip()
        if left and right:
            try:
                return parse_time_point(left), parse_time_point(right)
            except InvalidDateError:
                pass
        pos = raw.find("-", pos + 1)
    return None
