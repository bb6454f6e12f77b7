# src/nebula/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import TaskIndexError
from .task_models import Task, format_task

logger = logging.getLogger(__name__)


def _count_phrase(n: int) -> str:
    return f"Now you have {n} {'task' if n == 1 else 'tasks'} in the list."


def _numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}. {format_task(t)}" for i, t in enumerate(tasks, start=1)]


class TaskList:
    """
    Ordered, in-memory task collection.

    Users address tasks by 1-based number; storage is a plain 0-based list.
    Deleting shifts every later task down by one.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, idx: int) -> Task:
        return self._tasks[idx]

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def _get(self, number: int) -> Task:
        # The parser has already checked the range; this is the last line of defence.
        if not 1 <= number <= len(self._tasks):
            raise TaskIndexError(f"Task {number} does not exist.")
        return self._tasks[number - 1]

    # ---- mutations ----

    def add(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Added %s task (total=%d)", task.kind.name, len(self._tasks))
        return (
            "Got it. I've added this task:\n"
            f"  {format_task(task)}\n"
            f"{_count_phrase(len(self._tasks))}"
        )

    def mark(self, number: int) -> str:
        task = self._get(number)
        task.done = True
        return f"Nice! I've marked this task as done:\n  {format_task(task)}"

    def unmark(self, number: int) -> str:
        task = self._get(number)
        task.done = False
        return f"OK, I've marked this task as not done yet:\n  {format_task(task)}"

    def delete(self, number: int) -> str:
        self._get(number)
        removed = self._tasks.pop(number - 1)
        logger.debug("Deleted task #%d (total=%d)", number, len(self._tasks))
        return (
            "Noted. I've removed this task:\n"
            f"  {format_task(removed)}\n"
            f"{_count_phrase(len(self._tasks))}"
        )

    # ---- queries ----

    def matching(self, keyword: str) -> list[Task]:
        """Tasks whose description contains `keyword` (case-sensitive), in list order."""
        return [t for t in self._tasks if keyword in t.description]

    def find(self, keyword: str) -> str:
        found = self.matching(keyword)
        if not found:
            return "There are no matching tasks in your list."
        return "\n".join(["Here are the matching tasks in your list:", *_numbered(found)])

    def render(self) -> str:
        if not self._tasks:
            return "Your list is empty."
        return "\n".join(["Here are the tasks in your list:", *_numbered(self._tasks)])
