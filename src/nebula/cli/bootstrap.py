# src/nebula/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the task file store,
- hydrates the task list from disk.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    The data directory is NOT created here; the first save creates it.
    """
    if settings is None:
        settings = get_settings()

    store = TaskFileStore(settings.tasks_file_path)
    tasks = TaskList(store.load())
    logger.info("Task list ready (%d tasks) file=%s", len(tasks), store.path)

    return AppState(settings=settings, tasks=tasks, store=store)


def save_tasks(state: AppState) -> None:
    """Write the whole list. Errors propagate: a failed save must not look like success."""
    try:
        state.store.save(state.tasks)
    except OSError:
        logger.exception("Failed to save tasks to %s", state.store.path)
        raise
