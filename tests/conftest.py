# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from nebula.core.state import AppState
from nebula.tasks.task_list import TaskList
from nebula.tasks.task_store import TaskFileStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and the working directory.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Nebula",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        data_dir=data_dir,
        tasks_file_path=data_dir / "nebulaTaskList.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskFileStore:
    return TaskFileStore(settings.tasks_file_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskFileStore) -> AppState:
    """Empty task list backed by a file under tmp_path."""
    return AppState(settings=settings, tasks=TaskList(), store=store)
