# src/nebula/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    tasks: TaskList
    store: TaskFileStore
