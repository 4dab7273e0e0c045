# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from .presenter import TaskListPresenter


@dataclass
class AppState:
    """Everything the front-end needs, wired once by the composition root."""

    # Settings-like object (tests pass a SimpleNamespace).
    settings: Any

    task_store: TaskStore
    presenter: TaskListPresenter
