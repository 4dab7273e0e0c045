# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the one mutation context and TaskStore for this process,
- wires the presenter to its dialogs and failure banner.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Dialogs
from ..core.presenter import Notifier, TaskListPresenter
from ..core.state import AppState
from ..tasks.task_context import SQLiteTaskContext
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    dialogs: Dialogs,
    settings=None,
    notify: Notifier | None = None,
) -> AppState:
    """
    Create AppState from the provided settings and load the task list.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(SQLiteTaskContext(settings.tasks_db_path))
    presenter = TaskListPresenter(
        store,
        dialogs,
        title=getattr(settings, "list_title", "Task List"),
        notify=notify,
    )
    presenter.load()
    logger.info("Loaded %d tasks from %s", presenter.row_count, settings.tasks_db_path)

    return AppState(settings=settings, task_store=store, presenter=presenter)
