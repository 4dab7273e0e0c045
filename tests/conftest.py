# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.core.state import AppState
from tasklist.tasks.task_context import SQLiteTaskContext
from tasklist.tasks.task_store import TaskStore

from .fakes import Banner, FakeDialogs


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the composition root.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        log_file_enabled=False,
        list_title="Task List",
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
    )


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.sqlite3"


@pytest.fixture()
def context(db_path: Path) -> SQLiteTaskContext:
    return SQLiteTaskContext(db_path)


@pytest.fixture()
def store(context: SQLiteTaskContext) -> TaskStore:
    return TaskStore(context)


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def banner() -> Banner:
    return Banner()


@pytest.fixture()
def state(settings: SimpleNamespace, dialogs: FakeDialogs, banner: Banner) -> AppState:
    """
    AppState wired with scripted dialogs.

    NOTE: the SQLite context is real because its behavior is part of what we test.
    """
    return create_initial_state(settings=settings, dialogs=dialogs, notify=banner)
