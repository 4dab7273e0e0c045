# tests/test_bootstrap.py

from __future__ import annotations

import logging
from types import SimpleNamespace

from tasklist.cli.bootstrap import create_initial_state
from tasklist.logging_setup import setup_logging
from tasklist.tasks.task_context import SQLiteTaskContext
from tasklist.tasks.task_store import TaskStore

from .fakes import FakeDialogs


def test_state_loads_existing_tasks(settings: SimpleNamespace) -> None:
    settings.tasks_db_path.parent.mkdir(parents=True)
    seed = TaskStore(SQLiteTaskContext(settings.tasks_db_path))
    seed.add("from last run")

    state = create_initial_state(settings=settings, dialogs=FakeDialogs())

    assert settings.data_dir.is_dir()
    assert state.presenter.row_count == 1
    assert state.presenter.title_at(0) == "from last run"
    assert state.presenter.title == "Task List"


def test_setup_logging_writes_file(tmp_path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("tasklist.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "logs" / "tasklist.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)
