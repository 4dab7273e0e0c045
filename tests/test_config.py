# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in (
        "APP_NAME",
        "LOG_LEVEL",
        "LOG_FILE_ENABLED",
        "LIST_TITLE",
        "DATA_DIR",
        "TASKS_DB_PATH",
    ):
        monkeypatch.delenv(f"TASKLIST_{suffix}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.log_level == "INFO"
    assert s.log_file_enabled is True
    assert s.list_title == "Task List"
    assert s.data_dir == Path(".local/tasklist")
    assert s.tasks_db_path == Path(".local/tasklist/tasks.sqlite3")


def test_db_path_follows_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    s = Settings.from_env()
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKLIST_LOG_FILE_ENABLED", "off")
    monkeypatch.setenv("TASKLIST_LIST_TITLE", "Groceries")
    monkeypatch.setenv("TASKLIST_TASKS_DB_PATH", str(tmp_path / "x.db"))

    s = Settings.from_env()
    assert s.log_level == "DEBUG"
    assert s.log_file_enabled is False
    assert s.list_title == "Groceries"
    assert s.tasks_db_path == tmp_path / "x.db"


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKLIST_APP_NAME", "   ")
    monkeypatch.setenv("TASKLIST_TASKS_DB_PATH", "")
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.tasks_db_path == s.data_dir / "tasks.sqlite3"
