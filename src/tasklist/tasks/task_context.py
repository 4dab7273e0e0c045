# src/tasklist/tasks/task_context.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
import uuid
from pathlib import Path

from .task_models import PersistenceFailure, StoreOp, Task

logger = logging.getLogger(__name__)


class SQLiteTaskContext:
    """
    SQLite-backed mutation context (unit of work) for tasks.

    Changes are staged in memory and only reach the database on save():
    - new_task() stages an insert
    - delete() stages a delete (or cancels a staged insert)
    - assigning task.title on a managed task is picked up as an update

    fetch() includes pending changes: staged inserts are appended after the
    committed rows and staged deletes are left out.

    Identity map:
    - every fetch of the same row returns the same Task object

    Thread-safety:
    - none; one writer at a time by construction
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

        self._registered: dict[str, Task] = {}
        self._snapshots: dict[str, str] = {}  # id -> last committed title
        self._inserted: dict[str, Task] = {}
        self._deleted: dict[str, Task] = {}

        self._ensure_schema()
        try:
            total = self.count_tasks()
        except sqlite3.Error:
            total = -1
        logger.info("TaskContext ready db=%s total=%s", self._db_path, total)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def _dirty(self) -> list[Task]:
        return [
            t
            for tid, t in self._registered.items()
            if tid not in self._deleted and t.title != self._snapshots.get(tid)
        ]

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    @property
    def has_changes(self) -> bool:
        return bool(self._inserted or self._deleted or self._dirty())

    def fetch(self) -> list[Task]:
        try:
            conn = self._get_conn()
            try:
                rows = conn.execute("SELECT id, title FROM tasks ORDER BY rowid ASC").fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceFailure(StoreOp.FETCH, str(e)) from e

        out: list[Task] = []
        seen: set[str] = set()
        for row in rows:
            tid = str(row["id"])
            title = str(row["title"])
            seen.add(tid)

            task = self._registered.get(tid)
            if task is None:
                task = Task(id=tid, title=title)
                self._registered[tid] = task
            elif task.title == self._snapshots.get(tid):
                # Clean object: pick up the stored value. Dirty ones keep their edit.
                task.title = title
            self._snapshots[tid] = title

            if tid not in self._deleted:
                out.append(task)

        # Rows that vanished from disk are no longer managed.
        for tid in list(self._registered):
            if tid not in seen:
                self._registered.pop(tid, None)
                self._snapshots.pop(tid, None)
                self._deleted.pop(tid, None)

        out.extend(self._inserted.values())
        logger.debug("Fetched %d tasks (%d pending inserts)", len(out), len(self._inserted))
        return out

    def new_task(self, title: str) -> Task:
        task = Task(id=uuid.uuid4().hex, title=title)
        self._inserted[task.id] = task
        return task

    def delete(self, task: Task) -> None:
        if task.id in self._inserted:
            del self._inserted[task.id]
            return
        if self._registered.get(task.id) is not task:
            raise ValueError(f"Task {task.id} is not managed by this context")
        self._deleted[task.id] = task

    def save(self) -> None:
        """
        Flush staged inserts, updates and deletes in a single transaction.

        On failure the transaction is rolled back and the staged work is kept,
        so a later save() can retry it.
        """
        inserted = list(self._inserted.values())
        dirty = self._dirty()
        deleted = list(self._deleted.values())
        if not (inserted or dirty or deleted):
            return

        now = time.time()
        try:
            conn = self._get_conn()
            try:
                with conn:
                    conn.executemany(
                        "INSERT INTO tasks(id, title, created_at, updated_at) VALUES (?, ?, ?, ?)",
                        [(t.id, t.title, now, now) for t in inserted],
                    )
                    conn.executemany(
                        "UPDATE tasks SET title = ?, updated_at = ? WHERE id = ?",
                        [(t.title, now, t.id) for t in dirty],
                    )
                    conn.executemany(
                        "DELETE FROM tasks WHERE id = ?",
                        [(t.id,) for t in deleted],
                    )
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceFailure(StoreOp.SAVE, str(e)) from e

        for t in inserted:
            self._registered[t.id] = t
            self._snapshots[t.id] = t.title
        for t in dirty:
            self._snapshots[t.id] = t.title
        for t in deleted:
            self._registered.pop(t.id, None)
            self._snapshots.pop(t.id, None)

        self._inserted.clear()
        self._deleted.clear()
        logger.debug(
            "Saved inserted=%d updated=%d deleted=%d", len(inserted), len(dirty), len(deleted)
        )
