# tests/test_task_context.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from tasklist.tasks.task_context import SQLiteTaskContext
from tasklist.tasks.task_models import PersistenceFailure, StoreOp, Task


def test_new_task_is_pending_until_save(db_path: Path) -> None:
    ctx = SQLiteTaskContext(db_path)
    assert ctx.has_changes is False

    task = ctx.new_task("Buy milk")
    assert task.id
    assert ctx.has_changes is True
    # Pending inserts are visible to fetch, but not durable yet.
    assert [t.title for t in ctx.fetch()] == ["Buy milk"]
    assert SQLiteTaskContext(db_path).fetch() == []

    ctx.save()
    assert ctx.has_changes is False
    assert [t.title for t in SQLiteTaskContext(db_path).fetch()] == ["Buy milk"]


def test_fetch_keeps_insertion_order_and_identity(context: SQLiteTaskContext) -> None:
    a = context.new_task("A")
    b = context.new_task("B")
    c = context.new_task("C")
    context.save()

    first = context.fetch()
    second = context.fetch()
    assert [t.title for t in first] == ["A", "B", "C"]
    assert first[0] is a and first[1] is b and first[2] is c
    assert all(x is y for x, y in zip(first, second))


def test_title_assignment_is_tracked_as_update(db_path: Path) -> None:
    ctx = SQLiteTaskContext(db_path)
    task = ctx.new_task("Draft")
    ctx.save()

    task.title = "Final"
    assert ctx.has_changes is True
    ctx.save()
    assert ctx.has_changes is False

    (reloaded,) = SQLiteTaskContext(db_path).fetch()
    assert reloaded.id == task.id
    assert reloaded.title == "Final"


def test_assigning_same_title_is_not_a_change(context: SQLiteTaskContext) -> None:
    task = context.new_task("Same")
    context.save()
    task.title = "Same"
    assert context.has_changes is False


def test_delete_stages_removal(db_path: Path) -> None:
    ctx = SQLiteTaskContext(db_path)
    keep = ctx.new_task("keep")
    drop = ctx.new_task("drop")
    ctx.save()

    ctx.delete(drop)
    assert ctx.has_changes is True
    assert ctx.fetch() == [keep]

    ctx.save()
    assert [t.id for t in SQLiteTaskContext(db_path).fetch()] == [keep.id]


def test_delete_of_pending_insert_cancels_it(context: SQLiteTaskContext) -> None:
    task = context.new_task("oops")
    context.delete(task)
    assert context.has_changes is False
    assert context.fetch() == []


def test_delete_of_foreign_task_is_rejected(context: SQLiteTaskContext) -> None:
    with pytest.raises(ValueError):
        context.delete(Task(id="not-managed", title="x"))


def test_fetch_picks_up_rows_written_elsewhere(db_path: Path) -> None:
    ctx = SQLiteTaskContext(db_path)
    mine = ctx.new_task("old")
    ctx.save()

    other = SQLiteTaskContext(db_path)
    (theirs,) = other.fetch()
    theirs.title = "new"
    other.save()

    (again,) = ctx.fetch()
    assert again is mine
    assert mine.title == "new"


def test_save_failure_rolls_back_and_keeps_staged_work(db_path: Path) -> None:
    ctx = SQLiteTaskContext(db_path)
    ctx.new_task("first")
    ctx.save()

    # Drop the table behind the context's back so the next flush fails.
    conn = sqlite3.connect(str(db_path))
    try:
        conn.execute("DROP TABLE tasks")
        conn.commit()
    finally:
        conn.close()

    ctx.new_task("second")
    with pytest.raises(PersistenceFailure) as ei:
        ctx.save()
    assert ei.value.op is StoreOp.SAVE
    assert isinstance(ei.value.__cause__, sqlite3.Error)
    assert ctx.has_changes is True


def test_fetch_failure_is_wrapped(db_path: Path) -> None:
    ctx = SQLiteTaskContext(db_path)
    conn = sqlite3.connect(str(db_path))
    try:
        conn.execute("DROP TABLE tasks")
        conn.commit()
    finally:
        conn.close()

    with pytest.raises(PersistenceFailure) as ei:
        ctx.fetch()
    assert ei.value.op is StoreOp.FETCH
