# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging

from ..core.ports import TaskContext
from .task_models import PersistenceFailure, StoreResult, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Single point of access to persisted tasks.

    Owns the in-memory task list; every read and write goes through the
    mutation context. Persistence failures never raise: they are logged and
    returned in the StoreResult so the presenter can decide how to show them.

    Title validation is the caller's job.
    """

    def __init__(self, context: TaskContext) -> None:
        self._context = context
        self._tasks: list[Task] = []

    @property
    def task_list(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def _result(self, error: PersistenceFailure | None = None) -> StoreResult:
        return StoreResult(tasks=list(self._tasks), error=error)

    def _save_if_needed(self) -> PersistenceFailure | None:
        if not self._context.has_changes:
            return None
        try:
            self._context.save()
        except PersistenceFailure as e:
            logger.warning("Task save failed: %s", e)
            return e
        return None

    def fetch_all(self) -> StoreResult:
        """Replace the in-memory list with whatever storage returns."""
        try:
            self._tasks = list(self._context.fetch())
        except PersistenceFailure as e:
            logger.warning("Task fetch failed, keeping %d cached tasks: %s", len(self._tasks), e)
            return self._result(e)
        return self._result()

    def add(self, title: str) -> StoreResult:
        """
        Create a task and flush it.

        The new task stays in the in-memory list even if the flush fails.
        """
        task = self._context.new_task(title)
        self._tasks.append(task)
        err = self._save_if_needed()
        if err is None:
            logger.debug("Task added id=%s", task.id)
        return self._result(err)

    def remove(self, task: Task) -> StoreResult:
        """Delete a task, flush, and return the refreshed list."""
        self._context.delete(task)
        err = self._save_if_needed()
        if err is not None:
            return self._result(err)
        logger.debug("Task removed id=%s", task.id)
        return self.fetch_all()

    def rename(self, task: Task, new_title: str) -> StoreResult:
        task.title = new_title
        err = self._save_if_needed()
        if err is None:
            logger.debug("Task renamed id=%s", task.id)
        return self._result(err)
