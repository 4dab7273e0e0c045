# src/tasklist/core/presenter.py

"""
List presenter.

Front-end agnostic:
- maps row index -> task title,
- turns gestures (add, swipe-to-delete, swipe-to-edit, row tap while editing,
  inline edit) into TaskStore calls,
- refreshes from the store after every mutation.

The front-end (console) decides how rows and failure banners are drawn.

Inline edits (the row text field shown in editing mode) commit on return and
are discarded on dismiss.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_models import StoreResult, Task
from .ports import Dialogs, TaskRepo

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]

NEW_TASK_TITLE = "New Task"
NEW_TASK_MESSAGE = "What do you want to do?"
NEW_TASK_PLACEHOLDER = "New Task"
EDIT_TASK_TITLE = "Edit Task"
EDIT_TASK_MESSAGE = "Enter a new title"


@dataclass(frozen=True, slots=True)
class Row:
    index: int
    title: str
    editable: bool  # inline text field instead of a static label

    def render(self) -> str:
        if self.editable:
            return f"[ {self.title} ]"
        return self.title


class TaskListPresenter:
    def __init__(
        self,
        store: TaskRepo,
        dialogs: Dialogs,
        *,
        title: str = "Task List",
        notify: Notifier | None = None,
    ) -> None:
        self._store = store
        self._dialogs = dialogs
        self._notify = notify
        self.title = title
        self.editing = False

    # ---- data source ----

    @property
    def row_count(self) -> int:
        return len(self._store.task_list)

    @property
    def add_enabled(self) -> bool:
        return not self.editing

    def task_at(self, index: int) -> Task:
        tasks = self._store.task_list
        if index < 0 or index >= len(tasks):
            raise IndexError(f"No task at row {index}")
        return tasks[index]

    def title_at(self, index: int) -> str:
        return self.task_at(index).title

    def rows(self) -> list[Row]:
        return [
            Row(index=i, title=t.title, editable=self.editing)
            for i, t in enumerate(self._store.task_list)
        ]

    # ---- lifecycle ----

    def load(self) -> None:
        self._report(self._store.fetch_all())

    def set_editing(self, editing: bool) -> None:
        self.editing = bool(editing)
        logger.debug("Editing mode %s", "on" if self.editing else "off")

    # ---- gestures ----

    def add_task(self, text: str | None = None) -> bool:
        """
        Title-bar add button. Without text, asks for it through the dialog.

        Returns True if a task was stored.
        """
        if not self.add_enabled:
            return False
        if text is None:
            text = self._dialogs.ask_text(
                NEW_TASK_TITLE, NEW_TASK_MESSAGE, placeholder=NEW_TASK_PLACEHOLDER
            )
        if not text:
            return False

        ok = self._report(self._store.add(text))
        self._report(self._store.fetch_all())
        return ok

    def delete_row(self, index: int) -> bool:
        task = self.task_at(index)
        return self._report(self._store.remove(task))

    def edit_row(self, index: int, text: str | None = None) -> bool:
        """Swipe-to-edit. Without text, asks for it prefilled with the current title."""
        task = self.task_at(index)
        if text is None:
            text = self._dialogs.ask_text(EDIT_TASK_TITLE, EDIT_TASK_MESSAGE, initial=task.title)
        if not text:
            return False
        return self._rename(task, text)

    def select_row(self, index: int) -> bool:
        """Row tap: only opens the edit dialog while editing."""
        if not self.editing:
            return False
        return self.edit_row(index)

    def commit_inline_edit(self, index: int, text: str | None) -> bool:
        """
        Return key in a row's text field.

        None means the field was dismissed without return; nothing is stored.
        """
        if not self.editing or text is None:
            return False
        task = self.task_at(index)
        if not text or text == task.title:
            return False
        return self._rename(task, text)

    # ---- helpers ----

    def _rename(self, task: Task, text: str) -> bool:
        ok = self._report(self._store.rename(task, text))
        self._report(self._store.fetch_all())
        return ok

    def _report(self, result: StoreResult) -> bool:
        if result.ok:
            return True
        msg = f"Could not save your changes ({result.error})."
        if self._notify is not None:
            self._notify(msg)
        else:
            # The store already logged the failure itself.
            logger.debug("%s", msg)
        return False
