# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store and presenter depend on Protocols instead of concrete implementations.
This keeps the storage engine and the front-end swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import StoreResult, Task


class TaskContext(Protocol):
    """Persistence engine boundary: a unit of work over durable storage."""

    @property
    def has_changes(self) -> bool: ...

    def fetch(self) -> list[Task]: ...
    def new_task(self, title: str) -> Task: ...
    def delete(self, task: Task) -> None: ...
    def save(self) -> None: ...


class TaskRepo(Protocol):
    """What the presenter needs from the task store."""

    @property
    def task_list(self) -> Sequence[Task]: ...

    def fetch_all(self) -> StoreResult: ...
    def add(self, title: str) -> StoreResult: ...
    def remove(self, task: Task) -> StoreResult: ...
    def rename(self, task: Task, new_title: str) -> StoreResult: ...


class Dialogs(Protocol):
    """
    Modal text entry.

    Returns the entered text, or None if the user cancelled.
    """

    def ask_text(
            self,
            title: str,
            message: str,
            *,
            initial: str = "",
            placeholder: str = "",
    ) -> str | None: ...
