# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


@dataclass(eq=False, slots=True)
class Task:
    """
    A single to-do entry.

    `id` is assigned by the mutation context when the instance is created and
    never changes. Instances compare by identity: within one context, every
    fetch of the same row returns the same object.
    """

    id: str
    title: str


class StoreOp(StrEnum):
    FETCH = "fetch"
    SAVE = "save"


class PersistenceFailure(Exception):
    """Fetch or save against durable storage failed."""

    def __init__(self, op: StoreOp, message: str) -> None:
        super().__init__(f"{op.value} failed: {message}")
        self.op = op


@dataclass(frozen=True, slots=True)
class StoreResult:
    """
    Outcome of a TaskStore operation.

    `tasks` is a snapshot of the store's in-memory list after the operation,
    whether or not it succeeded.
    """

    tasks: list[Task] = field(default_factory=list)
    error: PersistenceFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
