# src/task_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used between the store and its consumers.

Consumers (console, tests, any future UI) depend on these Protocols instead of
the concrete TaskStore, and receive StoreChange events on every mutation.
"""

import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol


class ChangeKind(StrEnum):
    TASK_ADDED = "task_added"
    TASK_UPDATED = "task_updated"
    TASKS_DELETED = "tasks_deleted"
    CATEGORY_ADDED = "category_added"


@dataclass(frozen=True, slots=True)
class StoreChange:
    """One mutation, delivered to listeners after the store state has changed."""

    kind: ChangeKind
    task_ids: tuple[uuid.UUID, ...] = ()
    category_id: uuid.UUID | None = None


class StoreListener(Protocol):
    def __call__(self, change: StoreChange) -> None: ...


Unsubscribe = Callable[[], None]


class TaskRepo(Protocol):
    # Read surface
    @property
    def tasks(self) -> tuple[Any, ...]: ...
    @property
    def categories(self) -> tuple[Any, ...]: ...
    def find_task(self, task_id: uuid.UUID) -> Any | None: ...

    # Derived statistics
    @property
    def total_count(self) -> int: ...
    @property
    def completed_count(self) -> int: ...
    @property
    def completion_rate(self) -> float: ...
    def per_category_count(self, category: Any) -> int: ...

    # Write surface
    def add_task(self, task: Any) -> None: ...
    def update_task(self, task: Any) -> None: ...
    def delete_tasks(self, positions: Iterable[int]) -> None: ...
    def add_category(self, category: Any) -> None: ...

    # Change notification
    def subscribe(self, listener: StoreListener) -> Unsubscribe: ...
