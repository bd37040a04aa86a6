# src/task_manager/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

from ..core.models import Category, Task, default_categories
from ..core.ports import ChangeKind, StoreChange, StoreListener, Unsubscribe

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory store: the single owner of tasks and categories.

    Semantics:
    - insertion order is the only ordering for both collections
    - every mutation notifies listeners synchronously, before the call returns
    - statistics are derived from current state on every read (nothing cached)
    - no persistence: state lives for the lifetime of the process

    Thread-safety:
    - none; all calls are expected on the single UI/console thread
    """

    def __init__(self, categories: Iterable[Category] | None = None) -> None:
        self._tasks: list[Task] = []
        self._categories: list[Category] = (
            list(categories) if categories is not None else default_categories()
        )
        self._listeners: list[StoreListener] = []
        logger.info("TaskStore ready categories=%s", len(self._categories))

    # ---- change notification ----

    def subscribe(self, listener: StoreListener) -> Unsubscribe:
        """
        Register a listener for StoreChange events.
        Returns a callable that removes this one registration; calling it again
        is a no-op, even if the same listener was subscribed more than once.
        """
        self._listeners.append(listener)
        active = True

        def _unsubscribe() -> None:
            nonlocal active
            if not active:
                return
            active = False
            # By identity: listeners may define value equality.
            for i, registered in enumerate(self._listeners):
                if registered is listener:
                    del self._listeners[i]
                    break

        return _unsubscribe

    def _notify(self, change: StoreChange) -> None:
        # Copy: a listener may unsubscribe itself while being notified.
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Store listener failed kind=%s", change.kind)

    # ---- read surface ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories)

    def find_task(self, task_id: uuid.UUID) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # ---- derived statistics ----

    @property
    def total_count(self) -> int:
        return len(self._tasks)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_completed)

    @property
    def completion_rate(self) -> float:
        """Completed / total, or exactly 0.0 for an empty store."""
        if not self._tasks:
            return 0.0
        return self.completed_count / len(self._tasks)

    def per_category_count(self, category: Category) -> int:
        return sum(1 for t in self._tasks if t.category.id == category.id)

    # ---- write surface ----

    def add_task(self, task: Task) -> None:
        """Append a task. Validation (title, category) belongs to the caller."""
        self._tasks.append(task)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        self._notify(StoreChange(ChangeKind.TASK_ADDED, task_ids=(task.id,)))

    def update_task(self, task: Task) -> None:
        """
        Replace the stored task with the same id, keeping its position.

        Unknown id -> silent no-op (no notification). An editor may commit a
        working copy of a task that was deleted meanwhile.
        """
        for index, current in enumerate(self._tasks):
            if current.id == task.id:
                self._tasks[index] = task
                logger.debug("Task updated id=%s position=%s", task.id, index)
                self._notify(StoreChange(ChangeKind.TASK_UPDATED, task_ids=(task.id,)))
                return
        logger.debug("Task update ignored: unknown id=%s", task.id)

    def delete_tasks(self, positions: Iterable[int]) -> None:
        """
        Remove the tasks at `positions` in one update.

        All positions refer to the ordering before removal, so the result does not
        depend on the order (or duplicates) of `positions`. Positions come from the
        currently rendered list; an out-of-range one is a caller bug and raises
        IndexError before anything is removed.
        """
        doomed = set(positions)
        size = len(self._tasks)
        for pos in doomed:
            if pos < 0 or pos >= size:
                raise IndexError(f"task position out of range: {pos} (size={size})")

        removed = tuple(self._tasks[pos].id for pos in sorted(doomed))
        self._tasks = [t for i, t in enumerate(self._tasks) if i not in doomed]
        logger.debug("Tasks deleted positions=%s", sorted(doomed))
        self._notify(StoreChange(ChangeKind.TASKS_DELETED, task_ids=removed))

    def add_category(self, category: Category) -> None:
        """Append a category. Duplicate names are allowed."""
        self._categories.append(category)
        logger.debug("Category added id=%s name=%r", category.id, category.name)
        self._notify(StoreChange(ChangeKind.CATEGORY_ADDED, category_id=category.id))
