# src/task_manager/tasks/forms.py

"""
Form-side helpers used by presentation layers.

The store accepts anything; these objects do the gating a "Save" button
would do (non-empty title and a selected category for tasks, non-empty name
for categories) and implement edit-in-place for the detail view.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from types import TracebackType

from ..core.models import Category, Task
from ..core.ports import TaskRepo

logger = logging.getLogger(__name__)


class DraftIncompleteError(ValueError):
    """Raised when saving a draft whose `can_save` is False."""


@dataclass(slots=True)
class TaskDraft:
    title: str = ""
    description: str = ""
    due_date: date = field(default_factory=date.today)
    category: Category | None = None

    @property
    def can_save(self) -> bool:
        return bool(self.title) and self.category is not None

    def build(self) -> Task:
        if not self.can_save or self.category is None:
            raise DraftIncompleteError("task needs a title and a category")
        return Task(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            is_completed=False,
            category=self.category,
        )

    def save(self, store: TaskRepo) -> Task:
        task = self.build()
        store.add_task(task)
        return task


@dataclass(slots=True)
class CategoryDraft:
    name: str = ""
    color: str = "blue"

    @property
    def can_save(self) -> bool:
        return bool(self.name)

    def save(self, store: TaskRepo) -> Category:
        if not self.can_save:
            raise DraftIncompleteError("category needs a name")
        category = Category(name=self.name, color=self.color)
        store.add_category(category)
        return category


class TaskEditor:
    """
    Edit-in-place for a single task.

    Edits go to a private working copy; `commit()` writes the copy back through
    `store.update_task`. Use as a context manager to commit on a clean exit, like a
    detail screen committing when it disappears; an exception inside the block
    discards the edit. If the task was deleted in the meantime the commit is a
    no-op.
    """

    def __init__(self, store: TaskRepo, task: Task) -> None:
        self._store = store
        self.task = replace(task)

    def set_title(self, title: str) -> None:
        self.task.title = title

    def set_description(self, description: str) -> None:
        self.task.description = description

    def set_due_date(self, due_date: date) -> None:
        self.task.due_date = due_date

    def set_completed(self, completed: bool) -> None:
        self.task.is_completed = completed

    def toggle_completed(self) -> bool:
        self.task.is_completed = not self.task.is_completed
        return self.task.is_completed

    def commit(self) -> None:
        logger.debug("Committing edit for task id=%s", self.task.id)
        # Commit a copy so later edits to the working copy don't leak into the store.
        self._store.update_task(replace(self.task))

    def __enter__(self) -> TaskEditor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.commit()
