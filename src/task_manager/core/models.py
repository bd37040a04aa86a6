# src/task_manager/core/models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class Category:
    """
    Named, colored label used to group tasks.

    Notes:
    - equality and hashing use `id` only, so two categories with the same name stay distinct
    - frozen: assigning a category to a task stores a snapshot of its current data
    - `color` is a presentation value ("blue", "#ff8800", ...), never interpreted here
    """

    name: str
    color: str = "blue"
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(slots=True)
class Task:
    """
    A user-created unit of work.

    Equality uses `id` only: an edited working copy still equals the stored task.
    """

    title: str
    category: Category
    description: str = ""
    due_date: date = field(default_factory=date.today)
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id


# (name, color) in seed order.
DEFAULT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Work", "blue"),
    ("Personal", "green"),
    ("Errands", "orange"),
)


def default_categories() -> list[Category]:
    """Fresh default categories (new ids on every call)."""
    return [Category(name=name, color=color) for name, color in DEFAULT_CATEGORIES]
