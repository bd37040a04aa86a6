# src/task_manager/tasks/stats.py

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import Category
from ..core.ports import TaskRepo


@dataclass(frozen=True, slots=True)
class TaskStatistics:
    total: int
    completed: int
    completion_rate: float
    distribution: tuple[tuple[Category, int], ...]

    @classmethod
    def from_store(cls, store: TaskRepo) -> TaskStatistics:
        """Snapshot of the store's derived statistics, categories in store order."""
        return cls(
            total=store.total_count,
            completed=store.completed_count,
            completion_rate=store.completion_rate,
            distribution=tuple((c, store.per_category_count(c)) for c in store.categories),
        )


def format_rate(rate: float) -> str:
    # 0.5 -> "50.0%"
    return f"{rate * 100:.1f}%"
