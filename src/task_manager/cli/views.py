# src/task_manager/cli/views.py

"""Plain-text renderings of store state for the console."""

from __future__ import annotations

from ..core.models import Category, Task
from ..core.ports import TaskRepo
from ..tasks.stats import TaskStatistics, format_rate

DEFAULT_DATE_FORMAT = "%b %d, %Y"


def render_task_row(n: int, task: Task, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    mark = "x" if task.is_completed else " "
    line = f"{n}. [{mark}] {task.title}  ({task.category.name}, due {task.due_date.strftime(date_format)})"
    if task.description:
        line += f"\n      {task.description}"
    return line


def render_task_list(store: TaskRepo, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    tasks = store.tasks
    if not tasks:
        return "My Tasks: (empty). Use /add to create one."
    lines = ["My Tasks:"]
    for i, task in enumerate(tasks, start=1):
        lines.append(render_task_row(i, task, date_format))
    return "\n".join(lines)


def render_task_detail(task: Task, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    return (
        "Task Details:\n"
        f"  Title: {task.title}\n"
        f"  Description: {task.description or '-'}\n"
        f"  Due Date: {task.due_date.strftime(date_format)}\n"
        f"  Category: {task.category.name} ({task.category.color})\n"
        f"  Completed: {'yes' if task.is_completed else 'no'}"
    )


def render_categories(categories: tuple[Category, ...]) -> str:
    lines = ["Categories:"]
    for i, c in enumerate(categories, start=1):
        lines.append(f"  {i}. {c.name} [{c.color}]")
    return "\n".join(lines)


def render_statistics(stats: TaskStatistics) -> str:
    lines = [
        "Task Statistics:",
        f"  Total Tasks: {stats.total}",
        f"  Completed Tasks: {stats.completed}",
        f"  Completion Rate: {format_rate(stats.completion_rate)}",
        "Task Distribution:",
    ]
    for category, count in stats.distribution:
        lines.append(f"  {category.name}: {count}")
    return "\n".join(lines)


def render_summary(store: TaskRepo) -> str:
    return (
        f"[tasks] {store.total_count} total, {store.completed_count} done "
        f"({format_rate(store.completion_rate)})"
    )
