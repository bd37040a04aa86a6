# src/task_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.models import Category
from ..core.state import AppState
from ..tasks.forms import CategoryDraft, TaskDraft, TaskEditor
from ..tasks.stats import TaskStatistics
from .views import (
    DEFAULT_DATE_FORMAT,
    render_categories,
    render_statistics,
    render_task_detail,
    render_task_list,
)

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Commands whose handler gets the unsplit rest of the line as args[0].
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw:
            self._raw.update([key, *(a.lower() for a in aliases)])

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if name in self._raw:
            rest = line[1:].split(maxsplit=1)
            args = [rest[1]] if len(rest) > 1 else []

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def _date_format(state: AppState) -> str:
    return str(getattr(state.settings, "date_format", DEFAULT_DATE_FORMAT))


def _pipe_fields(args: list[str]) -> list[str]:
    """Split a raw argument line on "|": ["a  b | c"] -> ["a  b", "c"]."""
    raw = args[0] if args else ""
    return [p.strip() for p in raw.split("|")]


def _parse_number(raw: str, size: int) -> int | None:
    """1-based user number -> 0-based position, or None if invalid."""
    try:
        n = int(raw.lstrip("#"))
    except ValueError:
        return None
    if n < 1 or n > size:
        return None
    return n - 1


def _find_category(categories: tuple[Category, ...], raw: str) -> Category | None:
    """Resolve a category by 1-based number ("2", "#2") or case-insensitive name."""
    pos = _parse_number(raw, len(categories))
    if pos is not None:
        return categories[pos]
    wanted = raw.strip().lower()
    for c in categories:
        if c.name.lower() == wanted:
            return c
    return None


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_tasks(state: AppState, args: list[str]) -> str:
    return render_task_list(state.store, _date_format(state))


ADD_USAGE = "Usage: /add <title> | <description> | <due YYYY-MM-DD> | <category name or number>"


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add Buy milk | 2 litres | 2026-10-20 | Errands
    Description and due date may be left empty (due defaults to today).
    """
    fields = _pipe_fields(args)
    if len(fields) != 4:
        return ADD_USAGE
    title, description, due_raw, category_raw = fields

    due = date.today()
    if due_raw:
        try:
            due = date.fromisoformat(due_raw)
        except ValueError:
            return f"Invalid due date: {due_raw!r} (expected YYYY-MM-DD)."

    category = _find_category(state.store.categories, category_raw) if category_raw else None
    draft = TaskDraft(title=title, description=description, due_date=due, category=category)
    if not draft.can_save:
        if not title:
            return "A task needs a title. " + ADD_USAGE
        return f"Unknown category: {category_raw!r}. Use /categories to list them."

    task = draft.save(state.store)
    return f"Added task {len(state.store.tasks)}: {task.title}"


def cmd_show(state: AppState, args: list[str]) -> str:
    tasks = state.store.tasks
    pos = _parse_number(args[0], len(tasks)) if args else None
    if pos is None:
        return "Usage: /show <task number>"
    return render_task_detail(tasks[pos], _date_format(state))


EDIT_USAGE = "Usage: /edit <task number> <title|desc|due> <value>"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit 2 title Write the report
    /edit 2 desc            -> clears the description
    /edit 2 due 2026-11-01
    """
    parts = args[0].split(maxsplit=2) if args else []
    if len(parts) < 2:
        return EDIT_USAGE
    tasks = state.store.tasks
    pos = _parse_number(parts[0], len(tasks))
    if pos is None:
        return f"No task #{parts[0]}. Use /tasks to list them."
    field_name = parts[1].lower()
    value = parts[2] if len(parts) > 2 else ""

    # Commit only once the value parsed.
    editor = TaskEditor(state.store, tasks[pos])
    if field_name == "title":
        editor.set_title(value)
    elif field_name in ("desc", "description"):
        editor.set_description(value)
    elif field_name in ("due", "date"):
        try:
            editor.set_due_date(date.fromisoformat(value))
        except ValueError:
            return f"Invalid due date: {value!r} (expected YYYY-MM-DD)."
    else:
        return EDIT_USAGE
    editor.commit()
    return f"Updated task {pos + 1}."


def cmd_done(state: AppState, args: list[str]) -> str:
    tasks = state.store.tasks
    pos = _parse_number(args[0], len(tasks)) if args else None
    if pos is None:
        return "Usage: /done <task number>"
    with TaskEditor(state.store, tasks[pos]) as editor:
        completed = editor.toggle_completed()
    return f"Task {pos + 1} marked {'completed' if completed else 'not completed'}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    """/delete 1 3  -> numbers refer to the list as currently shown."""
    if not args:
        return "Usage: /delete <task number> [task number ...]"
    size = len(state.store.tasks)
    positions: set[int] = set()
    for raw in args:
        pos = _parse_number(raw, size)
        if pos is None:
            return f"No task #{raw}. Nothing deleted."
        positions.add(pos)
    logger.debug("Delete requested positions=%s", sorted(positions))
    state.store.delete_tasks(positions)
    return f"Deleted {len(positions)} task(s)."


def cmd_categories(state: AppState, args: list[str]) -> str:
    return render_categories(state.store.categories)


def cmd_addcat(state: AppState, args: list[str]) -> str:
    fields = _pipe_fields(args)
    name = fields[0]
    color = fields[1] if len(fields) > 1 and fields[1] else "blue"
    draft = CategoryDraft(name=name, color=color)
    if not draft.can_save:
        return "Usage: /addcat <name> [| <color>]"
    category = draft.save(state.store)
    return f"Added category {category.name} [{category.color}]."


def cmd_stats(state: AppState, args: list[str]) -> str:
    return render_statistics(TaskStatistics.from_store(state.store))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("tasks", cmd_tasks, help_text="List tasks.", aliases=["ls", "list"])
registry.register("add", cmd_add, help_text="Add a task: /add title | description | YYYY-MM-DD | category.", raw=True)
registry.register("show", cmd_show, help_text="Show task details: /show <n>.")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <n> title|desc|due <value>.", raw=True)
registry.register("done", cmd_done, help_text="Toggle completion: /done <n>.", aliases=["toggle"])
registry.register("delete", cmd_delete, help_text="Delete tasks: /delete <n> [n ...].", aliases=["rm", "del"])
registry.register("categories", cmd_categories, help_text="List categories.", aliases=["cats"])
registry.register("addcat", cmd_addcat, help_text="Add a category: /addcat name [| color].", raw=True)
registry.register("stats", cmd_stats, help_text="Show completion statistics.", aliases=["statistics"])
