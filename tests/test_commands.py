# tests/test_commands.py

from __future__ import annotations

from datetime import date

from task_manager.cli.commands import CommandRegistry, registry


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("ping", handler, "ping", aliases=["p"])

    assert reg.handle(state, "/ping a b") == "ok"
    assert reg.handle(state, "/P") == "ok"
    assert called == [["a", "b"], []]
    assert "/ping - ping" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_and_list(state) -> None:
    reply = registry.handle(state, "/add Buy milk | 2 litres | 2026-10-20 | errands")
    assert reply == "Added task 1: Buy milk"

    task = state.store.tasks[0]
    assert task.description == "2 litres"
    assert task.due_date == date(2026, 10, 20)
    assert task.category.name == "Errands"
    assert task.is_completed is False

    listing = registry.handle(state, "/tasks")
    assert "1. [ ] Buy milk  (Errands, due 2026-10-20)" in (listing or "")


def test_add_defaults_and_category_by_number(state) -> None:
    registry.handle(state, "/add Call mom |  |  | 2")
    task = state.store.tasks[0]
    assert task.category.name == "Personal"
    assert task.description == ""
    assert task.due_date == date.today()


def test_add_is_gated(state) -> None:
    assert "needs a title" in (registry.handle(state, "/add  | desc |  | Work") or "")
    assert "Unknown category" in (registry.handle(state, "/add Title | | | Nope") or "")
    assert "Unknown category" in (registry.handle(state, "/add Title | | | ") or "")
    assert "Invalid due date" in (registry.handle(state, "/add Title | | tomorrow | Work") or "")
    assert (registry.handle(state, "/add just a title") or "").startswith("Usage")
    assert state.store.tasks == ()


def test_pipe_commands_keep_inner_spacing(state) -> None:
    registry.handle(state, "/add a  b | x   y | | Work")
    task = state.store.tasks[0]
    assert task.title == "a  b"
    assert task.description == "x   y"

    registry.handle(state, "/edit 1 desc two  spaces")
    assert state.store.tasks[0].description == "two  spaces"

    assert registry.handle(state, "/addcat Deep  Work | green") == "Added category Deep  Work [green]."


def test_raw_registration_passes_rest_of_line(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("say", handler, "say", aliases=["s"], raw=True)

    reg.handle(state, "/say  hello   world ")
    reg.handle(state, "/S a  b")
    reg.handle(state, "/say")
    assert called == [["hello   world "], ["a  b"], []]


def test_done_toggles_completion(state) -> None:
    registry.handle(state, "/add A | | | Work")
    assert registry.handle(state, "/done 1") == "Task 1 marked completed."
    assert state.store.completed_count == 1
    assert registry.handle(state, "/done 1") == "Task 1 marked not completed."
    assert state.store.completed_count == 0
    assert (registry.handle(state, "/done 9") or "").startswith("Usage")


def test_edit_fields(state) -> None:
    registry.handle(state, "/add A | | | Work")
    assert registry.handle(state, "/edit 1 title Write the report") == "Updated task 1."
    registry.handle(state, "/edit 1 desc quarterly numbers")
    registry.handle(state, "/edit 1 due 2026-11-01")

    task = state.store.tasks[0]
    assert task.title == "Write the report"
    assert task.description == "quarterly numbers"
    assert task.due_date == date(2026, 11, 1)


def test_edit_bad_input_does_not_touch_store(state, listener) -> None:
    registry.handle(state, "/add A | | 2026-10-20 | Work")
    listener.changes.clear()

    assert "Invalid due date" in (registry.handle(state, "/edit 1 due soon") or "")
    assert (registry.handle(state, "/edit 1 colour red") or "").startswith("Usage")
    assert "No task #5" in (registry.handle(state, "/edit 5 title x") or "")

    assert listener.changes == []
    assert state.store.tasks[0].due_date == date(2026, 10, 20)


def test_delete_multiple_uses_shown_numbers(state) -> None:
    for title in "ABCDE":
        registry.handle(state, f"/add {title} | | | Work")

    assert registry.handle(state, "/delete 4 2") == "Deleted 2 task(s)."
    assert [t.title for t in state.store.tasks] == ["A", "C", "E"]


def test_delete_invalid_number_deletes_nothing(state) -> None:
    registry.handle(state, "/add A | | | Work")
    assert "Nothing deleted" in (registry.handle(state, "/delete 1 7") or "")
    assert len(state.store.tasks) == 1


def test_show(state) -> None:
    registry.handle(state, "/add A | details | 2026-10-20 | Errands")
    text = registry.handle(state, "/show 1") or ""
    assert "Title: A" in text
    assert "Description: details" in text
    assert "Category: Errands (orange)" in text
    assert "Completed: no" in text


def test_categories_and_addcat(state) -> None:
    assert registry.handle(state, "/addcat Health | red") == "Added category Health [red]."
    assert registry.handle(state, "/addcat Home") == "Added category Home [blue]."
    assert (registry.handle(state, "/addcat") or "").startswith("Usage")

    text = registry.handle(state, "/cats") or ""
    assert "4. Health [red]" in text
    assert "5. Home [blue]" in text

    registry.handle(state, "/add Run | | | health")
    assert state.store.tasks[0].category.name == "Health"


def test_stats_command(state) -> None:
    registry.handle(state, "/add Buy milk | | | Errands")
    registry.handle(state, "/add Write report | | | Work")
    registry.handle(state, "/done 1")

    text = registry.handle(state, "/stats") or ""
    assert "Total Tasks: 2" in text
    assert "Completion Rate: 50.0%" in text
    assert "Work: 1" in text


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/add", "/tasks", "/delete", "/stats", "/exit"):
        assert name in text
