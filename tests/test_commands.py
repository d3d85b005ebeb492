# tests/test_commands.py

from __future__ import annotations

from taskpad.cli.commands import CommandRegistry, parse_args, registry
from taskpad.core.state import AppState


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, args):
        called["a"] += 1
        return f"a:{','.join(args)}"

    reg.register("alpha", handler, "alpha help", aliases=["A"])

    assert reg.handle(state, "/alpha x y") == "a:x,y"
    assert reg.handle(state, "/a") == "a:"
    assert called["a"] == 2
    assert "/alpha - alpha help" in reg.build_help()


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_parse_args_splits_options_from_text() -> None:
    parsed = parse_args(["cat:work", "Pay", "rent", "due:2025-12-01", "at:09:00", "note:keep"])
    assert parsed.text == "Pay rent note:keep"
    assert parsed.options == {"category": "work", "due_date": "2025-12-01", "due_time": "09:00"}


def test_add_command(state: AppState) -> None:
    reply = registry.handle(state, "/add cat:shopping due:2025-11-29 Buy milk")
    assert reply == "Added: [ ] #1 Buy milk  [SHOPPING]  (Tomorrow)"

    task = state.task_store.get(1)
    assert task is not None
    assert task.category == "Shopping"
    assert task.due_date == "2025-11-29"
    assert task.due_time is None


def test_add_command_defaults_and_rejections(state: AppState) -> None:
    assert registry.handle(state, "/add") == "Nothing added: task text is empty."
    assert "Unknown category" in (registry.handle(state, "/add cat:chores Sweep") or "")
    assert state.task_store.tasks == []

    registry.handle(state, "/add Read a book")
    assert state.task_store.tasks[0].category == "Personal"


def test_toggle_and_delete_commands(state: AppState) -> None:
    registry.handle(state, "/add Water plants")
    assert registry.handle(state, "/done 1") == "Task #1 marked done."
    assert registry.handle(state, "/toggle #1") == "Task #1 marked not done."
    assert registry.handle(state, "/toggle 9") == "No task #9."
    assert registry.handle(state, "/toggle x") == "Usage: /toggle <id>"

    assert registry.handle(state, "/rm 1") == "Deleted task #1."
    assert registry.handle(state, "/delete 1") == "No task #1."


def test_edit_update_flow_keeps_category_and_completion(state: AppState) -> None:
    registry.handle(state, "/add cat:Work due:2025-12-01 at:09:00 Draft report")
    registry.handle(state, "/toggle 1")

    reply = registry.handle(state, "/edit 1") or ""
    assert reply.startswith("Editing:")
    assert state.edit.task_id == 1
    assert state.edit.due_date == "2025-12-01"

    assert registry.handle(state, "/update at:- Final report") == (
        "Updated: [x] #1 Final report  [WORK]  (3 days)"
    )
    task = state.task_store.get(1)
    assert task is not None
    assert task.text == "Final report"
    assert task.due_date == "2025-12-01"
    assert task.due_time is None
    assert task.completed is True
    assert task.category == "Work"
    assert not state.edit.active


def test_update_with_blank_text_stays_in_edit_mode(state: AppState) -> None:
    registry.handle(state, "/add Keep")
    registry.handle(state, "/edit 1")
    state.edit.text = "   "

    assert "cannot be empty" in (registry.handle(state, "/update") or "")
    assert state.edit.active
    assert state.task_store.get(1).text == "Keep"  # type: ignore[union-attr]

    assert registry.handle(state, "/cancel") == "Edit cancelled."
    assert registry.handle(state, "/cancel") == "Not editing anything."
    assert registry.handle(state, "/update x") == "Not editing anything. Use /edit <id> first."


def test_deleting_edited_task_ends_session(state: AppState) -> None:
    registry.handle(state, "/add Gone soon")
    registry.handle(state, "/edit 1")
    registry.handle(state, "/delete 1")
    assert not state.edit.active


def test_filter_and_list(state: AppState) -> None:
    registry.handle(state, "/add cat:Work Report")
    registry.handle(state, "/add cat:Health Gym")

    out = registry.handle(state, "/filter health") or ""
    assert state.active_filter == "Health"
    assert "#2 Gym" in out and "#1 Report" not in out

    assert "Unknown filter" in (registry.handle(state, "/filter nope") or "")
    assert state.active_filter == "Health"

    registry.handle(state, "/filter all")
    out = registry.handle(state, "/ls") or ""
    assert "#1 Report" in out and "#2 Gym" in out
    assert out.splitlines()[-1] == "2 of 2 tasks remaining"


def test_stats_and_status(state: AppState) -> None:
    registry.handle(state, "/add cat:Finance Taxes")
    registry.handle(state, "/add cat:Finance Budget")
    registry.handle(state, "/toggle 2")

    stats = registry.handle(state, "/stats") or ""
    assert "Remaining: 1" in stats
    assert "Completed: 1" in stats
    assert "Finance: 2" in stats

    status = registry.handle(state, "/status") or ""
    assert "taskpad-test" in status
    assert "Tasks: 2" in status


def test_option_key_without_value_stays_in_text(state: AppState) -> None:
    parsed = parse_args(["Call", "date:", "Friday"])
    assert parsed.text == "Call date: Friday"
    assert parsed.options == {}

    registry.handle(state, "/add Email cat:")
    task = state.task_store.get(1)
    assert task is not None
    assert task.text == "Email cat:"
    assert task.category == "Personal"
    assert task.due_date is None
