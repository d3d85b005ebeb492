# tests/test_render.py

from __future__ import annotations

from datetime import date

import pytest

from taskpad.cli.render import (
    CATEGORY_HEX,
    RESET,
    category_color,
    due_label,
    empty_message,
    format_task_line,
    format_time_12h,
    render_tasks,
    summary_line,
)
from taskpad.tasks.task_models import Category, Task

TODAY = date(2025, 11, 28)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("09:00", "9:00 AM"), ("00:15", "12:15 AM"), ("12:00", "12:00 PM"), ("23:59", "11:59 PM"), ("soon", "soon")],
)
def test_format_time_12h(raw: str, expected: str) -> None:
    assert format_time_12h(raw) == expected


@pytest.mark.parametrize(
    ("due", "time", "expected"),
    [
        (None, None, ""),
        ("2025-11-20", None, "Overdue"),
        ("2025-11-28", "09:00", "Today 9:00 AM"),
        ("2025-11-29", None, "Tomorrow"),
        ("2025-12-05", None, "7 days"),
        ("2025-12-06", "18:30", "Dec 6 6:30 PM"),
        ("someday", None, "someday"),
    ],
)
def test_due_label(due: str | None, time: str | None, expected: str) -> None:
    assert due_label(Task(id=1, text="t", due_date=due, due_time=time), TODAY) == expected


def test_task_line_without_color() -> None:
    task = Task(id=3, text="Buy milk", completed=True, category="Shopping", due_date="2025-11-29")
    assert format_task_line(task, TODAY) == "[x] #3 Buy milk  [SHOPPING]  (Tomorrow)"


def test_task_line_marks_editing() -> None:
    line = format_task_line(Task(id=1, text="x"), TODAY, editing=True)
    assert line.endswith("<editing>")


def test_unknown_category_uses_other_color() -> None:
    assert category_color("Errands") == category_color(Category.OTHER.value)
    assert set(CATEGORY_HEX) == set(Category)

    colored = format_task_line(Task(id=1, text="x", category="Errands"), TODAY, color=True)
    assert "[ERRANDS]" in colored
    assert RESET in colored


def test_empty_messages() -> None:
    assert empty_message([], "All") == "No tasks yet. Add one to get started!"
    assert empty_message([Task(id=1, text="x")], "Work") == "No tasks in Work category."


def test_summary_line() -> None:
    tasks = [
        Task(id=1, text="a", category="Work"),
        Task(id=2, text="b", completed=True, category="Work"),
        Task(id=3, text="c", category="Health"),
    ]
    assert summary_line([], "All") is None
    assert summary_line(tasks, "All") == "2 of 3 tasks remaining"
    assert summary_line(tasks, "Work") == "2 of 3 tasks remaining • Showing 2 Work tasks"
    assert summary_line(tasks, "Health") == "2 of 3 tasks remaining • Showing 1 Health task"


def test_render_tasks_layout() -> None:
    tasks = [Task(id=1, text="Report", category="Work"), Task(id=2, text="Milk", category="Shopping")]
    out = render_tasks(tasks, "Work", TODAY).splitlines()
    assert out[0] == (
        "All (2) | Personal (0) | *Work (1)* | Shopping (1) | Health (0) | Finance (0) | Other (0)"
    )
    assert out[1] == "[ ] #1 Report  [WORK]"
    assert out[2] == "2 of 2 tasks remaining • Showing 1 Work task"

    empty = render_tasks([], "All", TODAY).splitlines()
    assert empty[1] == "No tasks yet. Add one to get started!"
    assert len(empty) == 2
