# src/taskpad/tasks/task_view.py

"""
Derived, read-only views over a task collection.

Nothing here mutates or keeps the collection; every function is safe to call
on each render.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from enum import StrEnum

from .task_models import FILTER_ALL, FILTER_SELECTORS, Task

SOON_DAYS = 3


class DueUrgency(StrEnum):
    NONE = "none"
    OVERDUE = "overdue"
    TODAY = "today"
    SOON = "soon"
    LATER = "later"


def filter_tasks(tasks: Sequence[Task], selector: str) -> list[Task]:
    """All tasks for the "All" selector, otherwise exact category matches, order kept."""
    if selector == FILTER_ALL:
        return list(tasks)
    return [t for t in tasks if t.category == selector]


def count_by_category(tasks: Sequence[Task], category: str) -> int:
    return sum(1 for t in tasks if t.category == category)


def count_all(tasks: Sequence[Task]) -> int:
    return len(tasks)


def total_count(tasks: Sequence[Task]) -> int:
    return len(tasks)


def remaining_count(tasks: Sequence[Task]) -> int:
    return sum(1 for t in tasks if not t.completed)


def completed_count(tasks: Sequence[Task]) -> int:
    return sum(1 for t in tasks if t.completed)


def filter_counts(tasks: Sequence[Task]) -> dict[str, int]:
    """Badge count for every filter control, in display order."""
    return {
        selector: count_all(tasks) if selector == FILTER_ALL else count_by_category(tasks, selector)
        for selector in FILTER_SELECTORS
    }


def days_until_due(task: Task, today: date) -> int | None:
    """
    Calendar days from today to the due date (negative when overdue).

    None when the task has no due date or it is not a YYYY-MM-DD string.
    """
    if not task.due_date:
        return None
    try:
        due = date.fromisoformat(task.due_date)
    except ValueError:
        return None
    return (due - today).days


def due_urgency(task: Task, today: date) -> DueUrgency:
    days = days_until_due(task, today)
    if days is None:
        return DueUrgency.NONE
    if days < 0:
        return DueUrgency.OVERDUE
    if days == 0:
        return DueUrgency.TODAY
    if days <= SOON_DAYS:
        return DueUrgency.SOON
    return DueUrgency.LATER
