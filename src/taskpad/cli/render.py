# src/taskpad/cli/render.py

"""Plain-text rendering of the task list for the console.

Decisions:
- Colors are 24-bit ANSI and only emitted when the caller asks for them
  (settings.console_color, which already honors NO_COLOR).
- Categories outside the known set render with the "Other" color.
- Due labels are relative for the coming week ("Today", "Tomorrow", "3 days"),
  absolute ("Dec 1") further out.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from ..tasks.task_models import FILTER_ALL, FILTER_SELECTORS, Category, Task
from ..tasks.task_view import (
    DueUrgency,
    days_until_due,
    due_urgency,
    filter_counts,
    filter_tasks,
    remaining_count,
    total_count,
)

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"

CATEGORY_HEX: dict[Category, str] = {
    Category.PERSONAL: "#6f42c1",
    Category.WORK: "#007bff",
    Category.SHOPPING: "#28a745",
    Category.HEALTH: "#dc3545",
    Category.FINANCE: "#ffc107",
    Category.OTHER: "#6c757d",
}

URGENCY_HEX: dict[DueUrgency, str] = {
    DueUrgency.OVERDUE: "#dc3545",
    DueUrgency.TODAY: "#ffc107",
    DueUrgency.SOON: "#fd7e14",
    DueUrgency.LATER: "#6c757d",
    DueUrgency.NONE: "#6c757d",
}

WEEK_DAYS = 7


def _fg(hex_code: str) -> str:
    h = hex_code.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"\033[38;2;{r};{g};{b}m"


def paint(text: str, *styles: str, enabled: bool = True) -> str:
    """Apply ANSI styles to text (no-op when disabled)."""
    if not enabled or not styles:
        return text
    return "".join(styles) + text + RESET


def category_color(category: str) -> str:
    return _fg(CATEGORY_HEX[Category.coerce(category)])


def format_time_12h(value: str | None) -> str:
    """'09:00' -> '9:00 AM', '13:05' -> '1:05 PM'. Malformed input is returned as-is."""
    if not value:
        return ""
    hours, sep, minutes = value.partition(":")
    if not sep or not hours.isdigit():
        return value
    hour = int(hours)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minutes} {suffix}"


def due_label(task: Task, today: date) -> str:
    if not task.due_date:
        return ""
    time_part = f" {format_time_12h(task.due_time)}" if task.due_time else ""

    days = days_until_due(task, today)
    if days is None:
        return f"{task.due_date}{time_part}"
    if days < 0:
        return f"Overdue{time_part}"
    if days == 0:
        return f"Today{time_part}"
    if days == 1:
        return f"Tomorrow{time_part}"
    if days <= WEEK_DAYS:
        return f"{days} days{time_part}"

    due = date.fromisoformat(task.due_date)
    return f"{due:%b} {due.day}{time_part}"


def format_task_line(task: Task, today: date, *, color: bool = False, editing: bool = False) -> str:
    box = "[x]" if task.completed else "[ ]"
    text = paint(task.text, STRIKE, DIM, enabled=color) if task.completed else task.text
    parts = [f"{box} #{task.id} {text}"]

    if task.category:
        parts.append(paint(f"[{task.category.upper()}]", category_color(task.category), enabled=color))

    label = due_label(task, today)
    if label:
        urgency = due_urgency(task, today)
        parts.append(paint(f"({label})", _fg(URGENCY_HEX[urgency]), enabled=color))

    if editing:
        parts.append(paint("<editing>", BOLD, enabled=color))
    return "  ".join(parts)


def filter_bar(tasks: Sequence[Task], active_filter: str, *, color: bool = False) -> str:
    counts = filter_counts(tasks)
    items: list[str] = []
    for selector in FILTER_SELECTORS:
        item = f"{selector} ({counts[selector]})"
        if selector == active_filter:
            item = paint(f"*{item}*", BOLD, enabled=color)
        items.append(item)
    return " | ".join(items)


def empty_message(tasks: Sequence[Task], active_filter: str) -> str:
    if not tasks:
        return "No tasks yet. Add one to get started!"
    return f"No tasks in {active_filter} category."


def summary_line(tasks: Sequence[Task], active_filter: str) -> str | None:
    """'2 of 5 tasks remaining • Showing 1 Work task'; None for an empty collection."""
    total = total_count(tasks)
    if total == 0:
        return None
    line = f"{remaining_count(tasks)} of {total} tasks remaining"
    if active_filter != FILTER_ALL:
        shown = len(filter_tasks(tasks, active_filter))
        plural = "" if shown == 1 else "s"
        line += f" • Showing {shown} {active_filter} task{plural}"
    return line


def render_tasks(
    tasks: Sequence[Task],
    active_filter: str,
    today: date,
    *,
    color: bool = False,
    editing_id: int | None = None,
) -> str:
    lines = [filter_bar(tasks, active_filter, color=color)]

    visible = filter_tasks(tasks, active_filter)
    if not visible:
        lines.append(empty_message(tasks, active_filter))
    else:
        lines.extend(
            format_task_line(t, today, color=color, editing=t.id == editing_id) for t in visible
        )

    summary = summary_line(tasks, active_filter)
    if summary:
        lines.append(summary)
    return "\n".join(lines)
