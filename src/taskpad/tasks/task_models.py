# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Category(StrEnum):
    """
    Fixed task categories, in display order.

    Stored tasks keep their category as a plain string: values outside this
    enum are accepted and passed through, and coerce() maps them to OTHER
    wherever a known member is required (colors).
    """

    PERSONAL = "Personal"
    WORK = "Work"
    SHOPPING = "Shopping"
    HEALTH = "Health"
    FINANCE = "Finance"
    OTHER = "Other"

    @classmethod
    def coerce(cls, raw: str | None) -> Category:
        if not raw:
            return cls.OTHER
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER

    @classmethod
    def lookup(cls, raw: str) -> Category | None:
        """Case-insensitive match for user input; None when nothing matches."""
        needle = raw.strip().lower()
        for member in cls:
            if member.value.lower() == needle:
                return member
        return None


DEFAULT_CATEGORY = Category.PERSONAL

FILTER_ALL = "All"
FILTER_SELECTORS: tuple[str, ...] = (FILTER_ALL, *(c.value for c in Category))


def blank_to_none(value: str | None) -> str | None:
    """Empty form values mean "absent"."""
    return value if value else None


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    category: str = DEFAULT_CATEGORY.value
    due_date: str | None = None  # YYYY-MM-DD
    due_time: str | None = None  # HH:MM, 24h

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "category": self.category,
            "dueDate": self.due_date,
            "dueTime": self.due_time,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one persisted record.

        Raises ValueError if the record does not have the persisted shape:
        - id: int (bool is rejected)
        - text: non-blank str
        - completed: bool
        - category: str
        - dueDate / dueTime: str, null or absent
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"task id must be an integer, got {task_id!r}")

        text = raw.get("text")
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"task {task_id}: text must be a non-empty string")

        completed = raw.get("completed")
        if not isinstance(completed, bool):
            raise ValueError(f"task {task_id}: completed must be a boolean")

        category = raw.get("category")
        if not isinstance(category, str):
            raise ValueError(f"task {task_id}: category must be a string")

        due_date = raw.get("dueDate")
        due_time = raw.get("dueTime")
        for name, value in (("dueDate", due_date), ("dueTime", due_time)):
            if value is not None and not isinstance(value, str):
                raise ValueError(f"task {task_id}: {name} must be a string or null")

        return cls(
            id=task_id,
            text=text,
            completed=completed,
            category=category,
            due_date=blank_to_none(due_date),
            due_time=blank_to_none(due_time),
        )
