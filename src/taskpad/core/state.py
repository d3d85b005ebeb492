# src/taskpad/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..tasks.task_models import FILTER_ALL, Task
from .ports import TaskRepo


@dataclass(slots=True)
class EditSession:
    """
    Draft values for the task currently being edited (at most one).

    Presentation-only: never persisted and never handed to the task store
    except as the arguments of a single update() call.
    """

    task_id: int | None = None
    text: str = ""
    due_date: str = ""
    due_time: str = ""

    @property
    def active(self) -> bool:
        return self.task_id is not None

    def start(self, task: Task) -> None:
        self.task_id = task.id
        self.text = task.text
        self.due_date = task.due_date or ""
        self.due_time = task.due_time or ""

    def clear(self) -> None:
        self.task_id = None
        self.text = ""
        self.due_date = ""
        self.due_time = ""


@dataclass
class AppState:
    settings: Any
    task_store: TaskRepo

    # Presentation-scoped session state, kept apart from the store.
    edit: EditSession = field(default_factory=EditSession)
    active_filter: str = FILTER_ALL
    clock: Callable[[], date] = date.today
