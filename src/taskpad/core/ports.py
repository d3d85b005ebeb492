# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on a Protocol for its persistence medium instead of a
concrete backend, so SQLite/JSON/in-memory stores stay swappable and tests
can run without touching disk.
"""

from typing import Protocol

from ..tasks.task_models import Task


class KeyValueStore(Protocol):
    """
    Durable string key-value medium (the local equivalent of browser localStorage).

    get() returns None when nothing is stored under the key.
    set() overwrites any previous value. Write errors propagate to the caller.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class TaskRepo(Protocol):
    # Read side (rendering / projections)
    @property
    def tasks(self) -> list[Task]: ...
    def get(self, task_id: int) -> Task | None: ...

    # Mutations (each one persists the whole collection)
    def add(
            self,
            text: str,
            category: str | None = None,
            due_date: str | None = None,
            due_time: str | None = None,
    ) -> Task | None: ...
    def toggle(self, task_id: int) -> Task | None: ...
    def update(
            self,
            task_id: int,
            text: str,
            due_date: str | None = None,
            due_time: str | None = None,
    ) -> Task | None: ...
    def delete(self, task_id: int) -> bool: ...
