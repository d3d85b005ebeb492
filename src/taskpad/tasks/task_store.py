# src/taskpad/tasks/task_store.py

from __future__ import annotations

import json
import logging
from dataclasses import replace

from ..core.ports import KeyValueStore
from .task_models import DEFAULT_CATEGORY, Task, blank_to_none

logger = logging.getLogger(__name__)

STORAGE_KEY = "tasks"


class TaskStore:
    """
    In-memory task collection synchronized with a key-value medium.

    Lifecycle:
    - load() runs exactly once, before any mutation
    - every successful mutation writes the whole collection under STORAGE_KEY

    Rules:
    - blank text on add/update is a silent no-op (returns None, nothing written)
    - unknown ids are silent no-ops
    - insertion order is never changed; delete removes in place
    - write errors propagate to the caller
    """

    def __init__(self, kv: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self._kv = kv
        self._key = key
        self._tasks: list[Task] = []
        self._next_id = 1
        self._loaded = False

    # ---- low-level helpers ----

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise RuntimeError("TaskStore.load() must run before any mutation")

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _save(self) -> None:
        payload = json.dumps([t.to_record() for t in self._tasks], ensure_ascii=False)
        self._kv.set(self._key, payload)

    @staticmethod
    def _parse(raw: str) -> list[Task]:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array of tasks, got {type(data).__name__}")

        tasks = [Task.from_record(item) for item in data]

        seen: set[int] = set()
        for t in tasks:
            if t.id in seen:
                raise ValueError(f"duplicate task id {t.id}")
            seen.add(t.id)
        return tasks

    # ---- public API ----

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the collection in insertion order."""
        return list(self._tasks)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def load(self) -> list[Task]:
        """
        Read the persisted collection.

        A missing value is a normal empty start. Content that does not parse
        as the persisted shape is logged and also yields an empty collection;
        it never raises.
        """
        if self._loaded:
            raise RuntimeError("TaskStore.load() must run only once")

        raw = self._kv.get(self._key)
        tasks: list[Task] = []
        if raw is not None:
            try:
                tasks = self._parse(raw)
            except (ValueError, RecursionError):
                # json.JSONDecodeError is a ValueError too; deep nesting raises RecursionError.
                logger.exception("Error loading tasks from storage key=%s; starting empty.", self._key)
                tasks = []

        self._tasks = tasks
        self._next_id = max((t.id for t in tasks), default=0) + 1
        self._loaded = True
        logger.info("TaskStore loaded key=%s total=%d", self._key, len(tasks))
        return list(tasks)

    def add(
        self,
        text: str,
        category: str | None = None,
        due_date: str | None = None,
        due_time: str | None = None,
    ) -> Task | None:
        self._require_loaded()
        if not text or not text.strip():
            logger.debug("add rejected: blank text")
            return None

        task = Task(
            id=self._allocate_id(),
            text=text,
            completed=False,
            category=category or DEFAULT_CATEGORY.value,
            due_date=blank_to_none(due_date),
            due_time=blank_to_none(due_time),
        )
        self._tasks.append(task)
        self._save()
        logger.debug("Task added id=%s category=%s due=%s %s", task.id, task.category, task.due_date, task.due_time)
        return task

    def toggle(self, task_id: int) -> Task | None:
        self._require_loaded()
        idx = self._index_of(task_id)
        if idx is None:
            return None

        task = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = task
        self._save()
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def update(
        self,
        task_id: int,
        text: str,
        due_date: str | None = None,
        due_time: str | None = None,
    ) -> Task | None:
        """Replace text and due date/time; category and completion are kept."""
        self._require_loaded()
        if not text or not text.strip():
            logger.debug("update rejected: blank text id=%s", task_id)
            return None

        idx = self._index_of(task_id)
        if idx is None:
            return None

        task = replace(
            self._tasks[idx],
            text=text,
            due_date=blank_to_none(due_date),
            due_time=blank_to_none(due_time),
        )
        self._tasks[idx] = task
        self._save()
        logger.debug("Task updated id=%s", task.id)
        return task

    def delete(self, task_id: int) -> bool:
        """Remove the task if present. The collection is written either way."""
        self._require_loaded()
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = len(self._tasks) != before
        self._save()
        if removed:
            logger.debug("Task deleted id=%s", task_id)
        return removed
