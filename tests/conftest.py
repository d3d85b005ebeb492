# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_store import TaskStore

from .fakes import InMemoryKeyValueStore

TODAY = date(2025, 11, 28)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        storage_backend="sqlite",
        data_dir=tmp_path,
        db_path=tmp_path / "taskpad.sqlite3",
        json_path=tmp_path / "storage.json",
        console_color=False,
    )


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def store(kv: InMemoryKeyValueStore) -> TaskStore:
    s = TaskStore(kv)
    s.load()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with the in-memory store and a fixed clock."""
    return AppState(settings=settings, task_store=store, clock=lambda: TODAY)
