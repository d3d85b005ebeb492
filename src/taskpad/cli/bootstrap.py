# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the key-value backend and wires the TaskStore into AppState,
- runs the one-time TaskStore.load() before anything can mutate.
"""

from __future__ import annotations

import logging

from ..config import STORAGE_JSON, get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..tasks.kv_store import JsonFileKeyValueStore, SQLiteKeyValueStore
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)
    settings.json_path.parent.mkdir(parents=True, exist_ok=True)


def create_kv_store(settings) -> KeyValueStore:
    if getattr(settings, "storage_backend", None) == STORAGE_JSON:
        return JsonFileKeyValueStore(settings.json_path)
    return SQLiteKeyValueStore(settings.db_path)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState with a loaded TaskStore.

    Settings and the key-value store are injectable for tests; by default they
    come from get_settings() and the configured backend.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = create_kv_store(settings)

    task_store = TaskStore(kv)
    task_store.load()

    return AppState(settings=settings, task_store=task_store)
