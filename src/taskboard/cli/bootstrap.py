# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the byte store backend and wires it into the persistence adapter,
- restores the task collection and builds AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import FileKeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore
from ..storage.persistence import STORAGE_KEY, JsonTaskPersistence
from ..tasks.task_models import FilterMode
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)


def create_kv_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "file")).lower()
    path = Path(settings.storage_path)

    if backend == "memory":
        logger.warning("Using in-memory storage: tasks will not survive a restart.")
        return MemoryKeyValueStore()
    if backend == "sqlite":
        return SQLiteKeyValueStore(path)
    if backend == "file":
        return FileKeyValueStore(path)
    raise ValueError(f"unknown storage backend: {backend!r}")


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings(). Raises PersistenceError when the
    stored tasks exist but cannot be decoded.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if kv is None:
        kv = create_kv_store(settings)

    persistence = JsonTaskPersistence(kv, key=getattr(settings, "storage_key", "") or STORAGE_KEY)
    task_store = TaskStore.open(
        persistence,
        default_priority=getattr(settings, "default_priority", "medium"),
    )

    return AppState(
        settings=settings,
        task_store=task_store,
        active_filter=FilterMode.parse(getattr(settings, "default_filter", "all")),
    )
