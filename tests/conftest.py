# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.storage.persistence import JsonTaskPersistence
from taskboard.tasks.task_models import FilterMode
from taskboard.tasks.task_store import TaskStore

from .fakes import FailingKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        locale="en",
        data_dir=tmp_path / "data",
        storage_backend="file",
        storage_path=tmp_path / "data" / "storage",
        storage_key="modern_task_assignments",
        default_priority="medium",
        default_filter="all",
    )


@pytest.fixture()
def kv() -> FailingKeyValueStore:
    return FailingKeyValueStore()


@pytest.fixture()
def persistence(kv: FailingKeyValueStore) -> JsonTaskPersistence:
    return JsonTaskPersistence(kv)


@pytest.fixture()
def store(persistence: JsonTaskPersistence) -> TaskStore:
    return TaskStore.open(persistence, default_priority="medium")


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, active_filter=FilterMode.ALL)
