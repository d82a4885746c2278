# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete storage.
This keeps storage backends swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task, TaskInput


class KeyValueStore(Protocol):
    """
    Byte-oriented key-value slot store (a local-storage equivalent).

    get() returns None when the key was never written.
    Implementations may raise OSError / sqlite3.Error; the persistence
    adapter wraps those.
    """

    def get(self, key: str) -> bytes | None: ...
    def set(self, key: str, value: bytes) -> None: ...


class TaskPersistence(Protocol):
    """Mirrors the whole task collection to durable storage."""

    def save(self, tasks: Sequence[Task]) -> None: ...
    def load(self) -> list[Task]: ...


class TaskRepo(Protocol):
    # Mutations (each one persists)
    def add(self, task_input: TaskInput) -> Task: ...
    def remove(self, task_id: str) -> None: ...
    def toggle_completed(self, task_id: str) -> None: ...

    # Reads
    def all(self) -> list[Task]: ...
    def get(self, task_id: str) -> Task | None: ...
    def count(self) -> int: ...
