# src/taskboard/storage/persistence.py

from __future__ import annotations

import json
import logging
import sqlite3
from collections.abc import Sequence

from ..core.errors import PersistenceError
from ..core.ports import KeyValueStore
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

STORAGE_KEY = "modern_task_assignments"


class JsonTaskPersistence:
    """
    Whole-collection JSON mirror of the task list under one fixed key.

    Stored layout: a JSON array of task objects with the fields
    id, title, owner, date, time, priority, notes, completed.
    There is no version field; changing the record shape breaks stored data.
    """

    def __init__(self, kv: KeyValueStore, *, key: str = STORAGE_KEY) -> None:
        if not key:
            raise ValueError("storage key is required")
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def encode(tasks: Sequence[Task]) -> bytes:
        return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False).encode("utf-8")

    @staticmethod
    def decode(raw: bytes) -> list[Task]:
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"stored tasks are not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise PersistenceError(
                f"stored tasks must be a JSON array, got {type(data).__name__}"
            )

        tasks = [Task.from_dict(item) for item in data]

        seen: set[str] = set()
        for t in tasks:
            if t.id in seen:
                raise PersistenceError(f"stored tasks contain duplicate id {t.id}")
            seen.add(t.id)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = self.encode(tasks)
        try:
            self._kv.set(self._key, payload)
        except (OSError, ValueError, sqlite3.Error) as exc:
            raise PersistenceError(f"failed to write tasks under {self._key!r}: {exc}") from exc
        logger.debug("Saved %d tasks (%d bytes) key=%s", len(tasks), len(payload), self._key)

    def load(self) -> list[Task]:
        try:
            raw = self._kv.get(self._key)
        except (OSError, ValueError, sqlite3.Error) as exc:
            raise PersistenceError(f"failed to read tasks under {self._key!r}: {exc}") from exc

        if raw is None:
            logger.info("No stored tasks under key=%s; starting empty.", self._key)
            return []

        tasks = self.decode(raw)
        logger.info("Loaded %d tasks key=%s", len(tasks), self._key)
        return tasks
