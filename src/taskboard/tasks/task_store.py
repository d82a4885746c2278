# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.errors import PersistenceError, ValidationError
from ..core.ports import TaskPersistence
from .task_models import (
    Priority,
    Task,
    TaskInput,
    is_valid_date,
    is_valid_time,
    new_task_id,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class TaskStats:
    total: int
    completed: int
    pending: int


class TaskStore:
    """
    In-memory ordered task collection.

    - the store is the only owner of the list; callers get read access via all()
    - every mutation rewrites the whole collection through the persistence port
    - a failed write never undoes the in-memory mutation; PersistenceError is
      re-raised after the change is applied so the caller can warn the user
    """

    def __init__(
        self,
        persistence: TaskPersistence,
        *,
        default_priority: Priority | str = Priority.MEDIUM,
        tasks: list[Task] | None = None,
    ) -> None:
        self._persistence = persistence
        self._default_priority = Priority.parse(default_priority)
        self._tasks: list[Task] = list(tasks) if tasks else []

    @classmethod
    def open(
        cls,
        persistence: TaskPersistence,
        *,
        default_priority: Priority | str = Priority.MEDIUM,
    ) -> TaskStore:
        """Restore the persisted collection (once, at startup)."""
        tasks = persistence.load()
        store = cls(persistence, default_priority=default_priority, tasks=tasks)
        logger.info("TaskStore ready total=%s", len(tasks))
        return store

    @property
    def default_priority(self) -> Priority:
        return self._default_priority

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _persist(self) -> None:
        try:
            self._persistence.save(self._tasks)
        except PersistenceError:
            logger.warning(
                "Failed to persist %d tasks; in-memory state kept.", len(self._tasks), exc_info=True
            )
            raise

    def _build_task(self, task_input: TaskInput) -> Task:
        title = (task_input.title or "").strip()
        owner = (task_input.owner or "").strip()
        date = (task_input.date or "").strip()
        time = (task_input.time or "").strip()
        notes = (task_input.notes or "").strip()

        missing = [
            name
            for name, value in (("title", title), ("owner", owner), ("date", date), ("time", time))
            if not value
        ]
        if missing:
            raise ValidationError(f"required fields missing: {', '.join(missing)}")

        if not is_valid_date(date):
            raise ValidationError(f"date must be YYYY-MM-DD (got {date!r})")
        if not is_valid_time(time):
            raise ValidationError(f"time must be HH:MM, 24-hour (got {time!r})")

        if task_input.priority is None or str(task_input.priority).strip() == "":
            priority = self._default_priority
        else:
            priority = Priority.parse(task_input.priority)

        task_id = new_task_id()
        while self._index_of(task_id) is not None:
            task_id = new_task_id()

        return Task(
            id=task_id,
            title=title,
            owner=owner,
            date=date,
            time=time,
            priority=priority,
            notes=notes,
            completed=False,
        )

    # ---- public API ----

    def all(self) -> list[Task]:
        """Current collection in insertion order. Do not mutate the returned list."""
        return self._tasks

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def count(self) -> int:
        return len(self._tasks)

    def stats(self) -> TaskStats:
        total = len(self._tasks)
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(total=total, completed=completed, pending=total - completed)

    def add(self, task_input: TaskInput) -> Task:
        task = self._build_task(task_input)
        self._tasks.append(task)
        logger.debug("Task added id=%s date=%s time=%s", task.id, task.date, task.time)
        self._persist()
        return task

    def remove(self, task_id: str) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("remove: no task id=%s", task_id)
            return
        del self._tasks[idx]
        logger.debug("Task removed id=%s", task_id)
        self._persist()

    def toggle_completed(self, task_id: str) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle_completed: no task id=%s", task_id)
            return
        task = self._tasks[idx]
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        self._persist()

    def resolve_id(self, prefix: str) -> str | None:
        """
        Map a user-typed id prefix to a full id.

        An exact id wins; otherwise the prefix is matched case-insensitively
        and the stored id is returned. Returns None when nothing matches;
        raises ValidationError when the prefix is ambiguous.
        """
        prefix = (prefix or "").strip()
        if not prefix:
            return None
        if self._index_of(prefix) is not None:
            return prefix
        folded = prefix.casefold()
        matches = [t.id for t in self._tasks if t.id.casefold().startswith(folded)]
        if len(matches) > 1:
            raise ValidationError(f"id prefix {prefix!r} matches {len(matches)} tasks")
        return matches[0] if matches else None
