# src/taskboard/tasks/task_models.py

from __future__ import annotations

import re
import uuid
from dataclasses import asdict, dataclass
from datetime import date as _date
from enum import StrEnum
from typing import Any

from ..core.errors import PersistenceError, ValidationError

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

TASK_FIELDS = ("id", "title", "owner", "date", "time", "priority", "notes", "completed")


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: str | Priority) -> Priority:
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValidationError(f"priority must be one of: {allowed} (got {raw!r})") from None


class FilterMode(StrEnum):
    """Which tasks a view shows."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, raw: str | FilterMode) -> FilterMode:
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValidationError(f"filter must be one of: {allowed} (got {raw!r})") from None


def is_valid_date(value: str) -> bool:
    if not DATE_RE.match(value):
        return False
    try:
        _date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_time(value: str) -> bool:
    return bool(TIME_RE.match(value))


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class TaskInput:
    """
    Fields collected from the user before a Task exists.

    priority=None means "use the store's default priority".
    """

    title: str
    owner: str
    date: str
    time: str
    priority: Priority | str | None = None
    notes: str = ""


@dataclass(slots=True)
class Task:
    id: str
    title: str
    owner: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    priority: Priority
    notes: str = ""
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["priority"] = self.priority.value
        return d

    @staticmethod
    def from_dict(d: Any) -> Task:
        """
        Rebuild a Task from its stored form.

        Raises PersistenceError if the record does not describe a valid task;
        stored data is never patched up silently.
        """
        if not isinstance(d, dict):
            raise PersistenceError(f"task record must be an object, got {type(d).__name__}")

        missing = [f for f in TASK_FIELDS if f not in d and f != "notes"]
        if missing:
            raise PersistenceError(f"task record is missing fields: {', '.join(missing)}")

        for name in ("id", "title", "owner", "date", "time", "priority"):
            if not isinstance(d[name], str) or not d[name]:
                raise PersistenceError(f"task field {name!r} must be a non-empty string")

        notes = d.get("notes")
        if notes is None:
            notes = ""
        if not isinstance(notes, str):
            raise PersistenceError("task field 'notes' must be a string")

        if not isinstance(d["completed"], bool):
            raise PersistenceError("task field 'completed' must be a boolean")

        if not is_valid_date(d["date"]):
            raise PersistenceError(f"task {d['id']} has a malformed date: {d['date']!r}")
        if not is_valid_time(d["time"]):
            raise PersistenceError(f"task {d['id']} has a malformed time: {d['time']!r}")

        try:
            priority = Priority(d["priority"])
        except ValueError:
            raise PersistenceError(
                f"task {d['id']} has an unknown priority: {d['priority']!r}"
            ) from None

        return Task(
            id=d["id"],
            title=d["title"],
            owner=d["owner"],
            date=d["date"],
            time=d["time"],
            priority=priority,
            notes=notes,
            completed=d["completed"],
        )
