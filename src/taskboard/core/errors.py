# src/taskboard/core/errors.py

from __future__ import annotations


class TaskBoardError(Exception):
    """Base class for errors raised by taskboard."""


class ValidationError(TaskBoardError, ValueError):
    """A task input (or a filter mode) is missing a required value or is malformed."""


class PersistenceError(TaskBoardError, RuntimeError):
    """
    Storage read/write failure, or stored data that cannot be decoded.

    On save, the in-memory change has already been applied when this is raised.
    """
