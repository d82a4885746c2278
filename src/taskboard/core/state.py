# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import FilterMode
from ..tasks.task_query import TaskView, build_view
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything a running session owns: settings, the task store and the
    active filter. Built once in bootstrap and passed to commands/connectors.
    """

    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: object

    task_store: TaskStore
    active_filter: FilterMode = FilterMode.ALL

    def current_view(self) -> TaskView:
        return build_view(self.task_store.all(), self.active_filter)
