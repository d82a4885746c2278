# src/taskboard/tasks/task_query.py

from __future__ import annotations

"""
Query pipeline: filter -> sort -> group.

All functions are pure: they never mutate their input and return new lists.
Sorting relies on plain string comparison, which orders correctly because
dates are fixed-width YYYY-MM-DD and times fixed-width HH:MM.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .task_models import FilterMode, Task
from .task_store import TaskStats


@dataclass(slots=True, frozen=True)
class TaskGroup:
    date: str
    tasks: list[Task] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.tasks)


@dataclass(slots=True, frozen=True)
class TaskView:
    """
    Render-ready result of the pipeline.

    no_results is set when the filter matched nothing (groups is then empty).
    stats always describes the whole, unfiltered collection.
    """

    mode: FilterMode
    groups: list[TaskGroup]
    stats: TaskStats
    no_results: bool

    @property
    def is_empty_board(self) -> bool:
        return self.stats.total == 0


def filter_tasks(tasks: Iterable[Task], mode: FilterMode | str) -> list[Task]:
    mode = FilterMode.parse(mode)
    if mode == FilterMode.COMPLETED:
        return [t for t in tasks if t.completed]
    if mode == FilterMode.PENDING:
        return [t for t in tasks if not t.completed]
    return list(tasks)


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    # sorted() is stable: ties on (date, time) keep input order.
    return sorted(tasks, key=lambda t: (t.date, t.time))


def group_by_date(tasks: Sequence[Task]) -> list[TaskGroup]:
    """
    Partition an already sorted sequence into one group per distinct date.

    Single pass; groups are emitted in first-seen order, which is ascending
    for sorted input.
    """
    groups: list[TaskGroup] = []
    current: TaskGroup | None = None
    for task in tasks:
        if current is None or task.date != current.date:
            current = TaskGroup(date=task.date)
            groups.append(current)
        current.tasks.append(task)
    return groups


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    total = 0
    completed = 0
    for t in tasks:
        total += 1
        if t.completed:
            completed += 1
    return TaskStats(total=total, completed=completed, pending=total - completed)


def build_view(tasks: Sequence[Task], mode: FilterMode | str = FilterMode.ALL) -> TaskView:
    mode = FilterMode.parse(mode)
    filtered = filter_tasks(tasks, mode)
    stats = compute_stats(tasks)
    if not filtered:
        return TaskView(mode=mode, groups=[], stats=stats, no_results=True)
    return TaskView(
        mode=mode,
        groups=group_by_date(sort_tasks(filtered)),
        stats=stats,
        no_results=False,
    )
