# tests/test_task_query.py

from __future__ import annotations

import pytest

from taskboard.core.errors import ValidationError
from taskboard.tasks.task_models import FilterMode, Priority, Task
from taskboard.tasks.task_query import (
    build_view,
    compute_stats,
    filter_tasks,
    group_by_date,
    sort_tasks,
)
from taskboard.tasks.task_store import TaskStats


def _task(task_id: str, date: str, time: str, *, completed: bool = False, title: str = "") -> Task:
    return Task(
        id=task_id,
        title=title or f"task {task_id}",
        owner="Ana",
        date=date,
        time=time,
        priority=Priority.MEDIUM,
        completed=completed,
    )


@pytest.fixture()
def mixed() -> list[Task]:
    return [
        _task("a", "2024-05-02", "10:00"),
        _task("b", "2024-05-01", "09:00", completed=True),
        _task("c", "2024-05-01", "08:00"),
        _task("d", "2024-05-03", "07:30", completed=True),
        _task("e", "2024-05-01", "09:00"),
        _task("f", "2024-05-02", "06:15"),
    ]


def _ids(tasks: list[Task]) -> list[str]:
    return [t.id for t in tasks]


def test_filter_all_returns_input_unchanged(mixed: list[Task]) -> None:
    assert filter_tasks(mixed, FilterMode.ALL) == mixed
    assert filter_tasks(mixed, "all") == mixed


def test_filter_partitions_completed_and_pending(mixed: list[Task]) -> None:
    done = filter_tasks(mixed, "completed")
    pending = filter_tasks(mixed, FilterMode.PENDING)

    assert _ids(done) == ["b", "d"]
    assert _ids(pending) == ["a", "c", "e", "f"]
    assert not set(_ids(done)) & set(_ids(pending))
    assert sorted(_ids(done) + _ids(pending)) == sorted(_ids(mixed))


def test_filter_pending_scenario() -> None:
    done = _task("x", "2024-05-01", "09:00", completed=True)
    open_ = _task("y", "2024-05-01", "10:00")
    assert filter_tasks([done, open_], "pending") == [open_]


def test_filter_rejects_unknown_mode(mixed: list[Task]) -> None:
    with pytest.raises(ValidationError):
        filter_tasks(mixed, "archived")


def test_sort_orders_by_date_then_time(mixed: list[Task]) -> None:
    assert _ids(sort_tasks(mixed)) == ["c", "b", "e", "f", "a", "d"]


def test_sort_is_stable_for_equal_date_and_time(mixed: list[Task]) -> None:
    ordered = sort_tasks(mixed)
    # b and e share (2024-05-01, 09:00); b came first in the input.
    assert _ids(ordered).index("b") < _ids(ordered).index("e")


def test_sort_is_idempotent_and_does_not_mutate(mixed: list[Task]) -> None:
    before = list(mixed)
    once = sort_tasks(mixed)
    assert sort_tasks(once) == once
    assert mixed == before
    assert once is not mixed


def test_sort_scenario_earlier_time_first() -> None:
    milk = _task("1", "2024-05-01", "09:00", title="Buy milk")
    bob = _task("2", "2024-05-01", "08:00", title="Call Bob")
    assert [t.title for t in sort_tasks([milk, bob])] == ["Call Bob", "Buy milk"]


def test_group_by_date_partitions_without_loss(mixed: list[Task]) -> None:
    groups = group_by_date(sort_tasks(mixed))

    dates = [g.date for g in groups]
    assert dates == ["2024-05-01", "2024-05-02", "2024-05-03"]
    assert all(a < b for a, b in zip(dates, dates[1:]))

    flattened = [t.id for g in groups for t in g.tasks]
    assert sorted(flattened) == sorted(_ids(mixed))
    assert len(flattened) == len(set(flattened))

    assert _ids(groups[0].tasks) == ["c", "b", "e"]
    assert [g.count for g in groups] == [3, 2, 1]
    assert all(t.date == g.date for g in groups for t in g.tasks)


def test_group_by_date_scenario_two_dates() -> None:
    later = _task("1", "2024-05-02", "09:00")
    earlier = _task("2", "2024-05-01", "09:00")
    groups = group_by_date(sort_tasks([later, earlier]))
    assert [g.date for g in groups] == ["2024-05-01", "2024-05-02"]


def test_group_by_date_empty() -> None:
    assert group_by_date([]) == []


def test_compute_stats(mixed: list[Task]) -> None:
    assert compute_stats(mixed) == TaskStats(total=6, completed=2, pending=4)
    assert compute_stats([]) == TaskStats(total=0, completed=0, pending=0)


def test_build_view_composes_pipeline(mixed: list[Task]) -> None:
    view = build_view(mixed, "pending")

    assert view.mode is FilterMode.PENDING
    assert view.no_results is False
    assert [g.date for g in view.groups] == ["2024-05-01", "2024-05-02"]
    assert [t.id for g in view.groups for t in g.tasks] == ["c", "e", "f", "a"]
    # Stats describe the whole collection, not the filtered subset.
    assert view.stats == TaskStats(total=6, completed=2, pending=4)


def test_build_view_signals_no_results_for_empty_filter() -> None:
    only_pending = [_task("a", "2024-05-01", "09:00")]
    view = build_view(only_pending, FilterMode.COMPLETED)

    assert view.no_results is True
    assert view.groups == []
    assert view.is_empty_board is False


def test_build_view_on_empty_board() -> None:
    view = build_view([], FilterMode.ALL)
    assert view.no_results is True
    assert view.is_empty_board is True
    assert view.stats.total == 0
