# tests/test_render.py

from __future__ import annotations

from taskboard.presentation.render import format_date, render_view
from taskboard.tasks.task_models import Priority, Task
from taskboard.tasks.task_query import build_view


def _tasks() -> list[Task]:
    return [
        Task(id="bbbbbbbb1234", title="Buy milk", owner="Ana", date="2024-05-01", time="09:00",
             priority=Priority.LOW),
        Task(id="cccccccc5678", title="Call Bob", owner="Ana", date="2024-05-01", time="08:00",
             priority=Priority.HIGH, notes="ask about Friday", completed=True),
        Task(id="dddddddd9012", title="Dentist", owner="Luis", date="2024-05-03", time="16:30",
             priority=Priority.MEDIUM),
    ]


def test_format_date_en_and_es() -> None:
    assert format_date("2024-05-01") == "Wednesday, 01 May 2024"
    assert format_date("2024-05-01", "es") == "miércoles, 01 de mayo de 2024"
    # Unknown locales fall back to English.
    assert format_date("2024-05-01", "de") == "Wednesday, 01 May 2024"


def test_render_view_groups_and_tasks() -> None:
    text = render_view(build_view(_tasks(), "all"))

    assert "Wednesday, 01 May 2024 - 2 tasks" in text
    assert "Friday, 03 May 2024 - 1 task" in text
    assert text.index("Call Bob") < text.index("Buy milk") < text.index("Dentist")
    assert "[x] 08:00  Call Bob (Ana) [high] #cccccccc" in text
    assert "[ ] 09:00  Buy milk (Ana) [low] #bbbbbbbb" in text
    assert "ask about Friday" in text
    assert "No notes" in text
    assert text.rstrip().endswith("Total: 3 | Pending: 2 | Completed: 1")
    assert "Filter:" not in text


def test_render_view_shows_active_filter() -> None:
    text = render_view(build_view(_tasks(), "completed"))
    assert text.startswith("Filter: completed")
    assert "Buy milk" not in text


def test_render_view_empty_messages() -> None:
    assert "No tasks yet" in render_view(build_view([], "all"))

    only_pending = [t for t in _tasks() if not t.completed]
    text = render_view(build_view(only_pending, "completed"))
    assert "No tasks match the 'completed' filter" in text
    assert "Total: 2 | Pending: 2 | Completed: 0" in text


def test_render_view_spanish() -> None:
    text = render_view(build_view(_tasks(), "all"), "es")
    assert "miércoles, 01 de mayo de 2024 - 2 tareas" in text
    assert "Sin notas" in text
    assert "Sin tareas disponibles" in render_view(build_view([], "all"), "es")
