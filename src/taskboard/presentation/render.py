# src/taskboard/presentation/render.py

"""
Plain-text rendering of a TaskView.

Date headings use fixed name tables instead of the process locale so output
does not depend on the machine the board runs on.
"""

from __future__ import annotations

from datetime import date as _date

from ..tasks.task_models import FilterMode, Task
from ..tasks.task_query import TaskGroup, TaskView
from ..tasks.task_store import TaskStats

_WEEKDAYS = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "es": ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"),
}

_MONTHS = {
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "es": (
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
}

_TEXT = {
    "en": {
        "tasks": "tasks",
        "task": "task",
        "no_notes": "No notes",
        "empty_board": "No tasks yet. Create one with /add.",
        "no_match": "No tasks match the '{mode}' filter. Try another filter or create a new task.",
        "stats": "Total: {total} | Pending: {pending} | Completed: {completed}",
        "filter": "Filter: {mode}",
    },
    "es": {
        "tasks": "tareas",
        "task": "tarea",
        "no_notes": "Sin notas",
        "empty_board": "Sin tareas disponibles. Crea una nueva tarea con /add.",
        "no_match": "Sin tareas para el filtro '{mode}'. Prueba con otro filtro o crea una nueva tarea.",
        "stats": "Total: {total} | Pendientes: {pending} | Completadas: {completed}",
        "filter": "Filtro: {mode}",
    },
}


def _lang(locale: str) -> str:
    return locale if locale in _TEXT else "en"


def format_date(value: str, locale: str = "en") -> str:
    """'2024-05-01' -> 'Wednesday, 01 May 2024' (en) / 'miércoles, 01 de mayo de 2024' (es)."""
    lang = _lang(locale)
    d = _date.fromisoformat(value)
    weekday = _WEEKDAYS[lang][d.weekday()]
    month = _MONTHS[lang][d.month - 1]
    if lang == "es":
        return f"{weekday}, {d.day:02d} de {month} de {d.year}"
    return f"{weekday}, {d.day:02d} {month} {d.year}"


def format_stats(stats: TaskStats, locale: str = "en") -> str:
    return _TEXT[_lang(locale)]["stats"].format(
        total=stats.total, pending=stats.pending, completed=stats.completed
    )


def render_task(task: Task, locale: str = "en", id_width: int = 8) -> str:
    text = _TEXT[_lang(locale)]
    mark = "[x]" if task.completed else "[ ]"
    notes = task.notes or text["no_notes"]
    return (
        f"  {mark} {task.time}  {task.title} ({task.owner}) "
        f"[{task.priority.value}] #{task.id[:id_width]}\n"
        f"        {notes}"
    )


def render_group(group: TaskGroup, locale: str = "en") -> str:
    text = _TEXT[_lang(locale)]
    noun = text["task"] if group.count == 1 else text["tasks"]
    lines = [f"{format_date(group.date, locale)} - {group.count} {noun}"]
    lines.extend(render_task(t, locale) for t in group.tasks)
    return "\n".join(lines)


def render_view(view: TaskView, locale: str = "en") -> str:
    text = _TEXT[_lang(locale)]
    lines: list[str] = []

    if view.mode != FilterMode.ALL:
        lines.append(text["filter"].format(mode=view.mode.value))

    if view.no_results:
        if view.is_empty_board:
            lines.append(text["empty_board"])
        else:
            lines.append(text["no_match"].format(mode=view.mode.value))
    else:
        lines.append("\n\n".join(render_group(g, locale) for g in view.groups))

    lines.append("")
    lines.append(format_stats(view.stats, locale))
    return "\n".join(lines)
