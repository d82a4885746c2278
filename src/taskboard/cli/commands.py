# src/taskboard/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from typing import cast

from ..core.errors import PersistenceError, ValidationError
from ..core.state import AppState
from ..presentation.render import format_stats, render_view
from ..tasks.task_models import FilterMode, TaskInput

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_TEXT = {
    "en": {
        "save_failed": (
            "Warning: the change was applied but could not be saved; "
            "it may be lost after a restart."
        ),
        "add_usage": (
            "Usage: /add title=... owner=... date=YYYY-MM-DD time=HH:MM "
            "[priority=low|medium|high] [notes=...]\n"
            'Quote values with spaces: /add title="Buy milk" owner=Ana ...'
        ),
        "not_added": "Task not added: {error}.",
        "added": "Added #{id}: {title}",
        "missing_id": "Missing task id.",
        "no_task": "No task with id {id!r}.",
        "active_filter": "Active filter: {mode}. Use /filter all|completed|pending.",
    },
    "es": {
        "save_failed": (
            "Aviso: el cambio se aplicó pero no se pudo guardar; "
            "puede perderse al reiniciar."
        ),
        "add_usage": (
            "Uso: /add title=... owner=... date=AAAA-MM-DD time=HH:MM "
            "[priority=low|medium|high] [notes=...]\n"
            'Usa comillas para valores con espacios: /add title="Comprar leche" owner=Ana ...'
        ),
        "not_added": "Tarea no creada: {error}.",
        "added": "Creada #{id}: {title}",
        "missing_id": "Falta el id de la tarea.",
        "no_task": "No hay ninguna tarea con id {id!r}.",
        "active_filter": "Filtro activo: {mode}. Usa /filter all|completed|pending.",
    },
}

SAVE_FAILED_WARNING = _TEXT["en"]["save_failed"]
ADD_USAGE = _TEXT["en"]["add_usage"]


class CommandRegistry:
    """Slash-command registry used by the console connector (/add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def _locale(state: AppState) -> str:
    return str(getattr(state.settings, "locale", "en") or "en")


def _msg(state: AppState, key: str, **kwargs: object) -> str:
    text = _TEXT.get(_locale(state), _TEXT["en"])
    return text[key].format(**kwargs)


def _board(state: AppState) -> str:
    return render_view(state.current_view(), _locale(state))


def _save_failed(state: AppState) -> str:
    return f"{_msg(state, 'save_failed')}\n\n{_board(state)}"


def parse_task_input(args: list[str]) -> TaskInput:
    """
    Turn ["title=Buy milk", "owner=Ana", ...] into a TaskInput.

    Unknown keys and bare words raise ValidationError; presence of the
    required fields is checked by the store.
    """
    fields: dict[str, str] = {}
    allowed = {"title", "owner", "date", "time", "priority", "notes"}
    for arg in args:
        key, sep, value = arg.partition("=")
        key = key.strip().lower()
        if not sep:
            raise ValidationError(f"expected key=value, got {arg!r}")
        if key not in allowed:
            raise ValidationError(f"unknown field {key!r}")
        fields[key] = value

    return TaskInput(
        title=fields.get("title", ""),
        owner=fields.get("owner", ""),
        date=fields.get("date", ""),
        time=fields.get("time", ""),
        priority=fields.get("priority") or None,
        notes=fields.get("notes", ""),
    )


def _resolve(state: AppState, args: list[str]) -> tuple[str | None, str]:
    """Return (task_id, error_reply); task_id is None exactly when there is an error."""
    if not args:
        return None, _msg(state, "missing_id")
    try:
        task_id = state.task_store.resolve_id(args[0])
    except ValidationError as e:
        return None, f"{e}."
    if task_id is None:
        return None, _msg(state, "no_task", id=args[0])
    return task_id, ""


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return _msg(state, "add_usage")

    try:
        task_input = parse_task_input(args)
        task = state.task_store.add(task_input)
    except ValidationError as e:
        logger.debug("add rejected: %s", e)
        return f"{_msg(state, 'not_added', error=e)}\n{_msg(state, 'add_usage')}"
    except PersistenceError:
        return _save_failed(state)

    if emit:
        emit(_msg(state, "added", id=task.id[:8], title=task.title))
    return _board(state)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id, err = _resolve(state, args)
    if task_id is None:
        return err
    try:
        state.task_store.toggle_completed(task_id)
    except PersistenceError:
        return _save_failed(state)
    return _board(state)


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id, err = _resolve(state, args)
    if task_id is None:
        return err
    try:
        state.task_store.remove(task_id)
    except PersistenceError:
        return _save_failed(state)
    return _board(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter            -> show active filter
    /filter pending    -> show only pending tasks
    """
    if not args:
        return _msg(state, "active_filter", mode=state.active_filter.value)
    try:
        state.active_filter = FilterMode.parse(args[0])
    except ValidationError as e:
        return f"{e}."
    logger.debug("Filter set to %s", state.active_filter.value)
    return _board(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    return _board(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return format_stats(state.task_store.stats(), _locale(state))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Create a task: /add title=.. owner=.. date=.. time=..")
registry.register(
    "done", cmd_toggle, help_text="Mark a task completed (or reopen it): /done <id>.",
    aliases=["toggle"],
)
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register(
    "filter", cmd_filter, help_text="Choose which tasks to show: /filter all|completed|pending."
)
registry.register("list", cmd_list, help_text="Show the task board.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show total/pending/completed counts.")
