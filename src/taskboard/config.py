# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read from the environment at import time; get_settings() builds once.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"

STORAGE_BACKENDS = ("file", "sqlite", "memory")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    return value if value in choices else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    locale: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Storage ----
    storage_backend: str
    storage_path: Path
    storage_key: str

    # ---- Task defaults ----
    default_priority: str
    default_filter: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _first_env(_k("APP_NAME"), default="taskboard") or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        locale = _env_choice(_k("LOCALE"), ("en", "es"), "en")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))

        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "file")
        default_storage_path = (
            data_dir / "storage.sqlite3" if storage_backend == "sqlite" else data_dir / "storage"
        )
        storage_path = _env_path(_k("STORAGE_PATH"), default_storage_path)
        storage_key = (
            _first_env(_k("STORAGE_KEY"), default="modern_task_assignments") or ""
        ).strip()

        default_priority = _env_choice(
            _k("DEFAULT_PRIORITY"), ("low", "medium", "high"), "medium"
        )
        default_filter = _env_choice(
            _k("DEFAULT_FILTER"), ("all", "completed", "pending"), "all"
        )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            locale=locale,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            default_priority=default_priority,
            default_filter=default_filter,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
