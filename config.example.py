# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "File log level (default: INFO).",
    "TASKBOARD_LOCALE": "Language for date headings and messages: en | es (default: en).",
    # Paths (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory, also holds taskboard.log (default: .local/taskboard).",
    # Storage
    "TASKBOARD_STORAGE_BACKEND": "file | sqlite | memory (default: file).",
    "TASKBOARD_STORAGE_PATH": (
        "Directory (file backend) or database file (sqlite backend) "
        "(default: <data_dir>/storage or <data_dir>/storage.sqlite3)."
    ),
    "TASKBOARD_STORAGE_KEY": "Key the task list is stored under (default: modern_task_assignments).",
    # Task defaults
    "TASKBOARD_DEFAULT_PRIORITY": "Priority for tasks added without one: low | medium | high.",
    "TASKBOARD_DEFAULT_FILTER": "Filter active at startup: all | completed | pending.",
}
