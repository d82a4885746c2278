"""Local task board: dated/timed tasks, filtered and grouped by day, persisted on disk."""

__version__ = "0.1.0"
