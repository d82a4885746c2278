"""
Storage subsystem.

Components:
- kv_store.py: byte key-value slots (file, SQLite, in-memory)
- persistence.py: JSON mirror of the whole task list under one key
"""
