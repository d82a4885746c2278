"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskInput, Priority, FilterMode)
- task_store.py: in-memory collection that persists on every mutation
- task_query.py: filter / sort / group pipeline that builds a TaskView
"""
