"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Category) and the persisted record shape
- task_store.py: in-memory collection + load/save contract with a key-value store
- task_view.py: pure filtering / counting / due-date projections
- kv_store.py: SQLite and JSON-file key-value backends
"""
