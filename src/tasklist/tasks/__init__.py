"""
Task subsystem.

Components:
- task_models.py: data structures (Task, StoreResult, PersistenceFailure)
- task_context.py: SQLite-backed mutation context (unit of work, identity map)
- task_store.py: the in-memory task list and its fetch/add/remove/rename operations
"""
