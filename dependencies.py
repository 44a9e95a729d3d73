# dependencies.py
from typing import Optional

from storage import TaskStore, create_task_store

_task_store: Optional[TaskStore] = None

def get_task_store() -> TaskStore:
    """
    Returns the process-wide task store, built from TASKS_FILE on first use.
    Tests replace this dependency through `app.dependency_overrides`.
    """
    global _task_store
    if _task_store is None:
        _task_store = create_task_store()
    return _task_store
