# storage.py
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"


# --- Errors ---

class TaskValidationError(ValueError):
    """Raised when a task value is missing or empty."""


class TaskIndexError(IndexError):
    """Raised when a deletion index is missing, not an integer or out of range."""


# --- Backends ---

def _reject_constant(name: str):
    raise ValueError(f"Non-finite number {name} is not valid JSON")


class JsonFileBackend:
    """
    Persists the task list as a pretty-printed JSON array.

    The file is created on first write. Anything that cannot be read back as a
    JSON array is treated as an empty list.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> List[Any]:
        if not self.path.exists():
            return []
        # TODO: Consider adding a file lock to prevent race conditions on concurrent writes
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f, parse_constant=_reject_constant)
        except (OSError, ValueError) as e:
            logger.warning("Could not read tasks from %s, treating as empty: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.warning("Tasks file %s does not contain a JSON array, treating as empty", self.path)
            return []
        return data

    def write(self, tasks: List[Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Serialize before opening so a bad value cannot truncate the file.
        content = json.dumps(tasks, indent=2, ensure_ascii=False, allow_nan=False)
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(content)


class MemoryBackend:
    """Keeps the list in memory. Handy for tests."""

    def __init__(self, initial: Optional[List[Any]] = None):
        self._tasks: List[Any] = list(initial or [])

    def read(self) -> List[Any]:
        return list(self._tasks)

    def write(self, tasks: List[Any]):
        self._tasks = list(tasks)


# --- Store ---

def _is_empty(task: Any) -> bool:
    # 0 is a value like any other; False and empty containers are not.
    if task is None or task is False:
        return True
    if isinstance(task, str):
        return not task.strip()
    if isinstance(task, (list, dict)):
        return not task
    return False


def parse_index(value: Any) -> int:
    """Coerces a raw index (int or decimal string from a URL) into an int."""
    if value is None or isinstance(value, bool):
        raise TaskIndexError("Invalid task index")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if re.fullmatch(r"-?[0-9]+", text):
            return int(text)
    raise TaskIndexError("Invalid task index")


class TaskStore:
    """
    Read/append/remove over a persisted, ordered task list.

    Every call performs a full read-modify-write against the backend; nothing
    is cached between calls. There is no locking: two writers interleaving
    their read and write steps will lose one of the updates.
    """

    def __init__(self, backend):
        self.backend = backend

    def list(self) -> List[Any]:
        return self.backend.read()

    def add(self, task: Any) -> List[Any]:
        if _is_empty(task):
            raise TaskValidationError("Task is required")
        try:
            json.dumps(task, allow_nan=False)
        except ValueError:
            raise TaskValidationError("Task must be JSON without NaN or Infinity")

        tasks = self.backend.read()
        tasks.append(task)
        self.backend.write(tasks)
        logger.info("Added task at index %d (total %d)", len(tasks) - 1, len(tasks))
        return tasks

    def remove_at(self, index: Any) -> Tuple[Any, List[Any]]:
        position = parse_index(index)
        tasks = self.backend.read()
        if position < 0 or position >= len(tasks):
            raise TaskIndexError("Invalid task index")

        removed = tasks.pop(position)
        self.backend.write(tasks)
        logger.info("Removed task at index %d (total %d)", position, len(tasks))
        return removed, tasks


def create_task_store(path: Optional[Union[str, Path]] = None) -> TaskStore:
    """Builds a file-backed store from `path` or the TASKS_FILE setting."""
    if path is None:
        path = os.getenv("TASKS_FILE", DEFAULT_TASKS_FILE)
    return TaskStore(JsonFileBackend(path))
