import pytest
from fastapi.testclient import TestClient

from dependencies import get_task_store
from main import app
from storage import JsonFileBackend, TaskStore

@pytest.fixture
def tasks_file(tmp_path):
    """
    Path to a tasks.json inside a per-test temporary directory.
    The file itself is not created; the store creates it on first write.
    """
    return tmp_path / "tasks.json"

@pytest.fixture
def store(tasks_file):
    return TaskStore(JsonFileBackend(tasks_file))

@pytest.fixture
def client(store):
    """
    A TestClient whose routes use the per-test store instead of the
    process-wide one.
    """
    app.dependency_overrides[get_task_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

# This fixture will be automatically used by every test.
@pytest.fixture(autouse=True)
def isolated_tasks_file(tmp_path, monkeypatch):
    """
    Points TASKS_FILE at the temporary directory so nothing touches the
    project's own tasks.json.
    """
    monkeypatch.setenv("TASKS_FILE", str(tmp_path / "tasks.json"))
    yield
