import json
import logging

import pytest

from cli import main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back for the next test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_list_empty(tasks_file, capsys):
    assert main(["--file", str(tasks_file), "list"]) == 0
    assert "No tasks yet." in capsys.readouterr().out


def test_add_and_list(tasks_file, capsys):
    assert main(["--file", str(tasks_file), "add", "Buy milk"]) == 0
    assert main(["--file", str(tasks_file), "add", "Walk dog"]) == 0
    capsys.readouterr()

    assert main(["--file", str(tasks_file), "list"]) == 0
    out = capsys.readouterr().out
    assert "[0] Buy milk" in out
    assert "[1] Walk dog" in out


def test_add_empty_fails(tasks_file, capsys):
    assert main(["--file", str(tasks_file), "add", ""]) == 1
    assert "Task is required" in capsys.readouterr().out
    assert not tasks_file.exists()


def test_delete(tasks_file, capsys):
    tasks_file.write_text(json.dumps(["Buy milk", "Walk dog"]), encoding="utf-8")

    assert main(["--file", str(tasks_file), "delete", "0"]) == 0
    assert "Buy milk" in capsys.readouterr().out
    assert json.loads(tasks_file.read_text(encoding="utf-8")) == ["Walk dog"]


def test_delete_invalid_index(tasks_file, capsys):
    tasks_file.write_text(json.dumps(["Walk dog"]), encoding="utf-8")

    assert main(["--file", str(tasks_file), "delete", "5"]) == 1
    assert "Invalid task index" in capsys.readouterr().out
    assert json.loads(tasks_file.read_text(encoding="utf-8")) == ["Walk dog"]


def test_uses_tasks_file_env(tasks_file, capsys):
    # conftest points TASKS_FILE at tasks_file
    assert main(["add", "From env"]) == 0
    assert json.loads(tasks_file.read_text(encoding="utf-8")) == ["From env"]
