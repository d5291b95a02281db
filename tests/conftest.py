"""
Pytest configuration and shared fixtures.

Provides an isolated home directory, storage file paths, sample stores
and a fake external editor used across the test suite.
"""

import os
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from todo.core.tasks.models import Task
from todo.core.tasks.store import TaskStore

# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture
def home_dir(tmp_path: Path):
    """
    Point HOME and XDG_CONFIG_HOME at a temporary directory.

    Also clears TODO_DEV and EDITOR so tests never see the developer's setup.
    The whole environment is restored afterwards, including variables that
    load_layered_env() copies in from .env files.
    """
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ):
        os.environ["HOME"] = str(home)
        os.environ["XDG_CONFIG_HOME"] = str(home / ".config")
        os.environ.pop("TODO_DEV", None)
        os.environ.pop("EDITOR", None)
        yield home


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    """Path to a storage file that does not exist yet."""
    return tmp_path / "tasks.bin"


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def abc_store() -> TaskStore:
    """Store with three single-line tasks: {1: A, 2: B, 3: C}."""
    store = TaskStore()
    for head in ("A", "B", "C"):
        store.add(Task(head=head))
    return store


@pytest.fixture
def sample_tasks() -> dict[int, Task]:
    return {
        1: Task(head="Buy groceries"),
        2: Task(head="Call Sam", body="about the lease\n\nbefore Friday"),
        3: Task(head="Ünïcödé ✓", body="body with [brackets]"),
    }


# ==============================================================================
# Editor Fixtures
# ==============================================================================


class FakeEditor:
    """
    Stand-in for the external editor process.

    Patches subprocess.run in todo.core.editor. Each run records the text it
    was seeded with and the temp file path, then overwrites the file with
    ``response`` (unless it is None, which leaves the file untouched) and
    exits with ``returncode``. With ``delete_file`` set it removes the file
    instead.
    """

    def __init__(self) -> None:
        self.response: str | None = None
        self.returncode = 0
        self.raise_error: OSError | None = None
        self.delete_file = False
        self.seeds: list[str] = []
        self.paths: list[Path] = []
        self.commands: list[list[str]] = []

    def __call__(self, cmd: list[str], check: bool = False) -> subprocess.CompletedProcess:
        if self.raise_error is not None:
            raise self.raise_error
        path = Path(cmd[-1])
        self.commands.append(list(cmd))
        self.paths.append(path)
        self.seeds.append(path.read_text(encoding="utf-8"))
        if self.delete_file:
            path.unlink()
        elif self.response is not None:
            path.write_text(self.response, encoding="utf-8")
        return subprocess.CompletedProcess(cmd, self.returncode)


@pytest.fixture
def fake_editor():
    """Replace the external editor with a FakeEditor."""
    editor = FakeEditor()
    with patch("todo.core.editor.subprocess.run", side_effect=editor):
        yield editor
