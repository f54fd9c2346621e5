"""Shared fixtures for the lazytodo test suite."""

import sys
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from fakes import MemoryRepository, make_tasks  # noqa: E402
from lazytodo.controller import AppController  # noqa: E402
from lazytodo.providers import Workspace  # noqa: E402
from lazytodo.stores import TaskStore, WorkspaceStore  # noqa: E402


@pytest.fixture
def repository() -> MemoryRepository:
    return MemoryRepository()


@pytest.fixture
def seeded_repository() -> MemoryRepository:
    """Repository with three todos (the second one done) and two workspaces."""
    tasks = make_tasks("Write report", "Call Alice", "Buy bread")
    tasks[1].done = True
    return MemoryRepository(tasks, [Workspace(0, "home"), Workspace(1, "work")])


@pytest.fixture
def controller(seeded_repository: MemoryRepository) -> AppController:
    return AppController(
        TaskStore(seeded_repository), WorkspaceStore(seeded_repository)
    )
