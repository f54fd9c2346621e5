"""
In-memory task and workspace stores.

Each store owns its ordered collection and writes the whole collection through
its repository after every mutation. When a write fails the mutation is kept
in memory and PersistenceError propagates to the caller, so the next
successful flush persists it.
"""

from __future__ import annotations

import logging
from typing import Sequence

from lazytodo.providers import Repository, Task, Workspace, now_millis

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when a collection could not be written to storage."""


def next_id(ids: Sequence[int]) -> int:
    """Max existing id + 1, or 0 for an empty collection."""
    return max(ids) + 1 if ids else 0


class TaskStore:
    """Ordered tasks, synchronised to the repository after each change."""

    def __init__(self, repository: Repository) -> None:
        self._repository = repository
        self._tasks: list[Task] = repository.load_tasks()
        logger.debug("TaskStore loaded %d task(s)", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    def list(self) -> list[Task]:
        return list(self._tasks)

    def get(self, index: int) -> Task | None:
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def position_of(self, task: Task) -> int | None:
        """Position of this exact Task object; ids in a loaded file may repeat."""
        return next((i for i, t in enumerate(self._tasks) if t is task), None)

    def create(self, title: str, content: str = "") -> Task:
        task = Task.new(next_id([t.id for t in self._tasks]), title, content)
        self._tasks.append(task)
        logger.debug("created task id=%d title=%r", task.id, task.title)
        self.flush()
        return task

    def toggle(self, index: int) -> Task | None:
        task = self.get(index)
        if task is None:
            return None
        task.done = not task.done
        task.updated_at = now_millis()
        logger.debug("toggled task id=%d done=%s", task.id, task.done)
        self.flush()
        return task

    def delete(self, index: int) -> Task | None:
        if not 0 <= index < len(self._tasks):
            return None
        task = self._tasks.pop(index)
        logger.debug("deleted task id=%d", task.id)
        self.flush()
        return task

    def flush(self) -> None:
        self._repository.save_tasks(self._tasks)


class WorkspaceStore:
    """Ordered workspaces, synchronised to the repository after each change."""

    def __init__(self, repository: Repository) -> None:
        self._repository = repository
        self._workspaces: list[Workspace] = repository.load_workspaces()
        logger.debug("WorkspaceStore loaded %d workspace(s)", len(self._workspaces))

    def __len__(self) -> int:
        return len(self._workspaces)

    def list(self) -> list[Workspace]:
        return list(self._workspaces)

    def create(self, title: str) -> Workspace:
        workspace = Workspace(next_id([w.id for w in self._workspaces]), title)
        self._workspaces.append(workspace)
        logger.debug("created workspace id=%d title=%r", workspace.id, workspace.title)
        self.flush()
        return workspace

    def delete(self, index: int) -> Workspace | None:
        if not 0 <= index < len(self._workspaces):
            return None
        workspace = self._workspaces.pop(index)
        logger.debug("deleted workspace id=%d", workspace.id)
        self.flush()
        return workspace

    def flush(self) -> None:
        self._repository.save_workspaces(self._workspaces)
