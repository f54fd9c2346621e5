"""Test doubles shared across the suite."""

from typing import Sequence

from lazytodo.providers import Task, Workspace
from lazytodo.stores import PersistenceError


class MemoryRepository:
    """Repository fake that keeps copies of the saved collections."""

    def __init__(
        self,
        tasks: Sequence[Task] = (),
        workspaces: Sequence[Workspace] = (),
    ) -> None:
        self.tasks = [Task(**t.to_dict()) for t in tasks]
        self.workspaces = [Workspace(**w.to_dict()) for w in workspaces]
        self.task_saves = 0
        self.workspace_saves = 0
        self.fail_saves = False

    def load_tasks(self) -> list[Task]:
        return [Task(**t.to_dict()) for t in self.tasks]

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        if self.fail_saves:
            raise PersistenceError("disk full")
        self.tasks = [Task(**t.to_dict()) for t in tasks]
        self.task_saves += 1

    def load_workspaces(self) -> list[Workspace]:
        return [Workspace(**w.to_dict()) for w in self.workspaces]

    def save_workspaces(self, workspaces: Sequence[Workspace]) -> None:
        if self.fail_saves:
            raise PersistenceError("disk full")
        self.workspaces = [Workspace(**w.to_dict()) for w in workspaces]
        self.workspace_saves += 1


def make_tasks(*titles: str) -> list[Task]:
    return [Task(i, title, "", False, 1000, 1000) for i, title in enumerate(titles)]
