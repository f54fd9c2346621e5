"""
Repository implementation backed by JSON files in the app directory.

Layout:
    <app-dir>/todos         JSON array of task objects
    <app-dir>/workspaces    JSON array of workspace objects

A missing or corrupt file loads as an empty collection; the problem is logged
and the next save overwrites the file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Sequence, TypeVar

from lazytodo.providers import Task, Workspace
from lazytodo.stores import PersistenceError

logger = logging.getLogger(__name__)

APP_DIR_NAME = ".lazytodo"
APP_DIR_ENV = "LAZYTODO_DIR"
TODOS_FILE = "todos"
WORKSPACES_FILE = "workspaces"

E = TypeVar("E")


def default_app_dir() -> Path:
    """App directory: $LAZYTODO_DIR if set, else ./.lazytodo."""
    override = os.environ.get(APP_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.cwd() / APP_DIR_NAME


def atomic_write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=path.name + ".", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.unlink(tmp)


class FileRepository:
    """Repository that reads and writes JSON files under ``app_dir``."""

    def __init__(self, app_dir: Path | None = None):
        if app_dir is None:
            app_dir = default_app_dir()
        self._app_dir = Path(app_dir)

    @property
    def app_dir(self) -> Path:
        return self._app_dir

    @property
    def todos_path(self) -> Path:
        return self._app_dir / TODOS_FILE

    @property
    def workspaces_path(self) -> Path:
        return self._app_dir / WORKSPACES_FILE

    def _load(self, path: Path, decode: Callable[[dict[str, Any]], E]) -> list[E]:
        if not path.exists():
            logger.info("No data file at %s, starting empty", path)
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning("Could not load %s, starting empty: %s", path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Could not load %s, starting empty: not a JSON array", path)
            return []

        try:
            return [decode(raw) for raw in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Could not decode %s, starting empty: %s", path, e)
            return []

    def _save(self, path: Path, entities: Sequence[Any]) -> None:
        payload = json.dumps([e.to_dict() for e in entities], ensure_ascii=False, indent=2)
        try:
            atomic_write_text(path, payload + "\n")
        except OSError as e:
            logger.error("Could not save %s: %s", path, e)
            raise PersistenceError(f"could not write {path}: {e.strerror or e}") from e

    def load_tasks(self) -> list[Task]:
        return self._load(self.todos_path, Task.from_dict)

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        self._save(self.todos_path, tasks)

    def load_workspaces(self) -> list[Workspace]:
        return self._load(self.workspaces_path, Workspace.from_dict)

    def save_workspaces(self, workspaces: Sequence[Workspace]) -> None:
        self._save(self.workspaces_path, workspaces)
