"""
Data model and persistence protocol for lazytodo.

The repository protocol defines the load/save contract; implementations can
be swapped for testing or alternative storage.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Protocol, Sequence


def now_millis() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


@dataclass
class Task:
    """A todo item."""

    id: int
    title: str
    content: str = ""
    done: bool = False
    created_at: int = 0
    updated_at: int = 0

    @classmethod
    def new(cls, task_id: int, title: str, content: str = "") -> Task:
        stamp = now_millis()
        return cls(task_id, title, content, False, stamp, stamp)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Build a Task from its stored fields. Raises on malformed data."""
        task_id = data["id"]
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 0:
            raise ValueError(f"invalid task id: {task_id!r}")
        title = data["title"]
        if not isinstance(title, str):
            raise ValueError(f"invalid task title: {title!r}")
        content = data.get("content", "")
        if not isinstance(content, str):
            raise ValueError(f"invalid task content: {content!r}")
        done = data.get("done", False)
        if not isinstance(done, bool):
            raise ValueError(f"invalid task done flag: {done!r}")
        return cls(
            id=task_id,
            title=title,
            content=content,
            done=done,
            created_at=int(data.get("created_at", 0)),
            updated_at=int(data.get("updated_at", 0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Workspace:
    """A workspace (tag) grouping todos."""

    id: int
    title: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Workspace:
        ws_id = data["id"]
        if not isinstance(ws_id, int) or isinstance(ws_id, bool) or ws_id < 0:
            raise ValueError(f"invalid workspace id: {ws_id!r}")
        title = data["title"]
        if not isinstance(title, str):
            raise ValueError(f"invalid workspace title: {title!r}")
        return cls(id=ws_id, title=title)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def format_timestamp(millis: int) -> str:
    """Render a millisecond timestamp in local time."""
    if not millis:
        return "—"
    stamp = datetime.fromtimestamp(millis / 1000, tz=timezone.utc).astimezone()
    return stamp.strftime("%Y-%m-%d %H:%M")


class Repository(Protocol):
    """Protocol for loading and saving the persisted collections."""

    def load_tasks(self) -> list[Task]:
        """Load all tasks; an unreadable source yields an empty list."""
        ...

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Replace the persisted tasks. Raises PersistenceError on failure."""
        ...

    def load_workspaces(self) -> list[Workspace]:
        """Load all workspaces; an unreadable source yields an empty list."""
        ...

    def save_workspaces(self, workspaces: Sequence[Workspace]) -> None:
        """Replace the persisted workspaces. Raises PersistenceError on failure."""
        ...


# ---------------------------------------------------------------------------
# Render model: immutable per-frame snapshots pushed to the display surface.
# ---------------------------------------------------------------------------


class Tab(Enum):
    """Top-level views, in display order."""

    STATUS = "Status"
    INBOX = "Inbox"
    WORKSPACES = "Workspaces"
    TODOS = "Todos"


@dataclass(frozen=True)
class ListRow:
    """One rendered list entry. ``done`` is None for rows without a checkbox."""

    key: int
    label: str
    done: bool | None = None


@dataclass(frozen=True)
class ListView:
    """Snapshot of a selectable list."""

    title: str
    rows: tuple[ListRow, ...]
    selected: int | None
    empty_hint: str = ""


@dataclass(frozen=True)
class ModalView:
    """Snapshot of an open text-input overlay."""

    title: str
    before_cursor: str
    after_cursor: str


@dataclass(frozen=True)
class StatusMessage:
    text: str
    error: bool = False


@dataclass(frozen=True)
class Summary:
    """Counts shown on the status tab."""

    total: int
    done: int
    open: int
    workspaces: int


@dataclass(frozen=True)
class TaskDetail:
    """Immutable snapshot of a single task for the detail panel."""

    id: int
    title: str
    content: str
    done: bool
    created_at: int
    updated_at: int

    @classmethod
    def of(cls, task: Task) -> TaskDetail:
        return cls(
            task.id, task.title, task.content, task.done, task.created_at, task.updated_at
        )


@dataclass(frozen=True)
class RenderModel:
    """Complete frame state."""

    tab: Tab
    tabs: tuple[Tab, ...]
    summary: Summary
    help: str
    active_list: ListView | None = None
    modal: ModalView | None = None
    detail: TaskDetail | None = None
    message: StatusMessage | None = None
