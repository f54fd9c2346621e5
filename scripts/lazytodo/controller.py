"""
Interactive state machine.

AppController owns every piece of UI state: the active tab, the selectable
lists behind each tab and the two text-input modals. Keys arrive one at a time
through ``handle_key``; the display surface asks for a ``RenderModel`` after
each one.

Dispatch order:
1. an open modal receives every key;
2. global commands (quit, tab switching, save retry);
3. the handler of the active tab.
"""

from __future__ import annotations

import logging
from typing import Callable

from lazytodo.modal import Modal
from lazytodo.providers import (
    ListRow,
    ListView,
    ModalView,
    RenderModel,
    StatusMessage,
    Summary,
    Tab,
    Task,
    TaskDetail,
    Workspace,
)
from lazytodo.selection import SelectableList
from lazytodo.stores import PersistenceError, TaskStore, WorkspaceStore

logger = logging.getLogger(__name__)

TAB_ORDER: tuple[Tab, ...] = tuple(Tab)
TAB_KEYS: dict[str, Tab] = {str(i): tab for i, tab in enumerate(TAB_ORDER, start=1)}

QUIT_KEYS = frozenset({"q"})
NEXT_TAB_KEYS = frozenset({"tab"})
PREVIOUS_TAB_KEYS = frozenset({"shift+tab"})
SAVE_KEYS = frozenset({"s"})
NEXT_KEYS = frozenset({"j", "down"})
PREVIOUS_KEYS = frozenset({"k", "up"})
NEW_KEYS = frozenset({"n", "a"})
DELETE_KEYS = frozenset({"d"})
TOGGLE_KEYS = frozenset({"space"})

HELP = {
    Tab.STATUS: "1-4/tab switch · s save · q quit",
    Tab.INBOX: "j/k move · n new todo · d delete · 1-4/tab switch · q quit",
    Tab.WORKSPACES: "j/k move · n new workspace · d delete · 1-4/tab switch · q quit",
    Tab.TODOS: "j/k move · space done · n new todo · d delete · 1-4/tab switch · q quit",
}
MODAL_HELP = "enter save · esc cancel · ←/→ move cursor · backspace delete"


class AppController:
    """Top-level state machine for the interactive session."""

    def __init__(
        self,
        tasks: TaskStore,
        workspaces: WorkspaceStore,
        initial_tab: Tab = Tab.INBOX,
    ) -> None:
        self.tasks = tasks
        self.workspaces = workspaces
        self.tab = initial_tab
        self.running = True
        self.message: StatusMessage | None = None

        self.inbox: SelectableList[Task] = SelectableList(self._open_tasks())
        self.todos: SelectableList[Task] = SelectableList(tasks.list())
        self.workspace_list: SelectableList[Workspace] = SelectableList(workspaces.list())

        self.todo_modal = Modal("New todo", self._submit_todo)
        self.workspace_modal = Modal("New workspace", self._submit_workspace)

        self._tab_handlers: dict[Tab, Callable[[str], bool]] = {
            Tab.STATUS: self._handle_status_key,
            Tab.INBOX: self._handle_inbox_key,
            Tab.WORKSPACES: self._handle_workspaces_key,
            Tab.TODOS: self._handle_todos_key,
        }

    # -------------------- dispatch --------------------

    @property
    def active_modal(self) -> Modal | None:
        for modal in (self.todo_modal, self.workspace_modal):
            if modal.editing:
                return modal
        return None

    def handle_key(self, key: str, character: str | None = None) -> bool:
        """Process one key event. Returns True if the key did something."""
        modal = self.active_modal
        if modal is not None:
            return modal.handle_key(key, character)

        if key in QUIT_KEYS:
            self.quit()
            return True
        if key in TAB_KEYS:
            self.switch_tab(TAB_KEYS[key])
            return True
        if key in NEXT_TAB_KEYS:
            self.cycle_tab(1)
            return True
        if key in PREVIOUS_TAB_KEYS:
            self.cycle_tab(-1)
            return True
        if key in SAVE_KEYS:
            self.save_all()
            return True

        return self._tab_handlers[self.tab](key)

    def quit(self) -> None:
        logger.info("quit requested")
        self.running = False

    def switch_tab(self, tab: Tab) -> None:
        self.tab = tab

    def cycle_tab(self, step: int) -> None:
        index = TAB_ORDER.index(self.tab)
        self.tab = TAB_ORDER[(index + step) % len(TAB_ORDER)]

    def save_all(self) -> None:
        """Flush both stores; used to retry after a failed save."""
        try:
            self.tasks.flush()
            self.workspaces.flush()
        except PersistenceError as e:
            self._save_failed(e)
        else:
            self.message = StatusMessage("Saved")

    # -------------------- per-tab handlers --------------------

    def _handle_status_key(self, key: str) -> bool:
        return False

    def _handle_list_navigation(self, view: SelectableList, key: str) -> bool:
        if key in NEXT_KEYS:
            view.select_next()
            return True
        if key in PREVIOUS_KEYS:
            view.select_previous()
            return True
        return False

    def _handle_inbox_key(self, key: str) -> bool:
        if self._handle_list_navigation(self.inbox, key):
            return True
        if key in NEW_KEYS:
            self.todo_modal.open()
            return True
        if key in DELETE_KEYS:
            self._delete_selected_task(self.inbox)
            return True
        return False

    def _handle_todos_key(self, key: str) -> bool:
        if self._handle_list_navigation(self.todos, key):
            return True
        if key in NEW_KEYS:
            self.todo_modal.open()
            return True
        if key in DELETE_KEYS:
            self._delete_selected_task(self.todos)
            return True
        if key in TOGGLE_KEYS:
            self._toggle_selected_task(self.todos)
            return True
        return False

    def _handle_workspaces_key(self, key: str) -> bool:
        if self._handle_list_navigation(self.workspace_list, key):
            return True
        if key in NEW_KEYS:
            self.workspace_modal.open()
            return True
        if key in DELETE_KEYS:
            self._delete_selected_workspace()
            return True
        return False

    # -------------------- mutations --------------------

    def _persist(self, action: Callable[[], object]) -> None:
        """Run a store mutation, recording a failed save as a status message."""
        try:
            action()
        except PersistenceError as e:
            self._save_failed(e)
        else:
            self.message = None
        finally:
            self._sync_lists()

    def _save_failed(self, error: PersistenceError) -> None:
        logger.error("save failed: %s", error)
        self.message = StatusMessage(f"Save failed: {error} (press s to retry)", error=True)

    def _submit_todo(self, text: str) -> None:
        title = text.strip()
        if not title:
            return
        self._persist(lambda: self.tasks.create(title))
        # Follow the new task in the list it was added from.
        if self.tab is Tab.TODOS:
            self.todos.select(len(self.todos) - 1)
        elif self.tab is Tab.INBOX:
            self.inbox.select(len(self.inbox) - 1)

    def _submit_workspace(self, text: str) -> None:
        title = text.strip()
        if not title:
            return
        self._persist(lambda: self.workspaces.create(title))
        self.workspace_list.select(len(self.workspace_list) - 1)

    def _delete_selected_task(self, view: SelectableList[Task]) -> None:
        task = view.selected_item
        if task is None:
            return
        index = self.tasks.position_of(task)
        view.remove_selected()
        if index is None:
            return
        self._persist(lambda: self.tasks.delete(index))

    def _toggle_selected_task(self, view: SelectableList[Task]) -> None:
        task = view.selected_item
        if task is None:
            return
        index = self.tasks.position_of(task)
        if index is None:
            return
        self._persist(lambda: self.tasks.toggle(index))

    def _delete_selected_workspace(self) -> None:
        index = self.workspace_list.selected
        if index is None:
            return
        self.workspace_list.remove_selected()
        self._persist(lambda: self.workspaces.delete(index))

    def _open_tasks(self) -> list[Task]:
        return [t for t in self.tasks.list() if not t.done]

    def _sync_lists(self) -> None:
        self.todos.set_items(self.tasks.list())
        self.inbox.set_items(self._open_tasks())
        self.workspace_list.set_items(self.workspaces.list())

    # -------------------- rendering --------------------

    def summary(self) -> Summary:
        tasks = self.tasks.list()
        done = sum(1 for t in tasks if t.done)
        return Summary(
            total=len(tasks),
            done=done,
            open=len(tasks) - done,
            workspaces=len(self.workspaces),
        )

    def render(self) -> RenderModel:
        """Snapshot the current state for the display surface."""
        active_list: ListView | None = None
        detail: TaskDetail | None = None

        if self.tab is Tab.INBOX:
            active_list = ListView(
                "Inbox",
                tuple(ListRow(t.id, t.title) for t in self.inbox),
                self.inbox.selected,
                "Inbox is empty. Press n to add a todo.",
            )
        elif self.tab is Tab.TODOS:
            active_list = ListView(
                "Todos",
                tuple(ListRow(t.id, t.title, t.done) for t in self.todos),
                self.todos.selected,
                "No todos yet. Press n to add one.",
            )
            selected = self.todos.selected_item
            if selected is not None:
                detail = TaskDetail.of(selected)
        elif self.tab is Tab.WORKSPACES:
            active_list = ListView(
                "Workspaces",
                tuple(ListRow(w.id, w.title) for w in self.workspace_list),
                self.workspace_list.selected,
                "No workspaces yet. Press n to add one.",
            )

        modal_view: ModalView | None = None
        modal = self.active_modal
        if modal is not None:
            modal_view = ModalView(
                modal.title, modal.editor.before_cursor, modal.editor.after_cursor
            )

        return RenderModel(
            tab=self.tab,
            tabs=TAB_ORDER,
            summary=self.summary(),
            help=MODAL_HELP if modal is not None else HELP[self.tab],
            active_list=active_list,
            modal=modal_view,
            detail=detail,
            message=self.message,
        )
