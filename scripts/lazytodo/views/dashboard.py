"""Main screen: forwards keys to the controller and draws its render-model."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Header

from lazytodo.providers import RenderModel, Tab
from lazytodo.views.task_detail import TaskDetailPanel
from lazytodo.views.widgets import (
    HelpBar,
    InputOverlay,
    ItemListPanel,
    MessageBar,
    SummaryPanel,
    TabBar,
)


class DashboardScreen(Screen):
    """The single full-screen view.

    Widgets are never focused, so every key reaches ``on_key`` here and is
    handed to the app's controller.
    """

    DEFAULT_CSS = """
    DashboardScreen {
        layout: vertical;
    }

    #body {
        height: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield TabBar(id="tabs")
        with Horizontal(id="body"):
            yield SummaryPanel(id="summary")
            yield ItemListPanel(id="list")
            yield TaskDetailPanel(id="detail")
        yield MessageBar(id="message")
        yield InputOverlay(id="input")
        yield HelpBar(id="help")

    def on_mount(self) -> None:
        self.app.draw_frame(self)

    def on_key(self, event: events.Key) -> None:
        if self.app.process_key(event.key, event.character):
            event.prevent_default()
            event.stop()

    def present_model(self, model: RenderModel) -> None:
        """Redraw every widget from the snapshot."""
        self.query_one(TabBar).present(model.tabs, model.tab)

        summary = self.query_one(SummaryPanel)
        summary.display = model.tab is Tab.STATUS
        if summary.display:
            summary.present(model.summary)

        item_list = self.query_one(ItemListPanel)
        item_list.display = model.active_list is not None
        if model.active_list is not None:
            item_list.present(model.active_list)

        detail = self.query_one(TaskDetailPanel)
        detail.display = model.tab is Tab.TODOS
        if detail.display:
            detail.present(model.detail)

        self.query_one(MessageBar).present(model.message)
        self.query_one(InputOverlay).present(model.modal)
        self.query_one(HelpBar).present(model.help)
