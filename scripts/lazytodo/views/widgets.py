"""Reusable widgets for the lazytodo screen.

Every widget is a passive Static: it renders whatever snapshot it is handed
through ``present`` and keeps no state of its own.
"""

from rich.text import Text
from textual.widgets import Static

from lazytodo.providers import ListView, ModalView, StatusMessage, Summary, Tab


class TabBar(Static):
    """Row of numbered tab titles with the active one highlighted."""

    DEFAULT_CSS = """
    TabBar {
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    """

    def present(self, tabs: tuple[Tab, ...], active: Tab) -> None:
        text = Text()
        for i, tab in enumerate(tabs, start=1):
            label = f" {i} {tab.value} "
            if tab is active:
                text.append(label, style="bold reverse")
            else:
                text.append(label)
            text.append(" ")
        self.update(text)


class ItemListPanel(Static):
    """Selectable list of todos or workspaces."""

    DEFAULT_CSS = """
    ItemListPanel {
        height: 1fr;
        width: 2fr;
        border: solid $primary;
        padding: 0 1;
    }
    """

    def present(self, view: ListView) -> None:
        self.border_title = f"{view.title} ({len(view.rows)})"

        if not view.rows:
            self.update(Text(view.empty_hint, style="italic dim"))
            return

        text = Text()
        for i, row in enumerate(view.rows):
            if i:
                text.append("\n")
            selected = i == view.selected
            marker = "› " if selected else "  "
            if row.done is None:
                line = f"{marker}{row.label}"
            else:
                line = f"{marker}[{'x' if row.done else ' '}] {row.label}"
            style = "reverse" if selected else ""
            if row.done:
                style = f"{style} strike dim".strip()
            text.append(line, style=style)
        self.update(text)


class SummaryPanel(Static):
    """Counts of tasks and workspaces, shown on the status tab."""

    DEFAULT_CSS = """
    SummaryPanel {
        height: 1fr;
        border: solid $primary;
        padding: 1 2;
    }
    """

    def present(self, summary: Summary) -> None:
        self.border_title = "Status"
        progress = summary.done / summary.total if summary.total else 0
        lines = [
            f"Todos:      {summary.total}",
            f"  Done:     {summary.done}",
            f"  Open:     {summary.open}",
            f"Workspaces: {summary.workspaces}",
            "",
            f"Progress:   {progress:.0%}",
        ]
        self.update(Text("\n".join(lines)))


class InputOverlay(Static):
    """Single-line text entry drawn while a modal is open."""

    DEFAULT_CSS = """
    InputOverlay {
        dock: bottom;
        height: 3;
        margin: 0 4 2 4;
        border: round $accent;
        padding: 0 1;
        display: none;
    }
    """

    def present(self, modal: ModalView | None) -> None:
        if modal is None:
            self.display = False
            return

        self.display = True
        self.border_title = modal.title
        text = Text(modal.before_cursor)
        # Draw the caret over the character under the cursor, or a blank at the end.
        under = modal.after_cursor[:1] or " "
        text.append(under, style="reverse")
        text.append(modal.after_cursor[1:])
        self.update(text)


class MessageBar(Static):
    """Last status message; errors are highlighted."""

    DEFAULT_CSS = """
    MessageBar {
        height: 1;
        padding: 0 1;
    }

    MessageBar.error {
        color: $error;
        text-style: bold;
    }
    """

    def present(self, message: StatusMessage | None) -> None:
        self.set_class(bool(message and message.error), "error")
        self.update(Text(message.text if message else ""))


class HelpBar(Static):
    """Key hints for the current context."""

    DEFAULT_CSS = """
    HelpBar {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $panel;
        color: $text-muted;
    }
    """

    def present(self, help_text: str) -> None:
        self.update(Text(help_text))
