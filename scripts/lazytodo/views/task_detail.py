"""Detail panel for the todo under the cursor."""

from rich.text import Text
from textual.widgets import Static

from lazytodo.providers import TaskDetail, format_timestamp


class TaskDetailPanel(Static):
    """Panel showing one task's fields."""

    DEFAULT_CSS = """
    TaskDetailPanel {
        height: 1fr;
        width: 1fr;
        border: solid $primary;
        padding: 0 1;
    }
    """

    def present(self, task: TaskDetail | None) -> None:
        self.border_title = "Details"

        if task is None:
            self.update(Text("Nothing selected", style="italic dim"))
            return

        text = Text()
        text.append(f"#{task.id} ", style="dim")
        text.append(task.title, style="bold")
        text.append("\n\n")
        if task.done:
            text.append("Status:  DONE\n", style="green")
        else:
            text.append("Status:  OPEN\n", style="yellow")
        text.append(f"Created: {format_timestamp(task.created_at)}\n")
        text.append(f"Updated: {format_timestamp(task.updated_at)}\n")
        if task.content:
            text.append("\n")
            text.append(task.content)
        self.update(text)
