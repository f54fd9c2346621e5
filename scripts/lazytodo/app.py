"""
lazytodo TUI application.

Main entry point for the terminal user interface.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure scripts directory is in path
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from textual.app import App  # noqa: E402

from lazytodo.controller import AppController  # noqa: E402
from lazytodo.file_store import FileRepository, default_app_dir  # noqa: E402
from lazytodo.logging_setup import setup_logging  # noqa: E402
from lazytodo.providers import Repository, StatusMessage  # noqa: E402
from lazytodo.stores import TaskStore, WorkspaceStore  # noqa: E402
from lazytodo.views.dashboard import DashboardScreen  # noqa: E402

logger = logging.getLogger(__name__)


class LazyTodoApp(App):
    """Main lazytodo application."""

    TITLE = "lazytodo"
    SUB_TITLE = "Terminal Todos"
    # Every key belongs to the controller, including ctrl+p.
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        app_dir: Path | None = None,
        repository: Repository | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._repository = repository or FileRepository(app_dir)
        self.controller: AppController | None = None
        self._last_message: StatusMessage | None = None

    def on_mount(self) -> None:
        """Load the stores and show the main screen."""
        tasks = TaskStore(self._repository)
        workspaces = WorkspaceStore(self._repository)
        self.controller = AppController(tasks, workspaces)
        logger.info(
            "session started with %d todo(s), %d workspace(s)", len(tasks), len(workspaces)
        )
        self.push_screen(DashboardScreen())

    def process_key(self, key: str, character: str | None = None) -> bool:
        """Feed one key to the controller, then redraw or exit."""
        if self.controller is None:
            return False

        consumed = self.controller.handle_key(key, character)
        if not self.controller.running:
            self.exit(return_code=0)
            return True

        self.draw_frame()
        return consumed

    def draw_frame(self, screen: DashboardScreen | None = None) -> None:
        """Push the controller's render-model to the screen."""
        if self.controller is None:
            return

        model = self.controller.render()
        if screen is None and isinstance(self.screen, DashboardScreen):
            screen = self.screen
        if screen is not None:
            screen.present_model(model)

        message = model.message
        if message is not None and message.error and message != self._last_message:
            self.notify(message.text, title="Save failed", severity="error")
        self._last_message = message


def run(app_dir: Path | None = None) -> int:
    """Run the TUI application and return its exit code."""
    if app_dir is None:
        app_dir = default_app_dir()

    try:
        setup_logging(app_dir)
    except OSError as e:
        print(f"Warning: diagnostic log disabled: {e}", file=sys.stderr)

    app = LazyTodoApp(app_dir=app_dir)
    app.run()
    return app.return_code or 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
