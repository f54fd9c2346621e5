"""Text-input overlay that captures every key while it is open."""

from __future__ import annotations

import logging
from typing import Callable

from lazytodo.editor import TextEditor

logger = logging.getLogger(__name__)


def _noop() -> None:
    return None


class Modal:
    """A hidden/editing switch around one TextEditor.

    ``on_submit`` receives the buffer text when Enter is pressed; ``on_cancel``
    runs on Escape. Either way the buffer is cleared and the modal hides.
    """

    def __init__(
        self,
        title: str,
        on_submit: Callable[[str], None],
        on_cancel: Callable[[], None] = _noop,
    ) -> None:
        self.title = title
        self.editor = TextEditor()
        self._on_submit = on_submit
        self._on_cancel = on_cancel
        self._editing = False

    @property
    def editing(self) -> bool:
        return self._editing

    def open(self) -> None:
        self._editing = True

    def cancel(self) -> None:
        if not self._editing:
            return
        try:
            self._on_cancel()
        finally:
            self._close()

    def submit(self) -> None:
        if not self._editing:
            return
        text = self.editor.text
        try:
            self._on_submit(text)
        finally:
            self._close()

    def _close(self) -> None:
        self.editor.clear()
        self._editing = False

    def handle_key(self, key: str, character: str | None = None) -> bool:
        """Route one key to the editor. Returns False only when hidden."""
        if not self._editing:
            return False

        if key == "escape":
            logger.debug("modal %r cancelled", self.title)
            self.cancel()
        elif key == "enter":
            logger.debug("modal %r submitted", self.title)
            self.submit()
        elif key == "backspace":
            self.editor.delete_before_cursor()
        elif key == "left":
            self.editor.move_left()
        elif key == "right":
            self.editor.move_right()
        elif key == "home":
            self.editor.move_home()
        elif key == "end":
            self.editor.move_end()
        elif character and character.isprintable():
            self.editor.insert(character)
        # Any other key is swallowed while editing.
        return True
