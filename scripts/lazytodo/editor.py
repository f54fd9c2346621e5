"""Single-line text buffer with a character-index cursor."""


class TextEditor:
    """Editable text plus a cursor.

    The cursor counts characters (code points), not bytes, and always lies in
    ``[0, len(text)]``.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor = len(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def before_cursor(self) -> str:
        return self._text[: self._cursor]

    @property
    def after_cursor(self) -> str:
        return self._text[self._cursor :]

    def insert(self, char: str) -> None:
        """Insert at the cursor and advance past the inserted text."""
        if not char:
            return
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self._cursor += len(char)

    def delete_before_cursor(self) -> None:
        if self._cursor == 0:
            return
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1

    def move_left(self) -> None:
        self._cursor = max(self._cursor - 1, 0)

    def move_right(self) -> None:
        self._cursor = min(self._cursor + 1, len(self._text))

    def move_home(self) -> None:
        self._cursor = 0

    def move_end(self) -> None:
        self._cursor = len(self._text)

    def clear(self) -> None:
        self._text = ""
        self._cursor = 0

    def __repr__(self) -> str:
        return f"TextEditor(text={self._text!r}, cursor={self._cursor})"
