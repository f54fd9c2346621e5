"""Ordered collection with a single wrap-around selection cursor."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """A list of items and an optional selected index.

    Invariant: ``selected`` is None when the list is empty, otherwise it lies
    in ``[0, len(self))``.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._selected: int | None = 0 if self._items else None

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def selected_item(self) -> T | None:
        if self._selected is None:
            return None
        return self._items[self._selected]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def select(self, index: int | None) -> None:
        """Select an index directly; out-of-range values are clamped."""
        if index is None or not self._items:
            self._selected = None
            return
        self._selected = min(max(index, 0), len(self._items) - 1)

    def select_next(self) -> None:
        if not self._items:
            return
        if self._selected is None or self._selected >= len(self._items) - 1:
            self._selected = 0
        else:
            self._selected += 1

    def select_previous(self) -> None:
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected == 0:
            self._selected = len(self._items) - 1
        else:
            self._selected -= 1

    def remove_selected(self) -> T | None:
        """Remove and return the selected item, keeping the selection valid."""
        if self._selected is None:
            return None
        removed = self._items.pop(self._selected)
        self._clamp()
        return removed

    def set_items(self, items: Iterable[T]) -> None:
        """Replace the contents, keeping the selected index where possible."""
        self._items = list(items)
        if self._selected is None and self._items:
            self._selected = 0
        else:
            self._clamp()

    def _clamp(self) -> None:
        if not self._items:
            self._selected = None
        elif self._selected is not None and self._selected >= len(self._items):
            self._selected = len(self._items) - 1
