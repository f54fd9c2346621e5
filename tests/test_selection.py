"""Tests for selection.py - wrap-around list selection."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from lazytodo.selection import SelectableList  # noqa: E402


class TestInitialSelection:
    def test_non_empty_selects_first(self) -> None:
        assert SelectableList("abc").selected == 0

    def test_empty_has_no_selection(self) -> None:
        items: SelectableList[str] = SelectableList()

        assert items.selected is None
        assert items.selected_item is None


class TestSelectNext:
    """Tests for select_next wrap-around."""

    def test_increments(self) -> None:
        items = SelectableList("abc")
        items.select_next()

        assert items.selected == 1
        assert items.selected_item == "b"

    def test_wraps_from_last_to_first(self) -> None:
        items = SelectableList("abc")
        items.select(2)
        items.select_next()

        assert items.selected == 0

    def test_unset_selects_first(self) -> None:
        items = SelectableList("abc")
        items.select(None)
        items.select_next()

        assert items.selected == 0

    @pytest.mark.parametrize("size", [1, 2, 5, 17])
    def test_n_steps_return_to_start(self, size: int) -> None:
        """N consecutive select_next calls come back to the starting index."""
        items = SelectableList(range(size))
        for start in range(size):
            items.select(start)
            for _ in range(size):
                items.select_next()
                assert 0 <= items.selected < size
            assert items.selected == start

    def test_empty_is_noop(self) -> None:
        items: SelectableList[int] = SelectableList()
        items.select_next()

        assert items.selected is None


class TestSelectPrevious:
    """Tests for select_previous wrap-around."""

    def test_decrements(self) -> None:
        items = SelectableList("abc")
        items.select(2)
        items.select_previous()

        assert items.selected == 1

    def test_wraps_from_first_to_last(self) -> None:
        items = SelectableList("abc")
        items.select_previous()

        assert items.selected == 2

    def test_unset_selects_first(self) -> None:
        items = SelectableList("abc")
        items.select(None)
        items.select_previous()

        assert items.selected == 0

    def test_empty_is_noop(self) -> None:
        items: SelectableList[int] = SelectableList()
        items.select_previous()

        assert items.selected is None

    def test_mixed_walk_stays_in_bounds(self) -> None:
        items = SelectableList(range(4))
        moves = "nnppnnnnppppppn"
        for move in moves:
            if move == "n":
                items.select_next()
            else:
                items.select_previous()
            assert 0 <= items.selected < 4
        # 7 forward, 8 back: net one step back from 0
        assert items.selected == 3


class TestRemoveSelected:
    """Tests for remove_selected clamping."""

    def test_removes_and_keeps_index(self) -> None:
        items = SelectableList("abc")
        items.select(1)
        removed = items.remove_selected()

        assert removed == "b"
        assert items.items == ["a", "c"]
        assert items.selected == 1
        assert items.selected_item == "c"

    def test_removing_last_clamps(self) -> None:
        items = SelectableList("abc")
        items.select(2)
        items.remove_selected()

        assert items.selected == 1

    def test_removing_only_item_unsets(self) -> None:
        items = SelectableList("a")
        items.remove_selected()

        assert len(items) == 0
        assert items.selected is None

    def test_nothing_selected_returns_none(self) -> None:
        items: SelectableList[str] = SelectableList()

        assert items.remove_selected() is None


class TestSetItems:
    def test_keeps_index_when_possible(self) -> None:
        items = SelectableList("abc")
        items.select(1)
        items.set_items("xyz")

        assert items.selected == 1

    def test_clamps_when_shrinking(self) -> None:
        items = SelectableList("abcd")
        items.select(3)
        items.set_items("xy")

        assert items.selected == 1

    def test_selects_first_when_filled(self) -> None:
        items: SelectableList[str] = SelectableList()
        items.set_items("ab")

        assert items.selected == 0

    def test_unsets_when_emptied(self) -> None:
        items = SelectableList("ab")
        items.set_items([])

        assert items.selected is None
