"""Tests for the SelectionCursor class."""

import pytest

from pyship.cursor import SelectionCursor
from pyship.models import Entry


class TestNextPrev:
    """Tests for wraparound movement."""

    def test_next_from_none_selects_first(self):
        """Test next from no selection lands on index 0."""
        cursor = SelectionCursor()
        assert cursor.next(3) == 0

    def test_prev_from_none_selects_last(self):
        """Test prev from no selection lands on the last index."""
        cursor = SelectionCursor()
        assert cursor.prev(3) == 2

    def test_next_wraps_to_first(self):
        """Test next wraps from the last index to 0."""
        cursor = SelectionCursor(2)
        assert cursor.next(3) == 0

    def test_prev_wraps_to_last(self):
        """Test prev wraps from 0 to the last index."""
        cursor = SelectionCursor(0)
        assert cursor.prev(3) == 2

    def test_empty_catalog_stays_none(self):
        """Test movement over an empty catalog leaves nothing selected."""
        cursor = SelectionCursor(0)
        assert cursor.next(0) is None
        assert cursor.prev(0) is None
        assert cursor.index is None

    @pytest.mark.parametrize("length", [1, 2, 5, 17])
    def test_next_cycle_returns_to_start(self, length):
        """Test that length calls to next return to the starting index."""
        for start in range(length):
            cursor = SelectionCursor(start)
            for _ in range(length):
                cursor.next(length)
            assert cursor.index == start

    @pytest.mark.parametrize("length", [1, 2, 5])
    def test_prev_inverts_next(self, length):
        """Test prev undoes next for every valid index."""
        for start in range(length):
            cursor = SelectionCursor(start)
            cursor.next(length)
            cursor.prev(length)
            assert cursor.index == start

    def test_stale_index_is_pulled_back_in_range(self):
        """Test an index beyond a shrunken catalog never escapes it."""
        assert SelectionCursor(9).next(3) == 0
        assert SelectionCursor(9).prev(3) == 2


class TestSelected:
    """Tests for dereferencing the cursor."""

    def test_reset(self):
        """Test reset selects the first row or nothing."""
        cursor = SelectionCursor(4)
        assert cursor.reset(5) == 0
        assert cursor.reset(0) is None

    def test_selected_entry(self):
        """Test selected returns the highlighted entry."""
        entries = [Entry(name="a.txt"), Entry(name="b.txt")]
        cursor = SelectionCursor(1)
        assert cursor.selected(entries) == entries[1]

    def test_selected_on_empty_catalog(self):
        """Test selected never indexes an empty catalog."""
        assert SelectionCursor(0).selected([]) is None
        assert SelectionCursor().selected([Entry(name="a.txt")]) is None
