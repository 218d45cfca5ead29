"""Wraparound selection cursor for pyship."""

from collections.abc import Sequence

from pyship.models import Entry


class SelectionCursor:
    """
    Optional index into the catalog.

    ``None`` means nothing is selected, which is the only possible state for
    an empty catalog. Every operation takes the current catalog length so the
    index can never point past the end.
    """

    def __init__(self, index: int | None = None) -> None:
        """Initialize the cursor at index, or with nothing selected."""
        self._index = index

    @property
    def index(self) -> int | None:
        """Get the selected index, or None when nothing is selected."""
        return self._index

    def next(self, length: int) -> int | None:
        """Move down one row, wrapping from the last row to the first."""
        if length <= 0:
            self._index = None
        elif self._index is None or self._index >= length - 1:
            self._index = 0
        else:
            self._index += 1
        return self._index

    def prev(self, length: int) -> int | None:
        """Move up one row, wrapping from the first row to the last."""
        if length <= 0:
            self._index = None
        elif self._index is None or self._index == 0 or self._index >= length:
            self._index = length - 1
        else:
            self._index -= 1
        return self._index

    def reset(self, length: int) -> int | None:
        """Select the first row, or nothing for an empty catalog."""
        self._index = 0 if length > 0 else None
        return self._index

    def selected(self, entries: Sequence[Entry]) -> Entry | None:
        """Get the selected entry, or None when nothing valid is selected."""
        if self._index is None or not 0 <= self._index < len(entries):
            return None
        return entries[self._index]
