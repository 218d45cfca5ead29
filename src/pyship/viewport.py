"""Scroll window mapping long content onto a fixed-height viewport."""


def split_lines(content: str) -> list[str]:
    """
    Split content into display lines.

    Only ``\\n`` ends a line; a trailing ``\\r`` is dropped from each line and
    a final newline does not add an empty last line. Other separators that
    ``str.splitlines`` honours (form feed, ``\\u2028``) stay inside the line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def max_offset(line_count: int, viewport_height: int) -> int:
    """Largest offset that still fills the viewport."""
    return max(0, line_count - max(1, viewport_height))


class ScrollWindow:
    """
    Scroll offset over a list of content lines.

    The offset counts the leading lines hidden above the viewport. The
    viewport height is supplied by the renderer and may change between
    frames, so an offset left out of range by a resize is pulled back one
    line per frame rather than snapped to the new maximum.
    """

    def __init__(self) -> None:
        self._offset = 0

    @property
    def offset(self) -> int:
        """Get the current scroll offset."""
        return self._offset

    def reset(self) -> None:
        """Scroll back to the top."""
        self._offset = 0

    def scroll_down(self, line_count: int, viewport_height: int) -> int:
        """Scroll one line down, never past the last full window."""
        if self._offset < max_offset(line_count, viewport_height):
            self._offset += 1
        return self._offset

    def scroll_up(self) -> int:
        """Scroll one line up, never above the first line."""
        if self._offset > 0:
            self._offset -= 1
        return self._offset

    def settle(self, line_count: int, viewport_height: int) -> int:
        """Apply the per-frame clamp and return the resulting offset."""
        if line_count <= max(1, viewport_height):
            self._offset = 0
        elif self._offset > max_offset(line_count, viewport_height):
            self._offset -= 1
        return self._offset

    def is_settled(self, line_count: int, viewport_height: int) -> bool:
        """Check whether the offset is inside the valid range."""
        return self._offset <= max_offset(line_count, viewport_height)

    def window(self, lines: list[str], viewport_height: int) -> list[str]:
        """Settle the offset for this frame and return the visible lines."""
        height = max(1, viewport_height)
        offset = self.settle(len(lines), height)
        return lines[offset : offset + height]
