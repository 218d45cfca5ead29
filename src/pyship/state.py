"""Navigation and viewport state engine for pyship."""

import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from pyship.catalog import Catalog, ContentLoader, FileSystem
from pyship.cursor import SelectionCursor
from pyship.errors import ContentUnreadable, DirectoryUnreadable
from pyship.models import Browsing, Entry, Screen, Viewing
from pyship.viewport import ScrollWindow, split_lines

logger = logging.getLogger(__name__)

CONTENT_ERROR = "File couldn't be opened."
DIRECTORY_ERROR = "Directory couldn't be read."


class Command(Enum):
    """Discrete input commands understood by the state machine."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    REFRESH = "refresh"
    OPEN = "open"
    BACK = "back"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    QUIT = "quit"


class ScreenStateMachine:
    """
    Owns the catalog, cursor, screen, scroll offset and status message.

    Commands are processed one at a time by ``dispatch``. Errors raised while
    handling a command are turned into the status message and never escape,
    except for the implicit refresh done at construction, which propagates
    ``DirectoryUnreadable`` so startup can fail loudly.
    """

    def __init__(
        self,
        directory: Path,
        filesystem: FileSystem | None = None,
        viewport_height: int = 1,
    ) -> None:
        """
        Initialize the ScreenStateMachine.

        Args:
            directory: Directory to list.
            filesystem: Filesystem to read from. Defaults to the OS filesystem.
            viewport_height: Viewport height used for scrolling until the
                first frame reports the real one.

        Raises:
            DirectoryUnreadable: The initial listing failed.
        """
        self._catalog = Catalog(directory, filesystem)
        self._loader = ContentLoader(directory, filesystem)
        self._cursor = SelectionCursor()
        self._window = ScrollWindow()
        self._screen: Screen = Browsing()
        self._lines: list[str] = []
        self._viewport_height = max(1, viewport_height)
        self._status_message: str | None = None
        self._running = True
        self._reload()

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._catalog.entries

    @property
    def selected_index(self) -> int | None:
        return self._cursor.index

    @property
    def selected_entry(self) -> Entry | None:
        return self._cursor.selected(self._catalog.entries)

    @property
    def offset(self) -> int:
        return self._window.offset

    @property
    def status_message(self) -> str | None:
        """Get the outcome of the last command; None means success."""
        return self._status_message

    @property
    def running(self) -> bool:
        return self._running

    @property
    def viewport_height(self) -> int:
        return self._viewport_height

    @property
    def mode_label(self) -> str:
        return "Detail Mode" if isinstance(self._screen, Viewing) else "Normal Mode"

    def clear_status(self) -> None:
        """Forget the outcome of the last command."""
        self._status_message = None

    def dispatch(self, command: Command) -> bool:
        """
        Process one command.

        Returns:
            False once QUIT has been processed, True otherwise.
        """
        if not self._running:
            return False

        self._status_message = None
        if command is Command.QUIT:
            logger.debug("Quit requested")
            self._running = False
            return False

        if isinstance(self._screen, Viewing):
            self._dispatch_viewing(command)
        else:
            self._dispatch_browsing(command)
        return True

    def run(self, commands: Iterable[Command]) -> int:
        """Feed commands until they run out or QUIT stops the machine.

        Returns the number of commands consumed.
        """
        consumed = 0
        for command in commands:
            consumed += 1
            if not self.dispatch(command):
                break
        return consumed

    def frame(self, viewport_height: int) -> list[str]:
        """
        Record the renderer's viewport height and return the visible lines.

        Called once per rendered frame. Applies the one-step offset clamp, so
        an offset left out of range by a resize converges over several frames.
        """
        self._viewport_height = max(1, viewport_height)
        if not isinstance(self._screen, Viewing):
            return []
        return self._window.window(self._lines, self._viewport_height)

    def is_settled(self) -> bool:
        """Check whether the scroll offset is within range for the last frame."""
        return self._window.is_settled(len(self._lines), self._viewport_height)

    def _dispatch_browsing(self, command: Command) -> None:
        length = len(self._catalog)
        if command is Command.MOVE_DOWN:
            self._cursor.next(length)
        elif command is Command.MOVE_UP:
            self._cursor.prev(length)
        elif command is Command.REFRESH:
            self._refresh()
        elif command is Command.OPEN:
            self._open_selected()

    def _dispatch_viewing(self, command: Command) -> None:
        if command is Command.BACK:
            self._screen = Browsing()
            self._lines = []
            self._window.reset()
        elif command is Command.SCROLL_DOWN:
            self._window.scroll_down(len(self._lines), self._viewport_height)
        elif command is Command.SCROLL_UP:
            self._window.scroll_up()

    def _reload(self) -> None:
        self._catalog.refresh()
        self._cursor.reset(len(self._catalog))

    def _refresh(self) -> None:
        try:
            self._reload()
        except DirectoryUnreadable:
            self._status_message = DIRECTORY_ERROR

    def _open_selected(self) -> None:
        entry = self.selected_entry
        if entry is None:
            return
        try:
            opened = self._loader.load(entry)
        except ContentUnreadable:
            self._status_message = CONTENT_ERROR
            return
        self._screen = Viewing(opened)
        self._lines = split_lines(opened.content)
        self._window.reset()
        logger.debug("Opened %s (%d lines)", opened.name, len(self._lines))
