"""pyship - Main Textual application."""

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Footer, Static

from pyship.config import AppConfig, configure_logging, parse_args
from pyship.errors import DirectoryUnreadable
from pyship.models import Entry, Viewing
from pyship.state import Command, ScreenStateMachine

logger = logging.getLogger(__name__)

PRIMARY_COLOR = "rgb(137,180,250)"
HIGHLIGHT_COLOR = "rgb(106,151,153)"

KEY_HINTS = "(q) to quit / (r) to refresh"

# Key actions per screen; anything missing from a map is ignored on that screen.
BROWSING_KEYS = {
    "up": Command.MOVE_UP,
    "down": Command.MOVE_DOWN,
    "open": Command.OPEN,
    "refresh": Command.REFRESH,
    "quit": Command.QUIT,
}
VIEWING_KEYS = {
    "up": Command.SCROLL_UP,
    "down": Command.SCROLL_DOWN,
    "back": Command.BACK,
    "quit": Command.QUIT,
}


def command_for_key(machine: ScreenStateMachine, key: str) -> Command | None:
    """Map a key action name to a command for the machine's current screen."""
    keymap = VIEWING_KEYS if isinstance(machine.screen, Viewing) else BROWSING_KEYS
    return keymap.get(key)


class EntryList(Static):
    """Panel listing the catalog with the selected row highlighted."""

    DEFAULT_CSS = f"""
    EntryList {{
        height: 1fr;
        border: solid {PRIMARY_COLOR};
        padding: 0 1;
    }}
    """

    def update_entries(self, entries: Sequence[Entry], selected_index: int | None) -> None:
        """Redraw the list from a catalog snapshot."""
        if not entries:
            self.update("[dim]No files in this directory[/dim]")
            return
        lines = []
        for i, entry in enumerate(entries):
            row = f"{escape(entry.name):<40} {escape(entry.status.label)}"
            if i == selected_index:
                lines.append(f"[bold on {HIGHLIGHT_COLOR}]{row}[/]")
            else:
                lines.append(f"[yellow]{row}[/yellow]")
        self.update("\n".join(lines))


class ContentView(Widget):
    """Viewport over the content of the opened entry."""

    DEFAULT_CSS = f"""
    ContentView {{
        height: 1fr;
        border: solid {PRIMARY_COLOR};
        padding: 0 1;
    }}
    """

    def __init__(self, machine: ScreenStateMachine, *args, **kwargs) -> None:
        """Initialize ContentView."""
        super().__init__(*args, **kwargs)
        self._machine = machine

    def render(self) -> Text:
        """Render the visible window, reporting this frame's height."""
        lines = self._machine.frame(self.size.height)
        if not self._machine.is_settled():
            # Offset still above the maximum; keep clamping on later frames
            self.call_after_refresh(self.refresh)
        return Text("\n".join(lines), no_wrap=True, overflow="crop")


class PyshipApp(App):
    """Main pyship application."""

    TITLE = "pyship"
    SUB_TITLE = "Directory Container Viewer"

    CSS = f"""
    Screen {{
        layout: vertical;
    }}

    #title {{
        height: 3;
        border: solid {PRIMARY_COLOR};
        content-align: center middle;
        color: yellow;
    }}

    #mode-bar {{
        height: 3;
    }}

    #mode-info {{
        width: 1fr;
        border: solid {PRIMARY_COLOR};
    }}

    #key-hints {{
        width: 1fr;
        border: solid {PRIMARY_COLOR};
        color: red;
    }}

    #status-message {{
        height: 1;
        color: red;
    }}
    """

    BINDINGS = [
        Binding("q", "command('quit')", "Quit", priority=True),
        Binding("r", "command('refresh')", "Refresh", priority=True),
        Binding("enter", "command('open')", "Open", priority=True),
        Binding("escape,backspace", "command('back')", "Back", priority=True),
        Binding("up,k", "command('up')", "Up", show=False, priority=True),
        Binding("down,j", "command('down')", "Down", show=False, priority=True),
        Binding("tab", "command('down')", "Down", show=False, priority=True),
    ]

    def __init__(self, config: AppConfig | None = None) -> None:
        """
        Initialize the PyshipApp.

        Raises:
            DirectoryUnreadable: The configured directory cannot be listed.
        """
        super().__init__()
        self._config = config if config is not None else AppConfig(directory=Path("."))
        self._machine = ScreenStateMachine(self._config.directory)

    @property
    def machine(self) -> ScreenStateMachine:
        """Get the state machine driving the UI."""
        return self._machine

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Static(self.TITLE, id="title")
        yield EntryList(id="entry-list")
        yield ContentView(self._machine, id="content-view")
        yield Static("", id="status-message")
        yield Horizontal(
            Static("", id="mode-info"),
            Static(KEY_HINTS, id="key-hints"),
            id="mode-bar",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Draw the initial catalog once the widgets exist."""
        self._update_ui()

    def action_command(self, key: str) -> None:
        """Translate a key action into a state machine command."""
        command = command_for_key(self._machine, key)
        if command is None:
            # Unmapped keys still start a new input cycle
            self._machine.clear_status()
            self._update_ui()
            return
        logger.debug("Key %s dispatched as %s", key, command.name)
        if not self._machine.dispatch(command):
            self.exit()
            return
        self._update_ui()

    def _update_ui(self) -> None:
        """Poll the state machine and refresh every panel."""
        machine = self._machine
        viewing = isinstance(machine.screen, Viewing)

        entry_list = self.query_one("#entry-list", EntryList)
        entry_list.update_entries(machine.entries, machine.selected_index)
        entry_list.display = not viewing

        content_view = self.query_one("#content-view", ContentView)
        content_view.display = viewing
        content_view.refresh()

        status = self.query_one("#status-message", Static)
        status.update(escape(machine.status_message or ""))

        if viewing:
            name = machine.screen.entry.name
        else:
            selected = machine.selected_entry
            name = selected.name if selected is not None else "Nothing selected"
        mode_info = self.query_one("#mode-info", Static)
        mode_info.update(f"[green]{machine.mode_label}[/green] | [green]{escape(name)}[/green]")


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for pyship application."""
    config = parse_args(argv)
    configure_logging(config)
    try:
        app = PyshipApp(config)
    except DirectoryUnreadable as exc:
        sys.exit(f"pyship: {exc}")
    app.run()


if __name__ == "__main__":
    main()
