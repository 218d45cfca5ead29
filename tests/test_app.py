"""Tests for pyship application."""

import pytest

from pyship import app as app_module
from pyship.app import ContentView, EntryList, PyshipApp, command_for_key
from pyship.config import AppConfig
from pyship.models import Browsing, Viewing
from pyship.state import CONTENT_ERROR, Command, ScreenStateMachine


@pytest.fixture
def directory(tmp_path):
    (tmp_path / "a.txt").write_text("alpha\n")
    (tmp_path / "b.txt").write_text("\n".join(f"line {i}" for i in range(100)))
    return tmp_path


def make_app(directory) -> PyshipApp:
    return PyshipApp(AppConfig(directory=directory))


class TestKeyMap:
    """Tests for translating key actions into commands."""

    def test_browsing_keys(self, directory):
        """Test arrow actions move the cursor while browsing."""
        machine = ScreenStateMachine(directory)
        assert command_for_key(machine, "up") is Command.MOVE_UP
        assert command_for_key(machine, "down") is Command.MOVE_DOWN
        assert command_for_key(machine, "open") is Command.OPEN
        assert command_for_key(machine, "refresh") is Command.REFRESH
        assert command_for_key(machine, "back") is None

    def test_viewing_keys(self, directory):
        """Test arrow actions scroll while viewing."""
        machine = ScreenStateMachine(directory)
        machine.dispatch(Command.OPEN)
        assert command_for_key(machine, "up") is Command.SCROLL_UP
        assert command_for_key(machine, "down") is Command.SCROLL_DOWN
        assert command_for_key(machine, "back") is Command.BACK
        assert command_for_key(machine, "refresh") is None
        assert command_for_key(machine, "quit") is Command.QUIT


@pytest.mark.asyncio
async def test_app_creation(directory):
    """Test PyshipApp can be instantiated."""
    app = make_app(directory)
    assert app.title == "pyship"
    assert app.sub_title == "Directory Container Viewer"
    assert len(app.machine.entries) == 2


@pytest.mark.asyncio
async def test_app_compose(directory):
    """Test PyshipApp composes correctly."""
    app = make_app(directory)
    async with app.run_test() as pilot:
        entry_list = pilot.app.query_one("#entry-list", EntryList)
        content_view = pilot.app.query_one("#content-view", ContentView)
        assert entry_list.display
        assert not content_view.display


@pytest.mark.asyncio
async def test_move_bindings(directory):
    """Test down, tab and up move the selection."""
    app = make_app(directory)
    async with app.run_test() as pilot:
        await pilot.press("down")
        assert app.machine.selected_index == 1
        await pilot.press("tab")
        assert app.machine.selected_index == 0
        await pilot.press("up")
        assert app.machine.selected_index == 1
        assert app.machine.screen == Browsing()


@pytest.mark.asyncio
async def test_open_and_back(directory):
    """Test enter opens the selection and escape returns to the list."""
    app = make_app(directory)
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.machine.screen, Viewing)
        assert pilot.app.query_one("#content-view", ContentView).display
        assert not pilot.app.query_one("#entry-list", EntryList).display

        await pilot.press("escape")
        assert app.machine.screen == Browsing()
        assert pilot.app.query_one("#entry-list", EntryList).display


@pytest.mark.asyncio
async def test_scrolling_saturates_at_viewport(directory):
    """Test scrolling stops once the last line is at the bottom."""
    app = make_app(directory)
    async with app.run_test() as pilot:
        while app.machine.selected_entry.name != "b.txt":
            await pilot.press("down")
        await pilot.press("enter")
        await pilot.pause()

        height = app.machine.viewport_height
        assert 1 < height < 100

        await pilot.press(*["down"] * 120)
        await pilot.pause()

        assert app.machine.offset == 100 - height


@pytest.mark.asyncio
async def test_open_failure_shows_status(directory):
    """Test a deleted file reports an error and stays on the list."""
    app = make_app(directory)
    async with app.run_test() as pilot:
        (directory / app.machine.selected_entry.name).unlink()
        await pilot.press("enter")

        assert app.machine.screen == Browsing()
        assert app.machine.status_message == CONTENT_ERROR


@pytest.mark.asyncio
async def test_quit_from_viewing(directory):
    """Test that 'q' quits straight from the viewer."""
    app = make_app(directory)
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.press("q")
        assert not app.machine.running


def test_main_reports_unreadable_directory(tmp_path, monkeypatch):
    """Test main exits with a message when the directory cannot be listed."""
    monkeypatch.setattr(app_module, "configure_logging", lambda config: None)

    with pytest.raises(SystemExit) as excinfo:
        app_module.main([str(tmp_path / "missing")])

    assert "pyship:" in str(excinfo.value.code)


def panel_text(content_view: ContentView) -> str:
    """Text drawn by the content panel, one row per line."""
    return "\n".join(content_view.render_line(y).text for y in range(content_view.region.height))


@pytest.mark.asyncio
async def test_content_view_draws_top_and_bottom_windows(tmp_path):
    """Test wide lines are cropped so the last line can be scrolled into view."""
    (tmp_path / "wide.txt").write_text("\n".join(f"line{i:03d}" + "x" * 150 for i in range(100)))
    app = make_app(tmp_path)
    async with app.run_test(size=(80, 40)) as pilot:
        await pilot.press("enter")
        await pilot.pause()

        content_view = pilot.app.query_one("#content-view", ContentView)
        height = app.machine.viewport_height
        top = panel_text(content_view)
        assert "line000" in top
        assert f"line{height - 1:03d}" in top
        assert f"line{height:03d}" not in top

        await pilot.press(*["down"] * 150)
        await pilot.pause()

        assert app.machine.offset == 100 - height
        bottom = panel_text(content_view)
        assert "line099" in bottom
        assert f"line{100 - height:03d}" in bottom
        assert f"line{99 - height:03d}" not in bottom


@pytest.mark.asyncio
async def test_unmapped_key_clears_status(directory):
    """Test any keypress starts a new cycle and drops the last error."""
    app = make_app(directory)
    async with app.run_test() as pilot:
        (directory / app.machine.selected_entry.name).unlink()
        await pilot.press("enter")
        assert app.machine.status_message == CONTENT_ERROR

        await pilot.press("escape")

        assert app.machine.status_message is None
        assert app.machine.screen == Browsing()
