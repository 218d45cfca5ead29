"""Data models for pyship."""

from dataclasses import dataclass, replace


@dataclass(slots=True, frozen=True)
class Running:
    """Entry backed by a live process."""

    pid: int

    @property
    def label(self) -> str:
        return f"Up ({self.pid})"


@dataclass(slots=True, frozen=True)
class Exited:
    """Entry whose process has exited."""

    code: int

    @property
    def label(self) -> str:
        return f"Exited ({self.code})"


@dataclass(slots=True, frozen=True)
class Error:
    """Entry in an error state."""

    message: str

    @property
    def label(self) -> str:
        return f"Error: {self.message}"


Status = Running | Exited | Error


@dataclass(slots=True, frozen=True)
class Entry:
    """Immutable snapshot of one listed container."""

    name: str
    cpu: float = 0.0  # placeholder, never computed
    mem: float = 0.0  # placeholder, never computed
    status: Status = Exited(0)
    content: str = ""

    def with_content(self, content: str) -> "Entry":
        """Return a copy of this entry holding ``content``."""
        return replace(self, content=content)


@dataclass(slots=True, frozen=True)
class Browsing:
    """Screen showing the entry list."""


@dataclass(slots=True, frozen=True)
class Viewing:
    """Screen showing the content of an opened entry."""

    entry: Entry


Screen = Browsing | Viewing
