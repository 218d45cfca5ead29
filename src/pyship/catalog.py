"""Directory listing and content loading for pyship."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from pyship.errors import ContentUnreadable, DirectoryUnreadable
from pyship.models import Entry, Exited

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Read-only filesystem surface used by the catalog and loader."""

    def list_directory(self, path: Path) -> Iterable[tuple[str, bool]]:
        """Return ``(name, is_file)`` pairs for the direct children of ``path``."""
        ...

    def read_text(self, path: Path) -> str:
        """Return the full UTF-8 text of ``path``."""
        ...


class OsFileSystem:
    """FileSystem backed by the operating system."""

    def list_directory(self, path: Path) -> list[tuple[str, bool]]:
        """List the direct children of path, skipping ones that vanish mid-listing."""
        children: list[tuple[str, bool]] = []
        with os.scandir(path) as it:
            for dir_entry in it:
                try:
                    is_file = dir_entry.is_file()
                except OSError:
                    # Entry vanished or is unreachable mid-listing
                    continue
                children.append((dir_entry.name, is_file))
        return children

    def read_text(self, path: Path) -> str:
        """Read path in full as UTF-8 text."""
        with open(path, encoding="utf-8") as handle:
            return handle.read()


class Catalog:
    """
    Ordered listing of the regular files in one directory.

    The listing keeps the filesystem's iteration order and is rebuilt
    wholesale on every refresh.
    """

    def __init__(self, directory: Path, filesystem: FileSystem | None = None) -> None:
        """
        Initialize the Catalog.

        Args:
            directory: Directory whose files become entries.
            filesystem: Filesystem to list from. Defaults to the OS filesystem.
        """
        self._directory = directory
        self._fs = filesystem if filesystem is not None else OsFileSystem()
        self._entries: tuple[Entry, ...] = ()

    @property
    def directory(self) -> Path:
        """Get the directory being listed."""
        return self._directory

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Get the entries of the latest successful refresh."""
        return self._entries

    def __len__(self) -> int:
        """Get the number of listed entries."""
        return len(self._entries)

    def refresh(self) -> tuple[Entry, ...]:
        """
        Re-list the directory and replace the entries.

        Raises:
            DirectoryUnreadable: The directory could not be enumerated. The
                previous entries are kept.
        """
        try:
            children = list(self._fs.list_directory(self._directory))
        except (OSError, UnicodeError) as exc:
            logger.error("Failed to list %s: %s", self._directory, exc)
            raise DirectoryUnreadable(str(self._directory)) from exc

        self._entries = tuple(Entry(name=name, status=Exited(0)) for name, is_file in children if is_file)
        logger.debug("Listed %d entries in %s", len(self._entries), self._directory)
        return self._entries


class ContentLoader:
    """Reads the text content behind an entry."""

    def __init__(self, directory: Path, filesystem: FileSystem | None = None) -> None:
        """Initialize the ContentLoader for files under directory."""
        self._directory = directory
        self._fs = filesystem if filesystem is not None else OsFileSystem()

    def load(self, entry: Entry) -> Entry:
        """
        Read the entry's backing file in full.

        The read is synchronous and uncapped: a very large file blocks the
        caller until it has been read.

        Returns:
            A copy of ``entry`` with ``content`` populated.

        Raises:
            ContentUnreadable: The file is missing, unreadable or not UTF-8.
        """
        path = self._directory / entry.name
        try:
            content = self._fs.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read %s: %s", path, exc)
            raise ContentUnreadable(entry.name) from exc
        return entry.with_content(content)
