"""Exceptions raised by pyship."""


class PyshipError(Exception):
    """Base class for pyship errors."""


class DirectoryUnreadable(PyshipError):
    """The catalog directory could not be enumerated."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Cannot read directory: {directory}")
        self.directory = directory


class ContentUnreadable(PyshipError):
    """An entry's backing file could not be opened or decoded."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot read file: {name}")
        self.name = name
