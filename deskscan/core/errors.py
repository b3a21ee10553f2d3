"""Exceptions raised while parsing, scanning and launching desktop entries."""

from __future__ import annotations

from pathlib import Path

SECTION_HEADER_NOT_FOUND = "section header not found"


class DeskscanError(Exception):
    """Base class for all deskscan errors."""


class FormatError(DeskscanError):
    """The file is not a desktop entry (no main section header)."""

    def __init__(self, reason: str = SECTION_HEADER_NOT_FOUND) -> None:
        super().__init__(f"failed to parse desktop entry: {reason}")
        self.reason = reason


class ReadError(DeskscanError):
    """Reading a desktop entry failed or a line overflowed the read buffer."""

    def __init__(self, cause: BaseException | str) -> None:
        super().__init__(f"failed to parse desktop entry: {cause}")
        self.cause = cause


class ListError(DeskscanError):
    """A directory could not be listed."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        super().__init__(f"failed to list {path}: {cause}")
        self.path = str(path)
        self.cause = cause


class OpenError(DeskscanError):
    """A candidate desktop file could not be opened."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        super().__init__(f"failed to open {path}: {cause}")
        self.path = str(path)
        self.cause = cause


class LaunchError(DeskscanError):
    """An entry could not be launched."""
