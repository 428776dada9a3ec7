"""
Exceptions raised while organizing a directory.
"""

from pathlib import Path


class OrganizerError(Exception):
    """Base class for organizer errors."""


class MoveError(OrganizerError):
    """Moving a matched entry failed; aborts the walk."""

    def __init__(self, source: Path, message: str) -> None:
        super().__init__(message)
        self.source = source


class TargetDirectoryError(MoveError):
    """The category directory could not be created."""


class FileMoveError(MoveError):
    """The rename itself failed."""


class StatQueryError(MoveError):
    """The file moved but its size could not be read afterwards."""
