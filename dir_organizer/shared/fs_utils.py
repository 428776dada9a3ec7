"""
Filesystem and formatting utilities for dir-organizer.
"""

import logging
from pathlib import Path
from typing import Optional

import arrow

BYTES_PER_MB = 1024 * 1024

# arrow tokens for YYYYMMDD_HHMMSS
COLLISION_TIMESTAMP_FORMAT = "YYYYMMDD_HHmmss"


def bytes_to_megabytes(size_bytes: int) -> float:
    """
    Convert bytes to binary megabytes.

    Args:
        size_bytes: Size in bytes

    Returns:
        Size in MB (1 MB = 1,048,576 bytes)
    """
    return size_bytes / BYTES_PER_MB


def format_megabytes(size_bytes: int) -> str:
    """Format a byte count as megabytes with one decimal place."""
    return f"{bytes_to_megabytes(size_bytes):.1f} MB"


def file_extension(name: str) -> str:
    """
    Return the extension of a file name, from the last dot onwards.

    Unlike ``Path.suffix`` a leading dot counts, so ``.jpg`` has the
    extension ``.jpg``. A name without a dot has no extension.

    Args:
        name: File or directory name (not a full path)

    Returns:
        Extension including the dot, or "" if there is none
    """
    index = name.rfind(".")
    if index == -1:
        return ""
    return name[index:]


def timestamped_name(path: Path, now: Optional[arrow.Arrow] = None) -> str:
    """
    Build a collision-free file name by appending a timestamp to the stem.

    ``photo.jpg`` becomes ``photo_20240115_143022.jpg``. The timestamp has
    second precision, so two collisions within the same second produce the
    same name.

    Args:
        path: Path whose name collided
        now: Timestamp to embed (defaults to the current local time)

    Returns:
        New file name (not a full path)
    """
    timestamp = (now or arrow.now()).format(COLLISION_TIMESTAMP_FORMAT)
    extension = file_extension(path.name)
    stem = path.name[: len(path.name) - len(extension)]
    return f"{stem}_{timestamp}{extension}"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure diagnostic logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
