"""
Shared utilities for dir-organizer.

Small helpers used by both the organizer core and the CLI.
"""

from .fs_utils import (
    BYTES_PER_MB,
    COLLISION_TIMESTAMP_FORMAT,
    bytes_to_megabytes,
    file_extension,
    format_megabytes,
    setup_logging,
    timestamped_name,
)

__all__ = [
    "BYTES_PER_MB",
    "COLLISION_TIMESTAMP_FORMAT",
    "bytes_to_megabytes",
    "file_extension",
    "format_megabytes",
    "setup_logging",
    "timestamped_name",
]
