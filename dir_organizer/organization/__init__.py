"""
Organization module for sorting files into category directories.

This module walks a directory, classifies entries by extension, moves them
into category folders, and keeps an operation log and per-extension
statistics of the run.
"""

from .errors import (
    FileMoveError,
    MoveError,
    OrganizerError,
    StatQueryError,
    TargetDirectoryError,
)
from .file_organizer import FileOrganizer
from .operation_log import OperationLog
from .report import build_category_table, print_report
from .statistics import CategoryStatistics, OrganizationStatistics

__all__ = [
    "FileOrganizer",
    "OperationLog",
    "CategoryStatistics",
    "OrganizationStatistics",
    "build_category_table",
    "print_report",
    "OrganizerError",
    "MoveError",
    "TargetDirectoryError",
    "FileMoveError",
    "StatQueryError",
]
