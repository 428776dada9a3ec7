"""
File organizer for sorting a directory tree into category folders.

Walks the source directory, classifies each entry by its extension using a
rule table, and moves matches into ``<source>/<Category>/``. Every move
attempt is traced in the operation log and tallied in the run statistics.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from ..config import OrganizerConfig
from ..rules import DEFAULT_RULES, RuleTable
from ..shared import file_extension, timestamped_name
from .errors import FileMoveError, MoveError, StatQueryError, TargetDirectoryError
from .operation_log import OperationLog
from .statistics import OrganizationStatistics

logger = logging.getLogger(__name__)


class FileOrganizer:
    """Organize a directory tree into category subdirectories."""

    def __init__(
        self,
        source_dir: Path,
        operation_log: OperationLog,
        rules: RuleTable = DEFAULT_RULES,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize file organizer.

        Args:
            source_dir: Root directory to organize
            operation_log: Sink for SUCCESS/ERROR lines
            rules: Extension to category mapping
            dry_run: If True, preview moves without touching the filesystem
        """
        self.source_dir = Path(source_dir)
        self.operation_log = operation_log
        self.rules = rules
        self.dry_run = dry_run
        self.processed_files = 0
        self.statistics = OrganizationStatistics()

    @classmethod
    def from_config(
        cls,
        config: OrganizerConfig,
        operation_log: OperationLog,
        rules: RuleTable = DEFAULT_RULES,
    ) -> "FileOrganizer":
        """
        Create an organizer from run settings.

        Raises:
            ValueError: If the config has no source directory
        """
        if config.source_dir is None:
            raise ValueError("No source directory configured")
        return cls(
            source_dir=config.source_dir,
            operation_log=operation_log,
            rules=rules,
            dry_run=config.dry_run,
        )

    def organize(self) -> OrganizationStatistics:
        """
        Walk the source directory and move every matching entry.

        Entries that cannot be read are logged and skipped. A failed move is
        logged and aborts the walk; statistics gathered up to that point stay
        available on ``self.statistics``.

        Returns:
            Statistics of the moved files

        Raises:
            NotADirectoryError: If the source directory does not exist
            MoveError: If moving a matched entry fails
        """
        if not self.source_dir.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.source_dir}")

        logger.info(
            f"{'[DRY RUN] ' if self.dry_run else ''}Organizing {self.source_dir}"
        )

        for root, dirnames, filenames in os.walk(
            self.source_dir, onerror=self._on_walk_error
        ):
            root_path = Path(root)
            dirnames.sort()
            filenames.sort()

            # A directory is classified by its name like any file; once moved
            # it is no longer descended into.
            for name in list(dirnames):
                if self._process_entry(root_path / name):
                    dirnames.remove(name)

            for name in filenames:
                self._process_entry(root_path / name)

        logger.info(
            f"Organized {self.processed_files} entries "
            f"({self.statistics.total_size} bytes)"
        )
        return self.statistics

    def move_file(self, source: Path, target_dir: Path) -> Path:
        """
        Move a single entry into a target directory.

        Args:
            source: File (or directory) to move
            target_dir: Category directory to move it into

        Returns:
            Final destination path

        Raises:
            TargetDirectoryError: If target_dir cannot be created
            FileMoveError: If the rename fails
            StatQueryError: If the moved file's size cannot be read
        """
        if self.dry_run:
            return self._preview_move(source, target_dir)

        if not target_dir.is_dir():
            try:
                target_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.operation_log.error(f"Cannot create directory {target_dir}: {e}")
                raise TargetDirectoryError(
                    source, f"Cannot create directory {target_dir}: {e}"
                ) from e

        destination = self._resolve_destination(source, target_dir)

        self.operation_log.success(f"Source file: {source}")
        self.operation_log.success(f"Target directory: {target_dir}")

        try:
            source.rename(destination)
        except OSError as e:
            self.operation_log.error(f"Cannot move {source} -> {destination}: {e}")
            raise FileMoveError(source, f"Cannot move {source}: {e}") from e

        try:
            size = os.path.getsize(destination)
        except OSError as e:
            self.operation_log.error(f"Cannot read file info: {destination}: {e}")
            raise StatQueryError(
                source, f"Cannot read file info: {destination}: {e}"
            ) from e

        self._record(destination, size)
        self.operation_log.success(f"Result: {destination}")
        logger.debug(f"Moved {source} → {destination}")

        return destination

    def _process_entry(self, entry: Path) -> bool:
        """
        Classify one walked entry and move it if a rule matches.

        Returns:
            True if the entry was moved
        """
        target_dir = self._get_target_directory(entry)
        if target_dir is None:
            return False

        if entry.parent == target_dir:
            logger.debug(f"Skipping {entry}: already in {target_dir.name}")
            return False

        try:
            self.move_file(entry, target_dir)
        except MoveError as e:
            # Unlike unreadable entries, a failed move stops the whole walk.
            self.operation_log.error(f"Aborting at {entry}: {e}")
            raise

        return True

    def _get_target_directory(self, entry: Path) -> Optional[Path]:
        category = self.rules.category_for(file_extension(entry.name))
        if category is None:
            return None
        return self.source_dir / category

    def _resolve_destination(self, source: Path, target_dir: Path) -> Path:
        destination = target_dir / source.name
        if destination.exists():
            destination = target_dir / timestamped_name(source)
            logger.debug(f"Name collision for {source.name}, using {destination.name}")
        return destination

    def _preview_move(self, source: Path, target_dir: Path) -> Path:
        destination = self._resolve_destination(source, target_dir)

        try:
            size = os.path.getsize(source)
        except OSError as e:
            self.operation_log.error(f"Cannot read file info: {source}: {e}")
            raise StatQueryError(source, f"Cannot read file info: {source}: {e}") from e

        self._record(destination, size)
        self.operation_log.success(f"[DRY RUN] Would move {source} -> {destination}")
        logger.info(f"[DRY RUN] Would move {source} → {destination}")

        return destination

    def _record(self, destination: Path, size: int) -> None:
        self.statistics.record(file_extension(destination.name), size)
        self.processed_files += 1

    def _on_walk_error(self, error: OSError) -> None:
        self.operation_log.error(f"Cannot access {error.filename}: {error}")
        logger.warning(f"Skipping unreadable entry {error.filename}: {error}")
