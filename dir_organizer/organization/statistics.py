"""
Per-extension statistics for an organizer run.
"""

from typing import Dict

from pydantic import BaseModel, Field


class CategoryStatistics(BaseModel):
    """File count and total size for one extension."""

    count: int = Field(default=0, ge=0, description="Number of files moved")
    total_size: int = Field(default=0, ge=0, description="Total size in bytes")

    def add(self, size: int) -> None:
        """Account for one more file of the given size."""
        if size < 0:
            raise ValueError(f"File size cannot be negative: {size}")
        self.count += 1
        self.total_size += size


class OrganizationStatistics(BaseModel):
    """
    Additive tally of moved files, keyed by extension.

    Two extensions that map to the same category (``.jpg`` and ``.jpeg``)
    are tracked separately.
    """

    by_extension: Dict[str, CategoryStatistics] = Field(default_factory=dict)

    def record(self, extension: str, size: int) -> CategoryStatistics:
        """
        Record a moved file.

        Args:
            extension: Extension of the file's final path
            size: Size of the file in bytes

        Returns:
            The updated statistics entry for the extension
        """
        stats = self.by_extension.get(extension)
        if stats is None:
            stats = CategoryStatistics()
            self.by_extension[extension] = stats
        stats.add(size)
        return stats

    @property
    def total_files(self) -> int:
        return sum(stats.count for stats in self.by_extension.values())

    @property
    def total_size(self) -> int:
        return sum(stats.total_size for stats in self.by_extension.values())
