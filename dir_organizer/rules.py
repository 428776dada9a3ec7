"""
Extension rules for classifying files.

A rule table maps a file extension (including the leading dot) to the name
of the category directory the file is moved into. Lookups are exact and
case-sensitive: ``.JPG`` does not match a ``.jpg`` rule.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleTable(BaseModel):
    """Immutable mapping from file extension to category name."""

    rules: Mapping[str, str] = Field(
        default_factory=dict,
        description="Extension (with leading dot) -> category name",
    )

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("rules")
    @classmethod
    def _validate_rules(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        validated: Dict[str, str] = {}
        for ext, category in value.items():
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Extension must start with '.': {ext!r}")
            if not category:
                raise ValueError(f"Empty category for extension {ext!r}")
            validated[ext] = category
        return MappingProxyType(validated)

    def category_for(self, extension: str) -> Optional[str]:
        """
        Look up the category for an extension.

        Args:
            extension: Extension including the leading dot (e.g. ".jpg")

        Returns:
            Category name, or None if no rule matches
        """
        return self.rules.get(extension)

    @property
    def categories(self) -> FrozenSet[str]:
        """Distinct category names in the table."""
        return frozenset(self.rules.values())


DEFAULT_RULES = RuleTable(
    rules={
        ".jpg": "Images",
        ".jpeg": "Images",
        ".png": "Images",
        ".pdf": "Documents",
        ".doc": "Documents",
        ".docx": "Documents",
        ".txt": "Documents",
        ".mp3": "Music",
        ".wav": "Music",
        ".mp4": "Video",
        ".avi": "Video",
        ".zip": "Archives",
        ".rar": "Archives",
    }
)
