"""Organizer configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FILE = Path("organizer.log")


class OrganizerConfig(BaseSettings):
    """Run settings loaded from arguments or DIR_ORGANIZER_* environment variables."""

    # Directory to organize; prompted for interactively when unset
    source_dir: Optional[Path] = None

    # Append-only operation log, relative to the working directory
    log_file: Path = DEFAULT_LOG_FILE

    # Preview moves without touching the filesystem
    dry_run: bool = False

    model_config = SettingsConfigDict(
        env_prefix="DIR_ORGANIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unrelated .env entries
    )
