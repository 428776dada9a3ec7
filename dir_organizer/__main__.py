"""Allow running the organizer with ``python -m dir_organizer``."""

from .cli.organize import organize

if __name__ == "__main__":
    organize()
