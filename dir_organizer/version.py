"""Version information for dir-organizer."""

__version__ = "1.0.0"
