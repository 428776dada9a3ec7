"""Command-line interface for dir-organizer."""
