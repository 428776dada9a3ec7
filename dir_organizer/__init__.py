"""
dir-organizer: sort a directory into category folders by file extension.
"""

from .version import __version__

__all__ = ["__version__"]
