"""
Operation log for organizer runs.

Every move attempt is traced as a timestamped line in an append-only text
file::

    2024/01/15 14:30:22 [SUCCESS] Source file: /data/in/photo.jpg
    2024/01/15 14:30:22 [ERROR] Cannot access /data/in/private: ...

The log is a plain ``logging.Logger`` that is *not* registered with the
logging manager, so each organizer owns its sink and nothing leaks into the
root logger or the diagnostic output.
"""

import logging
from pathlib import Path
from types import TracebackType
from typing import Optional, TextIO, Type

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"
LOG_ENCODING = "utf-8"

logger = logging.getLogger(__name__)


class OperationLog:
    """SUCCESS/ERROR line sink backed by a private logger."""

    def __init__(
        self, stream: Optional[TextIO] = None, handler: Optional[logging.Handler] = None
    ) -> None:
        """
        Initialize the operation log.

        Args:
            stream: Text stream to write lines to (ignored if handler is given)
            handler: Pre-built handler, e.g. a FileHandler from open()
        """
        if handler is None:
            handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

        self._handler = handler
        self._logger = logging.Logger("dir_organizer.operations", level=SUCCESS)
        self._logger.propagate = False
        self._logger.addHandler(handler)

    @classmethod
    def open(cls, log_path: Path) -> "OperationLog":
        """
        Open (or create) a log file in append mode.

        Args:
            log_path: Log file location

        Returns:
            Operation log writing to the file

        Raises:
            OSError: If the file cannot be opened
        """
        handler = logging.FileHandler(log_path, mode="a", encoding=LOG_ENCODING)
        logger.debug(f"Opened operation log {log_path}")
        return cls(handler=handler)

    def success(self, message: str) -> None:
        """Write a SUCCESS line."""
        self._logger.log(SUCCESS, message)

    def error(self, message: str) -> None:
        """Write an ERROR line."""
        self._logger.error(message)

    def close(self) -> None:
        """Flush and close the underlying handler."""
        self._logger.removeHandler(self._handler)
        self._handler.close()

    def __enter__(self) -> "OperationLog":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
