"""
Pytest configuration and fixtures for dir_organizer tests.
"""

import io
from pathlib import Path
from typing import Callable, Iterator

import pytest

from dir_organizer.organization import FileOrganizer, OperationLog


@pytest.fixture
def log_stream() -> io.StringIO:
    """In-memory text stream capturing operation log lines."""
    return io.StringIO()


@pytest.fixture
def operation_log(log_stream: io.StringIO) -> Iterator[OperationLog]:
    """Operation log writing to ``log_stream``."""
    log = OperationLog(log_stream)
    yield log
    log.close()


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Empty directory to organize."""
    directory = tmp_path / "source"
    directory.mkdir()
    return directory


@pytest.fixture
def make_file(source_dir: Path) -> Callable[..., Path]:
    """Factory creating a file of a given size below ``source_dir``."""

    def _make_file(relative: str, size: int = 10) -> Path:
        path = source_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        return path

    return _make_file


@pytest.fixture
def organizer(source_dir: Path, operation_log: OperationLog) -> FileOrganizer:
    """Organizer over ``source_dir`` using the default rules."""
    return FileOrganizer(source_dir=source_dir, operation_log=operation_log)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DIR_ORGANIZER_* variables from the host out of tests."""
    for name in ("SOURCE_DIR", "LOG_FILE", "DRY_RUN"):
        monkeypatch.delenv(f"DIR_ORGANIZER_{name}", raising=False)
