"""
CLI command for organizing a directory.

Moves files into category folders by extension and prints a report.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..config import OrganizerConfig
from ..organization import FileOrganizer, MoveError, OperationLog, print_report
from ..rules import DEFAULT_RULES
from ..version import __version__
from .base import OrganizerDisplay, common_options, init_logging

console = Console()


def prompt_for_directory(display: OrganizerDisplay) -> Path:
    """
    Ask for the directory to organize on the terminal.

    Exits with status 1 on empty input or when stdin is closed.
    """
    display.welcome(DEFAULT_RULES)

    try:
        answer = Prompt.ask(
            "Enter the path of the directory to organize", console=display.console
        )
    except EOFError:
        display.error("Error: Failed to read input.")
        sys.exit(1)

    answer = answer.strip()
    if not answer:
        display.error("Error: No directory path entered.")
        sys.exit(1)

    return Path(answer).expanduser()


@click.command()
@click.argument(
    "directory", required=False, type=click.Path(file_okay=True, path_type=Path)
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Operation log file (default: organizer.log in the current directory)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview moves without changing anything",
)
@click.option(
    "--version",
    is_flag=True,
    help="Show version and exit",
)
@common_options
@init_logging
def organize(
    directory: Optional[Path],
    log_file: Optional[Path],
    dry_run: bool,
    version: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Sort the files under DIRECTORY into category folders.

    Files with a known extension are moved from anywhere below DIRECTORY
    into DIRECTORY/<Category>/ (Images, Documents, Music, Video, Archives).
    Name clashes get a timestamp appended. Every move is recorded in the
    operation log.

    If DIRECTORY is omitted and DIR_ORGANIZER_SOURCE_DIR is not set, the
    path is asked for interactively.

    \b
    Examples:
        # Preview what would happen
        dir-organize ~/Downloads --dry-run

        # Organize, logging to a custom file
        dir-organize ~/Downloads --log-file ~/organizer.log
    """
    if version:
        console.print(f"dir-organizer version {__version__}")
        sys.exit(0)

    display = OrganizerDisplay(console=console, quiet=quiet)

    try:
        config = OrganizerConfig()
    except ValidationError as e:
        display.error(f"Error: invalid configuration: {escape(str(e))}")
        sys.exit(1)

    overrides = {}
    if directory is not None:
        overrides["source_dir"] = directory
    if log_file is not None:
        overrides["log_file"] = log_file
    if dry_run:
        overrides["dry_run"] = True
    config = config.model_copy(update=overrides)

    if config.source_dir is None:
        config = config.model_copy(update={"source_dir": prompt_for_directory(display)})

    source_dir = config.source_dir
    if not source_dir.exists():
        display.error(
            f"Error: Directory '{escape(str(source_dir))}' does not exist."
        )
        sys.exit(1)
    if not source_dir.is_dir():
        display.error(f"Error: '{escape(str(source_dir))}' is not a directory.")
        sys.exit(1)

    display.directory_found(source_dir)

    try:
        operation_log = OperationLog.open(config.log_file)
    except OSError as e:
        display.error(
            f"Fatal: cannot open log file {escape(str(config.log_file))}: {e}"
        )
        sys.exit(1)

    display.settings(config)

    aborted: Optional[MoveError] = None
    with operation_log:
        organizer = FileOrganizer.from_config(config, operation_log)
        try:
            organizer.organize()
        except MoveError as e:
            aborted = e
        finally:
            print_report(
                organizer.statistics,
                organizer.rules,
                console=console,
                dry_run=config.dry_run,
            )

    if aborted is not None:
        display.aborted(aborted, config.log_file)
        sys.exit(1)


if __name__ == "__main__":
    organize()
