"""
Base CLI helpers shared by dir-organizer commands.

Provides the verbose/quiet click options and the console messages the
organizer prints around a run.
"""

from functools import wraps
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import OrganizerConfig
from ..rules import RuleTable
from ..shared import setup_logging


def common_options(f: Callable) -> Callable:
    """Apply standard CLI options (verbose, quiet)."""
    decorators = [
        click.option(
            "-v",
            "--verbose",
            is_flag=True,
            help="Enable verbose logging",
        ),
        click.option(
            "-q",
            "--quiet",
            is_flag=True,
            help="Suppress all output except errors and the report",
        ),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def init_logging(f: Callable) -> Callable:
    """Decorator to setup logging from verbose/quiet flags."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        verbose = kwargs.get("verbose", False)
        quiet = kwargs.get("quiet", False)
        setup_logging(verbose=verbose, quiet=quiet)
        return f(*args, **kwargs)

    return wrapper


class OrganizerDisplay:
    """
    Console messages printed around an organizer run.

    In quiet mode only warnings and errors are shown; the report itself is
    printed separately and is never suppressed.
    """

    def __init__(self, console: Optional[Console] = None, quiet: bool = False):
        """Initialize display helper.

        Args:
            console: Rich console instance (creates new if None)
            quiet: Suppress everything except warnings and errors
        """
        self.console = console or Console()
        self.quiet = quiet

    def welcome(self, rules: RuleTable) -> None:
        """Print the banner and usage notes shown before the path prompt.

        Args:
            rules: Rule table whose categories are listed
        """
        if self.quiet:
            return

        self.console.print("\n[bold cyan]Welcome to the File Organizer![/bold cyan]")
        self.console.print(
            "[dim]Files are sorted into folders according to their extensions.[/dim]\n"
        )
        self.console.print("[cyan]How it works:[/cyan]")
        self.console.print("  1. Every file under the chosen directory is examined.")
        self.console.print(
            "  2. Known file types are moved into category folders: "
            f"{', '.join(sorted(rules.categories))}."
        )
        self.console.print("  3. For each type the number of files and total size")
        self.console.print("     in megabytes are counted.")
        self.console.print("  4. A report is printed when the run finishes.\n")

    def directory_found(self, source_dir: Path) -> None:
        """Confirm the directory that will be organized."""
        if not self.quiet:
            self.console.print(
                f"[green]Directory found: {escape(str(source_dir))}[/green]"
            )

    def settings(self, config: OrganizerConfig) -> None:
        """Print the effective run settings.

        The dry-run notice is shown even in quiet mode.

        Args:
            config: Settings after command-line overrides
        """
        if not self.quiet:
            table = Table(show_header=False, box=None)
            table.add_column("Setting", style="cyan")
            table.add_column("Value", style="green")
            table.add_row("Source directory", escape(str(config.source_dir)))
            table.add_row("Log file", escape(str(config.log_file)))
            table.add_row("Dry run", "YES" if config.dry_run else "NO")

            self.console.print(table)
            self.console.print()

        if config.dry_run:
            self.console.print("[yellow]DRY RUN MODE - No files will be moved[/yellow]")

    def aborted(self, error: Exception, log_file: Path) -> None:
        """Explain that the walk stopped early (shown even in quiet mode)."""
        self.error(f"\nError: organizing aborted: {escape(str(error))}")
        self.error(f"See {escape(str(log_file))} for details.")

    def error(self, message: str) -> None:
        """Print error message (shown even in quiet mode)."""
        self.console.print(f"[red]{message}[/red]")
