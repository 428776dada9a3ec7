"""
End-of-run summary for the organizer.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from ..rules import RuleTable
from ..shared import format_megabytes
from .statistics import OrganizationStatistics

UNCATEGORIZED_LABEL = "Uncategorized"


def build_category_table(statistics: OrganizationStatistics, rules: RuleTable) -> Table:
    """
    Build the per-extension breakdown table.

    The category label is looked up in ``rules`` at report time, so an
    extension missing from the table is shown as "Uncategorized".

    Args:
        statistics: Run statistics
        rules: Rule table used for category labels

    Returns:
        Rich table with one row per extension
    """
    table = Table(title="Statistics by category")
    table.add_column("Category", style="cyan")
    table.add_column("Extension", style="dim")
    table.add_column("Files", style="green", justify="right")
    table.add_column("Size", style="green", justify="right")

    rows = sorted(
        statistics.by_extension.items(),
        key=lambda item: (rules.category_for(item[0]) or UNCATEGORIZED_LABEL, item[0]),
    )
    for ext, stats in rows:
        table.add_row(
            rules.category_for(ext) or UNCATEGORIZED_LABEL,
            ext,
            f"{stats.count:,}",
            format_megabytes(stats.total_size),
        )

    return table


def print_report(
    statistics: OrganizationStatistics,
    rules: RuleTable,
    console: Optional[Console] = None,
    dry_run: bool = False,
) -> None:
    """
    Print the summary of an organizer run.

    Args:
        statistics: Run statistics (possibly partial after an abort)
        rules: Rule table used for category labels
        console: Rich console to print to (creates new if None)
        dry_run: Mark the report as a preview
    """
    console = console or Console()

    title = "File Move Report"
    if dry_run:
        title += " (dry run)"

    console.print(f"\n[bold cyan]=== {title} ===[/bold cyan]\n")
    console.print(f"Total files processed: {statistics.total_files}")
    console.print(f"Total size: {format_megabytes(statistics.total_size)}")
    console.print()

    if not statistics.by_extension:
        console.print("[dim]No files were moved.[/dim]")
        return

    console.print(build_category_table(statistics, rules))
