from __future__ import annotations

from typing import Callable, Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from counseling.orchestrator import AllocationReport

TOTAL_INSTANCES_LABEL = "Total instances of RankIntervalStrategy"


def format_result(result: str) -> str:
    return f"Result: {result}"


def print_results(
    report: AllocationReport, echo: Optional[Callable[[str], None]] = None
) -> None:
    """
    Print one `Result: ...` line per strategy followed by the instance total.
    """
    echo = echo or typer.echo
    for _, result in report.results:
        echo(format_result(result))
    echo(f"{TOTAL_INSTANCES_LABEL}: {report.total_instances}")


def print_table(report: AllocationReport, console: Optional[Console] = None) -> None:
    """
    Render the allocation report as a rich table.

    Dataset labels and applicant names are printed literally, never as markup.
    """
    console = console or Console()

    if not report.results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    applicant = report.applicant
    table = Table(
        title=f"Allocation for {escape(applicant.name)} (rank {applicant.rank})",
        box=box.ROUNDED,
        caption=f"{TOTAL_INSTANCES_LABEL}: {report.total_instances}",
    )
    table.add_column("Strategy", style="cyan", no_wrap=True)
    table.add_column("Result", style="bold green")

    for name, result in report.results:
        table.add_row(name, escape(result))

    console.print(table)


__all__ = ["format_result", "print_results", "print_table"]
