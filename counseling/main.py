from __future__ import annotations

import sys
from typing import Optional

import typer

from counseling.config import get_settings
from counseling.domain.models import Applicant
from counseling.errors import CounselingError, InputError
from counseling.orchestrator import available_strategies, prepare_dataset, run_allocation
from counseling.reporter import print_results, print_table
from counseling.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(help="College counseling allocator CLI.")

INVALID_RANK_MESSAGE = "Error: Invalid input for rank. Please enter a valid integer."


def parse_rank(text: str) -> int:
    """Parse the first whitespace-separated token typed by the user as the rank."""
    tokens = text.split()
    try:
        return int(tokens[0])
    except (IndexError, ValueError):
        raise InputError(INVALID_RANK_MESSAGE, text) from None


def _prompt(text: str) -> str:
    # Input ending early leaves no rank to read.
    try:
        return typer.prompt(text)
    except typer.Abort:
        raise InputError(INVALID_RANK_MESSAGE) from None


def read_applicant() -> Applicant:
    """
    Prompt for name and rank. Leading whitespace is dropped from the name;
    embedded spaces are kept.
    """
    name = _prompt("Enter your name").lstrip()
    rank = parse_rank(_prompt("Enter your rank"))
    return Applicant(name=name, rank=rank)


@app.callback(invoke_without_command=True)
def root(ctx: typer.Context) -> None:
    """
    Run `allocate` when no command is given.
    """
    if ctx.invoked_subcommand is None:
        allocate(indirection_file=None, table=False)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"indirection={settings.indirection_file} default_dataset={settings.default_dataset} | "
        f"log_level={settings.log_level} json_logs={settings.json_logs} "
        f"error_exit_code={settings.error_exit_code}"
    )
    typer.echo("Strategies: " + ", ".join(available_strategies()))


@app.command()
def allocate(
    indirection_file: Optional[str] = typer.Option(
        None,
        "--indirection-file",
        "-f",
        help="File whose first line is the dataset path (default from settings).",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        help="Render results as a table instead of plain lines.",
    ),
) -> None:
    """
    Ask for name and rank, then allocate with every strategy.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    source = indirection_file or settings.indirection_file

    try:
        dataset_path = prepare_dataset(source)
        applicant = read_applicant()
        report = run_allocation(applicant, dataset_path)
    except CounselingError as exc:
        log.debug("Allocation aborted", exc_info=True)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=settings.error_exit_code)

    if table:
        print_table(report)
    else:
        print_results(report)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
