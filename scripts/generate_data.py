"""
Sample data generation script for the college counseling allocator.

Writes a deterministic rank-interval dataset of contiguous bands and an
indirection file pointing at it, ready for `counseling allocate`.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import typer

app = typer.Typer(help="Generate a sample rank-interval dataset and indirection file.")

_PREFIXES = ["National", "State", "City", "Regional", "Central", "Northern", "Southern"]
_KINDS = ["Institute of Technology", "University", "College of Engineering", "Polytechnic"]


def _generate_dataset(
    dataset_path: Path, colleges: int, band_width: int, first_rank: int, seed: int
) -> int:
    """Write `colleges` contiguous bands starting at `first_rank`. Returns the last rank covered."""
    rng = random.Random(seed)
    rank = first_rank

    with dataset_path.open("w", newline="\n", encoding="utf-8") as f:
        for i in range(colleges):
            width = rng.randint(max(1, band_width // 2), band_width)
            end = rank + width - 1
            name = f"{rng.choice(_PREFIXES)} {rng.choice(_KINDS)} #{i + 1}"
            f.write(f"{rank}-{end}:{name}\n")
            rank = end + 1
    return rank - 1


def _write_indirection(indirection_path: Path, dataset_path: Path) -> None:
    with indirection_path.open("w", newline="\n", encoding="utf-8") as f:
        f.write(f"{dataset_path}\n")


@app.command()
def main(
    colleges: int = typer.Option(
        10,
        "--colleges",
        "-c",
        help="Number of college bands to generate.",
    ),
    band_width: int = typer.Option(
        500,
        "--band-width",
        "-w",
        help="Maximum number of ranks per band.",
    ),
    first_rank: int = typer.Option(
        1,
        "--first-rank",
        help="Rank the first band starts at.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data/colleges.txt"),
        "--output",
        "-o",
        help="Dataset output path.",
    ),
    indirection: Path = typer.Option(
        Path("data.txt"),
        "--indirection",
        "-i",
        help="Indirection file to write (first line = dataset path).",
    ),
    no_indirection: bool = typer.Option(
        False,
        "--no-indirection",
        help="Only write the dataset; leave the indirection file alone.",
    ),
) -> None:
    """
    Generate a sample dataset and point the indirection file at it.
    """
    output.parent.mkdir(parents=True, exist_ok=True)
    last_rank = _generate_dataset(
        output, colleges=colleges, band_width=band_width, first_rank=first_rank, seed=seed
    )
    typer.echo(f"Wrote {colleges} bands covering ranks {first_rank}-{last_rank} -> {output}")

    if no_indirection:
        typer.echo("Skipping indirection file (no-indirection flag set).")
        return

    _write_indirection(indirection, output)
    typer.echo(f"Indirection file {indirection} -> {output}")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
