"""
File access for the college counseling allocator.

Resolves the indirection file to a dataset path, checks that a dataset can
be opened, and loads a dataset into interval records. Every handle is opened
and closed within a single call.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from counseling.domain.interval_table import parse
from counseling.domain.models import IntervalRecord
from counseling.errors import DataFormatError, DataSourceError
from counseling.utils.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]


def resolve_dataset_path(indirection_file: PathLike) -> str:
    """
    Return the first line of the indirection file, without its terminator.

    An empty indirection file resolves to an empty path.
    """
    try:
        with open(indirection_file, "r", encoding="utf-8") as f:
            first_line = f.readline()
    except OSError as exc:
        raise DataSourceError(
            f"Error: Cannot open {Path(indirection_file).name}", str(indirection_file)
        ) from exc
    except UnicodeDecodeError as exc:
        raise DataSourceError(
            f"Error: Cannot read {Path(indirection_file).name} (not valid UTF-8)",
            str(indirection_file),
        ) from exc

    dataset_path = first_line.rstrip("\r\n")
    log.debug(
        "Resolved dataset path",
        extra={"indirection_file": str(indirection_file), "dataset": dataset_path},
    )
    return dataset_path


def ensure_readable(dataset_path: PathLike) -> None:
    """Open and immediately close a dataset to confirm it can be read."""
    if not str(dataset_path):
        raise DataSourceError("Error: Cannot open dataset (empty path)", "")
    try:
        with open(dataset_path, "r", encoding="utf-8"):
            pass
    except OSError as exc:
        raise DataSourceError(
            f"Error: Cannot open {dataset_path}", str(dataset_path)
        ) from exc


def load_interval_table(dataset_path: PathLike) -> List[IntervalRecord]:
    """
    Read and parse a dataset file.

    Raises
    ------
    DataSourceError
        If the file cannot be opened.
    DataFormatError
        If any line is malformed or the file is not valid UTF-8.
    """
    try:
        f = open(dataset_path, "r", encoding="utf-8")
    except OSError as exc:
        raise DataSourceError("Error: Cannot open data file.", str(dataset_path)) from exc

    with f:
        try:
            records = parse(f)
        except UnicodeDecodeError as exc:
            raise DataFormatError(
                "Error: Invalid data format in the data file.", None, None
            ) from exc

    log.info(
        "Dataset parsed",
        extra={"dataset": str(dataset_path), "records": len(records)},
    )
    return records


__all__ = ["ensure_readable", "load_interval_table", "resolve_dataset_path"]
