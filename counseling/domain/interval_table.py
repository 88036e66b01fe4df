"""
Parser for rank-interval datasets.

A dataset holds one record per line in the form `<start>-<end>:<college>`.
The first `:` splits the range from the label, so labels may contain colons;
the first `-` inside the range splits start from end. Records are kept in
file order with no sorting, deduplication, or overlap checks.
"""

from __future__ import annotations

from typing import Iterable, List, TextIO, Union

from counseling.domain.models import IntervalRecord
from counseling.errors import DataFormatError

LABEL_SEPARATOR = ":"
RANGE_SEPARATOR = "-"


def _parse_rank(text: str, line_number: int, line: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise DataFormatError(
            "Error: Invalid rank value in the data file.", line_number, line
        ) from None


def parse_line(line: str, line_number: int = 1) -> IntervalRecord:
    """
    Parse a single dataset line (without its terminator) into a record.

    Raises
    ------
    DataFormatError
        If the line has no label separator, the range has no range
        separator, or either rank is not an integer.
    """
    rank_range, sep, college = line.partition(LABEL_SEPARATOR)
    if not sep:
        raise DataFormatError(
            "Error: Invalid data format in the data file.", line_number, line
        )

    start_text, sep, end_text = rank_range.partition(RANGE_SEPARATOR)
    if not sep:
        raise DataFormatError(
            "Error: Invalid rank range in the data file.", line_number, line
        )

    return IntervalRecord(
        rank_start=_parse_rank(start_text, line_number, line),
        rank_end=_parse_rank(end_text, line_number, line),
        college=college,
    )


def parse(data_source: Union[TextIO, Iterable[str]]) -> List[IntervalRecord]:
    """
    Parse every line of a text stream into interval records, in file order.

    The first malformed line aborts parsing with DataFormatError.
    """
    records: List[IntervalRecord] = []
    for line_number, raw in enumerate(data_source, start=1):
        records.append(parse_line(raw.rstrip("\r\n"), line_number))
    return records


__all__ = ["LABEL_SEPARATOR", "RANGE_SEPARATOR", "parse", "parse_line"]
