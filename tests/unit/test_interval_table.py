from __future__ import annotations

import io

import pytest

from counseling.domain.interval_table import parse, parse_line
from counseling.domain.models import IntervalRecord
from counseling.errors import DataFormatError


def test_parse_keeps_file_order() -> None:
    records = parse(io.StringIO("100-200:Tech U\n201-300:State College\n1-50:Early\n"))

    assert [r.college for r in records] == ["Tech U", "State College", "Early"]
    assert records[0] == IntervalRecord(rank_start=100, rank_end=200, college="Tech U")


def test_parse_accepts_last_line_without_newline() -> None:
    records = parse(io.StringIO("1-5:A\n6-10:B"))

    assert len(records) == 2
    assert records[1].college == "B"


def test_parse_strips_crlf_terminators() -> None:
    records = parse(io.StringIO("1-5:A\r\n6-10:B\r\n"))

    assert [r.college for r in records] == ["A", "B"]


def test_parse_empty_source_yields_no_records() -> None:
    assert parse(io.StringIO("")) == []


def test_parse_keeps_duplicates_and_overlaps() -> None:
    records = parse(["1-10:A\n", "1-10:A\n", "5-20:B\n"])

    assert len(records) == 3


def test_label_may_contain_colons() -> None:
    record = parse_line("1-5:Campus: North")

    assert record.college == "Campus: North"


def test_label_keeps_surrounding_spaces() -> None:
    record = parse_line("1-5: Spaced College ")

    assert record.college == " Spaced College "


def test_missing_range_separator_raises() -> None:
    with pytest.raises(DataFormatError) as excinfo:
        parse(io.StringIO("abc:College\n"))

    assert str(excinfo.value) == "Error: Invalid rank range in the data file."
    assert excinfo.value.line_number == 1
    assert excinfo.value.line == "abc:College"


def test_missing_label_separator_raises() -> None:
    with pytest.raises(DataFormatError) as excinfo:
        parse(io.StringIO("1-5\n"))

    assert str(excinfo.value) == "Error: Invalid data format in the data file."


def test_non_integer_rank_raises() -> None:
    with pytest.raises(DataFormatError, match="Invalid rank value"):
        parse(io.StringIO("1-5:A\nx-9:B\n"))


def test_non_integer_end_rank_reports_line_number() -> None:
    with pytest.raises(DataFormatError) as excinfo:
        parse(io.StringIO("1-5:A\n6-ten:B\n"))

    assert excinfo.value.line_number == 2


def test_empty_line_is_malformed() -> None:
    with pytest.raises(DataFormatError):
        parse(io.StringIO("1-5:A\n\n6-10:B\n"))


def test_data_format_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_line("nothing here")


def test_inverted_interval_is_parsed_but_never_matches() -> None:
    record = parse_line("10-1:Backwards")

    assert record.rank_start == 10
    assert record.rank_end == 1
    assert not record.contains(5)


def test_records_are_immutable() -> None:
    record = parse_line("1-5:A")

    with pytest.raises(Exception):
        record.college = "B"  # type: ignore[misc]
