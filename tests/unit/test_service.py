from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from counseling import orchestrator
from counseling.domain.models import Applicant
from counseling.errors import DataFormatError, DataSourceError
from counseling.orchestrator import (
    available_strategies,
    build_strategies,
    prepare_dataset,
    run_allocation,
)
from counseling.service import AllocationService
from counseling.strategies import InstanceCounter, RoundTwoStrategy

EXPECTED_ORDER = ["rank_interval", "round_two", "round_three"]


class _RecordingStrategy:
    name = "recording"
    description = "remembers the rank it was given"

    def __init__(self) -> None:
        self.ranks: list[int] = []

    def allocate(self, rank: int) -> str:
        self.ranks.append(rank)
        return f"rank {rank}"


class _FailingStrategy:
    name = "failing"
    description = "always raises"

    def allocate(self, rank: int) -> str:
        raise RuntimeError(f"cannot allocate {rank}")


def test_service_forwards_applicant_rank() -> None:
    strategy = _RecordingStrategy()

    result = AllocationService.allocate(strategy, Applicant(name="Ada Lovelace", rank=42))

    assert result == "rank 42"
    assert strategy.ranks == [42]


def test_service_propagates_strategy_errors() -> None:
    with pytest.raises(RuntimeError, match="cannot allocate 7"):
        AllocationService.allocate(_FailingStrategy(), Applicant(name="Bob", rank=7))


def test_service_treats_variants_uniformly() -> None:
    applicant = Applicant(name="Cy", rank=3)

    assert AllocationService.allocate(RoundTwoStrategy(), applicant) == "not eligible for round two"


def test_available_strategies_in_run_order() -> None:
    assert available_strategies() == EXPECTED_ORDER


def test_build_strategies_rejects_unknown_name(sample_dataset: Path, counter: InstanceCounter) -> None:
    with pytest.raises(ValueError, match="Unknown strategy 'round_four'"):
        build_strategies(sample_dataset, counter, ["round_four"])


def test_run_allocation_reports_every_strategy(
    sample_dataset: Path, counter: InstanceCounter
) -> None:
    report = run_allocation(Applicant(name="Dee", rank=150), sample_dataset, counter=counter)

    assert report.results == [
        ("rank_interval", "Tech U"),
        ("round_two", "not eligible for round two"),
        ("round_three", "not eligible for round three"),
    ]
    assert report.total_instances == 1
    assert report.dataset_path == str(sample_dataset)


def test_run_allocation_subset(sample_dataset: Path, counter: InstanceCounter) -> None:
    report = run_allocation(
        Applicant(name="Eve", rank=250), sample_dataset, counter=counter, strategy_names=["round_three"]
    )

    assert report.results == [("round_three", "not eligible for round three")]
    assert report.total_instances == 0


def test_run_allocation_builds_all_before_allocating(
    write_dataset: Callable[..., Path], counter: InstanceCounter, monkeypatch: pytest.MonkeyPatch
) -> None:
    recording = _RecordingStrategy()

    def fake_factories() -> dict:
        return {
            "recording": lambda dataset, c: recording,
            "rank_interval": orchestrator.RankIntervalStrategy,
        }

    monkeypatch.setattr(orchestrator, "_strategy_factories", fake_factories)
    path = write_dataset("1-5\n")

    with pytest.raises(DataFormatError):
        run_allocation(Applicant(name="Fay", rank=2), path, counter=counter)

    assert recording.ranks == []
    assert counter.value == 0


def test_prepare_dataset_resolves_indirection(workspace: Path, sample_dataset: Path) -> None:
    assert prepare_dataset("data.txt") == str(sample_dataset)


def test_prepare_dataset_missing_indirection(tmp_path: Path) -> None:
    with pytest.raises(DataSourceError) as excinfo:
        prepare_dataset(tmp_path / "data.txt")

    assert str(excinfo.value) == "Error: Cannot open data.txt"


def test_prepare_dataset_missing_dataset(tmp_path: Path) -> None:
    indirection = tmp_path / "data.txt"
    missing = tmp_path / "nowhere.txt"
    indirection.write_text(f"{missing}\n", encoding="utf-8")

    with pytest.raises(DataSourceError) as excinfo:
        prepare_dataset(indirection)

    assert str(excinfo.value) == f"Error: Cannot open {missing}"
    assert excinfo.value.path == str(missing)


def test_prepare_dataset_empty_indirection(tmp_path: Path) -> None:
    indirection = tmp_path / "data.txt"
    indirection.write_text("", encoding="utf-8")

    with pytest.raises(DataSourceError):
        prepare_dataset(indirection)


def test_prepare_dataset_non_utf8_indirection(tmp_path: Path) -> None:
    indirection = tmp_path / "data.txt"
    indirection.write_bytes(b"/srv/donn\xe9es.txt\n")

    with pytest.raises(DataSourceError, match="not valid UTF-8"):
        prepare_dataset(indirection)
