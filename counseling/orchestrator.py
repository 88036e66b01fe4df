"""
Orchestrator for building allocation strategies and running them for an applicant.

Usage (example from CLI):
    from counseling.orchestrator import prepare_dataset, run_allocation

    dataset = prepare_dataset("data.txt")
    report = run_allocation(Applicant(name="Ada", rank=150), dataset)
    for name, result in report.results:
        print(name, result)

Strategies always run in registry order: rank interval, round two, round three.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from counseling.domain.models import Applicant
from counseling.infrastructure.files import ensure_readable, resolve_dataset_path
from counseling.service import AllocationService
from counseling.strategies.abstract import AllocationStrategy
from counseling.strategies.fixed_response import RoundThreeStrategy, RoundTwoStrategy
from counseling.strategies.rank_interval import (
    InstanceCounter,
    RankIntervalStrategy,
    process_counter,
)
from counseling.utils.logging import get_logger

log = get_logger(__name__)

StrategyFactory = Callable[[str, InstanceCounter], AllocationStrategy]


@dataclass
class AllocationReport:
    """Outcome of one allocation run."""

    applicant: Applicant
    dataset_path: str
    results: List[Tuple[str, str]] = field(default_factory=list)
    total_instances: int = 0


def _strategy_factories() -> Dict[str, StrategyFactory]:
    """Registry of available strategies, in run order."""
    return {
        "rank_interval": lambda dataset, counter: RankIntervalStrategy(dataset, counter=counter),
        "round_two": lambda dataset, counter: RoundTwoStrategy(),
        "round_three": lambda dataset, counter: RoundThreeStrategy(),
    }


def available_strategies() -> List[str]:
    """List available strategy names in run order."""
    return list(_strategy_factories().keys())


def build_strategies(
    dataset_path: Union[str, Path],
    counter: Optional[InstanceCounter] = None,
    strategy_names: Optional[Iterable[str]] = None,
) -> List[AllocationStrategy]:
    """
    Construct strategies by name. All are built before any allocation runs,
    so a failing dataset suppresses every result.
    """
    factories = _strategy_factories()
    counter = counter if counter is not None else process_counter()
    names = list(strategy_names) if strategy_names is not None else list(factories)

    strategies: List[AllocationStrategy] = []
    for name in names:
        if name not in factories:
            raise ValueError(f"Unknown strategy '{name}'. Available: {', '.join(factories)}")
        strategies.append(factories[name](str(dataset_path), counter))
    return strategies


def prepare_dataset(indirection_file: Union[str, Path]) -> str:
    """
    Resolve the dataset path from the indirection file and check it opens.

    The dataset content is read later, when the rank interval strategy is built.
    """
    dataset_path = resolve_dataset_path(indirection_file)
    ensure_readable(dataset_path)
    log.info("Dataset located", extra={"dataset": dataset_path})
    return dataset_path


def run_allocation(
    applicant: Applicant,
    dataset_path: Union[str, Path],
    counter: Optional[InstanceCounter] = None,
    strategy_names: Optional[Iterable[str]] = None,
) -> AllocationReport:
    """
    Build every strategy and allocate the applicant with each in turn.

    Parameters
    ----------
    applicant : Applicant
        Who is being allocated.
    dataset_path : str | Path
        Dataset for the rank interval strategy.
    counter : InstanceCounter | None
        Counter recording rank interval constructions. Defaults to the
        process-wide counter.
    strategy_names : iterable[str] | None
        Subset of strategies to run. Defaults to all, in registry order.

    Returns
    -------
    AllocationReport
        Results in run order and the counter value after construction.
    """
    counter = counter if counter is not None else process_counter()
    strategies = build_strategies(dataset_path, counter, strategy_names)

    report = AllocationReport(applicant=applicant, dataset_path=str(dataset_path))
    for strategy in strategies:
        result = AllocationService.allocate(strategy, applicant)
        report.results.append((strategy.name, result))
        log.info(
            f"[ALLOCATED] {strategy.name}",
            extra={"strategy": strategy.name, "rank": applicant.rank, "result": result},
        )

    report.total_instances = counter.value
    return report


__all__ = [
    "AllocationReport",
    "available_strategies",
    "build_strategies",
    "prepare_dataset",
    "run_allocation",
]
