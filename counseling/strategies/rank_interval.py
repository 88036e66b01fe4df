"""
Rank interval strategy: first matching interval from a dataset wins.

The dataset is read once at construction. Each successful construction is
recorded on an InstanceCounter; a construction that fails while loading the
dataset leaves the counter untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from counseling.config import get_settings
from counseling.domain.models import IntervalRecord
from counseling.infrastructure.files import load_interval_table
from counseling.strategies.abstract import AbstractAllocationStrategy
from counseling.utils.logging import get_logger

log = get_logger(__name__)

NO_ALLOCATION = "No college allocated for your rank."


class InstanceCounter:
    """Monotonic count of constructed strategies. Never decremented."""

    def __init__(self) -> None:
        self._value = 0

    def increment(self) -> int:
        self._value += 1
        return self._value

    @property
    def value(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"InstanceCounter(value={self._value})"


_PROCESS_COUNTER = InstanceCounter()


def process_counter() -> InstanceCounter:
    """The counter used when a strategy is built without an explicit one."""
    return _PROCESS_COUNTER


class RankIntervalStrategy(AbstractAllocationStrategy):
    """
    Allocate the college of the first interval containing the rank.

    Parameters
    ----------
    data_source : str | Path | None
        Dataset to load. Defaults to the configured `default_dataset`.
    counter : InstanceCounter | None
        Counter to record this construction on. Defaults to the
        process-wide counter.
    """

    name: str = "rank_interval"
    description: str = "First dataset interval containing the rank (file order)."

    def __init__(
        self,
        data_source: Union[str, Path, None] = None,
        counter: Optional[InstanceCounter] = None,
    ) -> None:
        if data_source is None:
            data_source = get_settings().default_dataset
        self._data_source = str(data_source)
        self._records: Tuple[IntervalRecord, ...] = tuple(load_interval_table(data_source))
        self._counter = counter if counter is not None else process_counter()
        total = self._counter.increment()
        log.info(
            "RankIntervalStrategy constructed",
            extra={"dataset": self._data_source, "total_instances": total},
        )

    @property
    def data_source(self) -> str:
        return self._data_source

    @property
    def records(self) -> Tuple[IntervalRecord, ...]:
        return self._records

    @classmethod
    def total_instances(cls, counter: Optional[InstanceCounter] = None) -> int:
        return (counter if counter is not None else process_counter()).value

    def allocate(self, rank: int) -> str:
        for record in self._records:
            if record.contains(rank):
                return record.college
        return NO_ALLOCATION


__all__ = [
    "NO_ALLOCATION",
    "InstanceCounter",
    "RankIntervalStrategy",
    "process_counter",
]
