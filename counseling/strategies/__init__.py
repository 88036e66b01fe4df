"""
Strategies package for the college counseling allocator.

This module re-exports the abstract interfaces and the concrete strategy classes
so downstream code can import from `counseling.strategies` directly.
"""

from counseling.strategies.abstract import (
    AbstractAllocationStrategy,
    AllocationStrategy,
)
from counseling.strategies.fixed_response import (
    ROUND_THREE_MESSAGE,
    ROUND_TWO_MESSAGE,
    FixedResponseStrategy,
    RoundThreeStrategy,
    RoundTwoStrategy,
)
from counseling.strategies.rank_interval import (
    NO_ALLOCATION,
    InstanceCounter,
    RankIntervalStrategy,
    process_counter,
)

__all__ = [
    # Abstracts
    "AbstractAllocationStrategy",
    "AllocationStrategy",
    # Concrete strategies
    "FixedResponseStrategy",
    "RankIntervalStrategy",
    "RoundThreeStrategy",
    "RoundTwoStrategy",
    # Instance tracking
    "InstanceCounter",
    "process_counter",
    # Messages
    "NO_ALLOCATION",
    "ROUND_THREE_MESSAGE",
    "ROUND_TWO_MESSAGE",
]
