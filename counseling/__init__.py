"""
College counseling allocator - rank-based college allocation.

Reads a rank-interval dataset located through an indirection file and runs
an applicant through a fixed sequence of allocation strategies:

- Rank interval lookup (first matching interval in file order)
- Round two (always declines)
- Round three (always declines)

Every strategy exposes the same `allocate(rank) -> str` operation, so the
allocation service treats them interchangeably.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from counseling.config import Settings, get_settings
from counseling.domain.models import Applicant, IntervalRecord
from counseling.errors import CounselingError, DataFormatError, DataSourceError, InputError
from counseling.orchestrator import AllocationReport, available_strategies, run_allocation
from counseling.service import AllocationService
from counseling.strategies import (
    AbstractAllocationStrategy,
    AllocationStrategy,
    FixedResponseStrategy,
    InstanceCounter,
    RankIntervalStrategy,
    RoundThreeStrategy,
    RoundTwoStrategy,
)
from counseling.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Applicant",
    "IntervalRecord",
    # Errors
    "CounselingError",
    "DataFormatError",
    "DataSourceError",
    "InputError",
    # Orchestration
    "AllocationReport",
    "AllocationService",
    "available_strategies",
    "run_allocation",
    # Strategies
    "AbstractAllocationStrategy",
    "AllocationStrategy",
    "FixedResponseStrategy",
    "InstanceCounter",
    "RankIntervalStrategy",
    "RoundThreeStrategy",
    "RoundTwoStrategy",
    # Logging
    "configure_logging",
    "get_logger",
]
