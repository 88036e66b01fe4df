"""
Allocation service: runs a strategy against an applicant.
"""

from __future__ import annotations

from counseling.domain.models import Applicant
from counseling.strategies.abstract import AllocationStrategy
from counseling.utils.logging import get_logger

log = get_logger(__name__)


class AllocationService:
    """Delegates to a strategy using the applicant's rank. Errors propagate."""

    @staticmethod
    def allocate(strategy: AllocationStrategy, applicant: Applicant) -> str:
        result = strategy.allocate(applicant.rank)
        log.debug(
            "Allocation performed",
            extra={"strategy": strategy.name, "rank": applicant.rank, "result": result},
        )
        return result


__all__ = ["AllocationService"]
