"""
Domain models for the college counseling allocator.

Defines the interval record parsed from a dataset line and the applicant
value built from user input. Both are immutable once created.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class IntervalRecord(BaseModel):
    """
    One `<rank_start>-<rank_end>:<college>` line of a dataset.

    `rank_start <= rank_end` is expected but not enforced; an inverted
    interval simply never matches.
    """

    rank_start: int = Field(..., description="First rank covered (inclusive).")
    rank_end: int = Field(..., description="Last rank covered (inclusive).")
    college: str = Field(..., description="Label returned for a matching rank.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "strict": True,
    }

    def contains(self, rank: int) -> bool:
        return self.rank_start <= rank <= self.rank_end


class Applicant(BaseModel):
    """
    A student asking for an allocation.
    """

    name: str = Field(..., description="Applicant name, embedded spaces allowed.")
    rank: int = Field(..., description="Exam rank used for allocation.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "strict": True,
    }


__all__ = ["IntervalRecord", "Applicant"]
