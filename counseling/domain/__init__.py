"""
Domain package for the college counseling allocator.

Exports the value types and the interval-table parser. Keep this package
focused on data definitions and parsing; file access lives in infrastructure.
"""

from counseling.domain.interval_table import parse, parse_line
from counseling.domain.models import Applicant, IntervalRecord

__all__ = [
    "Applicant",
    "IntervalRecord",
    "parse",
    "parse_line",
]
