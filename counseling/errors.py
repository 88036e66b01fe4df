"""
Error taxonomy for the college counseling allocator.

All errors derive from CounselingError so the CLI can report them through a
single handler. The string form of each error is the message shown to users.
"""

from __future__ import annotations

from typing import Optional


class CounselingError(Exception):
    """Base class for every failure the allocator reports."""


class DataSourceError(CounselingError, OSError):
    """An indirection file or dataset could not be opened."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class DataFormatError(CounselingError, ValueError):
    """A dataset line is missing a separator or holds a non-integer rank."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class InputError(CounselingError, ValueError):
    """User-supplied rank is not a valid integer."""

    def __init__(self, message: str, value: Optional[str] = None) -> None:
        super().__init__(message)
        self.value = value


__all__ = [
    "CounselingError",
    "DataSourceError",
    "DataFormatError",
    "InputError",
]
