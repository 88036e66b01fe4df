"""
Abstract strategy interfaces for the college counseling allocator.

Concrete strategies (rank interval lookup, fixed round responses) implement
the AllocationStrategy protocol so the allocation service can treat them
uniformly through the single `allocate` operation.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable


@runtime_checkable
class AllocationStrategy(Protocol):
    """
    Common interface all allocation strategies must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the rule.
    """

    name: str
    description: str

    def allocate(self, rank: int) -> str:
        """
        Decide the allocation for an applicant rank.

        Parameters
        ----------
        rank : int
            The applicant's exam rank.

        Returns
        -------
        str
            The allocated college, or a message explaining why none applies.
        """
        ...


class AbstractAllocationStrategy(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `description` and implement `allocate`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def allocate(self, rank: int) -> str:  # pragma: no cover - interface only
        """Return the allocation for `rank`."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = [
    "AllocationStrategy",
    "AbstractAllocationStrategy",
]
