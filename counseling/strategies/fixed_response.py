"""
Fixed response strategies: later counseling rounds that always decline.

These ignore the rank entirely and return a constant message.
"""

from __future__ import annotations

from counseling.strategies.abstract import AbstractAllocationStrategy

ROUND_TWO_MESSAGE = "not eligible for round two"
ROUND_THREE_MESSAGE = "not eligible for round three"


class FixedResponseStrategy(AbstractAllocationStrategy):
    """Return `message` for every rank."""

    name: str = "fixed_response"
    description: str = "Constant response regardless of rank."

    def __init__(self, message: str) -> None:
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def allocate(self, rank: int) -> str:
        del rank
        return self._message


class RoundTwoStrategy(FixedResponseStrategy):
    name: str = "round_two"
    description: str = "Second counseling round (no seats offered)."

    def __init__(self) -> None:
        super().__init__(ROUND_TWO_MESSAGE)


class RoundThreeStrategy(FixedResponseStrategy):
    name: str = "round_three"
    description: str = "Third counseling round (no seats offered)."

    def __init__(self) -> None:
        super().__init__(ROUND_THREE_MESSAGE)


__all__ = [
    "ROUND_THREE_MESSAGE",
    "ROUND_TWO_MESSAGE",
    "FixedResponseStrategy",
    "RoundThreeStrategy",
    "RoundTwoStrategy",
]
