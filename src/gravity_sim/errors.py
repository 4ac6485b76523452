# MIT License (see LICENSE)
"""Exceptions raised by the simulation."""
from __future__ import annotations


class SingularityError(ArithmeticError):
    """
    Two bodies came closer than the configured minimum separation.

    Only raised when a simulation is given ``min_separation``. Without it,
    near-coincident bodies produce non-finite forces that flow silently into
    the state.

    Attributes:
        i, j: Indices of the offending pair in the body sequence.
        distance: Separation at the time of the check.
    """

    def __init__(self, i: int, j: int, distance: float, min_separation: float):
        self.i = i
        self.j = j
        self.distance = distance
        self.min_separation = min_separation
        super().__init__(
            f"bodies {i} and {j} are {distance:.3g} apart "
            f"(minimum separation {min_separation:.3g})"
        )
