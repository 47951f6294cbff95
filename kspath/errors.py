"""Exceptions raised by kspath."""

from __future__ import annotations

from typing import Hashable


class NegativeWeightError(ValueError):
    """Raised when a graph handed to a path search has a negative edge weight.

    Attributes:
        u: Tail node of the offending edge.
        v: Head node of the offending edge.
        weight: The negative weight.
    """

    def __init__(self, u: Hashable, v: Hashable, weight: float) -> None:
        self.u = u
        self.v = v
        self.weight = weight
        super().__init__(f"Edge '{u}' -> '{v}' has negative weight {weight}.")
