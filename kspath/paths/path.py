"""Lightweight representation of a single path.

The ``Path`` dataclass stores an ordered node sequence and its total cost.
Paths compare equal when their node sequences and costs match and order by
cost, so they sort directly into nondecreasing-weight order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple

from kspath.algorithms.base import Cost
from kspath.graph.capability import GraphCapability, NodeID


@dataclass(frozen=True)
class Path:
    """Represents a single source-to-destination path.

    Attributes:
        nodes: Node sequence from source to destination.
        cost: Total weight of the path.
    """

    nodes: Tuple[NodeID, ...]
    cost: Cost

    def __post_init__(self) -> None:
        """Freeze ``nodes`` into a tuple."""
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))

    def __getitem__(self, idx: int) -> NodeID:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    def __lt__(self, other: Any) -> bool:
        """Compare two paths by cost.

        Returns NotImplemented if ``other`` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __repr__(self) -> str:
        return f"Path({list(self.nodes)}, cost={self.cost})"

    def is_loopless(self) -> bool:
        """Return True if no node appears twice."""
        return len(set(self.nodes)) == len(self.nodes)


def is_same_path(a: Sequence[NodeID], b: Sequence[NodeID]) -> bool:
    """Return True if ``a`` and ``b`` are the same node sequence."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def path_weight(graph: GraphCapability, nodes: Sequence[NodeID]) -> Cost:
    """Sum the edge weights along ``nodes``.

    Returns:
        The total weight; ``0.0`` for paths with fewer than two nodes and
        ``inf`` if any consecutive pair is not connected.
    """
    total = 0.0
    for u, v in zip(nodes[:-1], nodes[1:]):
        w, ok = graph.weight(u, v)
        if not ok:
            return math.inf
        total += w
    return total
