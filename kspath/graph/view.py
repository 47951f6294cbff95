"""Graph view with transient node and edge suppression.

`MaskedGraphView` wraps a `GraphCapability` and hides selected nodes and
directed edges from neighbor enumeration without mutating the wrapped graph.
Yen's algorithm owns one view per search, fills it for a single spur-node
query, and clears it with ``reset()`` before the next one.
"""

from __future__ import annotations

from typing import AbstractSet, Iterator, List, Set, Tuple

from kspath.graph.capability import (
    EdgeWeightTuple,
    GraphCapability,
    NodeID,
    Weight,
)

__all__ = ["MaskedGraphView"]


class MaskedGraphView:
    """Overlay that hides nodes and edges from a base graph.

    Suppression only affects reachability: ``weight()`` always reports the
    base graph's weight. The two suppression sets are allocated once and
    cleared in place by ``reset()``.

    A view is single-owner. Sharing one between concurrent searches leaks
    suppressions from one query into another.

    Attributes:
        graph: The wrapped graph capability.
    """

    def __init__(self, graph: GraphCapability) -> None:
        self.graph = graph
        self._directed = graph.is_directed()
        self._nodes: Set[NodeID] = set()
        self._edges: Set[Tuple[NodeID, NodeID]] = set()

    def __repr__(self) -> str:
        return (
            f"MaskedGraphView({self.graph!r}, "
            f"suppressed_nodes={len(self._nodes)}, "
            f"suppressed_edges={len(self._edges)})"
        )

    @property
    def suppressed_nodes(self) -> AbstractSet[NodeID]:
        return frozenset(self._nodes)

    @property
    def suppressed_edges(self) -> AbstractSet[Tuple[NodeID, NodeID]]:
        return frozenset(self._edges)

    def reset(self) -> None:
        """Clear both suppression sets."""
        self._nodes.clear()
        self._edges.clear()

    def suppress_node(self, node: NodeID) -> None:
        """Hide ``node`` from neighbor enumeration. Idempotent."""
        self._nodes.add(node)

    def suppress_edge(self, u: NodeID, v: NodeID) -> None:
        """Hide the edge ``u -> v``; on undirected graphs hide ``v -> u`` too."""
        self._edges.add((u, v))
        if not self._directed:
            self._edges.add((v, u))

    def can_walk(self, u: NodeID, v: NodeID) -> bool:
        """Return True if ``u -> v`` is not hidden by the mask."""
        if v in self._nodes:
            return False
        return (u, v) not in self._edges

    #
    # GraphCapability
    #
    def has_node(self, node: NodeID) -> bool:
        return self.graph.has_node(node)

    def is_directed(self) -> bool:
        return self._directed

    def neighbors(self, node: NodeID) -> List[NodeID]:
        """Return visible neighbors of ``node``; none if ``node`` is hidden."""
        if node in self._nodes:
            return []
        return [nbr for nbr in self.graph.neighbors(node) if self.can_walk(node, nbr)]

    def weight(self, u: NodeID, v: NodeID) -> Tuple[Weight, bool]:
        return self.graph.weight(u, v)

    def edges(self) -> Iterator[EdgeWeightTuple]:
        return self.graph.edges()
