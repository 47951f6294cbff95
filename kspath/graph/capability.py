"""Read-only graph capability used by the path algorithms.

`GraphCapability` is the minimal surface the shortest-path search and the
k-shortest-paths orchestrator rely on: neighbor enumeration, the directed
flag, and weight lookup by ordered node pair. `NetworkXGraph` adapts any
``networkx`` graph to it without copying.
"""

from __future__ import annotations

import math
from typing import (
    Any,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    Tuple,
    Union,
)

import networkx as nx

from kspath.config import KSP_CONFIG, KSPConfig

NodeID = Hashable
Weight = float
EdgeWeightTuple = Tuple[NodeID, NodeID, Weight]


class GraphCapability(Protocol):
    """Protocol for graphs that path algorithms can walk.

    Implementations must not change while a search is running.
    """

    def has_node(self, node: NodeID) -> bool:
        """Return True if ``node`` belongs to the graph."""
        ...

    def is_directed(self) -> bool:
        """Return True for directed graphs."""
        ...

    def neighbors(self, node: NodeID) -> Iterable[NodeID]:
        """Return the nodes reachable from ``node`` over one edge."""
        ...

    def weight(self, u: NodeID, v: NodeID) -> Tuple[Weight, bool]:
        """Return ``(weight, exists)`` for the edge ``u -> v``."""
        ...

    def edges(self) -> Iterator[EdgeWeightTuple]:
        """Yield ``(u, v, weight)`` for every edge, parallel edges included."""
        ...


class NetworkXGraph:
    """Adapt a ``networkx`` graph to `GraphCapability`.

    Works with ``Graph``, ``DiGraph``, ``MultiGraph`` and ``MultiDiGraph``.
    Parallel edges collapse to the cheapest one. Edges without
    ``weight_attr`` cost ``default_weight``; with ``weight_attr=None`` every
    edge costs ``default_weight``.

    Attributes:
        graph: The wrapped networkx graph. Never mutated.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
    """

    def __init__(
        self,
        graph: nx.Graph,
        weight_attr: Optional[str] = "weight",
        default_weight: Weight = 1.0,
    ) -> None:
        self.graph = graph
        self.weight_attr = weight_attr
        self.default_weight = default_weight
        self._directed = graph.is_directed()
        self._multi = graph.is_multigraph()
        # Successor map for directed graphs, neighbor map otherwise
        self._adj = graph._adj  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return (
            f"NetworkXGraph({type(self.graph).__name__}, "
            f"nodes={self.graph.number_of_nodes()}, "
            f"edges={self.graph.number_of_edges()})"
        )

    def _attr_weight(self, attr: dict) -> Weight:
        if self.weight_attr is None:
            return float(self.default_weight)
        return float(attr.get(self.weight_attr, self.default_weight))

    def has_node(self, node: NodeID) -> bool:
        return node in self._adj

    def is_directed(self) -> bool:
        return self._directed

    def neighbors(self, node: NodeID) -> Iterable[NodeID]:
        """Return the successors of ``node``.

        Raises:
            KeyError: If ``node`` is not in the graph.
        """
        if node not in self._adj:
            raise KeyError(f"Node '{node}' is not in the graph.")
        return self._adj[node].keys()

    def weight(self, u: NodeID, v: NodeID) -> Tuple[Weight, bool]:
        """Return the weight of ``u -> v`` and whether the edge exists.

        A node reaches itself at zero cost. Missing edges report infinity.
        """
        if u == v and u in self._adj:
            return 0.0, True
        nbrs = self._adj.get(u)
        if nbrs is None or v not in nbrs:
            return math.inf, False
        data = nbrs[v]
        if self._multi:
            return min(self._attr_weight(attr) for attr in data.values()), True
        return self._attr_weight(data), True

    def edges(self) -> Iterator[EdgeWeightTuple]:
        for u, v, attr in self.graph.edges(data=True):
            yield u, v, self._attr_weight(attr)


def uniform_cost(graph: nx.Graph) -> NetworkXGraph:
    """Wrap ``graph`` so that every edge costs 1 regardless of attributes."""
    return NetworkXGraph(graph, weight_attr=None, default_weight=1.0)


def as_capability(
    graph: Union[nx.Graph, GraphCapability, Any],
    config: Optional[KSPConfig] = None,
) -> GraphCapability:
    """Return ``graph`` as a `GraphCapability`.

    networkx graphs are wrapped in `NetworkXGraph` using the weight settings
    from ``config``; anything else is assumed to already implement the
    protocol and is returned unchanged.

    Raises:
        TypeError: If ``graph`` is neither a networkx graph nor provides
            every `GraphCapability` method.
    """
    if isinstance(graph, nx.Graph):
        config = config or KSP_CONFIG
        return NetworkXGraph(
            graph,
            weight_attr=config.weight_attr,
            default_weight=config.default_weight,
        )
    for name in ("neighbors", "weight", "is_directed", "has_node", "edges"):
        if not callable(getattr(graph, name, None)):
            raise TypeError(
                f"Object of type '{type(graph).__name__}' does not provide '{name}()'."
            )
    return graph
