"""Shortest-path-first (SPF) search over a `GraphCapability`.

Dijkstra with a binary heap. The search stops as soon as the destination is
settled and never expands it. Among equal-cost predecessors the first one
discovered is kept, so the returned path is deterministic for a given
neighbor order.
"""

from __future__ import annotations

import math
from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from kspath.algorithms.base import Cost, NodeSeq, PathResult
from kspath.errors import NegativeWeightError
from kspath.graph.capability import GraphCapability, NodeID


def spf(
    graph: GraphCapability,
    src_node: NodeID,
    dst_node: Optional[NodeID] = None,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, Optional[NodeID]]]:
    """Compute shortest-path costs and predecessors from ``src_node``.

    Args:
        graph: Graph (or masked view) to search.
        src_node: Source node.
        dst_node: Optional destination. If given, the search terminates once
            ``dst_node`` is popped at its minimal cost.

    Returns:
        A tuple of (costs, pred):
          - costs: Minimal cost from ``src_node`` for each settled or reached node.
          - pred: Single predecessor per reached node; ``None`` for the source.

    Raises:
        KeyError: If ``src_node`` is not in the graph.
        NegativeWeightError: If a relaxed edge has a negative weight.
    """
    if not graph.has_node(src_node):
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    costs: Dict[NodeID, Cost] = {src_node: 0.0}
    pred: Dict[NodeID, Optional[NodeID]] = {src_node: None}
    settled = set()
    # Sequence number keeps heap order independent of node comparability
    seq = 0
    min_pq: List[Tuple[Cost, int, NodeID]] = [(0.0, seq, src_node)]

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        if node_id in settled or current_cost > costs[node_id]:
            continue
        settled.add(node_id)

        if dst_node is not None and node_id == dst_node:
            break

        for neighbor_id in graph.neighbors(node_id):
            if neighbor_id in settled:
                continue
            edge_cost, ok = graph.weight(node_id, neighbor_id)
            if not ok:
                continue
            if edge_cost < 0:
                raise NegativeWeightError(node_id, neighbor_id, edge_cost)

            new_cost = current_cost + edge_cost
            if neighbor_id not in costs or new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = node_id
                seq += 1
                heappush(min_pq, (new_cost, seq, neighbor_id))

    return costs, pred


def resolve_to_path(
    src_node: NodeID,
    dst_node: NodeID,
    pred: Dict[NodeID, Optional[NodeID]],
) -> NodeSeq:
    """Walk a single-predecessor map back from ``dst_node`` to ``src_node``.

    Returns:
        Nodes from ``src_node`` to ``dst_node``, or an empty list if
        ``dst_node`` was never reached.
    """
    if dst_node not in pred:
        return []
    path = [dst_node]
    node = dst_node
    while node != src_node:
        node = pred[node]
        path.append(node)
    path.reverse()
    return path


def shortest_path(
    graph: GraphCapability,
    src_node: NodeID,
    dst_node: NodeID,
) -> PathResult:
    """Return the minimum-weight path from ``src_node`` to ``dst_node``.

    Args:
        graph: Graph (or masked view) to search.
        src_node: Source node.
        dst_node: Destination node.

    Returns:
        ``(nodes, cost)``. ``([src_node], 0.0)`` when source and destination
        coincide; ``([], inf)`` when the destination is unreachable.

    Raises:
        KeyError: If ``src_node`` is not in the graph.
    """
    costs, pred = spf(graph, src_node, dst_node=dst_node)
    if dst_node not in pred:
        return [], math.inf
    return resolve_to_path(src_node, dst_node, pred), costs[dst_node]
