"""Yen's k-shortest loopless paths.

The first path comes from a plain SPF query. Each later round takes the most
recently accepted path, treats every node but the last as a spur node, and
asks SPF for a spur-to-destination path on a `MaskedGraphView` that hides
the root prefix and the edges already used by accepted paths sharing that
prefix. Spliced root+spur paths go into a `CandidatePool`; the cheapest one
is promoted each round.

All returned paths weigh at most ``shortest + cost``. Equal-weight candidates
are promoted in the order they were generated.
"""

from __future__ import annotations

import math
from typing import Iterator, List, Optional

from kspath.algorithms.base import Cost, NodeSeq
from kspath.algorithms.candidates import CandidatePool
from kspath.algorithms.spf import shortest_path
from kspath.config import KSP_CONFIG, KSPConfig
from kspath.errors import NegativeWeightError
from kspath.graph.capability import GraphCapability, NodeID, as_capability
from kspath.graph.view import MaskedGraphView
from kspath.logging import get_logger
from kspath.paths.path import Path, is_same_path, path_weight

logger = get_logger(__name__)

__all__ = [
    "check_nonnegative_weights",
    "iter_k_shortest_paths",
    "k_shortest_paths",
    "yen_k_shortest_paths",
]


def check_nonnegative_weights(graph: GraphCapability) -> None:
    """Scan every edge of ``graph`` and fail on the first negative weight.

    Raises:
        NegativeWeightError: If any edge weight is below zero.
    """
    for u, v, w in graph.edges():
        if w < 0:
            raise NegativeWeightError(u, v, w)


def _validate_request(graph: GraphCapability, cost: Cost, config: KSPConfig) -> None:
    if math.isnan(cost) or cost < 0:
        raise ValueError(f"Cost budget must be nonnegative, got {cost}.")
    if config.validate_weights:
        check_nonnegative_weights(graph)


def _yen_paths(
    graph: GraphCapability,
    k: int,
    cost: Cost,
    src_node: NodeID,
    dst_node: NodeID,
) -> Iterator[Path]:
    if k == 0:
        return

    # Absent endpoints are unreachable, except a node trivially reaching itself
    if not graph.has_node(src_node) or not graph.has_node(dst_node):
        if src_node == dst_node:
            yield Path([src_node], 0.0)
        else:
            logger.debug("Node %r or %r is not in the graph", src_node, dst_node)
        return

    shortest, weight = shortest_path(graph, src_node, dst_node)
    if not shortest:
        logger.debug("No path from %r to %r", src_node, dst_node)
        return
    if len(shortest) == 1:
        yield Path(shortest, weight)
        return

    max_cost = weight + cost
    paths: List[NodeSeq] = [shortest]
    yield Path(shortest, weight)

    view = MaskedGraphView(graph)
    pool = CandidatePool()

    while k < 0 or len(paths) < k:
        last = paths[-1]
        # Every node but the destination of the last accepted path is a spur.
        for n in range(len(last) - 1):
            view.reset()

            spur = last[n]
            root = last[: n + 1]

            for path in paths:
                if len(path) > n + 1 and is_same_path(path[: n + 1], root):
                    view.suppress_edge(path[n], path[n + 1])
            for u in root[:-1]:
                view.suppress_node(u)

            spur_path, spur_weight = shortest_path(view, spur, dst_node)
            if math.isinf(spur_weight) or spur_weight > max_cost:
                continue

            if len(root) > 1:
                root_weight = path_weight(graph, root)
                spur_path = root[:-1] + spur_path
                spur_weight += root_weight

            pool.add(Path(spur_path, spur_weight))

        if not pool:
            logger.debug("Candidate pool exhausted after %d paths", len(paths))
            break

        best = pool.peek()
        if len(best) <= 1 or best.cost > max_cost:
            logger.debug(
                "Cheapest candidate cost %s exceeds limit %s; stopping",
                best.cost,
                max_cost,
            )
            break
        pool.pop()
        paths.append(list(best.nodes))
        logger.debug(
            "Accepted path %d with cost %s (%d candidates pending)",
            len(paths),
            best.cost,
            len(pool),
        )
        yield best


def iter_k_shortest_paths(
    graph,
    src_node: NodeID,
    dst_node: NodeID,
    k: Optional[int] = None,
    cost: Cost = math.inf,
    config: Optional[KSPConfig] = None,
) -> Iterator[Path]:
    """Lazily yield up to ``k`` shortest loopless paths in nondecreasing cost.

    Input validation runs before the iterator is returned, so a bad graph
    fails at call time rather than on the first ``next()``.

    Args:
        graph: A networkx graph or any `GraphCapability`.
        src_node: Source node.
        dst_node: Destination node.
        k: Maximum number of paths. Negative means bounded by ``cost`` only;
            zero yields nothing; None uses ``config.default_k``.
        cost: Allowed excess over the shortest path's cost. Defaults to
            infinity.
        config: Optional configuration; defaults to ``KSP_CONFIG``.

    Yields:
        `Path` objects, cheapest first.

    Raises:
        NegativeWeightError: If any edge in ``graph`` has a negative weight.
        ValueError: If ``cost`` is negative or NaN.
    """
    config = config or KSP_CONFIG
    capability = as_capability(graph, config)
    _validate_request(capability, cost, config)
    return _yen_paths(capability, config.resolve_k(k), cost, src_node, dst_node)


def k_shortest_paths(
    graph,
    src_node: NodeID,
    dst_node: NodeID,
    k: Optional[int] = None,
    cost: Cost = math.inf,
    config: Optional[KSPConfig] = None,
) -> List[Path]:
    """Return up to ``k`` shortest loopless paths as `Path` objects.

    See `iter_k_shortest_paths` for arguments and errors.
    """
    return list(iter_k_shortest_paths(graph, src_node, dst_node, k, cost, config))


def yen_k_shortest_paths(
    graph,
    k: int,
    cost: Cost,
    src_node: NodeID,
    dst_node: NodeID,
    config: Optional[KSPConfig] = None,
) -> List[NodeSeq]:
    """Return the k-shortest loopless paths from ``src_node`` to ``dst_node``.

    Paths cost no more than ``cost`` beyond the shortest path. If ``k`` is
    negative only the cost limit bounds the result; ``k == 0`` returns an
    empty list.

    Args:
        graph: A networkx graph or any `GraphCapability`.
        k: Maximum number of paths.
        cost: Allowed excess over the shortest path's cost.
        src_node: Source node.
        dst_node: Destination node.
        config: Optional configuration; defaults to ``KSP_CONFIG``.

    Returns:
        Node lists in nondecreasing cost order. Empty if ``dst_node`` is
        unreachable or either endpoint is not in the graph; a node missing
        from the graph still reaches itself, giving ``[[src_node]]``.

    Raises:
        NegativeWeightError: If any edge in ``graph`` has a negative weight.
        ValueError: If ``cost`` is negative or NaN.
    """
    return [
        list(p.nodes)
        for p in iter_k_shortest_paths(graph, src_node, dst_node, k, cost, config)
    ]
