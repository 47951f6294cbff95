"""kspath: k-shortest loopless paths for weighted graphs.

kspath implements Yen's deviation algorithm on top of an exact Dijkstra
search. Graphs are read through a minimal capability interface; networkx
graphs are adapted automatically.

Primary API:
    yen_k_shortest_paths() - Node lists within a cost budget of the shortest
    k_shortest_paths() - Same search returning Path objects
    iter_k_shortest_paths() - Lazy generator variant
    shortest_path() - Single exact shortest-path query

Example:
    import networkx as nx
    from kspath import yen_k_shortest_paths

    g = nx.DiGraph()
    g.add_edge("A", "B", weight=1)
    g.add_edge("B", "C", weight=1)
    g.add_edge("A", "C", weight=3)

    yen_k_shortest_paths(g, k=2, cost=float("inf"), src_node="A", dst_node="C")
    # [['A', 'B', 'C'], ['A', 'C']]
"""

from __future__ import annotations

from kspath import logging
from kspath.algorithms.ksp import (
    iter_k_shortest_paths,
    k_shortest_paths,
    yen_k_shortest_paths,
)
from kspath.algorithms.spf import shortest_path
from kspath.config import KSP_CONFIG, KSPConfig
from kspath.errors import NegativeWeightError
from kspath.graph import GraphCapability, MaskedGraphView, NetworkXGraph, uniform_cost
from kspath.paths import Path

__version__ = "0.1.0"

# Handler and format for the "kspath" logger tree
logging.setup_root_logger()

__all__ = [
    "__version__",
    # Algorithms
    "yen_k_shortest_paths",
    "k_shortest_paths",
    "iter_k_shortest_paths",
    "shortest_path",
    # Graph
    "GraphCapability",
    "NetworkXGraph",
    "MaskedGraphView",
    "uniform_cost",
    # Values and config
    "Path",
    "KSPConfig",
    "KSP_CONFIG",
    "NegativeWeightError",
    "logging",
]
