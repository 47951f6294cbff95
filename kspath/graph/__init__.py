"""Graph primitives consumed by the path algorithms.

This package provides the read-only `GraphCapability` protocol, the
`NetworkXGraph` adapter, and the `MaskedGraphView` used by Yen's algorithm.
"""

from kspath.graph.capability import (
    GraphCapability,
    NetworkXGraph,
    NodeID,
    as_capability,
    uniform_cost,
)
from kspath.graph.view import MaskedGraphView

__all__ = [
    "GraphCapability",
    "MaskedGraphView",
    "NetworkXGraph",
    "NodeID",
    "as_capability",
    "uniform_cost",
]
