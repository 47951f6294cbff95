from __future__ import annotations

from typing import List, Tuple, Union

from kspath.graph.capability import NodeID

#: Numeric path cost (sum of edge weights).
Cost = Union[int, float]

#: Ordered node sequence from source to destination.
NodeSeq = List[NodeID]

#: Result of a single shortest-path query: (nodes, cost).
#: An unreachable destination gives ([], inf).
PathResult = Tuple[NodeSeq, Cost]
