"""Pool of deviation paths awaiting promotion in Yen's algorithm."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Sequence, Set, Tuple

from kspath.algorithms.base import Cost
from kspath.graph.capability import NodeID
from kspath.paths.path import Path


class CandidatePool:
    """Min-heap of candidate paths keyed by (cost, generation order).

    Equal-cost candidates leave the pool in the order they were added
    (first generated wins). A node sequence is accepted at most once over
    the pool's lifetime, so a popped path cannot be re-added either.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Cost, int, Path]] = []
        self._seen: Set[Tuple[NodeID, ...]] = set()
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, nodes: Sequence[NodeID]) -> bool:
        key = tuple(nodes)
        return any(entry[2].nodes == key for entry in self._heap)

    def add(self, path: Path) -> bool:
        """Add ``path`` unless its node sequence was seen before.

        Returns:
            True if the path was added, False if it was a duplicate.
        """
        if path.nodes in self._seen:
            return False
        self._seen.add(path.nodes)
        heappush(self._heap, (path.cost, self._next_id, path))
        self._next_id += 1
        return True

    def peek(self) -> Path:
        """Return the cheapest candidate without removing it.

        Raises:
            IndexError: If the pool is empty.
        """
        if not self._heap:
            raise IndexError("peek from an empty candidate pool")
        return self._heap[0][2]

    def pop(self) -> Path:
        """Remove and return the cheapest candidate.

        Raises:
            IndexError: If the pool is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty candidate pool")
        return heappop(self._heap)[2]
