"""Configuration classes for kspath components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class KSPConfig:
    """Defaults used by the k-shortest-paths entry points."""

    # Edge attribute read as the weight on networkx graphs
    weight_attr: str = "weight"

    # Weight of an edge that lacks ``weight_attr``
    default_weight: float = 1.0

    # Number of paths returned when the caller passes k=None
    default_k: int = 3

    # Scan every edge for negative weights before searching
    validate_weights: bool = True

    def resolve_k(self, k: Optional[int]) -> int:
        """Return ``k`` or ``default_k`` when ``k`` is None."""
        if k is None:
            return self.default_k
        return int(k)


# Global configuration instance
KSP_CONFIG = KSPConfig()
