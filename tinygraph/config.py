"""Graph configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GraphConfig:
    """
    Flags fixed for the whole lifetime of a Graph.

    Args:
        oriented: If True, edges are directional (origin -> destination);
            otherwise every edge can be traversed both ways. Defaults to False.
        weighted: If True, every edge carries a numeric weight used by the
            shortest-path and spanning-tree algorithms. Defaults to False.
    """

    oriented: bool = False
    weighted: bool = False

    def __post_init__(self) -> None:
        """Validate GraphConfig invariants."""
        if not isinstance(self.oriented, bool):
            raise TypeError(f"oriented must be a bool, got {self.oriented!r}.")
        if not isinstance(self.weighted, bool):
            raise TypeError(f"weighted must be a bool, got {self.weighted!r}.")
