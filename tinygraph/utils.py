"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction and spanning tree weights.
"""

from __future__ import annotations

from typing import Dict, Hashable, List, Optional, Sequence, Tuple, Union

from .core import Edge


def reconstruct_path(
    predecessors: Dict[Hashable, Optional[Hashable]], source: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct the path from source to target by walking predecessor links.

    Args:
        predecessors: Mapping node -> previous node on its shortest path, None
            for the source and for unreachable nodes.
        source: Node the search started from.
        target: Node to reconstruct the path to.

    Returns:
        List of nodes from source to target (inclusive), or None if target is
        not reachable from source.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B', 'D': None}
        >>> reconstruct_path(parent, 'A', 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'A', 'D') is None
        True
    """
    if target not in predecessors:
        return None

    path = []
    current: Optional[Hashable] = target
    visited = set()
    while current is not None:
        if current in visited:
            # Only a corrupt predecessor map can loop
            return None
        visited.add(current)
        path.append(current)
        if current == source:
            path.reverse()
            return path
        current = predecessors.get(current)

    return None


def total_weight(tree: Sequence[Union[Edge, Tuple[Hashable, Hashable, float]]]) -> float:
    """
    Sum the weights of a spanning tree.

    Accepts the Edge list of compute_kruskal as well as the
    (vertex, predecessor, weight) entries of compute_prim_jarnik.
    """
    total = 0.0
    for item in tree:
        total += item.weight if isinstance(item, Edge) else item[2]
    return total
