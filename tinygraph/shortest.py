"""
Single-source shortest paths (Dijkstra).

Works directly on per-vertex state instead of a priority queue: every step
scans the unvisited vertices for the smallest tentative distance, which makes
a run O(V^2). Edge costs are read from the adjacency matrix, built once per
run, so unweighted graphs pay the edge multiplicity of each cell.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

import numpy as np

from .core import Graph
from .errors import NegativeWeightError, NoPathError
from .logging import get_logger
from .matrices import adjacency_array
from .utils import reconstruct_path

logger = get_logger(__name__)


@dataclass
class VertexState:
    """
    Search state of one vertex after a Dijkstra run.

    Attributes:
        label: The vertex.
        distance: Shortest distance from the source (inf if unreachable).
        predecessor: Previous vertex on the shortest path, None for the
            source and for unreachable vertices.
        visited: Whether the vertex was settled.
    """

    label: Hashable
    distance: float = float("inf")
    predecessor: Optional[Hashable] = None
    visited: bool = False


def _check_non_negative(graph: Graph) -> None:
    if not graph.weighted:
        return
    for edge in graph.edges:
        if edge.weight < 0:
            raise NegativeWeightError(edge.origin, edge.destination, edge.weight)


def compute_dijkstra(graph: Graph, source: Hashable) -> Dict[Hashable, VertexState]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Repeatedly settles the unvisited vertex with the smallest tentative
    distance (ties go to the earliest inserted vertex) and relaxes its
    adjacency-list neighbors. Runs until every vertex is visited.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex.

    Returns:
        Mapping vertex -> VertexState, in vertex insertion order.

    Raises:
        VertexNotFoundError: If source is not in graph.
        NegativeWeightError: If a weighted edge has a negative weight.

    Example:
        >>> G = Graph(oriented=True, weighted=True)
        >>> G.add_vertices(["A", "B", "C"])
        >>> _ = G.add_edge("A", "B", 1.0)
        >>> _ = G.add_edge("B", "C", 2.0)
        >>> compute_dijkstra(G, "A")["C"].distance
        3.0
    """
    graph.require_vertex(source)
    _check_non_negative(graph)

    vertices = graph.vertices
    adjacency = graph.adjacency_list()
    costs = adjacency_array(graph)
    n = len(vertices)

    dist = np.full(n, np.inf)
    visited = np.zeros(n, dtype=bool)
    predecessor: List[Optional[int]] = [None] * n
    dist[graph.index_of(source)] = 0.0

    for _ in range(n):
        unvisited = np.flatnonzero(~visited)
        u = int(unvisited[np.argmin(dist[unvisited])])
        visited[u] = True

        for neighbor in adjacency[vertices[u]]:
            v = graph.index_of(neighbor)
            if visited[v]:
                continue
            candidate = dist[u] + costs[u, v]
            if candidate < dist[v]:
                dist[v] = candidate
                predecessor[v] = u

    logger.debug("Dijkstra from %s settled %d vertices", source, n)

    return {
        label: VertexState(
            label=label,
            distance=float(dist[i]),
            predecessor=None if predecessor[i] is None else vertices[predecessor[i]],
            visited=bool(visited[i]),
        )
        for i, label in enumerate(vertices)
    }


def shortest_distances(graph: Graph, source: Hashable) -> Dict[Hashable, float]:
    """Return vertex -> shortest distance from source (inf if unreachable)."""
    return {label: state.distance for label, state in compute_dijkstra(graph, source).items()}


def path_from_to(graph: Graph, origin: Hashable, destination: Hashable) -> List[Hashable]:
    """
    Shortest path between two vertices.

    Args:
        graph: Graph to search.
        origin: Start vertex.
        destination: End vertex.

    Returns:
        Vertices from origin to destination inclusive; ``[origin]`` when
        origin == destination.

    Raises:
        VertexNotFoundError: If either vertex is missing (origin first).
        NoPathError: If destination is unreachable from origin.
    """
    graph.require_vertex(origin)
    graph.require_vertex(destination)

    states = compute_dijkstra(graph, origin)
    predecessors = {label: state.predecessor for label, state in states.items()}

    path = reconstruct_path(predecessors, origin, destination)
    if path is None:
        raise NoPathError(origin, destination)

    logger.debug("Path %s -> %s: %s", origin, destination, path)
    return path
