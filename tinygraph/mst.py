"""
Minimum spanning tree algorithms: Kruskal and Prim-Jarnik.

Kruskal uses a union-find data structure. Prim-Jarnik uses the same
per-vertex state scan as the shortest-path search, with "distance" meaning
the cheapest known edge into the growing tree.

Both require an undirected, weighted graph. On a disconnected graph each
returns a spanning forest.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests), 23.2 (Kruskal and Prim).
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, NamedTuple, Optional

import numpy as np

from .core import Edge, Graph
from .errors import InvalidConfigurationError
from .logging import get_logger
from .utils import total_weight

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by size.

    Used by Kruskal's algorithm for cycle detection.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        """
        Initialize union-find with one singleton set per node.

        Args:
            nodes: Iterable of nodes.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.size: Dict[Hashable, int] = {}

        for node in nodes:
            self.parent[node] = node
            self.size[node] = 1

        self.components = len(self.parent)

    def find(self, x: Hashable) -> Hashable:
        """
        Find the root of x, pointing every node on the way straight at it.

        Args:
            x: Node to find root for.

        Returns:
            Root node.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Merge the sets containing x and y, hanging the smaller under the larger.

        Args:
            x: First node.
            y: Second node.

        Returns:
            True if a merge happened, False if x and y were already together.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.size[root_x] < self.size[root_y]:
            root_x, root_y = root_y, root_x

        self.parent[root_y] = root_x
        self.size[root_x] += self.size[root_y]
        self.components -= 1
        return True


class PrimEntry(NamedTuple):
    """One tree edge from Prim-Jarnik: vertex joined via predecessor at weight."""

    vertex: Hashable
    predecessor: Hashable
    weight: float


def _cheapest_edge_costs(graph: Graph) -> np.ndarray:
    """
    (V, V) table of the cheapest edge weight between each vertex pair.

    Unlike the adjacency matrix, parallel edges keep their minimum instead of
    the last weight written. Pairs without an edge are inf.
    """
    n = len(graph)
    costs = np.full((n, n), np.inf)

    for edge in graph.edges:
        i = graph.index_of(edge.origin)
        j = graph.index_of(edge.destination)
        cheapest = min(costs[i, j], edge.weight)
        costs[i, j] = cheapest
        costs[j, i] = cheapest

    return costs


def _require_spanning_tree_config(graph: Graph) -> None:
    if graph.oriented:
        raise InvalidConfigurationError(
            "undirected", "Minimum spanning trees require an undirected graph"
        )
    if not graph.weighted:
        raise InvalidConfigurationError(
            "weighted", "Minimum spanning trees require a weighted graph"
        )


def compute_kruskal(graph: Graph) -> List[Edge]:
    """
    Kruskal's algorithm for minimum spanning tree.

    Edges are taken in increasing weight order (equal weights keep insertion
    order); an edge is kept when its endpoints are still in different sets.
    Stops once all vertices share one set or the edges run out.

    Args:
        graph: Undirected, weighted graph.

    Returns:
        The kept Edge objects in the order they were accepted. A connected
        graph yields ``len(vertices) - 1`` edges.

    Raises:
        InvalidConfigurationError: If the graph is oriented or unweighted.

    Complexity: O(E log E) for sorting, near-linear for the union-find work.

    Example:
        >>> G = Graph(weighted=True)
        >>> G.add_vertices(["A", "B", "C"])
        >>> _ = G.add_edge("A", "B", 1.0)
        >>> _ = G.add_edge("B", "C", 2.0)
        >>> _ = G.add_edge("A", "C", 3.0)
        >>> len(compute_kruskal(G))
        2
    """
    _require_spanning_tree_config(graph)

    uf = UnionFind(graph.vertices)
    tree: List[Edge] = []

    for edge in sorted(graph.edges, key=lambda e: e.weight):
        if uf.components <= 1:
            break
        if uf.union(edge.origin, edge.destination):
            tree.append(edge)

    logger.debug(
        "Kruskal kept %d of %d edges, total weight %s",
        len(tree),
        len(graph.edges),
        total_weight(tree),
    )
    return tree


def compute_prim_jarnik(graph: Graph, start: Optional[Hashable] = None) -> List[PrimEntry]:
    """
    Prim-Jarnik algorithm for minimum spanning tree.

    Grows a tree from ``start``: each step adds the unvisited vertex with the
    cheapest known connecting edge (ties go to the earliest inserted vertex)
    and lowers the connecting cost of its unvisited neighbors. Among parallel
    edges the cheapest one counts.

    Args:
        graph: Undirected, weighted graph.
        start: Root vertex (defaults to the first inserted vertex).

    Returns:
        One PrimEntry per vertex that joined through an edge, in the order
        the vertices were added to the tree.

    Raises:
        InvalidConfigurationError: If the graph is oriented or unweighted.
        VertexNotFoundError: If start is given but not in graph.

    Complexity: O(V^2).
    """
    _require_spanning_tree_config(graph)

    vertices = graph.vertices
    if start is not None:
        graph.require_vertex(start)
    elif not vertices:
        return []
    else:
        start = vertices[0]

    adjacency = graph.adjacency_list()
    costs = _cheapest_edge_costs(graph)
    n = len(vertices)

    dist = np.full(n, np.inf)
    visited = np.zeros(n, dtype=bool)
    predecessor: List[Optional[int]] = [None] * n
    dist[graph.index_of(start)] = 0.0

    tree: List[PrimEntry] = []

    for _ in range(n):
        unvisited = np.flatnonzero(~visited)
        u = int(unvisited[np.argmin(dist[unvisited])])
        visited[u] = True

        # A vertex without predecessor roots a new component
        if predecessor[u] is not None:
            tree.append(PrimEntry(vertices[u], vertices[predecessor[u]], float(dist[u])))

        for neighbor in adjacency[vertices[u]]:
            v = graph.index_of(neighbor)
            if visited[v]:
                continue
            if costs[u, v] < dist[v]:
                dist[v] = costs[u, v]
                predecessor[v] = u

    logger.debug(
        "Prim-Jarnik from %s: %d tree edges, total weight %s",
        start,
        len(tree),
        total_weight(tree),
    )
    return tree
