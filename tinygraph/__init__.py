"""tinygraph - a small in-memory graph with matrix, shortest-path and spanning-tree algorithms.

Provides:
- Graph data structure (labelled vertices, oriented/weighted edges)
- Adjacency and incidence matrices
- Shortest paths (Dijkstra)
- Minimum spanning trees (Kruskal, Prim-Jarnik)

All algorithms are deterministic: ties are broken by insertion order.
"""

__version__ = "0.1.0"

from .config import GraphConfig
from .core import Edge, Graph
from .errors import (
    DuplicateVertexError,
    GraphError,
    InvalidConfigurationError,
    InvalidWeightError,
    MissingWeightError,
    NegativeWeightError,
    NoPathError,
    VertexNotFoundError,
)
from .matrices import (
    adjacency_array,
    compute_adjacency_matrix,
    compute_incidence_matrix,
    edge_column_ids,
    incidence_array,
)
from .mst import PrimEntry, UnionFind, compute_kruskal, compute_prim_jarnik
from .parsing import build_graph, parse_edges, parse_vertices
from .shortest import VertexState, compute_dijkstra, path_from_to, shortest_distances
from .utils import reconstruct_path, total_weight

__all__ = [
    "__version__",
    # Core
    "Graph",
    "Edge",
    "GraphConfig",
    # Errors
    "GraphError",
    "VertexNotFoundError",
    "DuplicateVertexError",
    "MissingWeightError",
    "InvalidWeightError",
    "NegativeWeightError",
    "NoPathError",
    "InvalidConfigurationError",
    # Matrices
    "adjacency_array",
    "incidence_array",
    "compute_adjacency_matrix",
    "compute_incidence_matrix",
    "edge_column_ids",
    # Shortest paths
    "VertexState",
    "compute_dijkstra",
    "path_from_to",
    "shortest_distances",
    # Spanning trees
    "UnionFind",
    "PrimEntry",
    "compute_kruskal",
    "compute_prim_jarnik",
    # Utilities
    "reconstruct_path",
    "total_weight",
    # Parsing
    "parse_vertices",
    "parse_edges",
    "build_graph",
]

# Example usage:
# from tinygraph import Graph
#
# G = Graph(weighted=True)
# G.add_vertices(["A", "B", "C"])
# G.add_edge("A", "B", 2)
# G.add_edge("B", "C", 5)
# G.add_edge("A", "C", 10)
# G.path_from_to("A", "C")  # ['A', 'B', 'C']
