"""
Adjacency and incidence matrices.

Matrices are built as numpy arrays with rows (and adjacency columns) in
vertex insertion order and incidence columns in edge insertion order. The
``compute_*`` functions wrap them as label-keyed nested dicts holding plain
Python numbers. Nothing here mutates the graph.
"""

from __future__ import annotations

from typing import Dict, Hashable, List, Sequence

import numpy as np

from .core import Graph


def edge_column_ids(graph: Graph) -> List[str]:
    """Return incidence column labels ``E1..En`` in edge order."""
    return [f"E{i + 1}" for i in range(len(graph.edges))]


def adjacency_array(graph: Graph) -> np.ndarray:
    """
    Compute the (V, V) adjacency matrix.

    Unweighted graphs count edge multiplicity: each edge adds 1 to
    ``[origin, destination]`` and, unless the graph is oriented, 1 to
    ``[destination, origin]``, so an undirected self-loop adds 2 to its
    diagonal cell. Weighted graphs store the edge weight instead, mirrored
    unless oriented; a later parallel edge overwrites an earlier one.

    Args:
        graph: Graph to read.

    Returns:
        int64 array for unweighted graphs, float64 array for weighted ones.

    Example:
        >>> G = Graph()
        >>> G.add_vertices(["A", "B"])
        >>> _ = G.add_edge("A", "B")
        >>> _ = G.add_edge("A", "A")
        >>> adjacency_array(G).tolist()
        [[2, 1], [1, 0]]
    """
    n = len(graph)
    dtype = np.float64 if graph.weighted else np.int64
    A = np.zeros((n, n), dtype=dtype)

    for edge in graph.edges:
        i = graph.index_of(edge.origin)
        j = graph.index_of(edge.destination)
        if graph.weighted:
            A[i, j] = edge.weight
            if not graph.oriented:
                A[j, i] = edge.weight
        else:
            A[i, j] += 1
            if not graph.oriented:
                A[j, i] += 1

    return A


def incidence_array(graph: Graph) -> np.ndarray:
    """
    Compute the (V, E) incidence matrix.

    Column j describes edge j: the origin row is +1, the destination row is
    +1 for undirected graphs and -1 for oriented ones. The destination is
    written last, so a self-loop keeps a single non-zero entry (-1 when
    oriented). Weights never appear.

    Args:
        graph: Graph to read.

    Returns:
        int64 array of shape (len(vertices), len(edges)).
    """
    M = np.zeros((len(graph), len(graph.edges)), dtype=np.int64)
    head_value = -1 if graph.oriented else 1

    for j, edge in enumerate(graph.edges):
        M[graph.index_of(edge.origin), j] = 1
        M[graph.index_of(edge.destination), j] = head_value

    return M


def _to_label_dict(
    array: np.ndarray, rows: Sequence[Hashable], columns: Sequence[Hashable]
) -> Dict[Hashable, Dict[Hashable, float]]:
    values = array.tolist()
    return {row: dict(zip(columns, values[i])) for i, row in enumerate(rows)}


def compute_adjacency_matrix(graph: Graph) -> Dict[Hashable, Dict[Hashable, float]]:
    """
    Label-keyed adjacency matrix: ``matrix[origin][destination]``.

    See adjacency_array for the cell semantics.
    """
    vertices = graph.vertices
    return _to_label_dict(adjacency_array(graph), vertices, vertices)


def compute_incidence_matrix(graph: Graph) -> Dict[Hashable, Dict[str, int]]:
    """
    Label-keyed incidence matrix: ``matrix[vertex]["E{i}"]``.

    Every vertex row holds every edge column, zeros included.
    """
    return _to_label_dict(incidence_array(graph), graph.vertices, edge_column_ids(graph))
