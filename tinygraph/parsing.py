"""
Parse graphs from the compact text notation used by interactive front ends.

Vertices are written as a comma-separated list (``"A, B, C"``) and edges as
bracketed groups (``"[A, B, 1], [A, C, 4]"``). Labels are upper-cased and
all whitespace is dropped.
"""

from __future__ import annotations

import re
from typing import List

from .core import Graph
from .logging import get_logger

logger = get_logger(__name__)

_EDGE_GROUP = re.compile(r"\[(.*?)\]")
_WHITESPACE = re.compile(r"\s")


def _normalize(text: str) -> str:
    return _WHITESPACE.sub("", text.upper())


def parse_vertices(text: str) -> List[str]:
    """
    Parse a comma-separated vertex list.

    Example:
        >>> parse_vertices("a, b ,C")
        ['A', 'B', 'C']
    """
    normalized = _normalize(text)
    if not normalized:
        return []
    return [label for label in normalized.split(",") if label]


def parse_edges(text: str) -> List[List[str]]:
    """
    Parse bracketed edge groups into lists of fields.

    Text outside brackets is ignored. Weights stay strings here; see
    build_graph for conversion.

    Example:
        >>> parse_edges("[a, b, 1], [A,C, 2.5]")
        [['A', 'B', '1'], ['A', 'C', '2.5']]
    """
    normalized = _normalize(text)
    if not normalized:
        return []
    return [group.split(",") for group in _EDGE_GROUP.findall(normalized)]


def build_graph(
    vertices_text: str,
    edges_text: str,
    *,
    oriented: bool = False,
    weighted: bool = False,
) -> Graph:
    """
    Build a Graph from vertex and edge text.

    Each edge group is ``[origin, destination]`` or
    ``[origin, destination, weight]``. The weight is required for weighted
    graphs and ignored otherwise.

    Raises:
        ValueError: If an edge group has the wrong number of fields or a
            weight is not a number.
        GraphError: Propagated from Graph (duplicate or unknown vertices,
            missing weights).

    Example:
        >>> G = build_graph("A, B, C", "[A, B, 2], [B, C, 5]", weighted=True)
        >>> G.path_from_to("A", "C")
        ['A', 'B', 'C']
    """
    graph = Graph(oriented=oriented, weighted=weighted)
    graph.add_vertices(parse_vertices(vertices_text))

    for fields in parse_edges(edges_text):
        if len(fields) not in (2, 3):
            raise ValueError(
                f"Edge [{','.join(fields)}] must have 2 or 3 fields, got {len(fields)}"
            )

        origin, destination = fields[0], fields[1]
        weight = None
        if weighted and len(fields) == 3:
            try:
                weight = float(fields[2])
            except ValueError:
                raise ValueError(
                    f"Weight of edge [{','.join(fields)}] is not a number: {fields[2]!r}"
                ) from None

        graph.add_edge(origin, destination, weight)

    logger.info("Built %r from text", graph)
    return graph
