"""
Core graph data structure.

Provides the Graph class: an insertion-ordered vertex set, an edge list whose
positions label incidence-matrix columns, and an adjacency-list relation kept
consistent with the edges. Vertices and edges are only ever appended.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Optional, Tuple

from .config import GraphConfig
from .errors import (
    DuplicateVertexError,
    InvalidWeightError,
    MissingWeightError,
    VertexNotFoundError,
)
from .logging import get_logger

if TYPE_CHECKING:
    from .mst import PrimEntry
    from .shortest import VertexState

logger = get_logger(__name__)


@dataclass(frozen=True)
class Edge:
    """
    An edge between two existing vertices.

    Attributes:
        origin: Tail vertex (the only traversal start for oriented graphs).
        destination: Head vertex.
        weight: Edge cost for weighted graphs, None otherwise.
    """

    origin: Hashable
    destination: Hashable
    weight: Optional[float] = None

    @property
    def is_loop(self) -> bool:
        """True if the edge starts and ends on the same vertex."""
        return self.origin == self.destination


class Graph:
    """
    Graph with labelled vertices and optionally oriented, weighted edges.

    The two configuration flags are fixed at construction. Adding an
    undirected edge (u, v) appends v to u's adjacency list and u to v's; an
    oriented edge only extends u's list, so a self-loop on an undirected graph
    shows up twice in its vertex's list.

    Attributes:
        config: The GraphConfig the graph was built with.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - has_vertex: O(1)
        - neighbors: O(deg(v))

    Example:
        >>> G = Graph(weighted=True)
        >>> G.add_vertices(["A", "B", "C"])
        >>> G.add_edge("A", "B", 2)
        Edge(origin='A', destination='B', weight=2)
        >>> G.neighbors("B")
        ['A']
    """

    __slots__ = ("config", "_vertices", "_index", "_edges", "_adjacency")

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(self, oriented: bool = False, weighted: bool = False) -> None:
        """
        Initialize an empty graph.

        Args:
            oriented: If True, edges are directional.
            weighted: If True, every edge must carry a weight.
        """
        self.config = GraphConfig(oriented=oriented, weighted=weighted)
        self._vertices: List[Hashable] = []
        self._index: Dict[Hashable, int] = {}
        self._edges: List[Edge] = []
        self._adjacency: Dict[Hashable, List[Hashable]] = {}

    @classmethod
    def from_config(cls, config: GraphConfig) -> Graph:
        """Create an empty graph with the flags of ``config``."""
        return cls(oriented=config.oriented, weighted=config.weighted)

    @property
    def oriented(self) -> bool:
        return self.config.oriented

    @property
    def weighted(self) -> bool:
        return self.config.weighted

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def add_vertex(self, label: Hashable) -> None:
        """
        Append a vertex with an empty adjacency list.

        Raises:
            DuplicateVertexError: If the label is already present.
        """
        if label in self._index:
            raise DuplicateVertexError(label)

        self._index[label] = len(self._vertices)
        self._vertices.append(label)
        self._adjacency[label] = []
        logger.debug("Added vertex %s", label)

    def add_vertices(self, labels: Iterable[Hashable]) -> None:
        """Add each label in order; stops at the first duplicate."""
        for label in labels:
            self.add_vertex(label)

    def add_edge(
        self, origin: Hashable, destination: Hashable, weight: Optional[float] = None
    ) -> Edge:
        """
        Append an edge between two existing vertices.

        Both endpoints and the weight are checked before anything is
        modified, so a failed call leaves the graph untouched. On unweighted
        graphs a supplied weight is ignored.

        Args:
            origin: Tail vertex.
            destination: Head vertex.
            weight: Edge cost, required when the graph is weighted.

        Returns:
            The stored Edge. Its position in ``edges`` is permanent.

        Raises:
            VertexNotFoundError: If either endpoint is missing (origin is
                checked first).
            MissingWeightError: If the graph is weighted and weight is None.
            InvalidWeightError: If the graph is weighted and weight is not a
                real number (bools included).
        """
        self.require_vertex(origin)
        self.require_vertex(destination)

        if self.weighted:
            if weight is None:
                raise MissingWeightError(origin, destination)
            if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
                raise InvalidWeightError(origin, destination, weight)
        elif weight is not None:
            logger.debug(
                "Ignoring weight %s on edge (%s, %s) of unweighted graph",
                weight,
                origin,
                destination,
            )
            weight = None

        edge = Edge(origin, destination, weight)

        self._adjacency[origin].append(destination)
        if not self.oriented:
            self._adjacency[destination].append(origin)
        self._edges.append(edge)

        logger.debug("Added edge E%d %s", len(self._edges), edge)
        return edge

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def has_vertex(self, label: Hashable) -> bool:
        """Return True if the label is a vertex of this graph."""
        return label in self._index

    def require_vertex(self, label: Hashable) -> None:
        """
        Precondition check used by every label-taking operation.

        Raises:
            VertexNotFoundError: If the label is not a vertex.
        """
        if label not in self._index:
            raise VertexNotFoundError(label)

    def index_of(self, label: Hashable) -> int:
        """Return the insertion position of a vertex (its matrix row)."""
        self.require_vertex(label)
        return self._index[label]

    @property
    def vertices(self) -> Tuple[Hashable, ...]:
        """Vertices in insertion order."""
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edges in insertion order; edge i is column ``E{i+1}``."""
        return tuple(self._edges)

    def neighbors(self, label: Hashable) -> List[Hashable]:
        """
        Return a copy of a vertex's adjacency list, in edge insertion order.

        Raises:
            VertexNotFoundError: If the label is not a vertex.
        """
        self.require_vertex(label)
        return list(self._adjacency[label])

    def adjacency_list(self) -> Dict[Hashable, List[Hashable]]:
        """Return a copy of the whole adjacency relation, keyed in vertex order."""
        return {label: list(self._adjacency[label]) for label in self._vertices}

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    # ------------------------------------------------------------------ #
    # Thin delegating methods (algorithms live in their own modules)
    # ------------------------------------------------------------------ #
    def compute_adjacency_matrix(self) -> Dict[Hashable, Dict[Hashable, float]]:
        """See tinygraph.matrices.compute_adjacency_matrix."""
        from .matrices import compute_adjacency_matrix

        return compute_adjacency_matrix(self)

    def compute_incidence_matrix(self) -> Dict[Hashable, Dict[str, int]]:
        """See tinygraph.matrices.compute_incidence_matrix."""
        from .matrices import compute_incidence_matrix

        return compute_incidence_matrix(self)

    def compute_dijkstra(self, source: Hashable) -> Dict[Hashable, VertexState]:
        """See tinygraph.shortest.compute_dijkstra."""
        from .shortest import compute_dijkstra

        return compute_dijkstra(self, source)

    def path_from_to(self, origin: Hashable, destination: Hashable) -> List[Hashable]:
        """See tinygraph.shortest.path_from_to."""
        from .shortest import path_from_to

        return path_from_to(self, origin, destination)

    def compute_kruskal(self) -> List[Edge]:
        """See tinygraph.mst.compute_kruskal."""
        from .mst import compute_kruskal

        return compute_kruskal(self)

    def compute_prim_jarnik(self, start: Optional[Hashable] = None) -> List[PrimEntry]:
        """See tinygraph.mst.compute_prim_jarnik."""
        from .mst import compute_prim_jarnik

        return compute_prim_jarnik(self, start)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        return (
            f"Graph(oriented={self.oriented}, weighted={self.weighted}, "
            f"num_vertices={len(self._vertices)}, num_edges={len(self._edges)})"
        )
