"""
Error types raised by graph operations.

Every error derives from GraphError and from the builtin exception that
plain Python code would raise for the same problem, so callers catching
ValueError or KeyError keep working.
"""

from typing import Any, Hashable, Optional


class GraphError(Exception):
    """Base class for all tinygraph errors."""


class VertexNotFoundError(GraphError, KeyError):
    """A vertex label referenced by an operation is not in the graph."""

    def __init__(self, label: Hashable):
        self.label = label
        super().__init__(f"{label} does not exist")

    def __str__(self) -> str:
        # KeyError would repr-quote the message
        return str(self.args[0])


class DuplicateVertexError(GraphError, ValueError):
    """A vertex label was added twice."""

    def __init__(self, label: Hashable):
        self.label = label
        super().__init__(f"{label} already exists")


class MissingWeightError(GraphError, ValueError):
    """An edge added to a weighted graph carried no weight."""

    def __init__(self, origin: Hashable, destination: Hashable):
        self.origin = origin
        self.destination = destination
        super().__init__(
            f"Edge ({origin}, {destination}) needs a weight in a weighted graph"
        )


class InvalidWeightError(GraphError, TypeError):
    """An edge added to a weighted graph carried a non-numeric weight."""

    def __init__(self, origin: Hashable, destination: Hashable, weight: Any):
        self.origin = origin
        self.destination = destination
        self.weight = weight
        super().__init__(
            f"Weight of edge ({origin}, {destination}) must be a real number, got {weight!r}"
        )


class NegativeWeightError(GraphError, ValueError):
    """Dijkstra was asked to run over an edge with a negative weight."""

    def __init__(self, origin: Hashable, destination: Hashable, weight: float):
        self.origin = origin
        self.destination = destination
        self.weight = weight
        super().__init__(
            f"Dijkstra requires non-negative weights. "
            f"Found negative weight {weight} on edge ({origin}, {destination})"
        )


class NoPathError(GraphError, ValueError):
    """The destination cannot be reached from the origin."""

    def __init__(self, origin: Hashable, destination: Hashable):
        self.origin = origin
        self.destination = destination
        super().__init__(f"No path from {origin} to {destination}")


class InvalidConfigurationError(GraphError, ValueError):
    """
    The graph's flags do not allow the requested algorithm.

    Attributes:
        precondition: Name of the failed precondition, "undirected" or
            "weighted".
    """

    def __init__(self, precondition: str, message: Optional[str] = None):
        self.precondition = precondition
        if message is None:
            message = f"Graph must be {precondition} for this operation"
        super().__init__(message)
