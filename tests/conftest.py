"""Pytest configuration and shared graph fixtures for tinygraph tests.

This module provides:
- Small named graphs reused across test modules
- A fixture restoring default logging after tests that reconfigure it
"""

import logging

import pytest

from tinygraph import Graph
from tinygraph.logging import configure_logging


@pytest.fixture
def square_graph() -> Graph:
    """Undirected, unweighted 4-cycle A-B-C-D-A."""
    G = Graph()
    G.add_vertices(["A", "B", "C", "D"])
    G.add_edge("A", "B")
    G.add_edge("B", "C")
    G.add_edge("C", "D")
    G.add_edge("A", "D")
    return G


@pytest.fixture
def clrs_graph() -> Graph:
    """The 9-vertex weighted undirected graph from CLRS chapter 23 (MST weight 37)."""
    G = Graph(weighted=True)
    G.add_vertices(["A", "B", "C", "D", "E", "F", "G", "H", "I"])
    for origin, destination, weight in [
        ("A", "B", 4),
        ("A", "H", 8),
        ("B", "C", 8),
        ("C", "F", 4),
        ("B", "H", 11),
        ("C", "D", 7),
        ("D", "F", 14),
        ("D", "E", 9),
        ("E", "F", 10),
        ("F", "G", 2),
        ("G", "H", 1),
        ("H", "I", 7),
        ("C", "I", 2),
        ("G", "I", 6),
    ]:
        G.add_edge(origin, destination, weight)
    return G


@pytest.fixture
def distinct_weight_graph() -> Graph:
    """Connected weighted undirected graph whose edge weights are all different."""
    G = Graph(weighted=True)
    G.add_vertices(["A", "B", "C", "D", "E", "F"])
    for origin, destination, weight in [
        ("A", "B", 7),
        ("A", "C", 9),
        ("A", "F", 14),
        ("B", "C", 10),
        ("B", "D", 15),
        ("C", "D", 11),
        ("C", "F", 2),
        ("D", "E", 6),
        ("E", "F", 8),
    ]:
        G.add_edge(origin, destination, weight)
    return G


@pytest.fixture
def reset_logging():
    """Restore default tinygraph logging after the test."""
    yield
    configure_logging(level=logging.WARNING)
