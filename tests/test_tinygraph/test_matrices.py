"""Tests for adjacency and incidence matrices."""

import numpy as np
import pytest

from tinygraph import (
    Graph,
    adjacency_array,
    compute_adjacency_matrix,
    compute_incidence_matrix,
    edge_column_ids,
    incidence_array,
)


def _loop_graph(**flags) -> Graph:
    G = Graph(**flags)
    G.add_vertices(["A", "B"])
    if flags.get("weighted"):
        G.add_edge("A", "B", 3)
        G.add_edge("A", "A", 2)
    else:
        G.add_edge("A", "B")
        G.add_edge("A", "A")
    return G


class TestAdjacencyMatrix:
    """Tests for the adjacency matrix."""

    def test_keys_follow_vertex_order(self):
        """Test rows and columns are keyed in insertion order."""
        matrix = compute_adjacency_matrix(_loop_graph())
        assert list(matrix) == ["A", "B"]
        assert list(matrix["A"]) == ["A", "B"]
        assert list(matrix["B"]) == ["A", "B"]

    def test_undirected_counts(self):
        """Test the undirected fill, self-loop counted twice."""
        matrix = compute_adjacency_matrix(_loop_graph())

        assert matrix["A"]["A"] == 2
        assert matrix["A"]["B"] == 1
        assert matrix["B"]["B"] == 0
        assert matrix["B"]["A"] == 1

    def test_oriented_counts(self):
        """Test the oriented fill."""
        matrix = compute_adjacency_matrix(_loop_graph(oriented=True))

        assert matrix["A"]["A"] == 1
        assert matrix["A"]["B"] == 1
        assert matrix["B"]["B"] == 0
        assert matrix["B"]["A"] == 0

    def test_weighted(self):
        """Test the weighted fill."""
        matrix = compute_adjacency_matrix(_loop_graph(weighted=True))

        assert matrix["A"]["B"] == 3
        assert matrix["B"]["A"] == 3
        assert matrix["A"]["A"] == 2
        assert matrix["B"]["B"] == 0

    def test_weighted_oriented_not_mirrored(self):
        """Test oriented weighted edges only fill one cell."""
        matrix = compute_adjacency_matrix(_loop_graph(oriented=True, weighted=True))
        assert matrix["A"]["B"] == 3
        assert matrix["B"]["A"] == 0

    def test_parallel_unweighted_accumulate(self):
        """Test parallel unweighted edges add up."""
        G = Graph()
        G.add_vertices(["A", "B"])
        G.add_edge("A", "B")
        G.add_edge("B", "A")
        G.add_edge("A", "B")

        matrix = compute_adjacency_matrix(G)
        assert matrix["A"]["B"] == 3
        assert matrix["B"]["A"] == 3

    def test_parallel_weighted_last_write_wins(self):
        """Test a later parallel weighted edge overwrites the earlier one."""
        G = Graph(weighted=True)
        G.add_vertices(["A", "B"])
        G.add_edge("A", "B", 4)
        G.add_edge("B", "A", 9)

        matrix = compute_adjacency_matrix(G)
        assert matrix["A"]["B"] == 9
        assert matrix["B"]["A"] == 9

    def test_symmetric_when_undirected(self, clrs_graph, square_graph):
        """Test undirected adjacency matrices are symmetric."""
        for G in (clrs_graph, square_graph):
            A = adjacency_array(G)
            assert np.array_equal(A, A.T)

            matrix = compute_adjacency_matrix(G)
            for u in G.vertices:
                for v in G.vertices:
                    assert matrix[u][v] == matrix[v][u]

    def test_plain_python_values(self):
        """Test dict values are Python numbers, not numpy scalars."""
        matrix = compute_adjacency_matrix(_loop_graph())
        assert type(matrix["A"]["B"]) is int

        weighted = compute_adjacency_matrix(_loop_graph(weighted=True))
        assert type(weighted["A"]["B"]) is float

    def test_array_dtypes(self):
        """Test dtype follows the weighted flag."""
        assert adjacency_array(_loop_graph()).dtype == np.int64
        assert adjacency_array(_loop_graph(weighted=True)).dtype == np.float64

    def test_empty_graph(self):
        """Test matrices of an empty graph."""
        G = Graph()
        assert compute_adjacency_matrix(G) == {}
        assert adjacency_array(G).shape == (0, 0)

    def test_does_not_mutate(self, square_graph):
        """Test building matrices leaves the graph alone."""
        edges = square_graph.edges
        adjacency = square_graph.adjacency_list()

        compute_adjacency_matrix(square_graph)
        compute_incidence_matrix(square_graph)

        assert square_graph.edges == edges
        assert square_graph.adjacency_list() == adjacency


class TestIncidenceMatrix:
    """Tests for the incidence matrix."""

    def test_empty_columns(self):
        """Test every vertex row has every edge column."""
        G = Graph()
        G.add_vertices(["A", "B", "C"])
        G.add_edge("A", "B")
        G.add_edge("A", "A")

        matrix = compute_incidence_matrix(G)

        assert edge_column_ids(G) == ["E1", "E2"]
        assert matrix["C"] == {"E1": 0, "E2": 0}
        assert list(matrix["A"]) == ["E1", "E2"]

    def test_undirected(self):
        """Test the undirected incidence fill."""
        matrix = compute_incidence_matrix(_loop_graph())

        assert matrix["A"]["E1"] == 1
        assert matrix["A"]["E2"] == 1
        assert matrix["B"]["E1"] == 1
        assert matrix["B"]["E2"] == 0

    def test_oriented(self):
        """Test the oriented incidence fill."""
        matrix = compute_incidence_matrix(_loop_graph(oriented=True))

        assert matrix["A"]["E1"] == 1
        assert matrix["A"]["E2"] == -1
        assert matrix["B"]["E1"] == -1
        assert matrix["B"]["E2"] == 0

    def test_weights_ignored(self):
        """Test incidence encodes topology only."""
        assert compute_incidence_matrix(_loop_graph(weighted=True)) == compute_incidence_matrix(
            _loop_graph()
        )

    def test_column_sums_oriented(self):
        """Test oriented columns sum to 0."""
        G = Graph(oriented=True)
        G.add_vertices(["A", "B", "C", "D"])
        for origin, destination in [("A", "B"), ("B", "D"), ("D", "C"), ("A", "C"), ("C", "A")]:
            G.add_edge(origin, destination)

        assert incidence_array(G).sum(axis=0).tolist() == [0, 0, 0, 0, 0]

    def test_column_sums_undirected(self, clrs_graph):
        """Test undirected columns sum to 2."""
        sums = incidence_array(clrs_graph).sum(axis=0)
        assert np.all(sums == 2)

    def test_no_edges(self):
        """Test a graph without edges has empty rows."""
        G = Graph()
        G.add_vertices(["A", "B"])
        assert compute_incidence_matrix(G) == {"A": {}, "B": {}}
        assert incidence_array(G).shape == (2, 0)

    @pytest.mark.parametrize("oriented", [False, True])
    def test_graph_method_delegates(self, oriented):
        """Test the Graph methods match the module functions."""
        G = _loop_graph(oriented=oriented)
        assert G.compute_adjacency_matrix() == compute_adjacency_matrix(G)
        assert G.compute_incidence_matrix() == compute_incidence_matrix(G)
