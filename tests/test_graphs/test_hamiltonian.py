"""Tests for Hamiltonian cycle backtracking."""

import pytest

from graphconduit.graphs import Graph, hamiltonian_cycle


def _assert_valid_cycle(graph, cycle):
    assert len(cycle) == len(graph) + 1
    assert cycle[0] == cycle[-1]
    assert set(cycle[:-1]) == set(graph.vertices())
    for u, v in zip(cycle, cycle[1:]):
        assert graph.has_edge(u, v)


class TestHamiltonianCycle:
    """Tests for hamiltonian_cycle."""

    @pytest.mark.parametrize("n", [3, 5, 8])
    def test_simple_cycle_has_length_n_plus_one(self, n):
        G = Graph()
        for i in range(n):
            G.add_edge(i, (i + 1) % n)
        cycle = hamiltonian_cycle(G)
        _assert_valid_cycle(G, cycle)
        assert cycle[0] == 0

    def test_square(self):
        G = Graph()
        for u, v in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")]:
            G.add_edge(u, v)
        assert hamiltonian_cycle(G) == ["A", "B", "C", "D", "A"]

    def test_complete_graph(self):
        G = Graph()
        labels = "ABCDE"
        for i, u in enumerate(labels):
            for v in labels[i + 1 :]:
                G.add_edge(u, v)
        _assert_valid_cycle(G, hamiltonian_cycle(G))

    def test_path_graph_has_no_cycle(self):
        G = Graph()
        G.add_edge("A", "B")
        G.add_edge("B", "C")
        G.add_edge("C", "D")
        assert hamiltonian_cycle(G) == []

    def test_isolated_vertex_rejects(self):
        G = Graph()
        G.add_edge("A", "B")
        G.add_edge("B", "C")
        G.add_edge("C", "A")
        G.add_vertex("D")
        assert hamiltonian_cycle(G) == []

    def test_directed_respects_arc_direction(self):
        G = Graph(directed=True)
        G.add_edge("A", "B")
        G.add_edge("B", "C")
        G.add_edge("C", "A")
        assert hamiltonian_cycle(G) == ["A", "B", "C", "A"]

        H = Graph(directed=True)
        H.add_edge("A", "B")
        H.add_edge("B", "C")
        H.add_edge("A", "C")
        H.add_edge("C", "B")
        assert hamiltonian_cycle(H) == []

    def test_backtracks_out_of_dead_end(self):
        G = Graph()
        for u, v in [("A", "B"), ("B", "D"), ("B", "C"), ("C", "D"), ("D", "A")]:
            G.add_edge(u, v)
        # A, B, D, C is a dead end (no C-A edge); the search must undo D
        assert hamiltonian_cycle(G, order_by_degree=False) == ["A", "B", "C", "D", "A"]

    def test_petersen_graph_has_no_cycle(self):
        outer = [(i, (i + 1) % 5) for i in range(5)]
        spokes = [(i, i + 5) for i in range(5)]
        inner = [(5 + i, 5 + (i + 2) % 5) for i in range(5)]
        G = Graph()
        for u, v in outer + spokes + inner:
            G.add_edge(u, v)
        assert hamiltonian_cycle(G) == []

    def test_ordering_does_not_change_existence(self):
        G = Graph()
        for u, v in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A"), ("A", "C")]:
            G.add_edge(u, v)
        _assert_valid_cycle(G, hamiltonian_cycle(G, order_by_degree=True))
        _assert_valid_cycle(G, hamiltonian_cycle(G, order_by_degree=False))

    def test_empty_graph(self):
        assert hamiltonian_cycle(Graph()) == []
