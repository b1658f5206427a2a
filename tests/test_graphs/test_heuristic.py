"""Tests for Greedy Best-First and A* search."""

import math

import pytest

from graphconduit.graphs import (
    Graph,
    astar,
    dijkstra,
    euclidean_heuristic,
    greedy_best_first,
    manhattan_heuristic,
    zero_heuristic,
)


@pytest.fixture
def grid():
    """Weighted graph with coordinates where the straight line is not the cheapest route."""
    coords = {
        "S": (0.0, 0.0),
        "A": (1.0, 0.0),
        "B": (2.0, 0.0),
        "C": (1.0, 1.0),
        "G": (3.0, 0.0),
    }
    G = Graph()
    G.add_edge("S", "A", 1.0)
    G.add_edge("A", "B", 5.0)
    G.add_edge("B", "G", 1.0)
    G.add_edge("S", "C", 1.5)
    G.add_edge("C", "G", 2.5)
    return G, coords


class TestHeuristics:
    """Tests for the heuristic factories."""

    def test_zero(self):
        assert zero_heuristic("A", "B") == 0.0

    def test_euclidean(self):
        h = euclidean_heuristic({"A": (0.0, 0.0), "B": (3.0, 4.0)})
        assert h("A", "B") == pytest.approx(5.0)

    def test_manhattan(self):
        h = manhattan_heuristic({"A": (0.0, 0.0), "B": (3.0, -4.0)})
        assert h("A", "B") == pytest.approx(7.0)

    def test_unknown_coordinates_estimate_zero(self):
        h = euclidean_heuristic({"A": (0.0, 0.0)})
        assert h("A", "Z") == 0.0
        assert manhattan_heuristic({})("A", "B") == 0.0


class TestAStar:
    """Tests for A* search."""

    def test_astar_optimal_with_admissible_heuristic(self, grid):
        G, coords = grid
        result = astar(G, "S", "G", euclidean_heuristic(coords))
        assert result.found
        assert result.path == ["S", "C", "G"]
        assert result.weight == pytest.approx(4.0)

    def test_astar_matches_dijkstra_with_zero_heuristic(self, grid):
        G, _ = grid
        a = astar(G, "S", "G")
        d = dijkstra(G, "S", "G")
        assert a.weight == pytest.approx(d.weight)

    def test_astar_start_equals_goal(self, grid):
        G, coords = grid
        result = astar(G, "S", "S", euclidean_heuristic(coords))
        assert result.path == ["S"]
        assert result.cost == 0
        assert result.weight == 0.0

    def test_astar_unreachable(self):
        G = Graph(directed=True)
        G.add_edge("A", "B")
        G.add_vertex("C")
        result = astar(G, "A", "C")
        assert not result.found
        assert math.isinf(result.weight)

    def test_astar_absent_endpoint(self):
        G = Graph()
        G.add_edge("A", "B")
        assert not astar(G, "A", "Z").found

    def test_astar_negative_heuristic_raises(self, grid):
        G, _ = grid
        with pytest.raises(ValueError, match="non-negative"):
            astar(G, "S", "G", lambda v, goal: -1.0)

    def test_astar_nan_heuristic_raises(self, grid):
        G, _ = grid
        with pytest.raises(ValueError):
            astar(G, "S", "G", lambda v, goal: float("nan"))

    def test_astar_negative_edge_flagged(self):
        G = Graph(directed=True)
        G.add_edge("A", "B", -1.0)
        G.add_edge("B", "C", 1.0)
        result = astar(G, "A", "C")
        assert result.found
        assert result.negative_weights


class TestGreedyBestFirst:
    """Tests for Greedy Best-First search."""

    def test_follows_heuristic_not_cost(self, grid):
        G, coords = grid
        result = greedy_best_first(G, "S", "G", euclidean_heuristic(coords))
        assert result.found
        # A and B lie on the straight line to G, so the greedy search goes that way
        assert result.path == ["S", "A", "B", "G"]
        assert result.weight == pytest.approx(7.0)
        assert result.cost == 3

    def test_start_equals_goal(self, grid):
        G, coords = grid
        result = greedy_best_first(G, "S", "S", euclidean_heuristic(coords))
        assert result.path == ["S"]
        assert result.weight == 0.0

    def test_unreachable(self):
        G = Graph(directed=True)
        G.add_edge("A", "B")
        G.add_vertex("C")
        assert not greedy_best_first(G, "A", "C", zero_heuristic).found

    def test_absent_endpoint(self):
        assert not greedy_best_first(Graph(), "A", "B", zero_heuristic).found

    def test_malformed_heuristic_raises(self, grid):
        G, _ = grid
        with pytest.raises(ValueError):
            greedy_best_first(G, "S", "G", lambda v, goal: -0.5)

    def test_parallel_arcs_weigh_as_cheapest(self):
        G = Graph(directed=True)
        G.add_edge("A", "B", 5.0)
        G.add_edge("A", "B", 1.0)
        result = greedy_best_first(G, "A", "B", zero_heuristic)
        assert result.path == ["A", "B"]
        assert result.weight == 1.0
        assert result.weight == dijkstra(G, "A", "B").weight
