"""Tests for Dijkstra's shortest path algorithm."""

import logging
import math

import pytest

from graphconduit.graphs import Graph, dijkstra


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_dijkstra_simple(self):
        G = Graph(directed=True)
        G.add_edge("A", "B", 1.0)
        G.add_edge("B", "C", 2.0)
        G.add_edge("A", "C", 5.0)
        result = dijkstra(G, "A", "C")
        assert result.found
        assert result.path == ["A", "B", "C"]
        assert result.weight == pytest.approx(3.0)
        assert result.cost == 2
        assert not result.negative_weights

    def test_dijkstra_path_graph(self, path_graph):
        result = dijkstra(path_graph, "A", "H")
        assert result.cost == 7
        assert result.weight == pytest.approx(7.0)
        assert result.path == list("ABCDEFGH")

    def test_dijkstra_prefers_lighter_longer_path(self):
        G = Graph()
        G.add_edge("A", "D", 10.0)
        G.add_edge("A", "B", 1.0)
        G.add_edge("B", "C", 1.0)
        G.add_edge("C", "D", 1.0)
        result = dijkstra(G, "A", "D")
        assert result.path == ["A", "B", "C", "D"]
        assert result.weight == pytest.approx(3.0)

    def test_dijkstra_parallel_edges_use_lightest(self):
        G = Graph()
        G.add_edge("A", "B", 5.0)
        G.add_edge("A", "B", 2.0)
        assert dijkstra(G, "A", "B").weight == pytest.approx(2.0)

    def test_dijkstra_start_equals_goal(self):
        G = Graph()
        G.add_edge("A", "B", 3.0)
        result = dijkstra(G, "A", "A")
        assert result.path == ["A"]
        assert result.cost == 0
        assert result.weight == 0.0

    def test_dijkstra_unreachable(self):
        G = Graph(directed=True)
        G.add_edge("A", "B", 1.0)
        G.add_vertex("C")
        result = dijkstra(G, "A", "C")
        assert not result.found
        assert result.path == []
        assert math.isinf(result.weight)

    def test_dijkstra_absent_endpoint(self):
        G = Graph()
        G.add_edge("A", "B")
        assert not dijkstra(G, "A", "Z").found
        assert not dijkstra(G, "Z", "A").found

    def test_dijkstra_negative_weight_flagged(self, caplog):
        G = Graph(directed=True)
        G.add_edge("A", "B", 2.0)
        G.add_edge("B", "C", -1.0)
        G.add_edge("C", "D", 1.0)

        logger = logging.getLogger("graphconduit.graphs.shortest")
        logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.WARNING, logger="graphconduit.graphs.shortest"):
                result = dijkstra(G, "A", "D")
        finally:
            logger.removeHandler(caplog.handler)

        assert result.found
        assert result.negative_weights
        assert any("Negative edge weight" in r.getMessage() for r in caplog.records)

    def test_dijkstra_weights_not_mutated(self):
        G = Graph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("B", "C", 1.0)
        before = G.edges()
        dijkstra(G, "A", "C")
        assert G.edges() == before
