"""Pytest configuration and shared fixtures for Graph Conduit tests.

This module provides:
- A deterministic numpy RNG fixture for randomized property tests
- Small graph builders shared across test modules
"""

import os
from typing import Iterable, Tuple

import numpy as np
import pytest

from graphconduit.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


def _build(edges: Iterable[Tuple], directed: bool = False) -> Graph:
    """Build a graph from (u, v) or (u, v, weight) tuples."""
    G = Graph(directed=directed)
    for edge in edges:
        G.add_edge(*edge)
    return G


@pytest.fixture
def triangle() -> Graph:
    """Undirected triangle A-B(2), B-C(3), C-A(1)."""
    return _build([("A", "B", 2.0), ("B", "C", 3.0), ("C", "A", 1.0)])


@pytest.fixture
def path_graph() -> Graph:
    """Directed path A -> B -> ... -> H with unit weights."""
    labels = "ABCDEFGH"
    return _build(list(zip(labels, labels[1:])), directed=True)
