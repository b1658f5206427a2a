"""
Graph isomorphism for small graphs.

Cheap invariants are checked first (directedness, vertex count, edge count,
degree-signature multiset). Survivors go through a backtracking search that
maps vertices group by group, where a group is the set of vertices sharing a
degree signature, and checks after every group that arc multiplicities
between mapped vertices agree.

The search is exponential in the worst case; pass ``max_vertices`` to
refuse inputs that are too large.
"""

from __future__ import annotations

import itertools
from collections import Counter, defaultdict
from typing import Dict, Hashable, List, Optional, Tuple

import numpy as np

from ..logging import get_logger
from .core import Graph, vertex_key
from .results import IsomorphismResult
from .utils import adjacency_matrix

logger = get_logger(__name__)

Signature = Tuple[int, ...]


def degree_signatures(graph: Graph) -> Dict[Hashable, Signature]:
    """
    Per-vertex degree signature.

    ``(degree,)`` for undirected graphs and ``(in_degree, out_degree)`` for
    directed graphs, counted from stored arcs.
    """
    out_deg = {v: graph.out_degree(v) for v in graph.vertices()}
    if not graph.directed:
        return {v: (d,) for v, d in out_deg.items()}

    in_deg: Counter = Counter()
    for u in graph.vertices():
        for v in graph.neighbors(u):
            in_deg[v] += 1
    return {v: (in_deg[v], out_deg[v]) for v in graph.vertices()}


def _signature_groups(signatures: Dict[Hashable, Signature]) -> Dict[Signature, List[Hashable]]:
    groups: Dict[Signature, List[Hashable]] = defaultdict(list)
    for v, sig in signatures.items():
        groups[sig].append(v)
    for members in groups.values():
        members.sort(key=vertex_key)
    return dict(groups)


def are_isomorphic(
    g1: Graph, g2: Graph, max_vertices: Optional[int] = None
) -> IsomorphismResult:
    """
    Decide whether two graphs are isomorphic and return a witness mapping.

    Args:
        g1: First graph.
        g2: Second graph.
        max_vertices: Refuse to run the exponential search on graphs with
            more vertices than this (None means no limit).

    Returns:
        IsomorphismResult. On success ``mapping`` sends every vertex of g1
        to a vertex of g2 such that u -> v has the same arc multiplicity in
        g1 as mapping[u] -> mapping[v] in g2. On failure the mapping is empty.

    Raises:
        ValueError: If the cheap filters pass but the graphs exceed
            ``max_vertices``.

    Example:
        >>> G1, G2 = Graph(), Graph()
        >>> G1.add_edge('A', 'B'); G1.add_edge('B', 'C')
        >>> G2.add_edge('x', 'y'); G2.add_edge('x', 'z')
        >>> are_isomorphic(G1, G2).mapping
        {'B': 'x', 'A': 'y', 'C': 'z'}
    """
    if g1.directed != g2.directed:
        return IsomorphismResult(False)
    if len(g1) != len(g2):
        return IsomorphismResult(False)
    if g1.edge_count() != g2.edge_count():
        return IsomorphismResult(False)

    sig1 = degree_signatures(g1)
    sig2 = degree_signatures(g2)
    if Counter(sig1.values()) != Counter(sig2.values()):
        return IsomorphismResult(False)

    groups1 = _signature_groups(sig1)
    groups2 = _signature_groups(sig2)
    sizes1 = sorted(len(members) for members in groups1.values())
    sizes2 = sorted(len(members) for members in groups2.values())
    if sizes1 != sizes2:
        return IsomorphismResult(False)

    if max_vertices is not None and len(g1) > max_vertices:
        raise ValueError(
            f"Isomorphism search refused: {len(g1)} vertices exceeds the limit of "
            f"{max_vertices}."
        )

    # Smallest groups first keeps the number of early permutations low
    order = sorted(groups1, key=lambda sig: (len(groups1[sig]), sig))

    matrix1, index1 = _indexed_adjacency(g1)
    matrix2, index2 = _indexed_adjacency(g2)

    rows1: List[int] = []
    rows2: List[int] = []
    mapping: Dict[Hashable, Hashable] = {}

    def consistent() -> bool:
        sub1 = matrix1[np.ix_(rows1, rows1)]
        sub2 = matrix2[np.ix_(rows2, rows2)]
        return bool(np.array_equal(sub1, sub2))

    def assign(group: int) -> bool:
        if group == len(order):
            return True

        sig = order[group]
        sources = groups1[sig]
        for targets in itertools.permutations(groups2[sig]):
            for u, v in zip(sources, targets):
                mapping[u] = v
                rows1.append(index1[u])
                rows2.append(index2[v])

            if consistent() and assign(group + 1):
                return True

            for u in sources:
                del mapping[u]
                rows1.pop()
                rows2.pop()
        return False

    if assign(0):
        logger.debug(f"Isomorphism found across {len(order)} signature groups")
        return IsomorphismResult(True, dict(mapping))

    logger.debug("Isomorphism search exhausted without a mapping")
    return IsomorphismResult(False)


def _indexed_adjacency(graph: Graph) -> Tuple[np.ndarray, Dict[Hashable, int]]:
    matrix, order = adjacency_matrix(graph)
    return matrix, {v: i for i, v in enumerate(order)}


__all__ = ["are_isomorphic", "degree_signatures"]
