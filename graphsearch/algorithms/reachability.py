"""Whole-graph traversals from a single root vertex.

Both functions walk a depth-first spanning tree with an explicit stack of
``(vertex, neighbor iterator)`` frames. That yields the same pre-order as the
recursive formulation without being bounded by the interpreter's recursion
limit.
"""

from __future__ import annotations

from typing import AbstractSet, Iterator, List, Set, Tuple

from graphsearch.logging import get_logger
from graphsearch.types import NeighborProvider, V

logger = get_logger(__name__)


def _preorder(graph: NeighborProvider[V], start: V) -> Iterator[Tuple[V, AbstractSet[V]]]:
    """Yield ``(vertex, neighbors)`` once per reachable vertex, in pre-order."""
    visited: Set[V] = {start}
    start_neighbors = graph.neighbors(start)
    yield start, start_neighbors
    stack: List[Iterator[V]] = [iter(start_neighbors)]

    while stack:
        for neighbor in stack[-1]:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            neighbors = graph.neighbors(neighbor)
            yield neighbor, neighbors
            stack.append(iter(neighbors))
            break
        else:
            # all neighbors handled, backtrack
            stack.pop()


def get_all_vertices(graph: NeighborProvider[V], start: V) -> Set[V]:
    """Return every vertex reachable from ``start``, ``start`` included.

    Only outgoing edges are followed on directed graphs. On a connected graph
    the result is the full vertex set.
    """
    vertices = {vertex for vertex, _ in _preorder(graph, start)}
    logger.debug("Found %d vertices reachable from %s", len(vertices), start)
    return vertices


def format_adjacency_list(graph: NeighborProvider[V], start: V) -> str:
    """Format the adjacency list of the subgraph reachable from ``start``.

    Each reachable vertex gets one line ``vertex: [n1,n2,...]``, emitted in
    pre-order of a spanning tree rooted at ``start``. Neighbors are listed in
    the order ``graph.neighbors`` returns them.

    Example:
        >>> from graphsearch.graph.adjacency import AdjacencyGraph
        >>> print(format_adjacency_list(AdjacencyGraph({"A": ["B", "C"]}), "A"), end="")
        A: [B,C]
        B: []
        C: []
    """
    lines = [
        f"{vertex}: [{','.join(str(n) for n in neighbors)}]\n"
        for vertex, neighbors in _preorder(graph, start)
    ]
    return "".join(lines)
