"""Dijkstra shortest path over a lazily discovered graph.

Notes:
    By default a vertex's tentative weight and parent are fixed the first time
    it is discovered: a neighbor that is already in the search tree is skipped
    without comparing weights. This matches the long-standing behavior of the
    engine and can miss a cheaper route that is found while the vertex is
    still queued. Pass ``relax_queued=True`` for textbook relaxation, which
    updates queued vertices and returns true shortest paths for non-negative
    weights.
"""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Generic, List, Optional, Tuple

from graphsearch.logging import get_logger
from graphsearch.path import Path
from graphsearch.types import NeighborProvider, V, Weight, WeightFn

logger = get_logger(__name__)


@dataclass
class _TreeNode(Generic[V]):
    """Entry of the shortest-path spanning tree built during one search."""

    vertex: V
    weight_sum_to: float = float("inf")
    parent: Optional[V] = None
    settled: bool = False


def _edge_weight(weight_fn: WeightFn, u: V, v: V) -> Weight:
    weight = weight_fn(u, v)
    if weight < 0:
        raise ValueError(
            f"Negative edge weight {weight} from {u} to {v}; "
            "Dijkstra requires non-negative weights."
        )
    return weight


def dijkstra_shortest_path(
    graph: NeighborProvider[V],
    start: Optional[V],
    target: Optional[V],
    weight_fn: WeightFn,
    relax_queued: bool = False,
) -> Optional[Path[V]]:
    """Find the cheapest path from ``start`` to ``target``.

    Vertices are popped from a min-heap ordered by cumulative weight. A popped
    vertex is settled and recorded in ``visited``. When ``target`` is popped
    the path is rebuilt by following parent pointers through the tree.
    Otherwise its neighbors are added to the tree and the heap.

    Args:
        graph: Neighbor provider to search.
        start: First vertex of the path.
        target: Vertex to reach.
        weight_fn: Weight of the edge between two adjacent vertices. Must be
            non-negative.
        relax_queued: If True, lower the tentative weight of a queued vertex
            when a cheaper route to it is found. If False (default) the first
            route that discovers a vertex is kept.

    Returns:
        The path with ``total_weight`` set to the target's cumulative weight
        and ``visited`` holding the settled vertices, or None if either
        endpoint is None or ``target`` is unreachable.

    Raises:
        ValueError: If ``weight_fn`` returns a negative weight.
    """
    if start is None or target is None:
        return None

    path: Path[V] = Path()
    path.visited.add(start)

    if start == target:
        path.vertices.append(start)
        return path

    tree: Dict[V, _TreeNode[V]] = {start: _TreeNode(start, weight_sum_to=0.0)}
    # The sequence number breaks weight ties so vertices are never compared.
    sequence = count()
    min_pq: List[Tuple[float, int, V]] = [(0.0, next(sequence), start)]

    while min_pq:
        weight_sum, _, vertex = heappop(min_pq)
        node = tree[vertex]
        if node.settled or weight_sum > node.weight_sum_to:
            # stale entry left behind by a relaxation
            continue
        node.settled = True
        path.visited.add(vertex)

        if vertex == target:
            walk: List[V] = []
            step: Optional[_TreeNode[V]] = node
            while step is not None:
                walk.append(step.vertex)
                step = tree[step.parent] if step.parent is not None else None
            walk.reverse()
            path.vertices = walk
            path.total_weight = node.weight_sum_to
            logger.debug(
                "Dijkstra %s -> %s: weight %.2f, %d vertices, %d visited",
                start,
                target,
                path.total_weight,
                len(path.vertices),
                len(path.visited),
            )
            return path

        for neighbor in graph.neighbors(vertex):
            existing = tree.get(neighbor)
            if existing is not None and (not relax_queued or existing.settled):
                continue

            candidate = node.weight_sum_to + _edge_weight(weight_fn, vertex, neighbor)
            if existing is None:
                tree[neighbor] = _TreeNode(neighbor, candidate, vertex)
            elif candidate < existing.weight_sum_to:
                existing.weight_sum_to = candidate
                existing.parent = vertex
            else:
                continue
            heappush(min_pq, (candidate, next(sequence), neighbor))

    logger.debug(
        "Dijkstra %s -> %s: no path, %d visited", start, target, len(path.visited)
    )
    return None
