"""Breadth-first path search (fewest edges)."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Optional

from graphsearch.logging import get_logger
from graphsearch.path import Path
from graphsearch.types import NeighborProvider, V

logger = get_logger(__name__)


def breadth_first_search(
    graph: NeighborProvider[V],
    start: Optional[V],
    target: Optional[V],
) -> Optional[Path[V]]:
    """Find a path from ``start`` to ``target`` with the fewest edges.

    Vertices are expanded level by level from a FIFO queue. ``visited_from``
    maps each discovered vertex to the vertex it was discovered from (None
    for ``start``) and doubles as the seen-set. The search stops as soon as
    ``target`` shows up among the neighbors of the vertex being expanded; the
    path is then rebuilt by following parent links back to ``start``.

    Args:
        graph: Neighbor provider to search.
        start: First vertex of the path.
        target: Vertex to reach.

    Returns:
        The path, whose ``visited`` contains every vertex discovered (queued
        or expanded), or None if either endpoint is None or ``target`` is
        unreachable. ``total_weight`` is left at 0.
    """
    if start is None or target is None:
        return None

    path: Path[V] = Path()
    path.visited.add(start)

    if start == target:
        path.vertices.append(start)
        return path

    visited_from: Dict[V, Optional[V]] = {start: None}
    queue: Deque[V] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            path.visited.add(neighbor)

            if neighbor == target:
                reversed_walk = [neighbor]
                node: Optional[V] = current
                while node is not None:
                    reversed_walk.append(node)
                    node = visited_from[node]
                reversed_walk.reverse()
                path.vertices = reversed_walk
                logger.debug(
                    "BFS %s -> %s: %d vertices, %d visited",
                    start,
                    target,
                    len(path.vertices),
                    len(path.visited),
                )
                return path

            if neighbor not in visited_from:
                visited_from[neighbor] = current
                queue.append(neighbor)

    logger.debug("BFS %s -> %s: no path, %d visited", start, target, len(path.visited))
    return None
