"""Depth-first path search."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from graphsearch.logging import get_logger
from graphsearch.path import Path
from graphsearch.types import NeighborProvider, V

logger = get_logger(__name__)


def depth_first_search(
    graph: NeighborProvider[V],
    start: Optional[V],
    target: Optional[V],
) -> Optional[Path[V]]:
    """Find a path from ``start`` to ``target`` by depth-first search.

    A vertex is marked visited before its neighbors are explored, so every
    vertex is entered at most once and cycles terminate. The search keeps a
    stack of ``(vertex, neighbor iterator)`` frames; when a branch runs out of
    unvisited neighbors its frame is dropped and the parent continues with its
    next neighbor. On reaching ``target`` the frames on the stack are exactly
    the path, so dead ends never appear in it.

    Args:
        graph: Neighbor provider to search.
        start: First vertex of the path.
        target: Vertex to reach.

    Returns:
        The path with ``visited`` holding every explored vertex (dead ends
        included), or None if either endpoint is None or ``target`` cannot be
        reached. ``total_weight`` is left at 0.
    """
    if start is None or target is None:
        return None

    path: Path[V] = Path()
    path.visited.add(start)

    if start == target:
        path.vertices.append(start)
        return path

    stack: List[Tuple[V, Iterator[V]]] = [(start, iter(graph.neighbors(start)))]
    while stack:
        for neighbor in stack[-1][1]:
            if neighbor in path.visited:
                continue
            path.visited.add(neighbor)
            if neighbor == target:
                path.vertices = [vertex for vertex, _ in stack]
                path.vertices.append(neighbor)
                logger.debug(
                    "DFS %s -> %s: %d vertices, %d visited",
                    start,
                    target,
                    len(path.vertices),
                    len(path.visited),
                )
                return path
            stack.append((neighbor, iter(graph.neighbors(neighbor))))
            break
        else:
            stack.pop()

    logger.debug("DFS %s -> %s: no path, %d visited", start, target, len(path.visited))
    return None
