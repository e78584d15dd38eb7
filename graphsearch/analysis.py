"""Run every search on the same endpoints and score them with one weight model.

DFS and BFS ignore weights while searching, so their paths are rescored with
the supplied weight function afterwards. That makes the three results directly
comparable: BFS has the fewest edges, Dijkstra (with ``relax_queued=True``)
the lowest weight.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, Generic, Optional

from graphsearch.algorithms.bfs import breadth_first_search
from graphsearch.algorithms.dfs import depth_first_search
from graphsearch.algorithms.dijkstra import dijkstra_shortest_path
from graphsearch.logging import get_logger
from graphsearch.path import Path
from graphsearch.types import NeighborProvider, V, WeightFn

logger = get_logger(__name__)

ALGORITHMS = ("dfs", "bfs", "dijkstra")


@dataclass(frozen=True)
class SearchResult(Generic[V]):
    """Outcome of one search run.

    Attributes:
        algorithm: One of ``"dfs"``, ``"bfs"``, ``"dijkstra"``.
        path: The path found, or None when the target was unreachable.
        elapsed: Wall-clock seconds spent in the search.
    """

    algorithm: str
    path: Optional[Path[V]]
    elapsed: float

    @property
    def found(self) -> bool:
        return self.path is not None


def compare_searches(
    graph: NeighborProvider[V],
    start: V,
    target: V,
    weight_fn: WeightFn,
    relax_queued: bool = False,
) -> Dict[str, SearchResult[V]]:
    """Search ``start -> target`` with DFS, BFS and Dijkstra.

    Args:
        graph: Neighbor provider to search.
        start: First vertex of the path.
        target: Vertex to reach.
        weight_fn: Weight model used by Dijkstra and to rescore DFS/BFS paths.
        relax_queued: Forwarded to Dijkstra.

    Returns:
        Results keyed by algorithm name, in the order of ``ALGORITHMS``.
    """
    runners: Dict[str, Callable[[], Optional[Path[V]]]] = {
        "dfs": lambda: depth_first_search(graph, start, target),
        "bfs": lambda: breadth_first_search(graph, start, target),
        "dijkstra": lambda: dijkstra_shortest_path(
            graph, start, target, weight_fn, relax_queued
        ),
    }

    results: Dict[str, SearchResult[V]] = {}
    for name in ALGORITHMS:
        t0 = perf_counter()
        path = runners[name]()
        elapsed = perf_counter() - t0

        if path is not None and name != "dijkstra":
            path.recalculate_total_weight(weight_fn)

        if path is None:
            logger.info("%s %s -> %s: no path found", name, start, target)
        else:
            logger.info("%s %s -> %s: %s", name, start, target, path)
        results[name] = SearchResult(name, path, elapsed)

    return results
