"""Abstract graph exposing the search engine as methods.

Subclasses implement :meth:`AbstractGraph.neighbors` and get every traversal
for free. Directed and undirected graphs are handled the same way: for a
directed graph ``neighbors`` returns outgoing targets only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AbstractSet, Generic, Optional, Set

from graphsearch.algorithms.bfs import breadth_first_search
from graphsearch.algorithms.dfs import depth_first_search
from graphsearch.algorithms.dijkstra import dijkstra_shortest_path
from graphsearch.algorithms.reachability import format_adjacency_list, get_all_vertices
from graphsearch.path import Path
from graphsearch.types import V, WeightFn


class AbstractGraph(ABC, Generic[V]):
    """Base class for graphs whose edges are discovered through ``neighbors``."""

    @abstractmethod
    def neighbors(self, vertex: V) -> AbstractSet[V]:
        """Return the vertices directly reachable from ``vertex``."""

    def get_all_vertices(self, start: V) -> Set[V]:
        return get_all_vertices(self, start)

    def format_adjacency_list(self, start: V) -> str:
        return format_adjacency_list(self, start)

    def depth_first_search(self, start: Optional[V], target: Optional[V]) -> Optional[Path[V]]:
        return depth_first_search(self, start, target)

    def breadth_first_search(self, start: Optional[V], target: Optional[V]) -> Optional[Path[V]]:
        return breadth_first_search(self, start, target)

    def dijkstra_shortest_path(
        self,
        start: Optional[V],
        target: Optional[V],
        weight_fn: WeightFn,
        relax_queued: bool = False,
    ) -> Optional[Path[V]]:
        """See :func:`graphsearch.algorithms.dijkstra.dijkstra_shortest_path`."""
        return dijkstra_shortest_path(self, start, target, weight_fn, relax_queued)
