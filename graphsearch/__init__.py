"""graphsearch: path searches over graphs defined by a neighbor query.

Any object with a ``neighbors(vertex)`` method can be searched; vertices only
need to be hashable. Subclassing :class:`AbstractGraph` adds the searches as
methods.

Primary API:
    depth_first_search() - Any path, exploring depth first
    breadth_first_search() - Path with the fewest edges
    dijkstra_shortest_path() - Weighted shortest path
    get_all_vertices() - Vertices reachable from a root
    format_adjacency_list() - Text adjacency list of the reachable subgraph
    Path - Result of every search
    AdjacencyGraph, NetworkXGraph - Ready-made neighbor providers

Example:
    from graphsearch import AdjacencyGraph

    g = AdjacencyGraph({"A": ["B", "C"], "B": ["D"], "C": ["D"]})
    path = g.breadth_first_search("A", "D")
    print(path)  # Weight=0.00 Length=3 visited=4 (A, B, D)
"""

from __future__ import annotations

from graphsearch import logging
from graphsearch._version import __version__
from graphsearch.algorithms import (
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    format_adjacency_list,
    get_all_vertices,
)
from graphsearch.analysis import SearchResult, compare_searches
from graphsearch.config import DISPLAY_CONFIG, PathDisplayConfig
from graphsearch.graph import AbstractGraph, AdjacencyGraph, NetworkXGraph
from graphsearch.path import Path
from graphsearch.types import NeighborProvider

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    "get_all_vertices",
    "format_adjacency_list",
    # Model
    "Path",
    "NeighborProvider",
    "AbstractGraph",
    "AdjacencyGraph",
    "NetworkXGraph",
    # Analysis
    "compare_searches",
    "SearchResult",
    # Configuration
    "PathDisplayConfig",
    "DISPLAY_CONFIG",
    # Utilities
    "logging",
]
