"""Search and traversal algorithms over any neighbor provider."""

from graphsearch.algorithms.bfs import breadth_first_search
from graphsearch.algorithms.dfs import depth_first_search
from graphsearch.algorithms.dijkstra import dijkstra_shortest_path
from graphsearch.algorithms.reachability import format_adjacency_list, get_all_vertices

__all__ = [
    "breadth_first_search",
    "depth_first_search",
    "dijkstra_shortest_path",
    "format_adjacency_list",
    "get_all_vertices",
]
