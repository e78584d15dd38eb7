"""Graph types that provide neighbors to the search algorithms."""

from graphsearch.graph.adjacency import AdjacencyGraph
from graphsearch.graph.base import AbstractGraph
from graphsearch.graph.nx_graph import NetworkXGraph

__all__ = ["AbstractGraph", "AdjacencyGraph", "NetworkXGraph"]
