"""Adapter that searches a NetworkX graph.

Wraps any of ``nx.Graph``, ``nx.DiGraph``, ``nx.MultiGraph`` or
``nx.MultiDiGraph`` without copying it. Directed graphs are walked along
successors; undirected graphs along all incident edges.
"""

from __future__ import annotations

from typing import AbstractSet, Any, Dict

import networkx as nx

from graphsearch.graph.base import AbstractGraph
from graphsearch.types import V, Weight

_NO_NEIGHBORS: Dict = {}


class NetworkXGraph(AbstractGraph[V]):
    """Neighbor provider over a NetworkX graph.

    Attributes:
        graph: The wrapped graph. Changes to it are visible to later searches
            but must not happen while a search runs.
        weight_attr: Edge attribute read by :meth:`weight`.
        default_weight: Weight of edges lacking ``weight_attr``.
    """

    def __init__(
        self,
        graph: nx.Graph,
        weight_attr: str = "weight",
        default_weight: Weight = 1.0,
    ) -> None:
        self.graph = graph
        self.weight_attr = weight_attr
        self.default_weight = default_weight

    def neighbors(self, vertex: V) -> AbstractSet[V]:
        # _adj is the successor map for directed graphs
        return self.graph._adj.get(vertex, _NO_NEIGHBORS).keys()  # type: ignore[attr-defined]

    def weight(self, u: V, v: V) -> Weight:
        """Return the weight of the edge ``u -> v``.

        For multigraphs the cheapest parallel edge is used.

        Raises:
            KeyError: If the graph has no edge from ``u`` to ``v``.
        """
        if not self.graph.has_edge(u, v):
            raise KeyError(f"No edge from {u} to {v}.")

        edge_data: Any = self.graph.get_edge_data(u, v)
        if self.graph.is_multigraph():
            return min(
                attr.get(self.weight_attr, self.default_weight)
                for attr in edge_data.values()
            )
        return edge_data.get(self.weight_attr, self.default_weight)

    def __repr__(self) -> str:
        return (
            f"NetworkXGraph({type(self.graph).__name__}, "
            f"{self.graph.number_of_nodes()} nodes, {self.graph.number_of_edges()} edges)"
        )
