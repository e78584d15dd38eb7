"""Read-only graph backed by an adjacency mapping."""

from __future__ import annotations

from typing import (
    AbstractSet,
    Dict,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    Optional,
    Tuple,
)

from graphsearch.graph.base import AbstractGraph
from graphsearch.types import V, Weight

_NO_NEIGHBORS: Dict = {}


class AdjacencyGraph(AbstractGraph[V]):
    """A graph fixed at construction from ``vertex -> neighbors`` entries.

    Neighbor sets keep the order in which they were listed, which makes
    traversal order and adjacency output deterministic. Vertices that only
    appear as neighbors are registered as vertices without outgoing edges.
    Vertices unknown to the graph have no neighbors.

    Example:
        >>> g = AdjacencyGraph({"A": ["B"], "B": ["C"]}, weights={("A", "B"): 2.5})
        >>> g.weight("A", "B"), g.weight("B", "C")
        (2.5, 1.0)

    Args:
        adjacency: Mapping of each vertex to the vertices it links to.
        weights: Optional edge weights keyed by ``(u, v)``. In undirected
            mode a weight given for ``(u, v)`` also applies to ``(v, u)``
            unless that direction has its own entry.
        directed: If False, every edge is mirrored.
        default_weight: Weight of edges missing from ``weights``.

    Raises:
        ValueError: If a weight is given for a pair that is not an edge.
    """

    def __init__(
        self,
        adjacency: Mapping[V, Iterable[V]],
        weights: Optional[Mapping[Tuple[V, V], Weight]] = None,
        directed: bool = True,
        default_weight: Weight = 1.0,
    ) -> None:
        self._directed = directed
        self._default_weight = default_weight
        # dict keys serve as insertion-ordered neighbor sets
        self._adj: Dict[V, Dict[V, None]] = {}

        for vertex, targets in adjacency.items():
            self._adj.setdefault(vertex, {})
            for target in targets:
                self._adj[vertex][target] = None
                self._adj.setdefault(target, {})
                if not directed:
                    self._adj[target][vertex] = None

        self._weights: Dict[Tuple[V, V], Weight] = {}
        for (u, v), weight in (weights or {}).items():
            if not self.has_edge(u, v):
                raise ValueError(f"Weight given for ({u}, {v}) but there is no such edge.")
            self._weights[(u, v)] = weight
        if not directed:
            for (u, v), weight in list(self._weights.items()):
                self._weights.setdefault((v, u), weight)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def vertices(self) -> KeysView[V]:
        """All vertices, in the order they were first seen."""
        return self._adj.keys()

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adj)

    def neighbors(self, vertex: V) -> AbstractSet[V]:
        return self._adj.get(vertex, _NO_NEIGHBORS).keys()

    def has_edge(self, u: V, v: V) -> bool:
        return v in self._adj.get(u, _NO_NEIGHBORS)

    def weight(self, u: V, v: V) -> Weight:
        """Return the weight of the edge ``u -> v``.

        Usable directly as the weight function of a weighted search.

        Raises:
            KeyError: If ``v`` is not a neighbor of ``u``.
        """
        if not self.has_edge(u, v):
            raise KeyError(f"No edge from {u} to {v}.")
        return self._weights.get((u, v), self._default_weight)

    def __repr__(self) -> str:
        edges = sum(len(targets) for targets in self._adj.values())
        kind = "directed" if self._directed else "undirected"
        return f"AdjacencyGraph({len(self._adj)} vertices, {edges} arcs, {kind})"
