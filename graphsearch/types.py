"""Shared type definitions for the search engine.

Vertices are opaque to the engine. Anything hashable with a meaningful
``__eq__`` and ``__str__`` can be used; strings, ints and tuples all qualify.
"""

from __future__ import annotations

from typing import AbstractSet, Callable, Hashable, Protocol, TypeVar, Union, runtime_checkable

#: Vertex type parameter. Vertices are used as dict keys and set members.
V = TypeVar("V", bound=Hashable)

#: Numeric weight of an edge or a path (distance, time, metric, ...).
Weight = Union[int, float]

#: Weight of the edge between two adjacent vertices.
WeightFn = Callable[[V, V], Weight]


@runtime_checkable
class NeighborProvider(Protocol[V]):
    """Anything that can enumerate the direct successors of a vertex.

    For directed graphs ``neighbors`` follows outgoing edges only. The result
    must not change while a search is running; its iteration order is not
    part of the contract.
    """

    def neighbors(self, vertex: V) -> AbstractSet[V]: ...
