"""Path record returned by every search algorithm."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, Set

from graphsearch.config import DISPLAY_CONFIG, PathDisplayConfig
from graphsearch.types import V, WeightFn


@dataclass
class Path(Generic[V]):
    """A directed walk through the graph plus statistics of the search.

    Attributes:
        vertices: Vertices in walk order. Each vertex is a neighbor of the one
            before it. A single vertex means start and target coincide; an
            empty list is the unpopulated state and is never returned by a
            search.
        total_weight: Sum of the pairwise weights along ``vertices``. Searches
            without a weight model leave it at 0 until
            :meth:`recalculate_total_weight` is called.
        visited: Every vertex the search touched, on the path or not. Only
            for analysis; it plays no part in equality.
    """

    vertices: List[V] = field(default_factory=list)
    total_weight: float = 0.0
    visited: Set[V] = field(default_factory=set, compare=False)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices)

    def is_empty(self) -> bool:
        return not self.vertices

    @property
    def start(self) -> Optional[V]:
        """First vertex of the walk, or None for an empty path."""
        return self.vertices[0] if self.vertices else None

    @property
    def target(self) -> Optional[V]:
        """Last vertex of the walk, or None for an empty path."""
        return self.vertices[-1] if self.vertices else None

    @property
    def edge_count(self) -> int:
        """Number of edges traversed (one less than the vertex count)."""
        return max(len(self.vertices) - 1, 0)

    def recalculate_total_weight(self, weight_fn: WeightFn) -> float:
        """Recompute ``total_weight`` from the weights of consecutive vertices.

        Lets a path found by an unweighted search be scored against a weight
        model after the fact.

        Args:
            weight_fn: Returns the weight of the edge from its first argument
                to its second.

        Returns:
            The new ``total_weight``.
        """
        total = 0.0
        for previous, current in zip(self.vertices, self.vertices[1:]):
            total += weight_fn(previous, current)
        self.total_weight = total
        return total

    def format(self, config: PathDisplayConfig = DISPLAY_CONFIG) -> str:
        """Return ``Weight=.. Length=.. visited=.. (v1, v2, ...)``.

        Long paths show only their head and tail, see
        :class:`~graphsearch.config.PathDisplayConfig`.
        """
        return (
            f"Weight={self.total_weight:.2f} Length={len(self.vertices)} "
            f"visited={len(self.visited)} ({config.format_sequence(self.vertices)})"
        )

    def __str__(self) -> str:
        return self.format()
