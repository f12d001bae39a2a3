"""Graph store for the country border network.

The store owns the vertex set and the adjacency lists. It goes through
two phases:

1. Loading: ``GraphStore`` accepts ``add_vertex``, ``add_edge`` and
   ``set_edge_weight`` calls from a loader.
2. Querying: ``seal()`` returns a ``FrozenGraph``, a read-only view that
   path finders consume. The store refuses any mutation afterwards.

The graph is undirected: every edge is stored on both endpoints and both
entries always carry the same weight.
"""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from ..domain.errors import (
    DuplicateEdgeError,
    GraphError,
    GraphSealedError,
    MalformedWeightError,
    UnknownVertexError,
)
from ..domain.models import UNRESOLVED, Neighbor

logger = logging.getLogger(__name__)


def validate_weight(value: Any, line_number: Optional[int] = None) -> float:
    """Convert ``value`` to a non-negative distance.

    The UNRESOLVED sentinel (infinity) is accepted.

    Raises:
        MalformedWeightError: If the value is not numeric, NaN or negative.
    """
    try:
        weight = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedWeightError(
            f"Distance is not a number: {value!r}",
            value=value,
            line_number=line_number,
            cause=e,
        )

    if math.isnan(weight) or weight < 0:
        raise MalformedWeightError(
            f"Distance must be a non-negative number, got {value!r}",
            value=value,
            line_number=line_number,
        )
    return weight


class _GraphReader:
    """Read operations shared by the loading store and the sealed view."""

    _adjacency: Mapping[str, Any]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def vertex_exists(self, vertex: str) -> bool:
        return vertex in self._adjacency

    def vertices(self) -> Tuple[str, ...]:
        return tuple(self._adjacency)

    def neighbors(self, vertex: str) -> Tuple[Neighbor, ...]:
        """Return the adjacency list of ``vertex``.

        Raises:
            UnknownVertexError: If the vertex is not in the graph.
        """
        try:
            return tuple(self._adjacency[vertex])
        except KeyError:
            raise UnknownVertexError(
                f"Country not in graph: {vertex}", vertex=vertex
            ) from None

    def are_adjacent(self, a: str, b: str) -> bool:
        """True iff ``b`` appears in ``a``'s neighbor list."""
        return any(n.vertex == b for n in self._adjacency.get(a, ()))

    def weight(self, a: str, b: str) -> Optional[float]:
        """Weight of the direct edge between ``a`` and ``b``, or None."""
        for n in self._adjacency.get(a, ()):
            if n.vertex == b:
                return n.weight
        return None

    @property
    def edge_count(self) -> int:
        return sum(len(ns) for ns in self._adjacency.values()) // 2

    def edges(self) -> Iterator[Tuple[str, str, float]]:
        """Yield every undirected edge once as ``(a, b, weight)``."""
        seen = set()
        for a, ns in self._adjacency.items():
            for n in ns:
                key = frozenset((a, n.vertex))
                if key in seen:
                    continue
                seen.add(key)
                yield a, n.vertex, n.weight

    def unresolved_edges(self) -> List[Tuple[str, str]]:
        """Edges still carrying the UNRESOLVED sentinel weight."""
        return [(a, b) for a, b, w in self.edges() if math.isinf(w)]


class FrozenGraph(_GraphReader, Mapping[str, Tuple[Neighbor, ...]]):
    """Read-only graph handed to path finders.

    Behaves as a mapping from country name to a tuple of neighbors.
    Nothing reachable from this object can be mutated, so a single
    instance can be shared between concurrent queries.
    """

    def __init__(self, adjacency: Mapping[str, List[Neighbor]]) -> None:
        self._adjacency = MappingProxyType(
            {vertex: tuple(ns) for vertex, ns in adjacency.items()}
        )

    def __getitem__(self, vertex: str) -> Tuple[Neighbor, ...]:
        return self._adjacency[vertex]

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"FrozenGraph(vertices={len(self)}, edges={self.edge_count})"


class GraphStore(_GraphReader):
    """Mutable graph used while the feeds are being loaded.

    Usage:
        store = GraphStore()
        store.add_vertex("France")
        store.add_vertex("Spain")
        store.add_edge("France", "Spain")          # unresolved weight
        store.set_edge_weight("France", "Spain", 1054.0)
        graph = store.seal()
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, List[Neighbor]] = {}
        self._frozen: Optional[FrozenGraph] = None

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        state = "sealed" if self.is_sealed else "loading"
        return f"GraphStore({state}, vertices={len(self)}, edges={self.edge_count})"

    @property
    def is_sealed(self) -> bool:
        return self._frozen is not None

    def _check_mutable(self) -> None:
        if self._frozen is not None:
            raise GraphSealedError("Graph is sealed; loading has already finished")

    def _require(self, vertex: str) -> List[Neighbor]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise UnknownVertexError(
                f"Country not in graph: {vertex}", vertex=vertex
            ) from None

    def add_vertex(self, vertex: str) -> None:
        """Insert ``vertex`` with no neighbors. Repeated calls are no-ops."""
        self._check_mutable()
        self._adjacency.setdefault(vertex, [])

    def add_edge(self, a: str, b: str, weight: float = UNRESOLVED) -> None:
        """Connect ``a`` and ``b`` in both directions.

        Raises:
            UnknownVertexError: If either endpoint was not added first.
            DuplicateEdgeError: If the two countries are already adjacent.
            MalformedWeightError: If the weight is invalid.
            GraphError: If ``a`` and ``b`` are the same country.
        """
        self._check_mutable()
        neighbors_a = self._require(a)
        neighbors_b = self._require(b)
        if a == b:
            raise GraphError(f"Self loop on {a} is not allowed")
        if self.are_adjacent(a, b):
            raise DuplicateEdgeError(
                f"Edge already exists: {a} - {b}", vertex_a=a, vertex_b=b
            )

        weight = validate_weight(weight)
        neighbors_a.append(Neighbor(b, weight))
        neighbors_b.append(Neighbor(a, weight))

    def set_edge_weight(self, a: str, b: str, weight: float) -> bool:
        """Overwrite the weight of the edge between ``a`` and ``b``.

        Both directions are updated together. Missing edges are ignored.

        Returns:
            True if the edge existed and was updated, False otherwise.

        Raises:
            MalformedWeightError: If the weight is invalid.
        """
        self._check_mutable()
        weight = validate_weight(weight)
        if not self.are_adjacent(a, b):
            return False

        for source, target in ((a, b), (b, a)):
            neighbors = self._adjacency[source]
            for i, n in enumerate(neighbors):
                if n.vertex == target:
                    neighbors[i] = Neighbor(target, weight)
                    break
        return True

    def seal(self) -> FrozenGraph:
        """Finish loading and return the read-only graph.

        Sealing is idempotent: further calls return the same view.
        """
        if self._frozen is None:
            self._frozen = FrozenGraph(self._adjacency)
            logger.debug(
                "Graph sealed",
                extra={"vertices": len(self), "edges": self.edge_count},
            )
        return self._frozen
