"""Shortest-path computation using Dijkstra's algorithm.

The search runs from the source over the whole graph and produces the
full single-source distance table; the route to a given target is then
rebuilt from the predecessor links.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union

from ..domain.errors import UnknownVertexError
from ..domain.models import NO_ROUTE, Neighbor, NoPathFound, Path, PathStep

Graph = Mapping[str, Sequence[Neighbor]]


@dataclass(frozen=True)
class SearchResult:
    """Single-source distance table.

    Attributes:
        source: The country the search started from
        distances: Shortest known distance to every country (inf if unreachable)
        previous: Predecessor on the shortest route (None for the source
            and for unreachable countries)
    """

    source: str
    distances: Dict[str, float]
    previous: Dict[str, Optional[str]]


def dijkstra(graph: Graph, source: str) -> SearchResult:
    """Compute shortest distances from ``source`` to every country.

    Parameters
    ----------
    graph:
        Graph as produced by ``GraphStore.seal()``.
    source:
        Country the search starts from.

    Returns
    -------
    SearchResult
        Distance and predecessor tables covering every vertex.
    """
    if source not in graph:
        raise UnknownVertexError(f"Country not in graph: {source}", vertex=source)

    distances: Dict[str, float] = {vertex: math.inf for vertex in graph}
    previous: Dict[str, Optional[str]] = {vertex: None for vertex in graph}
    distances[source] = 0.0

    heap: List[Tuple[float, str]] = [(0.0, source)]
    finalized: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry for a vertex already settled at a smaller distance.
        if u in finalized:
            continue
        finalized.add(u)

        for neighbor in graph[u]:
            v = neighbor.vertex
            if v in finalized:
                continue
            new_distance = current_distance + neighbor.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    return SearchResult(source=source, distances=distances, previous=previous)


def reconstruct_path(result: SearchResult, target: str) -> Union[Path, NoPathFound]:
    """Rebuild the route from ``result.source`` to ``target``.

    Returns NoPathFound when the predecessor walk does not lead back to
    the source, instead of a fragment starting elsewhere.
    """
    if target not in result.distances:
        raise UnknownVertexError(f"Country not in graph: {target}", vertex=target)

    if math.isinf(result.distances[target]):
        return NoPathFound(source=result.source, target=target)

    steps: List[PathStep] = []
    current: Optional[str] = target
    while current is not None:
        steps.append(PathStep(current, result.distances[current]))
        if current == result.source:
            break
        current = result.previous[current]

    if steps[-1].vertex != result.source:
        return NoPathFound(source=result.source, target=target)

    steps.reverse()
    return Path(steps=tuple(steps))


def shortest_path(graph: Graph, source: str, target: str) -> Union[Path, NoPathFound]:
    """Shortest route between two countries.

    Raises:
        UnknownVertexError: If either country is not in the graph.
    """
    if target not in graph:
        raise UnknownVertexError(f"Country not in graph: {target}", vertex=target)
    return reconstruct_path(dijkstra(graph, source), target)


def shortest_distance(graph: Graph, source: str, target: str) -> float:
    """Total length of the shortest route, or NO_ROUTE.

    The two countries do not need to share a border.
    """
    result = shortest_path(graph, source, target)
    return result.total_distance if result else NO_ROUTE
