"""Graph ports - Abstractions for graph loading, naming and routing.

These protocols define the contracts between the core and the
collaborators around it: the feed loaders, the name normalizer and
the route solver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, Union

if TYPE_CHECKING:
    from ..domain.models import Country, NoPathFound, Path
    from ..graph.store import FrozenGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/file_repository.py

    The repository is responsible for loading, sealing and caching the
    country graph from persistent storage.
    """

    def load(self) -> FrozenGraph:
        """Load the country graph.

        Returns:
            The sealed, read-only graph.
        """
        ...

    def country_by_code(self, code: str) -> Optional[Country]:
        """Get a country by its state code (e.g., 'USA').

        Returns:
            The Country, or None if the code is unknown.
        """
        ...

    def countries(self) -> Sequence[Country]:
        """List all countries of the code table."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py
    """

    def solve(
        self,
        graph: FrozenGraph,
        departure: str,
        arrival: str,
    ) -> Union[Path, NoPathFound]:
        """Find the shortest route between two countries.

        Args:
            graph: The sealed country graph.
            departure: Departure country name.
            arrival: Arrival country name.

        Returns:
            The Path, or NoPathFound if the countries are not connected.
        """
        ...

    def distance(self, graph: FrozenGraph, departure: str, arrival: str) -> float:
        """Total length of the shortest route, or NO_ROUTE."""
        ...


class NameNormalizerPort(Protocol):
    """Port mapping free-text country names to graph vertex names."""

    def normalize(self, raw: str) -> str:
        ...
