"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Input validation with typed errors
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from ...domain.errors import UnknownVertexError
from ...domain.models import NO_ROUTE, NoPathFound, Path
from ...graph.dijkstra import shortest_path
from ...graph.store import FrozenGraph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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

        Raises:
            UnknownVertexError: If departure or arrival is not in the graph.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        if departure not in graph:
            raise UnknownVertexError(
                f"Departure country not in graph: {departure}",
                vertex=departure,
            )
        if arrival not in graph:
            raise UnknownVertexError(
                f"Arrival country not in graph: {arrival}",
                vertex=arrival,
            )

        result = shortest_path(graph, departure, arrival)

        if not result:
            self._logger.warning(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            return result

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": len(result),
                "distance_km": result.total_distance,
            },
        )
        return result

    def distance(self, graph: FrozenGraph, departure: str, arrival: str) -> float:
        """Total length of the shortest route, or NO_ROUTE.

        Does not require the two countries to share a border.
        """
        result = self.solve(graph, departure, arrival)
        return result.total_distance if result else NO_ROUTE
