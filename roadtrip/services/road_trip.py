"""Road trip service - Main orchestrator.

Front-ends (the interactive shell, tests, any future server) talk to this
service only. It normalizes user-supplied names, loads the graph through
the repository and delegates routing to the solver.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Union

from ..domain.models import NoPathFound, Path
from ..graph.store import FrozenGraph
from ..ports.graph import GraphRepositoryPort, NameNormalizerPort, RouteSolverPort


@dataclass
class RoadTripService:
    """Answers "how far and which way" between two countries.

    Attributes:
        graph_repository: Loads the sealed country graph
        route_solver: Computes shortest routes
        name_normalizer: Maps user input to vertex names
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    name_normalizer: NameNormalizerPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> FrozenGraph:
        return self.graph_repository.load()

    def is_valid_country(self, name: str) -> bool:
        """Check whether ``name`` (after normalization) is a graph vertex."""
        return self.graph.vertex_exists(self.name_normalizer.normalize(name))

    def get_distance(self, country_a: str, country_b: str) -> float:
        """Length in km of the shortest route, or NO_ROUTE.

        The countries do not need to share a border: the distance is
        taken over the whole graph.

        Raises:
            UnknownVertexError: If either name is not a known country.
        """
        a = self.name_normalizer.normalize(country_a)
        b = self.name_normalizer.normalize(country_b)
        return self.route_solver.distance(self.graph, a, b)

    def find_path(self, country_a: str, country_b: str) -> Union[Path, NoPathFound]:
        """Shortest route between two countries.

        Raises:
            UnknownVertexError: If either name is not a known country.
        """
        a = self.name_normalizer.normalize(country_a)
        b = self.name_normalizer.normalize(country_b)
        self._logger.debug("Route requested", extra={"from": a, "to": b})
        return self.route_solver.solve(self.graph, a, b)

    @staticmethod
    def format_path(result: Union[Path, NoPathFound]) -> List[str]:
        """Render a route as ``"<country> - <km> km"`` lines."""
        if not result:
            return [f"No route between {result.source} and {result.target}."]
        return [f"{step.vertex} - {format_km(step.distance)} km" for step in result]


def format_km(distance: float) -> str:
    """Format a distance in km, dropping the decimals of whole numbers."""
    if math.isinf(distance):
        return "inf"
    if float(distance).is_integer():
        return str(int(distance))
    return f"{distance:.1f}"
