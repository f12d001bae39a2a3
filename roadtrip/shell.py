"""Interactive command loop.

Prompts for two countries, prints the shortest-route distance and the
countries of the route with their running km, and starts over until
the user types ``exit``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .domain.errors import UnknownVertexError
from .services.road_trip import RoadTripService, format_km

EXIT_COMMAND = "exit"


@dataclass
class RoadTripShell:
    """Read-eval-print loop over a RoadTripService.

    Attributes:
        service: The service answering queries
        input_fn: Reads one line from the user (``input`` by default)
        output_fn: Writes one line to the user (``print`` by default)
    """

    service: RoadTripService
    input_fn: Optional[Callable[[str], str]] = None
    output_fn: Optional[Callable[[str], None]] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.input_fn = self.input_fn or input
        self.output_fn = self.output_fn or print

    def _ask(self, prompt: str) -> Optional[str]:
        """Read a country name; None means the user wants to leave."""
        try:
            answer = self.input_fn(prompt).strip()
        except EOFError:
            return None
        if answer.lower() == EXIT_COMMAND:
            return None
        return answer

    def _ask_country(self, prompt: str) -> Optional[str]:
        while True:
            name = self._ask(prompt)
            if name is None or self.service.is_valid_country(name):
                return name
            self.output_fn("Invalid country name. Please enter a valid country name.")

    def run(self) -> None:
        while True:
            country_a = self._ask_country(
                f"Enter the name of the first country (type '{EXIT_COMMAND}' to stop): "
            )
            if country_a is None:
                break
            country_b = self._ask_country(
                f"Enter the name of the second country (type '{EXIT_COMMAND}' to stop): "
            )
            if country_b is None:
                break
            self.answer(country_a, country_b)
        self._logger.debug("Shell stopped")

    def answer(self, country_a: str, country_b: str) -> None:
        """Print the route between two countries."""
        try:
            result = self.service.find_path(country_a, country_b)
        except UnknownVertexError as e:
            self.output_fn(str(e))
            return

        if result:
            self.output_fn(
                f"The distance between {result.source} and {result.target} "
                f"is {format_km(result.total_distance)} km."
            )
            self.output_fn(f"Route from {result.source} to {result.target}:")
        for line in self.service.format_path(result):
            self.output_fn(line)
