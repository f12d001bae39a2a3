"""File Graph Repository adapter.

Builds the country graph from the three feed files:

- borders file (tab separated): one line per pair of bordering countries
- distances file (comma separated, with header): capital-to-capital km
  between two state codes
- codes file (tab separated): state code -> country name

Borders become edges at the UNRESOLVED weight, distances then resolve
them; state codes are turned into country names with the codes
file. Every name goes through the name normalizer before reaching the
graph store.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, MalformedWeightError
from ...domain.models import Country
from ...graph.store import FrozenGraph, GraphStore, validate_weight
from ...ports.graph import NameNormalizerPort
from ..naming import TableNameNormalizer


@dataclass
class FileGraphRepository:
    """Graph repository that loads from the border/distance/code files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
        normalizer: Maps raw feed names to vertex names
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    normalizer: NameNormalizerPort = field(default_factory=TableNameNormalizer)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[FrozenGraph] = field(default=None, repr=False)
    _countries: Optional[Dict[str, Country]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> FrozenGraph:
        """Load, resolve and seal the country graph.

        Returns:
            The sealed graph.

        Raises:
            GraphError: If a feed file cannot be read.
            MalformedWeightError: If the distance feed holds an invalid value.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "borders_path": str(self.config.borders_path),
                "distances_path": str(self.config.distances_path),
            },
        )

        store = GraphStore()
        self._load_borders(store)
        countries = self._load_countries()
        self._load_distances(store, countries)

        graph = store.seal()
        unresolved = graph.unresolved_edges()
        if unresolved:
            self._logger.warning(
                "Edges without distance",
                extra={"count": len(unresolved), "sample": unresolved[:5]},
            )
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "edges": graph.edge_count},
        )
        self._graph = graph
        return graph

    def _rows(
        self, path: Path, delimiter: str, skip_header: bool = False
    ) -> Iterator[Tuple[int, List[str]]]:
        """Yield ``(line_number, fields)`` for every line of a feed file."""
        try:
            with path.open(encoding=self.config.encoding, newline="") as f:
                quoting = csv.QUOTE_NONE if delimiter == "\t" else csv.QUOTE_MINIMAL
                reader = csv.reader(f, delimiter=delimiter, quoting=quoting)
                for line_number, row in enumerate(reader, start=1):
                    if skip_header and line_number == 1:
                        continue
                    yield line_number, row
        except OSError as e:
            raise GraphError(
                f"Failed to read {path.name}",
                file_path=str(path),
                cause=e,
            )

    def _load_borders(self, store: GraphStore) -> None:
        for line_number, row in self._rows(self.config.borders_path, "\t"):
            if len(row) < 4:
                continue

            a = self.normalizer.normalize(row[2])
            b = self.normalizer.normalize(row[3])
            if not a or not b or a == b:
                self._logger.debug(
                    "Border line skipped",
                    extra={"line": line_number, "a": a, "b": b},
                )
                continue

            store.add_vertex(a)
            store.add_vertex(b)
            if store.are_adjacent(a, b):
                self._logger.debug(
                    "Duplicate border", extra={"line": line_number, "a": a, "b": b}
                )
                continue
            store.add_edge(a, b)

    def _name_for_code(self, countries: Dict[str, Country], raw: str) -> str:
        """Country name for a state code, or the normalized raw value."""
        country = countries.get(raw.strip())
        if country is not None:
            return country.name
        return self.normalizer.normalize(raw)

    def _load_distances(
        self, store: GraphStore, countries: Dict[str, Country]
    ) -> None:
        resolved = 0
        unmatched = 0
        for line_number, row in self._rows(
            self.config.distances_path, ",", skip_header=True
        ):
            if len(row) < 5:
                continue

            a = self._name_for_code(countries, row[1])
            b = self._name_for_code(countries, row[3])
            try:
                distance = validate_weight(row[4].strip(), line_number=line_number)
            except MalformedWeightError:
                self._logger.error(
                    "Malformed distance",
                    extra={"line": line_number, "value": row[4], "a": a, "b": b},
                )
                raise

            if store.set_edge_weight(a, b, distance):
                resolved += 1
            else:
                unmatched += 1

        self._logger.debug(
            "Distances applied",
            extra={"resolved": resolved, "not_bordering": unmatched},
        )

    def country_by_code(self, code: str) -> Optional[Country]:
        """Get a country by its state code.

        Args:
            code: The state code to look up (e.g., 'USA').

        Returns:
            The Country, or None if not found.
        """
        return self._load_countries().get(code.strip())

    def countries(self) -> Sequence[Country]:
        """List all countries of the code table."""
        return list(self._load_countries().values())

    def _load_countries(self) -> Dict[str, Country]:
        """Load the code table from the tab-separated codes file."""
        if self._countries is not None:
            return self._countries

        countries: Dict[str, Country] = {}
        for _, row in self._rows(self.config.codes_path, "\t", skip_header=True):
            if len(row) < 6:
                continue
            code = row[1].strip()
            name = self.normalizer.normalize(row[2])
            if code and name:
                countries[code] = Country(code=code, name=name)

        self._countries = countries
        return countries

    def clear_cache(self) -> None:
        """Clear cached graph and country data."""
        self._graph = None
        self._countries = None
        self._logger.debug("Graph cache cleared")
