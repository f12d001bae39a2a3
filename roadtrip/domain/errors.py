"""Typed domain errors for the Road Trip resolver.

Every failure the core can report is one of these types, so callers
(loaders, the service, the shell) can decide whether to retry, prompt
again or abort. The core itself never exits the process.

All errors inherit from RoadTripError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RoadTripError(Exception):
    """Base error for the road trip domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownVertexError(RoadTripError):
    """A query or mutation references a country not in the graph.

    Attributes:
        vertex: The country name that was not found
    """

    vertex: str = ""


@dataclass
class MalformedWeightError(RoadTripError):
    """A distance is not numeric, is NaN, or is negative.

    Attributes:
        value: The offending raw value
        line_number: Line of the distance feed it came from, if known
    """

    value: Any = None
    line_number: Optional[int] = None


@dataclass
class DuplicateEdgeError(RoadTripError):
    """An edge between the two countries already exists."""

    vertex_a: str = ""
    vertex_b: str = ""


@dataclass
class GraphSealedError(RoadTripError):
    """The graph was mutated after loading finished."""


@dataclass
class GraphError(RoadTripError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the feed file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RoadTripError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
