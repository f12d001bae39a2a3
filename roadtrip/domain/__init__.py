"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateEdgeError,
    GraphError,
    GraphSealedError,
    MalformedWeightError,
    RoadTripError,
    UnknownVertexError,
)
from .models import (
    NO_ROUTE,
    UNRESOLVED,
    Country,
    Neighbor,
    NoPathFound,
    Path,
    PathStep,
)

__all__ = [
    # Models
    "Country",
    "Neighbor",
    "NoPathFound",
    "Path",
    "PathStep",
    "NO_ROUTE",
    "UNRESOLVED",
    # Errors
    "RoadTripError",
    "UnknownVertexError",
    "MalformedWeightError",
    "DuplicateEdgeError",
    "GraphSealedError",
    "GraphError",
    "ConfigurationError",
]
