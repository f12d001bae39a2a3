"""Immutable domain models for the Road Trip resolver.

All models are frozen dataclasses with slots. They have no external
dependencies and are produced fresh by each query.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

# Weight of an edge whose topology is known but whose distance has not
# been resolved yet.
UNRESOLVED = math.inf

# Distance reported when two countries are not connected.
NO_ROUTE = math.inf


@dataclass(frozen=True, slots=True)
class Neighbor:
    """One entry of an adjacency list.

    Attributes:
        vertex: The neighboring country
        weight: Distance in kilometers, or UNRESOLVED
    """

    vertex: str
    weight: float

    @property
    def is_resolved(self) -> bool:
        return not math.isinf(self.weight)


@dataclass(frozen=True, slots=True)
class PathStep:
    """A country on a route and its cumulative distance from the source."""

    vertex: str
    distance: float


@dataclass(frozen=True, slots=True)
class Path:
    """Shortest route between two countries.

    Attributes:
        steps: Ordered steps from the source (distance 0) to the target
    """

    steps: tuple[PathStep, ...]

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("A path needs at least one step")
        if self.steps[0].distance != 0:
            raise ValueError(
                f"A path must start at distance 0, got {self.steps[0].distance}"
            )

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)

    @property
    def source(self) -> str:
        return self.steps[0].vertex

    @property
    def target(self) -> str:
        return self.steps[-1].vertex

    @property
    def total_distance(self) -> float:
        return self.steps[-1].distance

    @property
    def vertices(self) -> tuple[str, ...]:
        """Country names along the route, source first."""
        return tuple(step.vertex for step in self.steps)

    @property
    def hops(self) -> tuple[tuple[PathStep, PathStep], ...]:
        """Consecutive (from, to) step pairs, one per edge travelled."""
        return tuple(zip(self.steps, self.steps[1:]))


@dataclass(frozen=True, slots=True)
class NoPathFound:
    """Both countries exist but no route connects them.

    This is a normal query outcome, not an error. It is falsy so callers
    can write ``if not result``.
    """

    source: str
    target: str
    steps: tuple[PathStep, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return False

    @property
    def total_distance(self) -> float:
        return NO_ROUTE


@dataclass(frozen=True, slots=True)
class Country:
    """An entry of the country-code table.

    Attributes:
        code: Short state code (e.g., 'USA')
        name: Normalized country name used as the graph vertex
    """

    code: str
    name: str
