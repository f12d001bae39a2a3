"""Application services orchestrating ports and adapters."""

from .road_trip import RoadTripService, format_km

__all__ = ["RoadTripService", "format_km"]
