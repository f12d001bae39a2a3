"""Graph-related modules for the country border network.

This subpackage contains the graph store filled by the loaders and the
path-finding algorithm that runs on top of the sealed graph.
"""

from .dijkstra import (
    SearchResult,
    dijkstra,
    reconstruct_path,
    shortest_distance,
    shortest_path,
)
from .store import FrozenGraph, GraphStore, validate_weight

__all__ = [
    "FrozenGraph",
    "GraphStore",
    "SearchResult",
    "dijkstra",
    "reconstruct_path",
    "shortest_distance",
    "shortest_path",
    "validate_weight",
]
