"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- FileGraphRepository: Loads the graph from the border/distance/code files
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .file_repository import FileGraphRepository

__all__ = ["DijkstraRouteSolver", "FileGraphRepository"]
