"""Top-level package for the Road Trip resolver.

Answers "what is the shortest road trip between country A and country B"
over the graph of land borders, weighted by the distance between capitals.

Subpackages:
- domain: immutable models and typed errors
- graph: graph store and Dijkstra path finder
- ports / adapters: loaders, name normalization, route solving
- services: the facade used by front-ends
"""

__version__ = "0.1.0"
