"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Graph storage (border, distance and code files)
- Route solving (Dijkstra)
- Country name normalization (override table)
"""
