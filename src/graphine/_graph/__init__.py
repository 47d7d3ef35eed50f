"""Graph module providing the dependency graph and its resolver.

This module contains:
- Vertex: A named vertex with metadata and ordered outgoing connections
- Graph: The identifier-keyed registry owning all vertices
- resolve: Depth-first dependency-order resolution from a starting vertex
"""

from ._registry import Graph
from ._resolver import CyclePolicy, resolve
from ._vertex import Vertex

__all__ = ["CyclePolicy", "Graph", "Vertex", "resolve"]
