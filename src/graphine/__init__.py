"""Directed graphs with dependency-order resolution."""

__all__ = [
    "CycleDetectedError",
    "CyclePolicy",
    "Graph",
    "GraphDocument",
    "GraphDocumentError",
    "GraphineError",
    "InvalidArgumentError",
    "Vertex",
    "VertexEntry",
    "export_order_to_toml",
    "graph_from_document",
    "load_graph_from_toml",
    "resolve",
]

from ._errors import CycleDetectedError, GraphDocumentError, GraphineError, InvalidArgumentError
from ._graph import CyclePolicy, Graph, Vertex, resolve
from ._io import GraphDocument, VertexEntry, export_order_to_toml, graph_from_document, load_graph_from_toml
