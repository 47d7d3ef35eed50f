"""Identifier-keyed registry owning the vertices of a graph."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Self

from ._resolver import CyclePolicy, resolve
from ._vertex import Vertex

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)


class Graph:
    """A directed graph of vertices keyed by identifier.

    The graph is the sole owner of its vertices. An edge ``a -> b`` means
    "a depends on b". Edges are add-only; there is no removal of edges or
    vertices.

    Mutating a graph while a resolution over it is running is not supported.

    Example:
        >>> graph = Graph()
        >>> graph.add_edge("A", "B")
        >>> graph.add_edge("A", "C")
        >>> graph.add_edge("B", "C")
        >>> graph.add_edge("B", "D")
        >>> graph.resolve("A")
        ['C', 'D', 'B', 'A']

    """

    __slots__ = ("_vertices",)

    def __init__(self) -> None:
        self._vertices: dict[str, Vertex] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[str, str]]) -> Self:
        """Build a graph from ``(start, end)`` edges, in the given order."""
        graph = cls()
        for start_id, end_id in edges:
            graph.add_edge(start_id, end_id)
        return graph

    @property
    def vertices(self) -> Mapping[str, Vertex]:
        """Read-only mapping from identifier to vertex, in creation order."""
        return MappingProxyType(self._vertices)

    def add_vertex(self, id: str, metadata: Mapping[str, Any] | None = None) -> Vertex:  # noqa: A002
        """Register a vertex, unless one with the same id already exists.

        Args:
            id: Identifier of the vertex.
            metadata: Metadata for a newly created vertex. Ignored when the
                vertex is already registered.

        Returns:
            The registered vertex.

        Raises:
            InvalidArgumentError: If ``id`` is empty or not a string.

        """
        vertex = self._lookup_or_build(id, metadata)
        self._register(vertex)
        return vertex

    def _lookup_or_build(self, id: str, metadata: Mapping[str, Any] | None = None) -> Vertex:  # noqa: A002
        """Get the registered vertex for ``id``, or build an unregistered one."""
        vertex = self._vertices.get(id) if isinstance(id, str) else None
        if vertex is not None:
            return vertex
        return Vertex._create_in(self, id, metadata)  # noqa: SLF001

    def _register(self, vertex: Vertex) -> None:
        if vertex.id in self._vertices:
            return
        self._vertices[vertex.id] = vertex
        logger.debug(f"Added vertex '{vertex.id}'")

    def get_vertex(self, id: str) -> Vertex | None:  # noqa: A002
        """Get the vertex registered under ``id``, or None if there is none."""
        return self._vertices.get(id)

    def add_edge(self, start_id: str, end_id: str) -> None:
        """Add the edge ``start_id -> end_id``, creating missing endpoints.

        Adding the same edge twice is a no-op. The graph is left unchanged
        when either id is invalid.

        Raises:
            InvalidArgumentError: If either id is empty or not a string.

        """
        start = self._lookup_or_build(start_id)
        end = self._lookup_or_build(end_id)
        self._register(start)
        # A self edge builds two vertices for the same id; link the registered one
        end = self._vertices.get(end.id, end)
        self._register(end)
        start.add_connection(end)

    def get_connections(self, id: str) -> tuple[str, ...] | None:  # noqa: A002
        """Get the identifiers connected from ``id``, or None if ``id`` is unregistered."""
        vertex = self._vertices.get(id)
        if vertex is None:
            return None
        return vertex.connection_ids

    def resolve(self, id: str, *, on_cycle: CyclePolicy = CyclePolicy.ERROR) -> list[str]:  # noqa: A002
        """Resolve the dependency order starting at the vertex ``id``.

        Raises:
            KeyError: If no vertex is registered under ``id``.
            CycleDetectedError: If a cycle is reached and ``on_cycle`` is ERROR.

        """
        vertex = self._vertices.get(id)
        if vertex is None:
            msg = f"No vertex registered under '{id}'"
            raise KeyError(msg)
        return resolve(vertex, on_cycle=on_cycle)

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._vertices)

    def __contains__(self, id: object) -> bool:  # noqa: A002
        """Check if a vertex is registered under ``id``."""
        return id in self._vertices

    def __iter__(self) -> Iterator[str]:
        """Iterate over vertex identifiers in creation order."""
        return iter(self._vertices)
