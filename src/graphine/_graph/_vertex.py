"""Vertex of a dependency graph."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from graphine._errors import InvalidArgumentError

if TYPE_CHECKING:
    from ._registry import Graph

logger = logging.getLogger(__name__)


class Vertex:
    """A named vertex holding metadata and its outgoing connections.

    A connection ``a -> b`` means "a depends on b". Connections are stored as
    identifiers and looked up through the owning ``Graph``, so a vertex never
    holds references to the vertices it depends on.

    Vertices are compared by identity.

    Example:
        >>> graph = Graph()
        >>> a = graph.add_vertex("a")
        >>> a.add_connection(graph.add_vertex("b"))
        >>> a.connection_ids
        ('b',)

    """

    __slots__ = ("_connection_ids", "_graph", "_id", "_metadata")

    def __init__(self, id: str, metadata: Mapping[str, Any] | None = None) -> None:  # noqa: A002
        if not isinstance(id, str):
            msg = f"Vertex id must be a string. Got: {type(id).__name__}"
            raise InvalidArgumentError(msg)
        if not id:
            msg = "Vertex id must not be empty"
            raise InvalidArgumentError(msg)

        self._id = id
        self._metadata: dict[str, Any] = dict(metadata) if isinstance(metadata, Mapping) else {}
        self._connection_ids: list[str] = []
        self._graph: Graph | None = None

    @classmethod
    def _create_in(cls, graph: Graph, id: str, metadata: Mapping[str, Any] | None = None) -> Vertex:  # noqa: A002
        vertex = cls(id, metadata)
        vertex._graph = graph
        return vertex

    @property
    def id(self) -> str:
        """The identifier of the vertex."""
        return self._id

    @property
    def metadata(self) -> Mapping[str, Any]:
        """Read-only view of the metadata attached to the vertex."""
        return MappingProxyType(self._metadata)

    @property
    def graph(self) -> Graph | None:
        """The graph owning this vertex, or None for a standalone vertex."""
        return self._graph

    @property
    def connection_ids(self) -> tuple[str, ...]:
        """Identifiers of the connected vertices, in connection order."""
        return tuple(self._connection_ids)

    def add_connection(self, target: Vertex) -> None:
        """Connect this vertex to ``target``.

        Adding an existing connection again is a no-op.

        Args:
            target: The vertex this vertex depends on.

        Raises:
            InvalidArgumentError: If ``target`` is not a Vertex, or if the two
                vertices are not owned by the same graph.

        """
        if not isinstance(target, Vertex):
            msg = f"Connection target must be a Vertex. Got: {type(target).__name__}"
            raise InvalidArgumentError(msg)
        if self._graph is None or target._graph is not self._graph:
            msg = f"Cannot connect '{self._id}' to '{target._id}': vertices must belong to the same graph"
            raise InvalidArgumentError(msg)
        if target._id in self._connection_ids:
            return
        self._connection_ids.append(target._id)
        logger.debug(f"Connected vertex '{self._id}' -> '{target._id}'")

    def connections(self) -> tuple[Vertex, ...]:
        """Get a snapshot of the connected vertices, in connection order."""
        if self._graph is None:
            return ()
        vertices = self._graph.vertices
        return tuple(vertices[vertex_id] for vertex_id in self._connection_ids)

    def __repr__(self) -> str:
        return f"Vertex({self._id!r}, connections={self._connection_ids!r})"
