import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._errors import GraphDocumentError
from ._graph import Graph

logger = logging.getLogger(__name__)


# =============================================================================
# Graph Document Schema
# =============================================================================


class VertexEntry(BaseModel):
    """A vertex of a graph document and the vertices it depends on."""

    model_config = ConfigDict(extra="forbid")

    depends: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("depends")
    @classmethod
    def _check_depends(cls, value: list[str]) -> list[str]:
        if any(not dep for dep in value):
            msg = "dependency ids must not be empty"
            raise ValueError(msg)
        return value


class GraphDocument(BaseModel):
    """A graph described as a table of vertices.

    Example:
        [vertices.A]
        depends = ["B", "C"]

        [vertices.B]
        depends = ["C", "D"]
        metadata = { owner = "core" }

    """

    model_config = ConfigDict(extra="forbid")

    vertices: dict[str, VertexEntry] = Field(default_factory=dict)

    @field_validator("vertices")
    @classmethod
    def _check_vertex_ids(cls, value: dict[str, VertexEntry]) -> dict[str, VertexEntry]:
        if "" in value:
            msg = "vertex ids must not be empty"
            raise ValueError(msg)
        return value


# =============================================================================
# Loading
# =============================================================================


def graph_from_document(document: GraphDocument) -> Graph:
    """Build a graph from a validated document.

    Vertices are registered in document order with their metadata, then
    edges are added in the order of each vertex's ``depends`` list.
    """
    graph = Graph()
    for vertex_id, entry in document.vertices.items():
        graph.add_vertex(vertex_id, entry.metadata)
    for vertex_id, entry in document.vertices.items():
        for dep in entry.depends:
            graph.add_edge(vertex_id, dep)
    logger.debug(f"Built graph with {len(graph)} vertices from document")
    return graph


def load_graph_from_toml(path: Path) -> Graph:
    """Load a graph from a TOML graph document.

    Raises:
        GraphDocumentError: If the file is not valid TOML or does not match
            the document schema.

    """
    logger.debug(f"Loading graph document from {path}")
    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            msg = f"Invalid TOML in {path}: {e}"
            raise GraphDocumentError(msg) from e

    try:
        document = GraphDocument.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid graph document {path}: {e}"
        raise GraphDocumentError(msg) from e

    return graph_from_document(document)


# =============================================================================
# Export
# =============================================================================


def order_to_dict(start: str, order: list[str]) -> dict[str, Any]:
    """Convert a resolved order into a TOML-serializable dictionary."""
    return {"start": start, "order": list(order)}


def export_order_to_toml(start: str, order: list[str], path: Path) -> None:
    """Write a resolved order to a TOML file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(order_to_dict(start, order), f)
    logger.debug(f"Exported order of {len(order)} vertices to {path}")
