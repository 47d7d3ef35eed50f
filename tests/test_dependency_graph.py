"""Tests for Vertex and Graph."""

import pytest

from graphine import Graph, InvalidArgumentError, Vertex


class TestVertexConstruction:
    """Tests for Vertex construction and identifier validation."""

    def test_id(self) -> None:
        vertex = Vertex("a")
        assert vertex.id == "a"

    def test_empty_id_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must not be empty"):
            Vertex("")

    def test_non_string_id_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must be a string"):
            Vertex(1)  # type: ignore[arg-type]

    def test_invalid_id_is_type_and_value_error(self) -> None:
        with pytest.raises(TypeError):
            Vertex(None)  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="must not be empty"):
            Vertex("")

    def test_metadata_defaults_to_empty(self) -> None:
        assert dict(Vertex("a").metadata) == {}

    def test_metadata_is_copied(self) -> None:
        metadata = {"owner": "core"}
        vertex = Vertex("a", metadata)
        metadata["owner"] = "other"
        assert vertex.metadata["owner"] == "core"

    def test_non_mapping_metadata_becomes_empty(self) -> None:
        vertex = Vertex("a", ["not", "a", "mapping"])  # type: ignore[arg-type]
        assert dict(vertex.metadata) == {}

    def test_metadata_is_read_only(self) -> None:
        vertex = Vertex("a", {"owner": "core"})
        with pytest.raises(TypeError):
            vertex.metadata["owner"] = "other"  # type: ignore[index]

    def test_standalone_vertex_has_no_connections(self) -> None:
        vertex = Vertex("a")
        assert vertex.graph is None
        assert vertex.connections() == ()
        assert vertex.connection_ids == ()


class TestVertexConnections:
    """Tests for Vertex.add_connection and connection snapshots."""

    def test_add_connection(self) -> None:
        graph = Graph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        a.add_connection(b)
        assert a.connections() == (b,)
        assert a.connection_ids == ("b",)

    def test_add_connection_preserves_order(self) -> None:
        graph = Graph()
        a = graph.add_vertex("a")
        for vertex_id in ["d", "b", "c"]:
            a.add_connection(graph.add_vertex(vertex_id))
        assert a.connection_ids == ("d", "b", "c")

    def test_add_connection_is_idempotent(self) -> None:
        graph = Graph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        a.add_connection(b)
        a.add_connection(b)
        assert a.connection_ids == ("b",)

    def test_add_connection_non_vertex_raises(self) -> None:
        graph = Graph()
        a = graph.add_vertex("a")
        with pytest.raises(InvalidArgumentError, match="must be a Vertex"):
            a.add_connection("b")  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            a.add_connection(None)  # type: ignore[arg-type]

    def test_add_connection_across_graphs_raises(self) -> None:
        a = Graph().add_vertex("a")
        b = Graph().add_vertex("b")
        with pytest.raises(InvalidArgumentError, match="same graph"):
            a.add_connection(b)

    def test_add_connection_standalone_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="same graph"):
            Vertex("a").add_connection(Vertex("b"))

    def test_connections_snapshot_is_detached(self) -> None:
        graph = Graph.from_edges([("a", "b")])
        a = graph.get_vertex("a")
        assert a is not None
        snapshot = a.connection_ids
        graph.add_edge("a", "c")
        assert snapshot == ("b",)
        assert a.connection_ids == ("b", "c")


class TestGraphVertices:
    """Tests for vertex registration and lookup."""

    @pytest.mark.parametrize("vertex_id", ["a", "A", "node-1", "pkg.module", "with space", "çà"])
    def test_add_then_get(self, vertex_id: str) -> None:
        graph = Graph()
        graph.add_vertex(vertex_id)
        vertex = graph.get_vertex(vertex_id)
        assert vertex is not None
        assert vertex.id == vertex_id
        assert vertex.graph is graph

    def test_add_vertex_is_idempotent(self) -> None:
        graph = Graph()
        first = graph.add_vertex("a", {"version": 1})
        second = graph.add_vertex("a", {"version": 2})
        assert first is second
        assert first.metadata["version"] == 1
        assert len(graph) == 1

    def test_add_vertex_invalid_id_raises(self) -> None:
        graph = Graph()
        with pytest.raises(InvalidArgumentError):
            graph.add_vertex("")
        with pytest.raises(InvalidArgumentError):
            graph.add_vertex(3)  # type: ignore[arg-type]
        assert len(graph) == 0

    def test_get_missing_vertex_returns_none(self) -> None:
        graph = Graph()
        assert graph.get_vertex("missing") is None

    def test_contains_and_iteration(self) -> None:
        graph = Graph.from_edges([("b", "a"), ("c", "a")])
        assert "a" in graph
        assert "z" not in graph
        assert list(graph) == ["b", "a", "c"]
        assert list(graph.vertices) == ["b", "a", "c"]

    def test_vertices_view_is_read_only(self) -> None:
        graph = Graph()
        graph.add_vertex("a")
        with pytest.raises(TypeError):
            graph.vertices["b"] = Vertex("b")  # type: ignore[index]


class TestGraphEdges:
    """Tests for edge insertion and connection queries."""

    def test_add_edge_creates_endpoints(self) -> None:
        graph = Graph()
        graph.add_edge("s", "e")
        assert graph.get_vertex("s") is not None
        assert graph.get_vertex("e") is not None
        assert len(graph) == 2

    def test_add_edge_is_idempotent(self) -> None:
        graph = Graph()
        graph.add_edge("s", "e")
        graph.add_edge("s", "e")
        assert graph.get_connections("s") == ("e",)

    def test_add_edge_is_directed(self) -> None:
        graph = Graph.from_edges([("s", "e")])
        assert graph.get_connections("s") == ("e",)
        assert graph.get_connections("e") == ()

    def test_add_edge_reuses_existing_vertex(self) -> None:
        graph = Graph()
        existing = graph.add_vertex("e", {"kind": "leaf"})
        graph.add_edge("s", "e")
        s = graph.get_vertex("s")
        assert s is not None
        assert s.connections() == (existing,)
        assert existing.metadata["kind"] == "leaf"

    def test_get_connections_missing_returns_none(self) -> None:
        graph = Graph.from_edges([("a", "b")])
        assert graph.get_connections("missing") is None

    def test_get_connections_order(self) -> None:
        graph = Graph.from_edges([("a", "c"), ("a", "b"), ("a", "d")])
        assert graph.get_connections("a") == ("c", "b", "d")

    def test_add_edge_invalid_id_raises(self) -> None:
        graph = Graph()
        with pytest.raises(InvalidArgumentError):
            graph.add_edge("a", "")
        assert len(graph) == 0

    def test_add_edge_invalid_start_leaves_graph_unchanged(self) -> None:
        graph = Graph.from_edges([("a", "b")])
        with pytest.raises(InvalidArgumentError):
            graph.add_edge(None, "c")  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            graph.add_edge("c", 1)  # type: ignore[arg-type]
        assert list(graph) == ["a", "b"]
        assert graph.get_connections("a") == ("b",)

    def test_self_edge(self) -> None:
        graph = Graph.from_edges([("a", "a")])
        assert graph.get_connections("a") == ("a",)
