"""Dependency-order resolution over a graph of vertices."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from graphine._errors import CycleDetectedError, InvalidArgumentError

from ._vertex import Vertex

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class CyclePolicy(StrEnum):
    """What the resolver does when an edge leads back onto the active path."""

    ERROR = "error"
    """Abort resolution with CycleDetectedError."""

    SKIP = "skip"
    """Ignore the cyclic edge and return a best-effort order."""


@dataclass(slots=True)
class _Frame:
    """A vertex being visited and the position of its next connection."""

    vertex: Vertex
    targets: tuple[str, ...]
    index: int = 0


def _push(stack: list[_Frame], path: list[str], on_path: set[str], vertex: Vertex) -> None:
    stack.append(_Frame(vertex=vertex, targets=vertex.connection_ids))
    path.append(vertex.id)
    on_path.add(vertex.id)


def resolve(vertex: Vertex, *, on_cycle: CyclePolicy | str = CyclePolicy.ERROR) -> list[str]:
    """Order the vertices reachable from ``vertex`` so that dependencies come first.

    The walk is depth-first over connections in connection order, and a vertex
    is emitted once all of its connections are emitted (postorder). For every
    edge ``u -> v`` reachable from ``vertex``, ``v`` appears before ``u``.

    Cycles are detected against the active path only: reaching a vertex that
    was already fully resolved through another branch is not a cycle.

    Args:
        vertex: The vertex to start from.
        on_cycle: Policy applied when an edge leads back onto the active path.

    Returns:
        Identifiers in dependency order, ending with ``vertex.id``.

    Raises:
        InvalidArgumentError: If ``vertex`` is not a Vertex, or ``on_cycle`` is
            not a known policy.
        CycleDetectedError: If a cycle is reached and ``on_cycle`` is ERROR.

    Example:
        >>> # A -> B, A -> C, B -> C, B -> D
        >>> resolve(graph.get_vertex("A"))
        ['C', 'D', 'B', 'A']

    """
    if not isinstance(vertex, Vertex):
        msg = f"Expected a Vertex to resolve. Got: {type(vertex).__name__}"
        raise InvalidArgumentError(msg)
    try:
        policy = CyclePolicy(on_cycle)
    except ValueError as e:
        msg = f"Unknown cycle policy '{on_cycle}'. Expected one of: {', '.join(CyclePolicy)}"
        raise InvalidArgumentError(msg) from e

    # Every vertex reachable from the start belongs to the start vertex's graph
    vertices: Mapping[str, Vertex] = vertex.graph.vertices if vertex.graph is not None else {}

    resolved: list[str] = []
    done: set[str] = set()
    # One frame per vertex on the active path
    stack: list[_Frame] = []
    path: list[str] = []
    on_path: set[str] = set()
    _push(stack, path, on_path, vertex)

    while stack:
        frame = stack[-1]

        if frame.index < len(frame.targets):
            target_id = frame.targets[frame.index]
            frame.index += 1

            if target_id in done:
                continue

            if target_id in on_path:
                edge = (frame.vertex.id, target_id)
                if policy is CyclePolicy.ERROR:
                    cycle = (*path[path.index(target_id) :], target_id)
                    raise CycleDetectedError(edge, cycle)
                logger.debug(f"Skipping cyclic edge '{edge[0]}' -> '{edge[1]}'")
                continue

            _push(stack, path, on_path, vertices[target_id])
            continue

        stack.pop()
        path.pop()
        on_path.discard(frame.vertex.id)
        resolved.append(frame.vertex.id)
        done.add(frame.vertex.id)

    logger.debug(f"Resolved {len(resolved)} vertices from '{vertex.id}'")
    return resolved
