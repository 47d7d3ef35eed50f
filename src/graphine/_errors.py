"""Exceptions raised by graphine."""


class GraphineError(Exception):
    """Base class for all graphine errors."""


class InvalidArgumentError(GraphineError, TypeError, ValueError):
    """Raised when a malformed identifier or a non-vertex argument is passed."""


class CycleDetectedError(GraphineError):
    """Raised when dependency resolution meets a vertex still on the active path.

    Attributes:
        edge: The ``(source, target)`` edge that closes the cycle.
        cycle: Identifiers along the cycle, starting and ending with ``target``.

    """

    def __init__(self, edge: tuple[str, str], cycle: tuple[str, ...]) -> None:
        self.edge = edge
        self.cycle = cycle
        source, target = edge
        super().__init__(f"Cycle detected through edge '{source}' -> '{target}': {' -> '.join(cycle)}")


class GraphDocumentError(GraphineError):
    """Raised when a graph document cannot be read or does not match the schema."""
