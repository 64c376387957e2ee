"""Public exception types for railgraph."""

from __future__ import annotations

from typing import Optional


class RailGraphError(Exception):
    """Base class for all railgraph exceptions."""


class MalformedEdgeToken(RailGraphError, ValueError):
    """Raised when an edge list token is not ``<Source><Destination><Digit>``."""

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"Edge token '{token}' is malformed: {reason}")


class UnknownNode(RailGraphError, LookupError):
    """Raised when a node does not exist in the graph."""

    def __init__(self, node: str) -> None:
        self.node = node
        super().__init__(f"{node} is not a node in the graph")


class NoSuchRoute(RailGraphError, LookupError):
    """Raised when no traversable edge or route exists for a request."""

    def __init__(
        self,
        source: Optional[str] = None,
        destination: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        self.source = source
        self.destination = destination
        if message is None:
            message = f"No edge from {source} to {destination}"
        super().__init__(message)


class EdgeNotFound(NoSuchRoute):
    """Raised by point lookups for a directed edge that is not stored."""


class PathTooShort(RailGraphError, ValueError):
    """Raised when a route names fewer than two nodes."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"At least 2 nodes are required, got {count}")


class PredicateRequiredForSameNodeQuery(RailGraphError, ValueError):
    """Raised when a start == end search has neither a predicate nor shortest mode."""

    def __init__(self, node: str) -> None:
        self.node = node
        super().__init__(
            f"Routes starting and ending at {node} require a predicate "
            "or shortest-route mode"
        )
