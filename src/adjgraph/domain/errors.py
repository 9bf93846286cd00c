"""Typed errors raised by graph operations.

Every error is raised at the point of detection and propagates unchanged.
An operation that raises has made no mutation. The service layer maps
``code`` onto :class:`~adjgraph.services.result.ServiceError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from adjgraph.domain.edge import Edge


class GraphError(Exception):
    """Base error for all graph operations."""

    code = "GRAPH_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> dict[str, Any]:
        """Structured context for error payloads."""
        return {}


class NotFoundError(GraphError, LookupError):
    """No vertex with the requested id is stored in the graph."""

    code = "NOT_FOUND"

    def __init__(self, vertex_id: int) -> None:
        super().__init__(f"Vertex {vertex_id} does not exist")
        self.vertex_id = vertex_id

    @property
    def detail(self) -> dict[str, Any]:
        return {"vertex_id": self.vertex_id}


class SelfLoopError(GraphError, ValueError):
    """An undirected edge was requested from a vertex to itself."""

    code = "SELF_LOOP"

    def __init__(self, vertex_id: int) -> None:
        super().__init__(f"Cannot add edge from vertex {vertex_id} to itself")
        self.vertex_id = vertex_id

    @property
    def detail(self) -> dict[str, Any]:
        return {"vertex_id": self.vertex_id}


class DanglingEdgeError(GraphError):
    """An edge points at a vertex that is no longer stored in the graph."""

    code = "DANGLING_EDGE"

    def __init__(self, edge: Edge) -> None:
        super().__init__(f"Edge destination {edge.target_id} was removed from the graph")
        self.edge = edge

    @property
    def detail(self) -> dict[str, Any]:
        return {"target_id": self.edge.target_id, "weight": self.edge.weight}


class SpecError(GraphError, ValueError):
    """A vertex or edge spec token could not be parsed."""

    code = "INVALID_SPEC"

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"Invalid spec '{token}': {reason}")
        self.token = token

    @property
    def detail(self) -> dict[str, Any]:
        return {"token": self.token}
