"""Vertex: identifier, payload, and an ordered list of outgoing edges."""

from __future__ import annotations

from adjgraph.domain.edge import Edge


class Vertex[T]:
    """A node of the adjacency list.

    Attributes:
        key: Storage key assigned by the owning graph. Unique per graph,
            never reused, and the only thing edges refer to.
        id: Caller-assigned identifier. Not validated for uniqueness.
        data: Opaque payload.
        edges: Outgoing edges in insertion order.
    """

    __slots__ = ("data", "edges", "id", "key")

    def __init__(self, key: int, vertex_id: int, data: T | None = None) -> None:
        self.key = key
        self.id = vertex_id
        self.data = data
        self.edges: list[Edge] = []

    def __repr__(self) -> str:
        return f"Vertex(id={self.id!r}, data={self.data!r}, degree={self.degree})"

    @property
    def degree(self) -> int:
        """Number of outgoing edges, parallel edges included."""
        return len(self.edges)

    def add_edge(self, destination: Vertex[T], weight: float = 0.0) -> Edge:
        """Append an edge to *destination*. Parallel edges accumulate."""
        edge = Edge(target=destination.key, target_id=destination.id, weight=float(weight))
        self.edges.append(edge)
        return edge

    def remove_edge(self, destination: Vertex[T]) -> int:
        """Remove every edge pointing at *destination*; return how many went."""
        kept = [e for e in self.edges if not e.points_to(destination.key)]
        removed = len(self.edges) - len(kept)
        self.edges = kept
        return removed

    def remove_all_edges(self) -> None:
        self.edges = []

    def has_edge_to(self, destination: Vertex[T]) -> bool:
        return any(e.points_to(destination.key) for e in self.edges)
