"""Graph: ordered adjacency-list storage with vertex/edge mutation.

Vertices live in an insertion-ordered arena keyed by a graph-assigned
storage key. Edges hold that key, never the vertex object, and are
resolved through :meth:`Graph.destination`.

Edge insertion semantics come from an :class:`EdgePolicy` chosen at
construction:

- :class:`UndirectedPolicy` (default): rejects self loops, then stores a
  mirrored pair of edges with the same weight.
- :class:`DirectedPolicy`: stores a single edge and accepts self loops.

INVARIANT: an operation that raises has made no mutation.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from itertools import count
from typing import IO, Protocol

from adjgraph.domain.edge import Edge
from adjgraph.domain.errors import DanglingEdgeError, NotFoundError, SelfLoopError
from adjgraph.domain.traversal import BFSIterator, DFSIterator
from adjgraph.domain.vertex import Vertex

logger = logging.getLogger(__name__)


class EdgePolicy(Protocol):
    """Strategy for turning ``add_edge(from, to)`` into stored edges."""

    directed: bool

    def link[T](self, graph: Graph[T], from_id: int, to_id: int, weight: float) -> list[Edge]:
        """Store the edge(s) and return them in insertion order."""
        ...


class UndirectedPolicy:
    """Mirrored edge pair; self loops are rejected before any lookup."""

    directed = False

    def link[T](self, graph: Graph[T], from_id: int, to_id: int, weight: float) -> list[Edge]:
        if from_id == to_id:
            raise SelfLoopError(from_id)
        v = graph.find_vertex(from_id)
        u = graph.find_vertex(to_id)
        return [u.add_edge(v, weight), v.add_edge(u, weight)]


class DirectedPolicy:
    """Single edge ``from -> to``; self loops are accepted."""

    directed = True

    def link[T](self, graph: Graph[T], from_id: int, to_id: int, weight: float) -> list[Edge]:
        v = graph.find_vertex(from_id)
        u = graph.find_vertex(to_id)
        return [v.add_edge(u, weight)]


class Graph[T]:
    """Adjacency-list graph, undirected unless built with ``directed=True``.

    Vertex ids are the sole lookup key. Uniqueness is the caller's job:
    with duplicate ids the first vertex in insertion order wins.

    Traversals read the live edge lists. Mutating the graph while an
    iterator is in progress is the caller's responsibility.
    """

    def __init__(
        self,
        *,
        directed: bool = False,
        default_weight: float = 0.0,
        cascade_removal: bool = False,
        policy: EdgePolicy | None = None,
    ) -> None:
        if policy is None:
            policy = DirectedPolicy() if directed else UndirectedPolicy()
        self._policy = policy
        self._vertices: dict[int, Vertex[T]] = {}
        self._keys = count()
        self.default_weight = default_weight
        self.cascade_removal = cascade_removal

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, vertices={len(self)}, edges={self.edge_count()})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex[T]]:
        return iter(list(self._vertices.values()))

    def __contains__(self, vertex_id: object) -> bool:
        return any(v.id == vertex_id for v in self._vertices.values())

    @property
    def directed(self) -> bool:
        return self._policy.directed

    @property
    def vertices(self) -> list[Vertex[T]]:
        """Snapshot of the stored vertices in insertion order."""
        return list(self._vertices.values())

    def edge_count(self) -> int:
        """Total stored edges. An undirected edge counts twice."""
        return sum(v.degree for v in self._vertices.values())

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, vertex_id: int, data: T | None = None) -> Vertex[T]:
        """Append a new vertex. Duplicate ids are not checked."""
        vertex: Vertex[T] = Vertex(next(self._keys), vertex_id, data)
        self._vertices[vertex.key] = vertex
        logger.debug("Added vertex %s", vertex_id)
        return vertex

    def find_vertex(self, vertex_id: int) -> Vertex[T]:
        """Return the first vertex with *vertex_id*.

        Raises:
            NotFoundError: No stored vertex has that id.
        """
        for vertex in self._vertices.values():
            if vertex.id == vertex_id:
                return vertex
        raise NotFoundError(vertex_id)

    def remove_vertex(self, vertex_id: int, *, cascade: bool | None = None) -> Vertex[T] | None:
        """Remove and return the first vertex with *vertex_id*, or None if absent.

        Edges elsewhere that point at the removed vertex are left in place
        (they become dangling) unless *cascade* is true. *cascade* defaults
        to the graph's ``cascade_removal`` setting.
        """
        for key, vertex in self._vertices.items():
            if vertex.id == vertex_id:
                break
        else:
            return None

        del self._vertices[key]
        if cascade is None:
            cascade = self.cascade_removal
        scrubbed = 0
        if cascade:
            for other in self._vertices.values():
                scrubbed += other.remove_edge(vertex)
        logger.debug("Removed vertex %s (cascade=%s, scrubbed=%d)", vertex_id, cascade, scrubbed)
        return vertex

    def destination(self, edge: Edge) -> Vertex[T]:
        """Resolve *edge* to its destination vertex.

        Raises:
            DanglingEdgeError: The destination has been removed.
        """
        try:
            return self._vertices[edge.target]
        except KeyError:
            raise DanglingEdgeError(edge) from None

    def neighbors(self, vertex_id: int) -> list[Vertex[T]]:
        """Destinations of the vertex's outgoing edges, in edge order."""
        return [self.destination(e) for e in self.find_vertex(vertex_id).edges]

    def dangling_edges(self) -> list[tuple[Vertex[T], Edge]]:
        """Every ``(owner, edge)`` whose destination is no longer stored."""
        return [
            (v, e)
            for v in self._vertices.values()
            for e in v.edges
            if e.target not in self._vertices
        ]

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, from_id: int, to_id: int, weight: float | None = None) -> list[Edge]:
        """Connect two vertices according to the graph's edge policy.

        Raises:
            SelfLoopError: Undirected graph and ``from_id == to_id``.
            NotFoundError: Either endpoint does not exist.
        """
        if weight is None:
            weight = self.default_weight
        stored = self._policy.link(self, from_id, to_id, float(weight))
        logger.debug("Added edge %s -> %s [%s]", from_id, to_id, weight)
        return stored

    def remove_edge(self, from_id: int, to_id: int) -> int:
        """Remove all edges between two vertices, in both directions.

        Returns the number of edges removed.
        """
        v = self.find_vertex(from_id)
        u = self.find_vertex(to_id)
        removed = u.remove_edge(v) + v.remove_edge(u)
        logger.debug("Removed %d edge(s) between %s and %s", removed, from_id, to_id)
        return removed

    def remove_edges(self, vertex_id: int) -> int:
        """Remove every edge to and from a vertex; return how many went."""
        v = self.find_vertex(vertex_id)
        removed = sum(other.remove_edge(v) for other in self._vertices.values())
        removed += v.degree
        v.remove_all_edges()
        logger.debug("Cleared %d edge(s) of vertex %s", removed, vertex_id)
        return removed

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _owned(self, start: Vertex[T]) -> Vertex[T]:
        # Storage keys restart at 0 in every graph, so a foreign vertex's
        # edges would resolve against this graph's arena.
        if self._vertices.get(start.key) is not start:
            raise NotFoundError(start.id)
        return start

    def bfs(self, start: Vertex[T]) -> BFSIterator[T]:
        """Breadth-first iterator rooted at *start* (no visited set).

        Raises:
            NotFoundError: *start* is not stored in this graph.
        """
        return BFSIterator(self, self._owned(start))

    def dfs(self, start: Vertex[T]) -> DFSIterator[T]:
        """Depth-first iterator rooted at *start* (no visited set).

        Raises:
            NotFoundError: *start* is not stored in this graph.
        """
        return DFSIterator(self, self._owned(start))

    get_bfs_iterator = bfs
    get_dfs_iterator = dfs

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def format_graph(self) -> str:
        """Render ``<id>: <destId>[<weight>] ...`` per vertex in storage order."""
        lines = []
        for v in self._vertices.values():
            entries = "".join(f" {e.target_id}[{e.weight:.2f}]" for e in v.edges)
            lines.append(f"{v.id}:{entries}\n")
        return "".join(lines)

    def print_graph(self, file: IO[str] | None = None) -> None:
        (file or sys.stdout).write(self.format_graph())


def DirectedGraph[T](  # noqa: N802
    *,
    default_weight: float = 0.0,
    cascade_removal: bool = False,
) -> Graph[T]:
    """Build a :class:`Graph` with single-direction edges and no self-loop guard."""
    return Graph(directed=True, default_weight=default_weight, cascade_removal=cascade_removal)
