"""Lazy BFS/DFS iterators over a graph's vertices.

Both iterators expand every popped vertex's current edges with NO visited
set. A vertex reachable along several paths is yielded several times, and
on a cyclic graph (every undirected graph with an edge is one) the
sequence never ends. Bound it with :func:`itertools.islice` or stop
pulling.

The frontier holds the start vertex and, after that, edges. Each edge is
resolved against the live graph when it reaches the front, so a removed
destination raises :class:`~adjgraph.domain.errors.DanglingEdgeError`
at that point. Resolution happens before the frontier is popped, which
leaves the iterator unchanged when it raises.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING

from adjgraph.domain.edge import Edge
from adjgraph.domain.vertex import Vertex

if TYPE_CHECKING:
    from adjgraph.domain.graph import Graph

type _Pending[T] = Vertex[T] | Edge


class _Traversal[T](ABC):
    """Shared iterator protocol; subclasses pick the frontier discipline."""

    def __init__(self, graph: Graph[T], start: Vertex[T]) -> None:
        self._graph = graph
        self._seed(start)

    def __iter__(self) -> _Traversal[T]:
        return self

    def __next__(self) -> Vertex[T]:
        if not self.has_next():
            raise StopIteration
        vertex = self._resolve(self._peek())
        self._pop()
        self._push(vertex.edges)
        return vertex

    @abstractmethod
    def has_next(self) -> bool:
        """True while the frontier holds anything."""
        ...

    def _resolve(self, item: _Pending[T]) -> Vertex[T]:
        if isinstance(item, Vertex):
            return item
        return self._graph.destination(item)

    @abstractmethod
    def _seed(self, start: Vertex[T]) -> None:
        """Create the frontier holding only *start*."""
        ...

    @abstractmethod
    def _peek(self) -> _Pending[T]: ...

    @abstractmethod
    def _pop(self) -> None: ...

    @abstractmethod
    def _push(self, edges: list[Edge]) -> None: ...


class BFSIterator[T](_Traversal[T]):
    """FIFO frontier: dequeue the front, enqueue its destinations at the back."""

    def _seed(self, start: Vertex[T]) -> None:
        self._queue: deque[_Pending[T]] = deque([start])

    def has_next(self) -> bool:
        return bool(self._queue)

    def _peek(self) -> _Pending[T]:
        return self._queue[0]

    def _pop(self) -> None:
        self._queue.popleft()

    def _push(self, edges: list[Edge]) -> None:
        self._queue.extend(edges)


class DFSIterator[T](_Traversal[T]):
    """LIFO frontier: pop the top, push destinations in edge order.

    The last edge's destination is therefore visited next.
    """

    def _seed(self, start: Vertex[T]) -> None:
        self._stack: list[_Pending[T]] = [start]

    def has_next(self) -> bool:
        return bool(self._stack)

    def _peek(self) -> _Pending[T]:
        return self._stack[-1]

    def _pop(self) -> None:
        self._stack.pop()

    def _push(self, edges: list[Edge]) -> None:
        self._stack.extend(edges)
