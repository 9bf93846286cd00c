"""adjgraph: in-memory adjacency-list graphs with lazy traversal."""

from adjgraph.domain.errors import (
    DanglingEdgeError,
    GraphError,
    NotFoundError,
    SelfLoopError,
)
from adjgraph.domain.edge import Edge
from adjgraph.domain.graph import DirectedGraph, Graph
from adjgraph.domain.traversal import BFSIterator, DFSIterator
from adjgraph.domain.vertex import Vertex

__version__ = "0.1.0"

__all__ = [
    "BFSIterator",
    "DFSIterator",
    "DanglingEdgeError",
    "DirectedGraph",
    "Edge",
    "Graph",
    "GraphError",
    "NotFoundError",
    "SelfLoopError",
    "Vertex",
    "__version__",
]
