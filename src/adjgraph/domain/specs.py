"""Vertex and edge spec tokens: the CLI's way of describing a graph.

Edge spec: ``FROM-TO`` or ``FROM-TO:WEIGHT`` (``1-2``, ``1-3:2.5``).
Vertex spec: ``ID`` or ``ID=DATA`` (``4``, ``4=depot``).

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from adjgraph.domain.errors import SpecError

_INT = r"[+-]?\d+"
_EDGE_PATTERN = re.compile(rf"^(?P<src>{_INT})-(?P<dst>{_INT})(?::(?P<weight>[^:]+))?$")
_VERTEX_PATTERN = re.compile(rf"^(?P<id>{_INT})(?:=(?P<data>.*))?$")


@dataclass(frozen=True)
class EdgeSpec:
    """A parsed ``FROM-TO[:WEIGHT]`` token."""

    from_id: int
    to_id: int
    weight: float | None = None  # None means the graph default


@dataclass(frozen=True)
class VertexSpec:
    """A parsed ``ID[=DATA]`` token."""

    vertex_id: int
    data: str | None = None


def parse_edge_spec(token: str) -> EdgeSpec:
    """Parse one edge token, raising :class:`SpecError` when malformed."""
    match = _EDGE_PATTERN.match(token.strip())
    if match is None:
        raise SpecError(token, "expected FROM-TO or FROM-TO:WEIGHT")
    weight: float | None = None
    raw_weight = match.group("weight")
    if raw_weight is not None:
        try:
            weight = float(raw_weight)
        except ValueError:
            raise SpecError(token, f"weight '{raw_weight}' is not a number") from None
    return EdgeSpec(int(match.group("src")), int(match.group("dst")), weight)


def parse_vertex_spec(token: str) -> VertexSpec:
    """Parse one vertex token, raising :class:`SpecError` when malformed."""
    match = _VERTEX_PATTERN.match(token.strip())
    if match is None:
        raise SpecError(token, "expected ID or ID=DATA")
    return VertexSpec(int(match.group("id")), match.group("data"))


def implied_vertex_ids(
    vertices: list[VertexSpec],
    edges: list[EdgeSpec],
) -> list[int]:
    """Vertex ids in first-mention order: explicit vertices, then edge endpoints."""
    seen: dict[int, None] = {}
    for v in vertices:
        seen.setdefault(v.vertex_id, None)
    for e in edges:
        seen.setdefault(e.from_id, None)
        seen.setdefault(e.to_id, None)
    return list(seen)
