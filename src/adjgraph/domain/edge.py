"""Edge: one outgoing adjacency entry.

An edge never owns its destination. It stores the destination's storage
key, resolved through :meth:`Graph.destination`, so a removed vertex shows
up as a :class:`~adjgraph.domain.errors.DanglingEdgeError` rather than a
stale object.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """Weighted reference from a vertex to a destination vertex."""

    target: int  # storage key of the destination
    target_id: int  # caller id of the destination when the edge was made
    weight: float = 0.0

    def points_to(self, key: int) -> bool:
        return self.target == key
