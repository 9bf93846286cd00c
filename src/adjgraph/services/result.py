"""ServiceResult and ServiceError: the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI consumes this type; renderers read ``items`` and ``ids`` rather
than reaching into ``data``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from adjgraph.domain.errors import GraphError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_graph_error(cls, exc: GraphError) -> ServiceError:
        """Carry a domain error's code, message and detail fields over."""
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: ``"show"``, ``"bfs"`` or ``"dfs"``.
        data: Operation-specific payload on success. Both ops put one
            dict per vertex under ``items``.
        warnings: Non-fatal issues, e.g. a traversal cut short by its limit.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (the traversal limit).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: GraphError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_graph_error(exc))

    @property
    def items(self) -> list[dict[str, Any]]:
        """Per-vertex entries: adjacency rows for show, the visit order for walks."""
        items = self.data.get("items")
        return items if isinstance(items, list) else []

    @property
    def ids(self) -> list[int]:
        """Vertex ids of :attr:`items`, in order, repeats included."""
        return [item["id"] for item in self.items if "id" in item]
