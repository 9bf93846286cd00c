"""BaseService: shared foundation for adjgraph services.

Every service receives the resolved :class:`AdjSettings` at construction
time and builds graphs from its ``[graph]`` section.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from adjgraph.domain.graph import Graph
from adjgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from adjgraph.config.settings import AdjSettings
    from adjgraph.domain.errors import GraphError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def show(self, ...) -> ServiceResult:
                graph = self._new_graph()
                ...
    """

    def __init__(self, settings: AdjSettings) -> None:
        self._settings = settings

    def _new_graph(self) -> Graph[Any]:
        """Empty graph configured from the ``[graph]`` section."""
        cfg = self._settings.graph
        return Graph(
            directed=cfg.directed,
            default_weight=cfg.default_weight,
            cascade_removal=cfg.cascade_removal,
        )

    @staticmethod
    def _failure(op: str, exc: GraphError) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc.message)
        return ServiceResult.failure(op, exc)
