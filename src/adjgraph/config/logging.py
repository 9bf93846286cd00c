"""structlog configuration for adjgraph.

Domain and service modules log through stdlib ``logging.getLogger``;
structlog renders those records via ``ProcessorFormatter``:

- Human (default): console renderer on stderr, colored on a TTY
- JSON (--log-json): one JSON object per line on stderr

:func:`graph_context` binds the operation being served (``op``,
``directed``, ``start``) so every record emitted while building or
walking a graph carries it.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import structlog

ADJ_LOGGER = "adjgraph"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Args:
        verbose: DEBUG for the ``adjgraph`` logger tree (graph mutations,
            service failures). When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(ADJ_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


@contextmanager
def graph_context(op: str, *, directed: bool, **fields: Any) -> Generator[None]:
    """Bind *op*, *directed* and any extra *fields* to records logged inside.

    ``None`` values are dropped so ``start`` only appears for traversals.
    """
    bound = {"op": op, "directed": directed, **{k: v for k, v in fields.items() if v is not None}}
    with structlog.contextvars.bound_contextvars(**bound):
        yield
