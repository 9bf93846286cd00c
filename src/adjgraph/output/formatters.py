"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich tables and colors) or
machines (--json).  ``--quiet`` trims human output to vertex ids.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from adjgraph.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from adjgraph.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    weight_precision: int = Field(default=2, ge=0)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Precedence: JSON, then quiet, then the Rich renderer for ``result.op``.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        weight_precision=settings.weight_precision,
    )
