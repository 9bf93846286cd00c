"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, adjgraph.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- adjgraph.toml sections ---


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    directed: bool = False
    default_weight: float = 0.0
    cascade_removal: bool = False


class TraversalConfig(BaseModel):
    """[traversal] section."""

    model_config = {"frozen": True}

    default_limit: int = Field(default=20, ge=1)
    strategy: Literal["bfs", "dfs"] = "bfs"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    weight_precision: int = Field(default=2, ge=0, le=10)
