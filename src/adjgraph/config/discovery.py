"""Config file discovery.

Locates adjgraph.toml the way git locates .git/: walk up from the
working directory and take the first hit. An explicit ``--config`` path
skips the walk, and ADJGRAPH_CONFIG replaces it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

CONFIG_FILENAME = "adjgraph.toml"
CONFIG_ENV_VAR = "ADJGRAPH_CONFIG"

logger = logging.getLogger(__name__)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for adjgraph.toml.

    Checks ADJGRAPH_CONFIG first; a path there that is not a file
    disables discovery rather than falling back to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | None = None, cwd: Path | None = None) -> Path | None:
    """Pick the TOML file for this invocation.

    *explicit* (the ``--config`` value) wins when given. A missing
    explicit file yields None, i.e. code defaults, and is logged.
    """
    if not explicit:
        return find_config(cwd)
    path = Path(explicit)
    if path.is_file():
        return path
    logger.warning("Config file %s not found; using defaults", explicit)
    return None
