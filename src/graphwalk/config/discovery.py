"""Locate the ``graphwalk.toml`` that settings should load.

Precedence: ``--config`` path, then ``GRAPHWALK_CONFIG``, then the nearest
``graphwalk.toml`` in the working directory or any parent.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "graphwalk.toml"
CONFIG_ENV_VAR = "GRAPHWALK_CONFIG"


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Return the config file to load, or None to run on defaults.

    An override (*explicit* or the env var) that does not name a file
    disables the walk-up search instead of falling through to it.
    """
    override = explicit or os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
