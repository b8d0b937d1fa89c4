"""Config file discovery.

Walk-up finder locates artindex.toml from the working directory towards
the filesystem root, the same way git finds .git/.  The ARTINDEX_CONFIG
env var pins an explicit file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "artindex.toml"
CONFIG_ENV_VAR = "ARTINDEX_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest artindex.toml at or above *start* (default: cwd).

    ARTINDEX_CONFIG wins when set; if it names a missing file, no
    config is used at all rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
