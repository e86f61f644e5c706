"""Config file discovery.

swapctl.toml is looked up from the working directory upwards, the way git
finds .git/.  The SWAPCTL_CONFIG env var pins an explicit file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "swapctl.toml"
CONFIG_ENV_VAR = "SWAPCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest swapctl.toml at or above *start* (default: cwd).

    When SWAPCTL_CONFIG is set, only that path is considered; a missing
    file there means no config rather than a fallback to walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
