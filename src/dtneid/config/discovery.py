"""Config file discovery.

Walk-up finder locates dtneid.toml from the working directory towards the
filesystem root. DTNEID_CONFIG, when set, wins over the walk-up.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "dtneid.toml"
CONFIG_ENV_VAR = "DTNEID_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest dtneid.toml at or above *start* (default: cwd).

    An unreadable DTNEID_CONFIG path yields None rather than falling back
    to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
