"""Config file discovery.

Walk-up finder locates scalarctl.toml, similar to how git finds .git/.
Supports the SCALARCTL_CONFIG env var and the --config CLI flag.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "scalarctl.toml"
CONFIG_ENV_VAR = "SCALARCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for scalarctl.toml.

    Returns the path to the config file, or None if not found.
    A set SCALARCTL_CONFIG wins over the walk-up, even when it points
    at a missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
