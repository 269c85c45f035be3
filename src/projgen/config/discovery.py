"""Config file discovery.

Walk-up finder locates projgen.toml, similar to how git finds .git/.
``PROJGEN_CONFIG`` pins the file explicitly. Parsing and merging happen
in :mod:`projgen.config.settings`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "projgen.toml"
CONFIG_ENV_VAR = "PROJGEN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for projgen.toml.

    A set ``PROJGEN_CONFIG`` wins over the walk-up; when it names a file
    that does not exist there is no config at all.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
