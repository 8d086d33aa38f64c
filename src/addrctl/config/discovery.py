"""Locate the ``addrctl.toml`` that applies to a data directory.

The file is looked up from the data directory towards the filesystem
root, the way git finds ``.git/``. ``ADDRCTL_CONFIG`` pins one file and
disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "addrctl.toml"
CONFIG_ENV_VAR = "ADDRCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A path in ``ADDRCTL_CONFIG`` wins outright; if it names a missing file
    no config is used at all rather than falling back to the search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
