"""Locate and read ``shieldctl.toml``.

Lookup order: an explicit path (``--config``), then the ``SHIELDCTL_CONFIG``
environment variable, then a walk up from the working directory the way git
finds ``.git/``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "shieldctl.toml"
CONFIG_ENV_VAR = "SHIELDCTL_CONFIG"


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A set ``SHIELDCTL_CONFIG`` wins over the walk-up, even when the file it
    names does not exist.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None
    return _walk_up((start or Path.cwd()).resolve())


def resolve_config(explicit: str | Path | None = None, cwd: Path | None = None) -> Path | None:
    """Use *explicit* when given, otherwise :func:`find_config` from *cwd*.

    An explicit path that is not a file resolves to None; discovery is not
    attempted in its place.
    """
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    return find_config(cwd)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*.  Raises ``tomllib.TOMLDecodeError`` on bad syntax."""
    with path.open("rb") as fh:
        return tomllib.load(fh)
