"""Locating ``bytectl.toml``.

``BYTECTL_CONFIG`` names a file outright.  Otherwise the search starts in
the working directory and climbs toward the filesystem root, so a file at
a project root covers every directory below it.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "bytectl.toml"
CONFIG_ENV_VAR = "BYTECTL_CONFIG"


def search_dirs(start: Path | None = None) -> Iterator[Path]:
    """Yield *start* (default: cwd) and then each ancestor, nearest first."""
    here = (start or Path.cwd()).resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None.

    A set ``BYTECTL_CONFIG`` is final: if it names a missing file, no
    config is used and no search happens.
    """
    named = os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    candidates = (d / CONFIG_FILENAME for d in search_dirs(start))
    return next((c for c in candidates if c.is_file()), None)
