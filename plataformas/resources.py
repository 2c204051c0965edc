"""Locating the game's resource directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def _default_app_dir() -> Path:
    return Path(sys.argv[0] if sys.argv and sys.argv[0] else ".").resolve().parent


def search_and_set_resource_dir(folder_name: str, app_dir: str | os.PathLike | None = None) -> bool:
    """Find ``folder_name`` and make it the working directory.

    Looks in the working directory, then the application directory and up
    to three levels above it. Returns False, leaving the working directory
    untouched, if the folder is not found.
    """
    in_cwd = Path.cwd() / folder_name
    if in_cwd.is_dir():
        os.chdir(in_cwd)
        return True

    base = Path(app_dir) if app_dir is not None else _default_app_dir()
    for levels in range(4):
        candidate = base.joinpath(*([".."] * levels), folder_name)
        if candidate.is_dir():
            os.chdir(candidate)
            return True
    return False