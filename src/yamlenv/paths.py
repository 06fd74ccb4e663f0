from __future__ import annotations

import os
from typing import Union

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_DIR = "config"


def resolve_path(filename: Union[str, os.PathLike], config_dir: Union[str, os.PathLike] = DEFAULT_CONFIG_DIR) -> str:
    """Return the absolute path to treat as the configuration file.

    Search order, first match wins:

    1. an absolute ``filename`` is returned unchanged;
    2. ``filename`` exists relative to the working directory;
    3. ``config_dir`` is a directory in the working directory, in which case
       ``config_dir/filename`` is returned whether or not it exists;
    4. ``filename`` relative to the working directory, even though missing.

    A path is always returned so failures can report where the loader looked.
    """
    filename = os.fspath(filename)
    if os.path.isabs(filename):
        return filename

    if os.path.exists(filename):
        resolved = os.path.abspath(filename)
        logger.debug(f"Config {filename!r} found in working directory: {resolved}")
        return resolved

    if os.path.isdir(config_dir):
        resolved = os.path.abspath(os.path.join(config_dir, filename))
        logger.debug(f"Config {filename!r} looked up in {os.fspath(config_dir)!r}: {resolved}")
        return resolved

    resolved = os.path.abspath(filename)
    logger.debug(f"Config {filename!r} not found, falling back to {resolved}")
    return resolved
