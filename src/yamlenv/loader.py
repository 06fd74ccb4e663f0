from __future__ import annotations

import os
from typing import Any, Optional, Tuple, Type, TypeVar, Union

from dotenv import load_dotenv

from .decode import decode
from .env import resolve_env
from .exceptions import ConfigReadError
from .logger import get_logger
from .paths import DEFAULT_CONFIG_DIR, resolve_path

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_ENV_FILE = ".env"
ENV_FILE_VARIABLE = "YAMLENV_ENV_FILE"

PathType = Union[str, os.PathLike]


def _default_env_file() -> str:
    return os.environ.get(ENV_FILE_VARIABLE) or DEFAULT_ENV_FILE


def load_env_file(env_file: Optional[PathType] = None) -> bool:
    """Merge ``env_file`` into ``os.environ`` if it exists.

    Variables already present in the environment are kept. A missing or
    unreadable file is not an error; the return value tells whether anything
    was loaded.
    """
    path = os.fspath(env_file) if env_file is not None else _default_env_file()
    if not os.path.isfile(path):
        logger.debug(f"No env file at {path!r}, skipping")
        return False
    try:
        loaded = load_dotenv(path, override=False)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot load env file {path!r}, skipping: {e}")
        return False
    logger.debug(f"Loaded env file {path!r}")
    return loaded


def _read(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ConfigReadError(f"Cannot read config file {path}: {e}", path, e) from e


def load_config_with_path(
    filename: PathType,
    target: Optional[Type[T]] = None,
    *,
    env_file: Optional[PathType] = DEFAULT_ENV_FILE,
    config_dir: PathType = DEFAULT_CONFIG_DIR,
) -> Tuple[Any, str]:
    """Load a YAML config file with environment placeholders resolved.

    Args:
        filename: Absolute path, or a name looked up in the working directory
            and then in ``config_dir``.
        target: Type to decode into; ``None`` returns the parsed mapping.
        env_file: ``.env`` file merged into the environment before
            resolution, ``None`` to skip. When left at the default, the
            ``YAMLENV_ENV_FILE`` variable may point somewhere else.
        config_dir: Fallback directory for relative names.

    Returns:
        ``(config, resolved_path)``.

    Raises:
        ConfigReadError: the resolved file cannot be read.
        ConfigDecodeError: the resolved document cannot be decoded.
        Both carry the resolved path as ``error.path``.
    """
    if env_file is not None:
        if env_file == DEFAULT_ENV_FILE:
            env_file = _default_env_file()
        load_env_file(env_file)

    path = resolve_path(filename, config_dir)
    content = _read(path)
    resolved = resolve_env(content)
    config = decode(resolved, target, path)
    logger.debug(f"Loaded config from {path}")
    return config, path


def load_config(
    filename: PathType,
    target: Optional[Type[T]] = None,
    *,
    env_file: Optional[PathType] = DEFAULT_ENV_FILE,
    config_dir: PathType = DEFAULT_CONFIG_DIR,
) -> Any:
    """Same as :func:`load_config_with_path`, without the resolved path."""
    config, _ = load_config_with_path(filename, target, env_file=env_file, config_dir=config_dir)
    return config
