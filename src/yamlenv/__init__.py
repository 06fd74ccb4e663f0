"""Load YAML configuration files with ``${NAME:default}`` environment placeholders."""

from .decode import decode
from .env import Placeholder, find_placeholders, resolve_env
from .exceptions import ConfigDecodeError, ConfigReadError, YamlEnvError
from .loader import load_config, load_config_with_path, load_env_file
from .logger import get_logger
from .logger_config import LoggingConfig, setup_logger
from .paths import resolve_path

__version__ = "0.1.0"

__all__ = [
    "ConfigDecodeError",
    "ConfigReadError",
    "LoggingConfig",
    "Placeholder",
    "YamlEnvError",
    "decode",
    "find_placeholders",
    "get_logger",
    "load_config",
    "load_config_with_path",
    "load_env_file",
    "resolve_env",
    "resolve_path",
    "setup_logger",
]
