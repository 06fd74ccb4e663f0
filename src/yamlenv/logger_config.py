from __future__ import annotations

import logging
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, List, Optional

from .loader import load_config
from .logger import ROOT_LOGGER_NAME, get_logger

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGER_INITIALIZED = False


@dataclass
class RotateConfig:
    enabled: Any = False
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = DEFAULT_FORMAT
    file: Optional[str] = "logs/app.log"
    console: Any = True
    rotate: RotateConfig = field(default_factory=RotateConfig)


@dataclass
class _Document:
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _as_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "on"}:
            return True
        if v in {"0", "false", "no", "off", ""}:
            return False
    return default


def build_handlers(log_config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if log_config.file:
        Path(log_config.file).parent.mkdir(parents=True, exist_ok=True)
        rotate = log_config.rotate
        if _as_bool(rotate.enabled, False):
            handlers.append(
                RotatingFileHandler(
                    log_config.file,
                    maxBytes=int(rotate.max_bytes),
                    backupCount=int(rotate.backup_count),
                    encoding="utf-8",
                )
            )
        else:
            handlers.append(logging.FileHandler(log_config.file, encoding="utf-8"))
    if _as_bool(log_config.console, True):
        handlers.append(logging.StreamHandler())
    formatter = logging.Formatter(log_config.format or DEFAULT_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logger(config_path: str = "config.yaml") -> logging.Logger:
    """Configure root logging from the ``logging`` section of a YAML file.

    The file goes through :func:`yamlenv.load_config`, so values such as
    ``level: ${LOG_LEVEL:INFO}`` are resolved from the environment. Handlers
    are installed once per process; later calls only return the logger.
    """
    global _LOGGER_INITIALIZED
    log_config = load_config(config_path, _Document).logging

    if not _LOGGER_INITIALIZED:
        level = getattr(logging, str(log_config.level).upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
        root = logging.getLogger()
        root.setLevel(level)
        for handler in build_handlers(log_config):
            root.addHandler(handler)
        _LOGGER_INITIALIZED = True

    logger = get_logger(ROOT_LOGGER_NAME)
    logger.debug("Logger initialized")
    return logger
