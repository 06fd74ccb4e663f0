"""Pytest configuration and shared fixtures."""

import logging
import os
from pathlib import Path

import pytest


LOGGER_VARIABLES = [
    "LOGGER_LEVEL",
    "LOGGER_FORMAT",
    "LOGGER_OUTPUT",
    "LOGGER_MAX_SIZE",
    "LOGGER_MAX_BACKUPS",
    "LOGGER_MAX_AGE",
    "LOGGER_COMPRESS",
    "LOGGER_COLOR",
    "LOGGER_STACKTRACE",
    "YAMLENV_ENV_FILE",
]

LOGGER_DOCUMENT = """
logger:
  level: "${LOGGER_LEVEL:info}"
  format: "${LOGGER_FORMAT:console}"
  output: "${LOGGER_OUTPUT:stdout}"
  max_size: ${LOGGER_MAX_SIZE:100}
  max_backups: ${LOGGER_MAX_BACKUPS:3}
  max_age: ${LOGGER_MAX_AGE:7}
  compress: ${LOGGER_COMPRESS:true}
  color: ${LOGGER_COLOR:true}
  stacktrace: ${LOGGER_STACKTRACE:true}
"""


@pytest.fixture(autouse=True)
def restore_environ(monkeypatch):
    """Snapshot os.environ so .env loading cannot leak between tests."""
    saved = dict(os.environ)
    for name in LOGGER_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch) -> Path:
    """Run every test from an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def logger_config_file(tmp_path) -> Path:
    path = tmp_path / "test_config.yaml"
    path.write_text(LOGGER_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
