import logging
from logging.handlers import RotatingFileHandler

import pytest

import yamlenv.logger_config as logger_config
from yamlenv import get_logger, setup_logger


@pytest.fixture
def fresh_logger(monkeypatch, root_logger):
    monkeypatch.setattr(logger_config, "_LOGGER_INITIALIZED", False)
    return root_logger


def test_get_logger_namespacing():
    assert get_logger().name == "yamlenv"
    assert get_logger("yamlenv.loader").name == "yamlenv.loader"
    assert get_logger("myapp").name == "yamlenv.myapp"


def test_setup_logger_resolves_placeholders(workdir, fresh_logger, monkeypatch):
    log_file = workdir / "logs" / "app.log"
    (workdir / "logging.yaml").write_text(
        "logging:\n"
        "  level: ${LOG_LEVEL:INFO}\n"
        f"  file: {log_file}\n"
        "  console: ${LOG_CONSOLE:false}\n"
        "  rotate:\n"
        "    enabled: true\n"
        "    max_bytes: 1024\n"
        "    backup_count: 2\n"
    )
    monkeypatch.setenv("LOG_LEVEL", "warning")

    logger = setup_logger("logging.yaml")

    assert logger.name == "yamlenv"
    assert fresh_logger.level == logging.WARNING
    added = [h for h in fresh_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(added) == 1
    assert added[0].maxBytes == 1024
    assert added[0].backupCount == 2
    assert log_file.exists()


def test_setup_logger_defaults(workdir, fresh_logger):
    (workdir / "empty.yaml").write_text("other: 1\n")

    setup_logger("empty.yaml")

    assert fresh_logger.level == logging.INFO
    assert (workdir / "logs" / "app.log").exists()
    assert any(type(h) is logging.FileHandler for h in fresh_logger.handlers)


def test_setup_logger_installs_handlers_once(workdir, fresh_logger):
    (workdir / "logging.yaml").write_text("logging:\n  file: null\n  console: true\n")

    before = len(fresh_logger.handlers)
    setup_logger("logging.yaml")
    setup_logger("logging.yaml")

    assert len(fresh_logger.handlers) == before + 1


def test_setup_logger_emits_only_debug_records(workdir, fresh_logger, caplog):
    (workdir / "logging.yaml").write_text("logging:\n  file: null\n  console: false\n")

    with caplog.at_level(logging.DEBUG, logger="yamlenv"):
        setup_logger("logging.yaml")

    records = [r for r in caplog.records if r.name.startswith("yamlenv")]
    assert records
    assert all(r.levelno == logging.DEBUG for r in records)
