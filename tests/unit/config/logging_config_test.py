"""Unit tests for configure_logging() and get_bootstrap_logger()."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from property_mapper.config.converter_config import LoggingConfig
from property_mapper.config.logging_config import configure_logging, get_bootstrap_logger


def test_console_only_by_default(isolated_root_logger: logging.Logger) -> None:
    """Given no config When configured Then a single stdout handler at INFO is installed."""
    # When
    handlers = configure_logging()

    # Then
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].stream is sys.stdout
    assert isolated_root_logger.handlers == handlers
    assert isolated_root_logger.level == logging.INFO


def test_rotating_file_handler(isolated_root_logger: logging.Logger, tmp_path: Path) -> None:
    # Given
    log_file = tmp_path / "logs" / "mapper.log"
    config = LoggingConfig(level="DEBUG", file_path=str(log_file), console_enabled=False, max_bytes=1024, backup_count=2)

    # When
    handlers = configure_logging(config, service_name="mapper")
    logging.getLogger("mapper.test").debug("written to file")
    for handler in handlers:
        handler.flush()

    # Then
    assert len(handlers) == 1
    assert isinstance(handlers[0], RotatingFileHandler)
    assert handlers[0].maxBytes == 1024
    assert handlers[0].backupCount == 2
    assert isolated_root_logger.level == logging.DEBUG
    assert "written to file" in log_file.read_text()


def test_plain_file_handler_without_rotation(isolated_root_logger: logging.Logger, tmp_path: Path) -> None:
    # Given
    config = LoggingConfig(file_path=str(tmp_path / "mapper.log"), rotation_enabled=False)

    # When
    handlers = configure_logging(config)

    # Then
    assert [type(handler) for handler in handlers] == [logging.FileHandler, logging.StreamHandler]


def test_bootstrap_logger_installs_handler_once() -> None:
    # When
    first = get_bootstrap_logger("mapper-test")
    second = get_bootstrap_logger("mapper-test")

    # Then
    assert first is second
    assert first.name == "mapper-test.bootstrap"
    assert len(first.handlers) == 1
    assert first.propagate is False
