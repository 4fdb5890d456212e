"""Logging configuration utilities for applications using the property mapper.

Example usage:
    from property_mapper.config.logging_config import configure_logging
    configure_logging(config.logging, service_name="my_service")

The converter itself only ever emits through module level loggers; this
module decides where those records end up.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from property_mapper.config.converter_config import LoggingConfig

_BOOTSTRAP_HANDLER_ATTR = "_bootstrap_handler_installed"


def configure_logging(
    logging_config: Optional[LoggingConfig] = None,
    service_name: str = "property_mapper",
) -> List[logging.Handler]:
    """Configure the root logger from a LoggingConfig.

    Args:
        logging_config: The logging configuration (defaults are used if not provided)
        service_name: Name used for the default log file when file logging is enabled

    Returns:
        The handlers installed on the root logger
    """
    logging_config = logging_config or LoggingConfig()
    level = getattr(logging, logging_config.level.upper(), logging.INFO)
    formatter = logging.Formatter(logging_config.format)

    # Reset root logger
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    handlers: List[logging.Handler] = []

    if logging_config.file_path:
        log_file = Path(logging_config.file_path)
        log_file.parent.mkdir(exist_ok=True, parents=True)
        if logging_config.rotation_enabled:
            handlers.append(
                RotatingFileHandler(
                    str(log_file),
                    maxBytes=logging_config.max_bytes,
                    backupCount=logging_config.backup_count
                )
            )
        else:
            handlers.append(logging.FileHandler(str(log_file)))

    if logging_config.console_enabled:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
        logging.root.addHandler(handler)
    logging.root.setLevel(level)

    logging.getLogger(service_name).debug(
        f"Logging configured for {service_name} at level {logging_config.level}"
    )
    return handlers


def get_bootstrap_logger(service_name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a temporary bootstrap logger for early startup diagnostics.

    Logger name pattern: ``{service_name}.bootstrap``. A handler is only
    attached once; subsequent calls return the same configured logger.
    """
    name = f"{service_name}.bootstrap"
    logger = logging.getLogger(name)
    if not getattr(logger, _BOOTSTRAP_HANDLER_ATTR, False):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | BOOT | %(levelname)-8s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
        setattr(logger, _BOOTSTRAP_HANDLER_ATTR, True)
    return logger
