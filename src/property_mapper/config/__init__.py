from .config_loader import ConfigLoader
from .converter_config import ConverterConfig, LoggingConfig, PropertyMapperConfig
from .logging_config import configure_logging, get_bootstrap_logger

__all__ = [
    "ConfigLoader",
    "ConverterConfig",
    "LoggingConfig",
    "PropertyMapperConfig",
    "configure_logging",
    "get_bootstrap_logger",
]
