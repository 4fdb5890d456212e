"""Dependency injection module for the property mapper."""
from pathlib import Path
from typing import Optional, Union

from injector import Module, provider, singleton

from property_mapper.config.config_loader import ConfigLoader
from property_mapper.config.converter_config import ConverterConfig, LoggingConfig, PropertyMapperConfig
from property_mapper.config.logging_config import get_bootstrap_logger
from property_mapper.core.service.property_converter import PropertyConverter


class PropertyMapperModule(Module):
    """Binds the property mapper configuration and converter factory."""

    def __init__(
        self,
        config: Optional[PropertyMapperConfig] = None,
        config_path: Optional[Union[str, Path]] = None,
    ) -> None:
        """Initialize the module with optional configuration.

        Args:
            config: Optional PropertyMapperConfig instance
            config_path: Optional JSON/YAML file loaded when no config instance is given.
                Defaults are used when neither is provided.
        """
        self._config = config
        self._config_path = config_path

    @provider
    @singleton
    def provide_property_mapper_config(self) -> PropertyMapperConfig:
        """Provide the top level configuration."""
        if self._config is None:
            bootstrap_logger = get_bootstrap_logger("property_mapper")
            if self._config_path is None:
                bootstrap_logger.info("No configuration given, using defaults")
                self._config = PropertyMapperConfig()
            else:
                bootstrap_logger.info(f"Loading configuration from {self._config_path}")
                self._config = ConfigLoader.get_config(PropertyMapperConfig, self._config_path)
        return self._config

    @provider
    @singleton
    def provide_converter_config(self, config: PropertyMapperConfig) -> ConverterConfig:
        return config.converter

    @provider
    @singleton
    def provide_logging_config(self, config: PropertyMapperConfig) -> LoggingConfig:
        return config.logging

    @provider
    def provide_property_converter(self, converter_config: ConverterConfig) -> PropertyConverter:
        """Provide a fresh converter per injection; mappers are registered per use."""
        return PropertyConverter.from_config(converter_config)
