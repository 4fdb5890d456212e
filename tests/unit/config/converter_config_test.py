"""Unit tests for the configuration schemas and ConfigLoader."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from property_mapper.config.config_loader import ConfigLoader
from property_mapper.config.converter_config import ConverterConfig, LoggingConfig, PropertyMapperConfig
from property_mapper.core.service.exclusion_filter import DEFAULT_EXCLUSIONS


class TestConverterConfig:
    """Test suite for ConverterConfig."""

    def test_defaults(self) -> None:
        # Given / When
        config = ConverterConfig()

        # Then
        assert config.fail_on_error is False
        assert config.exclusions == set(DEFAULT_EXCLUSIONS)

    def test_default_exclusions_are_not_shared(self) -> None:
        # Given
        first = ConverterConfig()
        second = ConverterConfig()

        # When
        first.exclusions.add("number_field")

        # Then
        assert "number_field" not in second.exclusions

    def test_unknown_keys_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConverterConfig(fail_fast=True)


class TestLoggingConfig:
    """Test suite for LoggingConfig."""

    def test_level_is_normalised(self) -> None:
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_level_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown log level"):
            LoggingConfig(level="chatty")


class TestConfigLoader:
    """Test suite for ConfigLoader.get_config()."""

    def test_loads_json(self, tmp_path: Path) -> None:
        # Given
        path = tmp_path / "application.json"
        path.write_text(json.dumps({"converter": {"fail_on_error": True, "exclusions": ["password"]}}))

        # When
        config = ConfigLoader.get_config(PropertyMapperConfig, path)

        # Then
        assert config.converter.fail_on_error is True
        assert config.converter.exclusions == {"password"}
        assert config.logging == LoggingConfig()

    def test_loads_yaml(self, tmp_path: Path) -> None:
        # Given
        path = tmp_path / "application.yaml"
        path.write_text(
            "converter:\n"
            "  exclusions:\n"
            "    - password\n"
            "    - token\n"
            "logging:\n"
            "  level: warning\n"
            "  console_enabled: false\n"
        )

        # When
        config = ConfigLoader.get_config(PropertyMapperConfig, str(path))

        # Then
        assert config.converter.fail_on_error is False
        assert config.converter.exclusions == {"password", "token"}
        assert config.logging.level == "WARNING"
        assert config.logging.console_enabled is False

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        # Given
        path = tmp_path / "application.yml"
        path.write_text("")

        # When / Then
        assert ConfigLoader.get_config(PropertyMapperConfig, path) == PropertyMapperConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader.get_config(PropertyMapperConfig, tmp_path / "missing.json")

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        # Given
        path = tmp_path / "application.toml"
        path.write_text("")

        # When / Then
        with pytest.raises(ValueError, match="Unsupported configuration file type"):
            ConfigLoader.get_config(PropertyMapperConfig, path)

    def test_invalid_content_is_rejected(self, tmp_path: Path) -> None:
        # Given
        path = tmp_path / "application.json"
        path.write_text(json.dumps({"converter": {"unexpected": 1}}))

        # When / Then
        with pytest.raises(ValidationError):
            ConfigLoader.get_config(PropertyMapperConfig, path)
