"""
Configuration schemas for the property mapper.

Provides Pydantic configuration models for the converter's error policy
and exclusion set, and for the logging setup of applications embedding it.
"""

import logging
from typing import Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from property_mapper.core.service.exclusion_filter import DEFAULT_EXCLUSIONS


class ConverterConfig(BaseModel):
    """Settings applied to a PropertyConverter when it is created."""

    model_config = ConfigDict(extra="forbid")

    fail_on_error: bool = Field(
        default=False,
        description="Raise default-path access failures instead of logging and skipping them"
    )

    exclusions: Set[str] = Field(
        default_factory=lambda: set(DEFAULT_EXCLUSIONS),
        description="Property names never read or written during a conversion"
    )


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Logging level (INFO, DEBUG, WARNING, ERROR, CRITICAL)
        format: Log message format string
        file_path: Path to log file; file logging is disabled when unset
        console_enabled: Whether to also log to console
        rotation_enabled: Whether to use rotating log files
        max_bytes: Maximum size of log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
    """

    model_config = ConfigDict(extra="forbid")

    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file_path: Optional[str] = None
    console_enabled: bool = True
    rotation_enabled: bool = True
    max_bytes: int = 10_485_760  # 10 MB
    backup_count: int = 5

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class PropertyMapperConfig(BaseModel):
    """Top level configuration document."""

    model_config = ConfigDict(extra="forbid")

    converter: ConverterConfig = Field(default_factory=ConverterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
