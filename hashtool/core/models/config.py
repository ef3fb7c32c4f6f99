"""
Configuration models.

Provides Pydantic models for hashtool configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import HashToolBaseModel
from .digest import HashAlgorithm

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(HashToolBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class HashConfig(ConfigBaseModel):
    """Hash run defaults; each can be overridden by a CLI flag."""

    algorithm: HashAlgorithm = HashAlgorithm.SHA256
    hex: bool = False
    update: bool = False
    quiet: bool = False
    progressive: bool = False

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: Any) -> Any:
        """Accept algorithm names in any case ('SHA256', 'Blake3')."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class OutputConfig(ConfigBaseModel):
    """Output configuration section."""

    preview_width: int = Field(default=40, ge=1)
    color: bool = True


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


class HashToolConfig(ConfigBaseModel):
    """Complete hashtool configuration."""

    hash: HashConfig = Field(default_factory=HashConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'hash.algorithm')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        obj: Any = self
        for part in key.split("."):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default
        return obj
