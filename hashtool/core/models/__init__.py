"""
Pydantic models for hashtool.

All models use Pydantic v2; value objects are frozen.
"""

from .base import HashToolBaseModel, ImmutableModel
from .config import HashConfig, HashToolConfig, LoggingConfig, OutputConfig
from .digest import DigestMode, DigestOptions, DigestReport, HashAlgorithm
from .inputs import HashInput, InputKind

__all__ = [
    "DigestMode",
    "DigestOptions",
    "DigestReport",
    "HashAlgorithm",
    "HashConfig",
    "HashInput",
    "HashToolBaseModel",
    "HashToolConfig",
    "ImmutableModel",
    "InputKind",
    "LoggingConfig",
    "OutputConfig",
]
