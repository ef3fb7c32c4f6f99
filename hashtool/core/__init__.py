"""
Core infrastructure for hashtool.

This package provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for pluggable services
- Pydantic models and settings
- Custom exception hierarchy
"""

from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    DigestStateError,
    HashToolConfigError,
    HashToolException,
    HexDecodeError,
    InputOrderError,
    InvalidHexCharacter,
    InvalidHexLength,
    InvalidHexPrefix,
    UnknownAlgorithmError,
    UnreadableSourceError,
)

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "DigestStateError",
    "HashToolConfigError",
    "HashToolException",
    "HexDecodeError",
    "InputOrderError",
    "InvalidHexCharacter",
    "InvalidHexLength",
    "InvalidHexPrefix",
    "UnknownAlgorithmError",
    "UnreadableSourceError",
]
