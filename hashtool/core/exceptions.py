"""
Custom exception hierarchy for hashtool.

Every failure the CLI can report is a typed exception carrying the
offending token or path, so callers can surface an actionable message
and map it to a process exit code.
"""

from __future__ import annotations

# sysexits.h codes
EX_DATAERR = 65
EX_IOERR = 74
EX_CONFIG = 78


class HashToolException(Exception):
    """
    Base exception for all hashtool errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (tokens, paths, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Hex Decoding Errors
# =============================================================================


class HexDecodeError(HashToolException, ValueError):
    """
    A hex-literal input could not be decoded.

    Decoding is all-or-nothing: one bad token fails the whole input.
    """

    exit_code: int = EX_DATAERR

    def __init__(
        self,
        message: str,
        *,
        token: str,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.token = token
        ctx = context or {}
        ctx["token"] = token
        super().__init__(message, context=ctx, cause=cause)


class InvalidHexPrefix(HexDecodeError):
    """Token does not start with 0x or 0X."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f"Invalid hex prefix '{token}', should start with 0x or 0X",
            token=token,
        )


class InvalidHexLength(HexDecodeError):
    """Token is not exactly four characters long."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f"Invalid string length '{token}', should be 4, e.g. '0x12'",
            token=token,
        )


class InvalidHexCharacter(HexDecodeError):
    """Token contains a character outside 0-9, a-f, A-F after the prefix."""

    def __init__(self, token: str, char: str) -> None:
        self.char = char
        super().__init__(
            f"Invalid character '{char}' in string '{token}'",
            token=token,
            context={"char": char},
        )


# =============================================================================
# Input Errors
# =============================================================================


class UnreadableSourceError(HashToolException):
    """
    A file input could not be read.

    Raised for missing files, permission errors, and (in hex mode)
    content that is not valid UTF-8 text.
    """

    exit_code: int = EX_IOERR

    def __init__(
        self,
        path: str,
        reason: str,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"Cannot read file {path}: {reason}",
            context={"path": path},
            cause=cause,
        )


class InputOrderError(HashToolException, ValueError):
    """Origin indices handed to the resolver are unsorted or collide."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        ctx = {"index": index} if index is not None else None
        super().__init__(message, context=ctx)


# =============================================================================
# Digest Errors
# =============================================================================


class UnknownAlgorithmError(HashToolException, ValueError):
    """Requested hash algorithm is not registered."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(
            f"Unknown hash algorithm: {algorithm}",
            context={"algorithm": algorithm},
        )


class DigestStateError(HashToolException):
    """An incremental digest state was used after it was finalized."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class HashToolConfigError(HashToolException):
    """Base class for configuration-related errors."""

    exit_code: int = EX_CONFIG


class ConfigFileError(HashToolConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(HashToolConfigError, ValueError):
    """Invalid configuration value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
