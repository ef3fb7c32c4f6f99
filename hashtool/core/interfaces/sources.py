"""
Byte source interface.

A byte source turns a file input into the bytes the digest engine
consumes. Reading is all-or-nothing: a source either returns the full
content or raises UnreadableSourceError.
"""

from abc import ABC, abstractmethod


class IByteSource(ABC):
    """Interface for acquiring the content of file inputs."""

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """
        Read the raw content of a file.

        Raises:
            UnreadableSourceError: If the file cannot be read
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a file as UTF-8 text (used for hex-literal files).

        Raises:
            UnreadableSourceError: If the file cannot be read or decoded
        """
        pass
