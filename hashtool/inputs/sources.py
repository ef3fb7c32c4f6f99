"""
File byte sources.

Reads file inputs fully into memory. Any failure becomes an
UnreadableSourceError naming the path.
"""

from __future__ import annotations

from pathlib import Path

from ..core.exceptions import UnreadableSourceError
from ..core.interfaces.sources import IByteSource


class FileByteSource(IByteSource):
    """Reads inputs from the local filesystem, relative to ``base_dir``."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir

    def _resolve(self, path: str) -> Path:
        p = Path(path)
        if self._base_dir is not None and not p.is_absolute():
            p = self._base_dir / p
        return p

    def read_bytes(self, path: str) -> bytes:
        try:
            return self._resolve(path).read_bytes()
        except OSError as e:
            raise UnreadableSourceError(path, e.strerror or str(e), cause=e) from e

    def read_text(self, path: str) -> str:
        data = self.read_bytes(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnreadableSourceError(path, "stream did not contain valid UTF-8", cause=e) from e


class MemoryByteSource(IByteSource):
    """Serves file inputs from an in-memory mapping of path to content."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files = dict(files or {})

    def add(self, path: str, content: bytes) -> None:
        self._files[path] = content

    def read_bytes(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError:
            raise UnreadableSourceError(path, "No such file or directory") from None

    def read_text(self, path: str) -> str:
        data = self.read_bytes(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnreadableSourceError(path, "stream did not contain valid UTF-8", cause=e) from e
