"""
Input handling: ordering of text/file inputs and reading file content.
"""

from .resolver import merge_by_index, resolve_inputs
from .sources import FileByteSource, MemoryByteSource

__all__ = [
    "FileByteSource",
    "MemoryByteSource",
    "merge_by_index",
    "resolve_inputs",
]
