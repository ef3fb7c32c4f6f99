"""
Input models.

An input is either literal text or a file path, tagged with its origin
index: the position of its option among all input options on the
command line, text and file combined.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import ImmutableModel


class InputKind(str, Enum):
    """Origin of an input."""

    TEXT = "TEXT"
    FILE = "FILE"


class HashInput(ImmutableModel):
    """A single text or file input to be digested."""

    kind: InputKind
    value: str
    index: int = Field(ge=0)

    @classmethod
    def text(cls, value: str, index: int) -> HashInput:
        return cls(kind=InputKind.TEXT, value=value, index=index)

    @classmethod
    def file(cls, path: str, index: int) -> HashInput:
        return cls(kind=InputKind.FILE, value=path, index=index)
