"""
Interface definitions for hashtool's pluggable services.
"""

from .logger import ILogger
from .presenter import IPresenter
from .sources import IByteSource

__all__ = [
    "IByteSource",
    "ILogger",
    "IPresenter",
]
