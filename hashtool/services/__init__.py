"""
Application services for hashtool.
"""

from .digest import DigestService
from .logging import HashToolLogger, NullLogger

__all__ = ["DigestService", "HashToolLogger", "NullLogger"]
