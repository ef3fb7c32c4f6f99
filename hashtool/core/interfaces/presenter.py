"""
Presenter interface definitions for output formatting.

Enables pluggable output formats for digest reports.
"""

from abc import ABC, abstractmethod

from ..models.digest import DigestReport


class IPresenter(ABC):
    """
    Interface for output presentation.

    Implementations decide how a digest report is shown: framed
    blocks for people, bare hex for scripts.
    """

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""
        pass

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""
        pass

    @abstractmethod
    def print_report(self, report: DigestReport, quiet: bool = False) -> None:
        """
        Print a digest report.

        Args:
            report: Digest and the entry it was computed over
            quiet: Emit only the hex digest, without framing
        """
        pass
