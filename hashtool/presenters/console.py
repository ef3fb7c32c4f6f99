"""
Console presenter for terminal output.

Writes digest reports to stdout and errors to stderr via click.
"""

from __future__ import annotations

from typing import IO

import click

from ..core.interfaces.presenter import IPresenter
from ..core.models.digest import DigestReport
from .formatting import PREVIEW_WIDTH, render_report


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Framed blocks are followed by an empty line so consecutive blocks
    stay visually separate; quiet output is one digest per line.
    """

    def __init__(
        self,
        use_color: bool = True,
        preview_width: int = PREVIEW_WIDTH,
        file: IO[str] | None = None,
        err_file: IO[str] | None = None,
    ) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether errors may be styled (ignored when not a TTY)
            preview_width: Characters of text/path shown in framed output
            file: Output stream (defaults to stdout)
            err_file: Error stream (defaults to stderr)
        """
        self._use_color = use_color
        self._preview_width = preview_width
        self._file = file
        self._err_file = err_file

    def print(self, message: str) -> None:
        """Print a message to output."""
        click.echo(message, file=self._file)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        text = f"Error: {message}"
        if self._use_color:
            text = click.style(text, fg="red")
        # click strips styling when the stream is not a terminal
        click.echo(text, file=self._err_file, err=self._err_file is None)

    def print_report(self, report: DigestReport, quiet: bool = False) -> None:
        """Print a digest report, framed unless ``quiet``."""
        rendered = render_report(report, quiet=quiet, width=self._preview_width)
        if quiet:
            self.print(rendered)
        else:
            self.print(rendered + "\n")
