"""
Output presenters for hashtool.
"""

from .console import ConsolePresenter
from .formatting import EntryPreview, make_preview, render_quiet, render_report, render_summary

__all__ = [
    "ConsolePresenter",
    "EntryPreview",
    "make_preview",
    "render_quiet",
    "render_report",
    "render_summary",
]
