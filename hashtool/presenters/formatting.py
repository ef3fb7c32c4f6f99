"""
Output formatting for digest reports.

Pure functions that turn a digest and the entry it describes into text.
A framed block looks like::

    ================================================================================
    [COMPUTE TEXT] [hello]
    [SHA256 HASH] [2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824]
    ================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..core.models.digest import DigestMode, DigestReport, HashAlgorithm
from ..core.models.inputs import HashInput, InputKind

PREVIEW_WIDTH = 40
DELIMITER = "=" * 80
ELLIPSIS = "..."


@dataclass(frozen=True)
class EntryPreview:
    """Shortened description of an input for framed output."""

    kind: InputKind
    preview: str
    truncated: bool


def make_preview(entry: HashInput, width: int = PREVIEW_WIDTH) -> EntryPreview:
    """
    Cut an entry's text or path down to ``width`` characters.

    ``truncated`` is set only when the original is longer than ``width``.
    Undecodable argument bytes show as U+FFFD.
    """
    text = os.fsencode(entry.value).decode("utf-8", "replace")
    return EntryPreview(
        kind=entry.kind,
        preview=text[:width],
        truncated=len(text) > width,
    )


def render_summary(
    preview: EntryPreview,
    algorithm: HashAlgorithm,
    mode: DigestMode,
    digest: str,
) -> str:
    """Render the four-line framed block for one digest."""
    etc = ELLIPSIS if preview.truncated else ""
    entry_line = f"[{mode.value} {preview.kind.value}] [{preview.preview}]{etc}"
    hash_line = f"[{algorithm.label} HASH] [{digest}]"
    return "\n".join([DELIMITER, entry_line, hash_line, DELIMITER])


def render_quiet(report: DigestReport) -> str:
    """Quiet mode: the bare hex digest."""
    return report.digest


def render_report(
    report: DigestReport,
    quiet: bool = False,
    width: int = PREVIEW_WIDTH,
) -> str:
    """Render a report either bare (quiet) or as a framed block."""
    if quiet:
        return render_quiet(report)
    return render_summary(
        make_preview(report.entry, width),
        report.algorithm,
        report.mode,
        report.digest,
    )
