"""
Unit tests for output formatting and the console presenter.

Tests preview truncation, the framed block layout and quiet output.
"""

import io
import os

from hashtool.core.models.digest import DigestMode, DigestReport, HashAlgorithm
from hashtool.core.models.inputs import HashInput, InputKind
from hashtool.presenters.console import ConsolePresenter
from hashtool.presenters.formatting import (
    DELIMITER,
    EntryPreview,
    make_preview,
    render_quiet,
    render_report,
    render_summary,
)
from tests.vectors import HELLO


def _report(entry: HashInput, mode=DigestMode.COMPUTE, algorithm=HashAlgorithm.SHA256):
    return DigestReport(entry=entry, algorithm=algorithm, mode=mode, digest=HELLO["sha256"])


class TestMakePreview:
    """Tests for make_preview."""

    def test_short_entry_kept(self):
        preview = make_preview(HashInput.text("hello", 0))
        assert preview == EntryPreview(kind=InputKind.TEXT, preview="hello", truncated=False)

    def test_exactly_forty_not_truncated(self):
        value = "x" * 40
        preview = make_preview(HashInput.text(value, 0))
        assert preview.preview == value
        assert preview.truncated is False

    def test_longer_than_forty_truncated(self):
        value = "abcdefghij" * 5
        preview = make_preview(HashInput.file(value, 0))
        assert preview.preview == value[:40]
        assert len(preview.preview) == 40
        assert preview.truncated is True

    def test_truncation_counts_characters_not_bytes(self):
        value = "é" * 41
        preview = make_preview(HashInput.text(value, 0))
        assert preview.preview == "é" * 40
        assert preview.truncated is True

    def test_custom_width(self):
        preview = make_preview(HashInput.text("abcdef", 0), width=3)
        assert preview.preview == "abc"
        assert preview.truncated is True

    def test_undecodable_bytes_shown_as_replacement(self):
        preview = make_preview(HashInput.text(os.fsdecode(b"ab\xff"), 0))
        assert preview.preview == "ab\ufffd"
        assert preview.truncated is False


class TestRenderSummary:
    """Tests for the framed block."""

    def test_block_layout(self):
        block = render_summary(
            EntryPreview(InputKind.TEXT, "hello", False),
            HashAlgorithm.SHA256,
            DigestMode.COMPUTE,
            HELLO["sha256"],
        )
        assert block.split("\n") == [
            "=" * 80,
            "[COMPUTE TEXT] [hello]",
            f"[SHA256 HASH] [{HELLO['sha256']}]",
            "=" * 80,
        ]

    def test_truncated_entry_gets_ellipsis(self):
        block = render_summary(
            EntryPreview(InputKind.FILE, "p" * 40, True),
            HashAlgorithm.BLAKE3,
            DigestMode.UPDATE,
            "00",
        )
        assert f"[UPDATE FILE] [{'p' * 40}]..." in block
        assert "[BLAKE3 HASH] [00]" in block

    def test_render_report_framed(self):
        rendered = render_report(_report(HashInput.file("data.bin", 3), algorithm=HashAlgorithm.MD5))
        assert rendered.startswith(DELIMITER)
        assert "[COMPUTE FILE] [data.bin]" in rendered
        assert "[MD5 HASH]" in rendered


class TestQuietOutput:
    """Quiet mode emits only the digest."""

    def test_render_quiet(self):
        assert render_quiet(_report(HashInput.text("hello", 0))) == HELLO["sha256"]

    def test_render_report_quiet_has_no_framing(self):
        rendered = render_report(_report(HashInput.text("hello", 0), mode=DigestMode.UPDATE), quiet=True)
        assert rendered == HELLO["sha256"]
        assert "=" not in rendered
        assert "[" not in rendered


class TestConsolePresenter:
    """Tests for ConsolePresenter."""

    def test_framed_block_followed_by_blank_line(self):
        out = io.StringIO()
        ConsolePresenter(file=out).print_report(_report(HashInput.text("hello", 0)))
        lines = out.getvalue().split("\n")
        assert lines[0] == DELIMITER
        assert lines[3] == DELIMITER
        assert lines[4] == ""

    def test_quiet_is_one_line(self):
        out = io.StringIO()
        ConsolePresenter(file=out).print_report(_report(HashInput.text("hello", 0)), quiet=True)
        assert out.getvalue() == HELLO["sha256"] + "\n"

    def test_preview_width_setting(self):
        out = io.StringIO()
        ConsolePresenter(file=out, preview_width=2).print_report(_report(HashInput.text("hello", 0)))
        assert "[COMPUTE TEXT] [he]..." in out.getvalue()

    def test_print_error_goes_to_error_stream(self):
        out, err = io.StringIO(), io.StringIO()
        presenter = ConsolePresenter(use_color=False, file=out, err_file=err)
        presenter.print_error("Cannot read file x: nope")
        assert out.getvalue() == ""
        assert err.getvalue() == "Error: Cannot read file x: nope\n"
