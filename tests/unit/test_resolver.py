"""
Unit tests for input ordering.

Tests the two-run merge, its invariant checks, and rebuilding the
order from the parser's occurrence log.
"""

import pytest

from hashtool.core.exceptions import InputOrderError
from hashtool.core.models.inputs import HashInput, InputKind
from hashtool.inputs.resolver import merge_by_index, resolve_inputs


def _shape(inputs):
    return [(i.kind, i.value, i.index) for i in inputs]


class TestMergeByIndex:
    """Tests for merge_by_index."""

    def test_interleaved(self):
        result = merge_by_index([(0, "A"), (2, "B")], [(1, "f")])
        assert _shape(result) == [
            (InputKind.TEXT, "A", 0),
            (InputKind.FILE, "f", 1),
            (InputKind.TEXT, "B", 2),
        ]

    def test_files_first_then_text_tail(self):
        result = merge_by_index([(2, "t1"), (3, "t2")], [(0, "f1"), (1, "f2")])
        assert [i.value for i in result] == ["f1", "f2", "t1", "t2"]

    def test_text_only(self):
        result = merge_by_index([(0, "a"), (1, "b")], [])
        assert all(i.kind is InputKind.TEXT for i in result)
        assert [i.index for i in result] == [0, 1]

    def test_file_only(self):
        result = merge_by_index([], [(0, "x"), (5, "y")])
        assert [i.value for i in result] == ["x", "y"]

    def test_empty(self):
        assert merge_by_index([], []) == []

    def test_gaps_in_indices_are_fine(self):
        result = merge_by_index([(3, "t")], [(1, "f"), (7, "g")])
        assert [i.index for i in result] == [1, 3, 7]

    def test_collision_rejected(self):
        with pytest.raises(InputOrderError) as exc_info:
            merge_by_index([(1, "t")], [(1, "f")])
        assert exc_info.value.context["index"] == 1

    def test_unsorted_run_rejected(self):
        with pytest.raises(InputOrderError):
            merge_by_index([(2, "b"), (0, "a")], [])

    def test_duplicate_within_run_rejected(self):
        with pytest.raises(InputOrderError):
            merge_by_index([], [(4, "a"), (4, "b")])

    def test_negative_index_rejected(self):
        with pytest.raises(InputOrderError):
            merge_by_index([(-1, "a")], [])

    def test_results_are_hash_inputs(self):
        (entry,) = merge_by_index([(0, "A")], [])
        assert entry == HashInput.text("A", 0)


class TestResolveInputs:
    """Tests for resolve_inputs."""

    def test_text_file_text(self):
        result = resolve_inputs(["text", "file", "text"], ["A", "B"], ["f"])
        assert _shape(result) == [
            (InputKind.TEXT, "A", 0),
            (InputKind.FILE, "f", 1),
            (InputKind.TEXT, "B", 2),
        ]

    def test_other_options_do_not_count(self):
        order = ["md5", "text", "quiet", "file", "hex_mode", "text"]
        result = resolve_inputs(order, ["A", "B"], ["f"])
        assert [i.index for i in result] == [0, 1, 2]
        assert [i.value for i in result] == ["A", "f", "B"]

    def test_mismatched_log_rejected(self):
        with pytest.raises(InputOrderError):
            resolve_inputs(["text"], ["A", "B"], [])

    def test_no_inputs(self):
        assert resolve_inputs(["quiet"], [], []) == []
