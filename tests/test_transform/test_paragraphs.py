"""Tests for paragraph segmentation."""

from __future__ import annotations

from mdblocks.transform.paragraphs import (
    map_paragraphs,
    split_paragraphs,
    unwrap_paragraphs,
    wrap_paragraphs,
)

BLOCK = ["a b", "c", "", "", "d e f", "   ", "g"]


class TestSplitParagraphs:
    def test_segments(self) -> None:
        assert split_paragraphs(BLOCK) == [["a b", "c"], [""], [""], ["d e f"], ["   "], ["g"]]

    def test_lossless(self) -> None:
        assert [line for seg in split_paragraphs(BLOCK) for line in seg] == BLOCK

    def test_empty(self) -> None:
        assert split_paragraphs([]) == []


class TestMapParagraphs:
    """map_paragraphs applies a function per paragraph only."""

    def test_identity_is_lossless(self) -> None:
        assert map_paragraphs(BLOCK, lambda p: p) == BLOCK

    def test_blank_lines_never_passed(self) -> None:
        seen: list[list[str]] = []

        def record(paragraph: list[str]) -> list[str]:
            seen.append(paragraph)
            return paragraph

        map_paragraphs(BLOCK, record)
        assert seen == [["a b", "c"], ["d e f"], ["g"]]

    def test_blank_separators_preserved(self) -> None:
        result = map_paragraphs(BLOCK, lambda p: ["X"])
        assert result == ["X", "", "", "X", "   ", "X"]

    def test_leading_blank_lines(self) -> None:
        assert map_paragraphs(["", "a"], lambda p: [s.upper() for s in p]) == ["", "A"]


class TestWrapParagraphs:
    def test_wraps_each_paragraph(self) -> None:
        lines = ["one two three", "", "  four five six"]
        assert wrap_paragraphs(lines, 9) == ["one two", "three", "", "  four", "  five", "  six"]

    def test_unwrap_each_paragraph(self) -> None:
        lines = ["one", "two", "", "three", "four"]
        assert unwrap_paragraphs(lines) == ["one two", "", "three four"]
