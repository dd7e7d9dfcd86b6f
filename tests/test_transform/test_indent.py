"""Tests for indent measurement."""

from __future__ import annotations

import pytest

from mdblocks.transform.indent import (
    IndentMode,
    indent_width,
    leading_whitespace,
    normalize_indent,
    rendered_width,
)


class TestIndent:
    def test_leading_whitespace(self) -> None:
        assert leading_whitespace("\t  text  ") == "\t  "
        assert leading_whitespace("text") == ""

    @pytest.mark.parametrize(
        ("indent", "width"),
        [("", 0), ("  ", 2), ("\t", 4), ("\t ", 5), (" \t\t", 9)],
    )
    def test_rendered_width(self, indent: str, width: int) -> None:
        assert rendered_width(indent) == width

    def test_normalize_expands_tabs(self) -> None:
        assert normalize_indent("\t ") == " " * 5

    def test_indent_width_modes(self) -> None:
        line = "\t1. item"
        assert indent_width(line) == 4
        assert indent_width(line, IndentMode.RAW) == 1
