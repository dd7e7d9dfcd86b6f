"""Leading-whitespace measurement.

Indent width is the rendered column width of a line's leading whitespace:
a tab counts as four columns, any other whitespace character as one.
"""

from __future__ import annotations

import re
from enum import Enum

TAB_WIDTH = 4

_LEADING_WS_RE = re.compile(r"^\s*")


class IndentMode(Enum):
    """How indent widths are compared."""

    RENDERED = "rendered"
    RAW = "raw"


def leading_whitespace(line: str) -> str:
    """Return the raw leading whitespace of a line."""
    match = _LEADING_WS_RE.match(line)
    return match.group(0) if match else ""


def rendered_width(indent: str) -> int:
    """Column width of a whitespace string (tab = 4, others = 1)."""
    return sum(TAB_WIDTH if c == "\t" else 1 for c in indent if c.isspace())


def normalize_indent(indent: str) -> str:
    """Expand an indent to spaces using the rendered width rule."""
    return " " * rendered_width(indent)


def indent_width(line: str, mode: IndentMode = IndentMode.RENDERED) -> int:
    """Width of a line's indent under the given comparison mode.

    Args:
        line: Line to measure.
        mode: RENDERED expands tabs to four columns; RAW counts characters.

    Returns:
        Indent width in columns (RENDERED) or characters (RAW).
    """
    indent = leading_whitespace(line)
    if mode is IndentMode.RAW:
        return len(indent)
    return rendered_width(indent)
