"""Ordered-list numbering.

Two algorithms share the ``<digits>. <text>`` item model:

* flat numbering, which only touches non-indented lines and uses a single
  counter;
* indent-aware renumbering, which keeps one counter per indent width so
  nested lists are numbered independently. A line shallower than a tracked
  list's indent restarts that list.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from mdblocks.block import is_blank
from mdblocks.transform.indent import IndentMode, indent_width, leading_whitespace

_ITEM_RE = re.compile(r"^(\d+)\.\s+(.*)$")
_INDENTED_ITEM_RE = re.compile(r"^(\s*)\d+\.\s+")
_NUMBERED_FIRST_LINE_RE = re.compile(r"^\s*\d+\.\s")
_NON_INDENTED_RE = re.compile(r"^\S")


def is_numbered(line: str) -> bool:
    """True if the line is an ordered-list item at any indent."""
    return _NUMBERED_FIRST_LINE_RE.match(line) is not None


def number_lines(lines: Sequence[str]) -> list[str]:
    """Number the non-indented lines of a block from 1.

    Existing items are renumbered in sequence; other non-indented lines
    get ``N. `` prepended. Indented and blank lines are left alone and do
    not advance the counter.
    """
    result: list[str] = []
    counter = 1
    for line in lines:
        match = _ITEM_RE.match(line)
        if match:
            result.append(f"{counter}. {match.group(2)}")
            counter += 1
        elif _NON_INDENTED_RE.match(line):
            result.append(f"{counter}. {line}")
            counter += 1
        else:
            result.append(line)
    return result


def unnumber_lines(lines: Sequence[str]) -> list[str]:
    """Strip ``N. `` item numbers at any indent, keeping the indent."""
    return [_INDENTED_ITEM_RE.sub(r"\1", line, count=1) for line in lines]


def toggle_numbered_list(lines: Sequence[str]) -> list[str]:
    """Unnumber the block if its first line is numbered, otherwise number it."""
    if lines and is_numbered(lines[0]):
        return unnumber_lines(lines)
    return number_lines(lines)


def _format_item(indent: str, number: int, text: str) -> str:
    # Number and dot left-aligned in three columns plus one space, so
    # "100." still gets a separating space instead of a strict four-column pad.
    return f"{indent}{f'{number}.':<3} {text}"


def renumber_lines(
    lines: Sequence[str],
    mode: IndentMode = IndentMode.RENDERED,
) -> list[str]:
    """Renumber existing list items with one counter per indent width.

    Args:
        lines: Block lines.
        mode: How indent widths are compared when tracking list levels.

    Returns:
        New list of lines. Only lines already matching ``N. text`` change.
    """
    counters: dict[int, int] = {}
    result: list[str] = []
    for line in lines:
        if is_blank(line):
            result.append(line)
            continue

        width = indent_width(line, mode)
        for list_width in counters:
            if width < list_width:
                counters[list_width] = 1

        indent = leading_whitespace(line)
        match = _ITEM_RE.match(line[len(indent) :])
        if match is None:
            result.append(line)
            continue

        number = counters.setdefault(width, 1)
        result.append(_format_item(indent, number, match.group(2)))
        counters[width] = number + 1
    return result
