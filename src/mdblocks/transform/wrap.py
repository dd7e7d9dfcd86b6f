"""Greedy word wrap and its inverse for a single paragraph."""

from __future__ import annotations

from collections.abc import Sequence

from mdblocks.transform.indent import leading_whitespace, normalize_indent, rendered_width


def wrap(text: str, column_width: int) -> list[str]:
    """Greedily pack the words of ``text`` into lines.

    Runs of whitespace are collapsed; original spacing is not preserved.
    A word longer than ``column_width`` sits alone on its own line, so
    ``column_width <= 0`` yields one word per line.

    Args:
        text: Text to wrap.
        column_width: Maximum line length.

    Returns:
        Wrapped lines. Empty if ``text`` has no words.
    """
    result: list[str] = []
    line = ""
    for word in text.split():
        if not line:
            line = word
        elif len(line) + 1 + len(word) > column_width:
            result.append(line)
            line = word
        else:
            line = f"{line} {word}"
    if line:
        result.append(line)
    return result


def unwrap(lines: Sequence[str]) -> str:
    """Join lines into one line separated by single spaces."""
    return " ".join(word for line in lines for word in line.split())


def wrap_paragraph(
    lines: Sequence[str],
    column_width: int,
    retain_indent: bool = True,
    normalize: bool = True,
) -> list[str]:
    """Rewrap a paragraph, carrying the first line's indent.

    With ``retain_indent`` the first line's indent is subtracted (by rendered
    width) from ``column_width`` and prepended to every produced line, tab
    expanded when ``normalize`` is set. Without it only the first produced
    line gets the original raw indent.
    """
    if not lines:
        return []
    first_indent = leading_whitespace(lines[0])
    text = unwrap(lines)

    if not retain_indent:
        wrapped = wrap(text, column_width)
        if wrapped:
            wrapped[0] = first_indent + wrapped[0]
        return wrapped

    indent = normalize_indent(first_indent) if normalize else first_indent
    width = max(0, column_width - rendered_width(first_indent))
    return [indent + line for line in wrap(text, width)]


def unwrap_paragraph(
    lines: Sequence[str],
    retain_indent: bool = True,
    normalize: bool = True,
) -> list[str]:
    """Join a paragraph onto one line, keeping the first line's indent.

    The indent is tab expanded when ``normalize`` is set.
    """
    if not lines:
        return []
    indent = ""
    if retain_indent:
        first_indent = leading_whitespace(lines[0])
        indent = normalize_indent(first_indent) if normalize else first_indent
    return [indent + unwrap(lines)]
