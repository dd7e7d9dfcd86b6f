"""Paragraph segmentation over a block.

A block decomposes losslessly into paragraphs (maximal runs of non-blank
lines) and the blank lines separating them. Transformations are mapped
over the paragraphs while every blank line is kept verbatim in place.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from mdblocks.block import is_blank
from mdblocks.transform.wrap import unwrap_paragraph, wrap_paragraph

ParagraphFn = Callable[[list[str]], list[str]]


def split_paragraphs(lines: Sequence[str]) -> list[list[str]]:
    """Split lines into paragraph and blank-line segments.

    Each blank line is its own single-element segment, so concatenating the
    segments reproduces ``lines`` exactly.
    """
    segments: list[list[str]] = []
    paragraph: list[str] = []
    for line in lines:
        if is_blank(line):
            if paragraph:
                segments.append(paragraph)
                paragraph = []
            segments.append([line])
        else:
            paragraph.append(line)
    if paragraph:
        segments.append(paragraph)
    return segments


def map_paragraphs(lines: Sequence[str], fn: ParagraphFn) -> list[str]:
    """Apply ``fn`` to each paragraph in ``lines`` independently.

    Args:
        lines: Block lines.
        fn: Paragraph transformation. Never receives blank lines.

    Returns:
        Transformed lines with blank-line separators preserved in count
        and position.
    """
    result: list[str] = []
    paragraph: list[str] = []
    for line in lines:
        if is_blank(line):
            if paragraph:
                result.extend(fn(paragraph))
                paragraph = []
            result.append(line)
        else:
            paragraph.append(line)
    if paragraph:
        result.extend(fn(paragraph))
    return result


def wrap_paragraphs(
    lines: Sequence[str],
    column_width: int,
    retain_indent: bool = True,
    normalize: bool = True,
) -> list[str]:
    """Rewrap every paragraph of a block at ``column_width``."""
    return map_paragraphs(
        lines,
        lambda paragraph: wrap_paragraph(paragraph, column_width, retain_indent, normalize),
    )


def unwrap_paragraphs(
    lines: Sequence[str],
    retain_indent: bool = True,
    normalize: bool = True,
) -> list[str]:
    """Join every paragraph of a block onto a single line."""
    return map_paragraphs(
        lines, lambda paragraph: unwrap_paragraph(paragraph, retain_indent, normalize)
    )
