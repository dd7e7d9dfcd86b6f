"""Block transformations and the name-to-transform registry."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mdblocks.transform.fence import Fence, code_fence, comment_fence, html_fence, rule_fence
from mdblocks.transform.indent import IndentMode
from mdblocks.transform.numbering import renumber_lines, toggle_numbered_list
from mdblocks.transform.paragraphs import map_paragraphs, unwrap_paragraphs, wrap_paragraphs
from mdblocks.transform.table import csv_to_markdown, markdown_to_csv, toggle_csv_table
from mdblocks.transform.toggle import BULLET, QUOTE, ToggleAction, ToggleRule, toggle_line_breaks
from mdblocks.transform.wrap import unwrap, wrap

if TYPE_CHECKING:
    from mdblocks.block import Block
    from mdblocks.config import MdBlocksConfig

__all__ = [
    "TRANSFORM_NAMES",
    "Fence",
    "IndentMode",
    "ToggleAction",
    "ToggleRule",
    "Transform",
    "csv_to_markdown",
    "get_transform",
    "map_paragraphs",
    "markdown_to_csv",
    "unwrap",
    "wrap",
]

TRANSFORM_NAMES: tuple[str, ...] = (
    "wrap",
    "unwrap",
    "quote",
    "bullets",
    "breaks",
    "number",
    "renumber",
    "rule",
    "code",
    "html",
    "comment",
    "fence",
    "table",
)


@dataclass(frozen=True, slots=True)
class Transform:
    """A named block transformation.

    Args:
        name: Registry name.
        fn: Maps a block to its replacement lines.
        publishes: Whether the result is also copied to the clipboard.
    """

    name: str
    fn: Callable[[Block], list[str]]
    publishes: bool = False

    def apply(self, block: Block) -> list[str]:
        return self.fn(block)


def _fence_transform(name: str, fence: Fence) -> Transform:
    return Transform(name, lambda block: fence.toggle(block.lines))


def get_transform(
    name: str,
    config: MdBlocksConfig | None = None,
    **params: Any,
) -> Transform:
    """Create a transform by name.

    Args:
        name: One of ``TRANSFORM_NAMES``.
        config: Configuration supplying defaults. Hard-coded defaults when None.
        **params: Per-call overrides (``column``, ``retain_indent``, ``lang``,
            ``tag``, ``start``, ``end``).

    Returns:
        A Transform instance.

    Raises:
        ValueError: If the name is unknown or required parameters are missing.
    """
    if config is None:
        from mdblocks.config import MdBlocksConfig

        config = MdBlocksConfig()

    if name == "wrap":
        column = params.get("column")
        if column is None:
            column = config.wrap.column_number
        retain_indent = params.get("retain_indent")
        if retain_indent is None:
            retain_indent = config.wrap.retain_indent
        normalize = config.wrap.normalize_indent
        return Transform(
            name,
            lambda block: wrap_paragraphs(block.lines, column, retain_indent, normalize),
        )

    if name == "unwrap":
        normalize = config.wrap.normalize_indent
        return Transform(name, lambda block: unwrap_paragraphs(block.lines, True, normalize))

    if name == "quote":
        rule = dataclasses.replace(QUOTE, skip_blank_lines=config.quote.skip_blank_lines)
        return Transform(name, lambda block: rule.apply(block.lines))

    if name == "bullets":
        rule = dataclasses.replace(BULLET, skip_blank_lines=config.bullets.skip_blank_lines)
        return Transform(name, lambda block: rule.apply(block.lines))

    if name == "breaks":
        return Transform(
            name, lambda block: toggle_line_breaks(block.lines, block.is_end_of_paragraph)
        )

    if name == "number":
        return Transform(name, lambda block: toggle_numbered_list(block.lines))

    if name == "renumber":
        mode = IndentMode(config.numbering.indent_mode)
        return Transform(name, lambda block: renumber_lines(block.lines, mode))

    if name == "rule":
        return _fence_transform(name, rule_fence())

    if name == "code":
        lang = params.get("lang")
        language = config.fence.code_language if lang is None else lang
        return Transform(name, lambda block: code_fence(language, block.lines).toggle(block.lines))

    if name == "html":
        tag = params.get("tag") or config.fence.html_tag
        return _fence_transform(name, html_fence(tag))

    if name == "comment":
        return _fence_transform(name, comment_fence())

    if name == "fence":
        start = params.get("start")
        end = params.get("end")
        if not start or not end:
            raise ValueError("fence transform requires 'start' and 'end' delimiters")
        return _fence_transform(name, Fence.parse(start, end))

    if name == "table":
        return Transform(
            name,
            lambda block: toggle_csv_table(block.lines),
            publishes=config.table.copy_to_clipboard,
        )

    raise ValueError(f"Unknown transform: {name!r}")
