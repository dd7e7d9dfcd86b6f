"""Block selection and replacement against a host editor.

Resolves the block to operate on (the visual selection when one is
active, otherwise the paragraph under the cursor), runs one transform
over it, and writes the result back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mdblocks.block import Block, is_blank
from mdblocks.errors import BlockSelectionError, ClipboardError, InvalidSelection, NoParagraphFound
from mdblocks.report import TransformResult

if TYPE_CHECKING:
    from mdblocks.core.protocols import BlockTransform, Host

logger = logging.getLogger(__name__)


class BlockSelector:
    """Apply transforms to the current block of a host.

    Args:
        host: Editor adapter owning the document.
    """

    def __init__(self, host: Host) -> None:
        self._host = host

    def is_end_of_paragraph(self, line_number: int) -> bool:
        """True if the line is the last of the document or precedes a blank line."""
        total = self._host.line_count()
        if line_number >= total:
            return True
        return is_blank(self._host.get_lines(line_number + 1, line_number + 1)[0])

    def selected_block(self) -> Block:
        """Block spanning the active visual selection.

        Raises:
            InvalidSelection: If nothing is selected or the marks are inconsistent.
        """
        marks = self._host.selection()
        if marks is None:
            raise InvalidSelection("This operation requires a visual selection")
        start, end = marks
        total = self._host.line_count()
        if end < start:
            raise InvalidSelection(f"Selection end ({end}) is before its start ({start})")
        if start < 1 or end > total:
            raise InvalidSelection(f"Selection {start}-{end} is outside lines 1-{total}")
        return Block(
            lines=tuple(self._host.get_lines(start, end)),
            start_index=start,
            end_index=end,
            is_end_of_paragraph=self.is_end_of_paragraph(end),
        )

    def paragraph_block(self) -> Block:
        """Block spanning the paragraph under the cursor.

        Raises:
            NoParagraphFound: If the cursor is on a blank line.
        """
        total = self._host.line_count()
        cursor = self._host.cursor_line()
        if not 1 <= cursor <= total:
            raise NoParagraphFound(f"Cursor line {cursor} is outside lines 1-{total}")
        if is_blank(self._host.get_lines(cursor, cursor)[0]):
            raise NoParagraphFound("No paragraph found")

        lines = self._host.get_lines(1, total)
        start = cursor
        while start > 1 and not is_blank(lines[start - 2]):
            start -= 1
        end = cursor
        while end < total and not is_blank(lines[end]):
            end += 1
        return Block(
            lines=tuple(lines[start - 1 : end]),
            start_index=start,
            end_index=end,
            is_end_of_paragraph=True,
        )

    def current_block(self) -> Block:
        """The visual selection if one is active, else the paragraph under the cursor."""
        if self._host.selection() is not None:
            return self.selected_block()
        return self.paragraph_block()

    def replace(self, block: Block, lines: list[str]) -> None:
        """Write lines over the block's range and move the cursor past them."""
        self._host.set_lines(lines, block.start_index, block.end_index)
        cursor = max(1, block.start_index + len(lines) - 1)
        # Step onto the line after the block unless that runs off the end.
        if cursor < self._host.line_count():
            cursor += 1
        self._host.set_cursor_line(cursor)

    def _publish(self, name: str, lines: list[str]) -> None:
        try:
            self._host.copy_to_clipboard("\n".join(lines))
        except ClipboardError as exc:
            logger.warning("Could not copy %s result to clipboard: %s", name, exc)

    def map_block(self, transform: BlockTransform) -> TransformResult | None:
        """Run a transform over the current block and write the result back.

        Selection failures are reported through the host and leave the
        document untouched.

        Args:
            transform: Transformation to apply.

        Returns:
            TransformResult describing the edit, or None if no block could
            be resolved.
        """
        try:
            block = self.current_block()
        except BlockSelectionError as exc:
            self._host.notify(str(exc), logging.ERROR)
            return None

        logger.debug(
            "Applying %s to lines %d-%d (end_of_paragraph=%s)",
            transform.name,
            block.start_index,
            block.end_index,
            block.is_end_of_paragraph,
        )
        new_lines = transform.apply(block)
        self.replace(block, new_lines)
        if transform.publishes:
            self._publish(transform.name, new_lines)

        return TransformResult(
            transform=transform.name,
            start_index=block.start_index,
            end_index=block.end_index,
            lines_before=len(block),
            lines_after=len(new_lines),
            changed=list(block.lines) != new_lines,
        )
