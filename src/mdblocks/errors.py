"""Exception hierarchy for mdblocks."""

from __future__ import annotations


class MdBlocksError(Exception):
    """Base class for all mdblocks errors."""


class BlockSelectionError(MdBlocksError):
    """The host could not resolve a block to operate on."""


class InvalidSelection(BlockSelectionError):
    """No active selection, or the selection marks are inconsistent."""


class NoParagraphFound(BlockSelectionError):
    """Paragraph detection was requested with the cursor on a blank line."""


class ClipboardError(MdBlocksError):
    """Publishing a result to the clipboard failed."""
