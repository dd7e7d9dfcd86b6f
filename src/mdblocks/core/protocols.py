"""Interface contracts between the transformation core and its host editor.

The host owns the document, cursor, selection and clipboard. The core only
reads a line range, computes replacement lines, and hands them back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mdblocks.block import Block


@runtime_checkable
class Host(Protocol):
    """Editor buffer operations the block selector relies on.

    Line numbers are 1-based and inclusive.
    """

    def line_count(self) -> int: ...

    def get_lines(self, start: int, end: int) -> list[str]: ...

    def set_lines(self, lines: list[str], start: int, end: int) -> None: ...

    def cursor_line(self) -> int: ...

    def set_cursor_line(self, line: int) -> None: ...

    def selection(self) -> tuple[int, int] | None: ...

    def copy_to_clipboard(self, text: str) -> None: ...

    def notify(self, message: str, level: int) -> None: ...


@runtime_checkable
class BlockTransform(Protocol):
    """Compute the replacement lines for a block."""

    name: str
    publishes: bool

    def apply(self, block: Block) -> list[str]: ...
