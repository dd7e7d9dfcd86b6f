"""In-memory editor buffer implementing the Host protocol.

Stands in for an editor when transforming files from the command line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

UNNAMED_REGISTER = '"'
CLIPBOARD_REGISTER = "+"


@dataclass
class Buffer:
    """A document held as a list of lines.

    Args:
        lines: Document lines without newline characters.
        cursor: 1-based cursor line.
        visual: Active visual selection as (start, end), or None.
        registers: Register name to contents. Clipboard copies land in the
            unnamed and clipboard registers.
        messages: Notifications raised by operations, as (level, message).
    """

    lines: list[str] = field(default_factory=list)
    cursor: int = 1
    visual: tuple[int, int] | None = None
    registers: dict[str, str] = field(default_factory=dict)
    messages: list[tuple[int, str]] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, **kwargs: Any) -> Buffer:
        """Build a buffer from text, ignoring one trailing newline."""
        if text.endswith("\n"):
            text = text[:-1]
        lines = text.split("\n") if text else []
        return cls(lines=[line.rstrip("\r") for line in lines], **kwargs)

    def to_text(self) -> str:
        """Join the lines back into text with a trailing newline."""
        return "\n".join(self.lines) + "\n" if self.lines else ""

    def line_count(self) -> int:
        return len(self.lines)

    def get_lines(self, start: int, end: int) -> list[str]:
        return self.lines[start - 1 : end]

    def set_lines(self, lines: list[str], start: int, end: int) -> None:
        self.lines[start - 1 : end] = lines

    def cursor_line(self) -> int:
        return self.cursor

    def set_cursor_line(self, line: int) -> None:
        self.cursor = min(max(1, line), max(1, len(self.lines)))

    def selection(self) -> tuple[int, int] | None:
        return self.visual

    def copy_to_clipboard(self, text: str) -> None:
        self.registers[CLIPBOARD_REGISTER] = text
        self.registers[UNNAMED_REGISTER] = text

    def notify(self, message: str, level: int) -> None:
        self.messages.append((level, message))
        logger.log(level, message)
