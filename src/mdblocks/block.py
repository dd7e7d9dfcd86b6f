"""Block data model.

A block is the line range a transformation operates on. Positions are
1-based, inclusive line numbers in the host document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def is_blank(line: str) -> bool:
    """Return True if the line is empty or whitespace-only."""
    return not line.strip()


@dataclass(frozen=True, slots=True)
class Block:
    """An ordered run of document lines.

    Args:
        lines: Line contents, without newline characters.
        start_index: 1-based line number of the first line.
        end_index: 1-based line number of the last line (inclusive).
            ``start_index - 1`` denotes an empty block.
        is_end_of_paragraph: True if ``end_index`` is the last line of a
            paragraph or of the document.
    """

    lines: tuple[str, ...] = field(default_factory=tuple)
    start_index: int = 1
    end_index: int = 0
    is_end_of_paragraph: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))
        if self.end_index < self.start_index - 1:
            raise ValueError(
                f"end_index ({self.end_index}) must be >= start_index - 1 ({self.start_index - 1})"
            )
        expected = self.end_index - self.start_index + 1
        if len(self.lines) != expected:
            raise ValueError(
                f"Block spans {expected} lines but {len(self.lines)} were given"
            )
        for line in self.lines:
            if "\n" in line or "\r" in line:
                raise ValueError(f"Block lines must not contain newlines: {line!r}")

    @classmethod
    def from_lines(
        cls,
        lines: list[str] | tuple[str, ...],
        start_index: int = 1,
        is_end_of_paragraph: bool = True,
    ) -> Block:
        """Build a block whose end index is derived from the line count."""
        return cls(
            lines=tuple(lines),
            start_index=start_index,
            end_index=start_index + len(lines) - 1,
            is_end_of_paragraph=is_end_of_paragraph,
        )

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "lines": list(self.lines),
            "start_index": self.start_index,
            "end_index": self.end_index,
            "is_end_of_paragraph": self.is_end_of_paragraph,
        }
