"""Delimiter fences: a start and end marker line enclosing a block.

Block-level HTML needs blank lines between the tags and the content for
Markdown to treat the content as Markdown again, so a fence may pad its
markers with blank lines. In the compact string form a trailing newline on
the start delimiter (``"<div>\\n"``) or a leading newline on the end
delimiter (``"\\n</div>"``) requests that padding.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_CODE_FENCE = "```"


@dataclass(frozen=True, slots=True)
class Fence:
    """A pair of marker lines.

    Args:
        start: Start marker line.
        end: End marker line.
        blank_after_start: Pad a blank line after the start marker.
        blank_before_end: Pad a blank line before the end marker.
    """

    start: str
    end: str
    blank_after_start: bool = False
    blank_before_end: bool = False

    @classmethod
    def parse(cls, start_delimiter: str, end_delimiter: str) -> Fence:
        """Build a fence from the newline-encoded delimiter form."""
        blank_after_start = start_delimiter.endswith("\n")
        blank_before_end = end_delimiter.startswith("\n")
        return cls(
            start=start_delimiter[:-1] if blank_after_start else start_delimiter,
            end=end_delimiter[1:] if blank_before_end else end_delimiter,
            blank_after_start=blank_after_start,
            blank_before_end=blank_before_end,
        )

    def is_fenced(self, lines: Sequence[str]) -> bool:
        return bool(lines) and lines[0] == self.start

    def enclose(self, lines: Sequence[str]) -> list[str]:
        result = [self.start]
        if self.blank_after_start:
            result.append("")
        result.extend(lines)
        if self.blank_before_end:
            result.append("")
        result.append(self.end)
        return result

    def unenclose(self, lines: Sequence[str]) -> list[str]:
        """Remove the markers and any padding blank lines.

        The end marker is only removed together with the start marker.
        """
        result = list(lines)
        has_end = len(result) > 1 and result[-1] == self.end
        del result[0]
        if self.blank_after_start and result and result[0] == "":
            del result[0]
        if has_end and result:
            if self.blank_before_end and len(result) > 1 and result[-2] == "":
                del result[-2]
            del result[-1]
        return result

    def toggle(self, lines: Sequence[str]) -> list[str]:
        """Remove the fence if the first line is its start marker, else add it."""
        if self.is_fenced(lines):
            return self.unenclose(lines)
        return self.enclose(lines)


def toggle_fence(lines: Sequence[str], start_delimiter: str, end_delimiter: str) -> list[str]:
    """Toggle a fence given in the newline-encoded delimiter form."""
    return Fence.parse(start_delimiter, end_delimiter).toggle(lines)


def rule_fence() -> Fence:
    """Horizontal rules above and below the block."""
    return Fence("___", "___")


def code_fence(language: str = "", lines: Sequence[str] = ()) -> Fence:
    """Fenced code block.

    An existing fence opening the block is matched whatever its language
    tag, so a code block can be unfenced without knowing it.
    """
    if lines and lines[0].startswith(_CODE_FENCE) and " " not in lines[0].strip():
        return Fence(lines[0], _CODE_FENCE)
    return Fence(f"{_CODE_FENCE}{language}", _CODE_FENCE)


def html_fence(tag: str = "div") -> Fence:
    """Block-level HTML element padded so its content stays Markdown."""
    return Fence(f"<{tag}>", f"</{tag}>", blank_after_start=True, blank_before_end=True)


def comment_fence() -> Fence:
    """HTML comment around the block."""
    return Fence("<!--", "-->")
