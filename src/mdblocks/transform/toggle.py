"""Marker toggles decided by the state of the first line.

A toggle rule pairs a detection pattern with an add/remove mutation. If
the block's first line carries the marker, the marker is removed from
every line that has it; otherwise it is added to every eligible line.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from mdblocks.block import is_blank

LineFn = Callable[[str], str]
SkipFn = Callable[[Sequence[str], int], bool]


class ToggleAction(Enum):
    """Direction chosen by inspecting the first line."""

    ADD = "add"
    REMOVE = "remove"


def strip_pattern(pattern: re.Pattern[str]) -> LineFn:
    """Build a remove function deleting the first match of ``pattern``."""

    def _remove(line: str) -> str:
        return pattern.sub("", line, count=1)

    return _remove


def prepend(prefix: str) -> LineFn:
    """Build an add function prefixing ``prefix``."""

    def _add(line: str) -> str:
        return prefix + line

    return _add


def append(suffix: str) -> LineFn:
    """Build an add function suffixing ``suffix``."""

    def _add(line: str) -> str:
        return line + suffix

    return _add


@dataclass(frozen=True, slots=True)
class ToggleRule:
    """A toggleable line marker.

    Args:
        name: Rule name used in logs and reports.
        marker: Pattern identifying a marked line.
        add: Mutation applied to eligible lines when adding.
        remove: Mutation applied to marked lines when removing.
        skip_blank_lines: Leave blank lines untouched when adding.
        skip: Extra predicate ``(lines, index) -> bool`` excluding a line
            from the add pass.
    """

    name: str
    marker: re.Pattern[str]
    add: LineFn
    remove: LineFn
    skip_blank_lines: bool = False
    skip: SkipFn | None = None

    def detect(self, lines: Sequence[str]) -> ToggleAction:
        """Decide the toggle direction from the first line."""
        if lines and self.marker.search(lines[0]):
            return ToggleAction.REMOVE
        return ToggleAction.ADD

    def is_marked(self, line: str) -> bool:
        return self.marker.search(line) is not None

    def _skips(self, lines: Sequence[str], index: int) -> bool:
        if self.skip_blank_lines and is_blank(lines[index]):
            return True
        return self.skip is not None and self.skip(lines, index)

    def add_all(self, lines: Sequence[str]) -> list[str]:
        return [
            line if self._skips(lines, i) else self.add(line) for i, line in enumerate(lines)
        ]

    def remove_all(self, lines: Sequence[str]) -> list[str]:
        return [self.remove(line) if self.is_marked(line) else line for line in lines]

    def apply(self, lines: Sequence[str], action: ToggleAction | None = None) -> list[str]:
        """Toggle the marker over ``lines``.

        Args:
            lines: Block lines.
            action: Force a direction instead of detecting it.

        Returns:
            New list of lines.
        """
        if action is None:
            action = self.detect(lines)
        if action is ToggleAction.REMOVE:
            return self.remove_all(lines)
        return self.add_all(lines)


def _skip_line_break(lines: Sequence[str], index: int) -> bool:
    line = lines[index]
    followed_by_blank = index + 1 < len(lines) and is_blank(lines[index + 1])
    return is_blank(line) or followed_by_blank or line.endswith("\\")


_QUOTE_RE = re.compile(r"^>\s?")
_BULLET_RE = re.compile(r"^-\s+")
_BULLET_MARKER_RE = re.compile(r"^-\s")
_LINE_BREAK_RE = re.compile(r"\s*\\$")

QUOTE = ToggleRule(
    name="quote",
    marker=_QUOTE_RE,
    add=prepend("> "),
    remove=strip_pattern(_QUOTE_RE),
)

BULLET = ToggleRule(
    name="bullets",
    marker=_BULLET_RE,
    add=prepend("- "),
    remove=strip_pattern(_BULLET_MARKER_RE),
    skip_blank_lines=True,
)

LINE_BREAK = ToggleRule(
    name="breaks",
    marker=_LINE_BREAK_RE,
    add=append(" \\"),
    remove=strip_pattern(_LINE_BREAK_RE),
    skip=_skip_line_break,
)


def toggle_line_breaks(lines: Sequence[str], end_of_paragraph: bool = False) -> list[str]:
    """Toggle trailing `` \\`` continuation markers.

    When the block ends its paragraph, the final line never keeps a marker.
    Removal also strips the whitespace before each marker, so trailing
    whitespace a line carried before the marker was added is not restored.
    """
    result = LINE_BREAK.apply(lines)
    if end_of_paragraph and result:
        result[-1] = LINE_BREAK.remove(result[-1])
    return result
