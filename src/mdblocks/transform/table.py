"""Conversion between CSV and pipe-delimited Markdown tables.

CSV parsing is lenient: an unterminated quoted field runs to the end of
the line instead of raising.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_LINE_SPLIT_RE = re.compile(r"[^\r\n]+")
_TABLE_ROW_RE = re.compile(r"^\|.*\|$")


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV record into fields.

    Quoted fields may contain commas and doubled quotes (``""`` is a
    literal ``"``); whitespace between the closing quote and the next comma
    is skipped. Unquoted fields are trimmed.

    Args:
        line: A single CSV record.

    Returns:
        One string per comma-delimited field. Empty for an empty line.
    """
    fields: list[str] = []
    i = 0
    n = len(line)
    while i < n:
        chars: list[str] = []
        if line[i] == '"':
            i += 1
            while i < n:
                c = line[i]
                if c == '"':
                    if i + 1 < n and line[i + 1] == '"':
                        chars.append('"')
                        i += 2
                        continue
                    i += 1
                    break
                chars.append(c)
                i += 1
            while i < n and line[i] != ",":
                i += 1
            fields.append("".join(chars))
        else:
            while i < n and line[i] != ",":
                chars.append(line[i])
                i += 1
            fields.append("".join(chars).strip())
        if i < n:
            # Consume the separator; a trailing one opens an empty last field.
            i += 1
            if i == n:
                fields.append("")
    return fields


def format_csv_field(value: str) -> str:
    """Quote a field, doubling any embedded quotes."""
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def split_lines(text: str) -> list[str]:
    """Split text into its non-empty lines."""
    return _LINE_SPLIT_RE.findall(text)


def format_table_row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def parse_table_row(line: str) -> list[str]:
    """Split a Markdown table row into trimmed cells."""
    inner = line.strip()
    if inner.startswith("|"):
        inner = inner[1:]
    if inner.endswith("|"):
        inner = inner[:-1]
    return [cell.strip() for cell in inner.split("|")]


def csv_to_markdown(csv_text: str) -> str:
    """Convert CSV text to a Markdown table.

    The first record is the header. Ragged rows are emitted as they are.
    """
    lines = split_lines(csv_text)
    if not lines:
        return ""
    header = parse_csv_line(lines[0])
    rows = [format_table_row(header), "|" + "---|" * len(header)]
    rows.extend(format_table_row(parse_csv_line(line)) for line in lines[1:])
    return "\n".join(rows) + "\n"


def markdown_to_csv(markdown_text: str) -> str:
    """Convert a Markdown table to CSV with every field quoted.

    The second line (the separator row) is dropped.
    """
    records: list[str] = []
    for i, line in enumerate(split_lines(markdown_text)):
        if i == 1:
            continue
        records.append(",".join(format_csv_field(cell) for cell in parse_table_row(line)))
    return "\n".join(records)


def is_markdown_table(lines: Sequence[str]) -> bool:
    """True if the first line looks like a pipe-delimited table row."""
    return bool(lines) and _TABLE_ROW_RE.match(lines[0].strip()) is not None


def csv_to_table(lines: Sequence[str]) -> list[str]:
    return split_lines(csv_to_markdown("\n".join(lines)))


def table_to_csv(lines: Sequence[str]) -> list[str]:
    return split_lines(markdown_to_csv("\n".join(lines)))


def toggle_csv_table(lines: Sequence[str]) -> list[str]:
    """Convert a Markdown table to CSV, or CSV to a Markdown table."""
    if is_markdown_table(lines):
        return table_to_csv(lines)
    return csv_to_table(lines)
