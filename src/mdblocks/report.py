"""Transform result records and their text/JSON rendering."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.table import Table

from mdblocks import __version__


@dataclass(frozen=True, slots=True)
class TransformResult:
    """Outcome of applying one transform to one block.

    Args:
        transform: Name of the transform applied.
        start_index: First line of the replaced range (1-based).
        end_index: Last line of the replaced range (inclusive).
        lines_before: Line count of the original block.
        lines_after: Line count of the replacement.
        changed: Whether the replacement differs from the original.
    """

    transform: str
    start_index: int
    end_index: int
    lines_before: int
    lines_after: int
    changed: bool

    def __post_init__(self) -> None:
        if self.lines_before < 0 or self.lines_after < 0:
            raise ValueError("line counts must be >= 0")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "transform": self.transform,
            "start_index": self.start_index,
            "end_index": self.end_index,
            "lines_before": self.lines_before,
            "lines_after": self.lines_after,
            "changed": self.changed,
        }


class ReportFormatter:
    """Render transform results for the terminal or as JSON."""

    def format_json(self, result: TransformResult, input_path: str | None = None) -> str:
        report: dict[str, Any] = {
            "mdblocks_version": __version__,
            "input_path": input_path,
            "result": result.to_dict(),
        }
        return json.dumps(report, indent=2)

    def build_table(self, result: TransformResult) -> Table:
        table = Table(title="Transform Summary", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Transform", result.transform)
        table.add_row("Lines", f"{result.start_index}-{result.end_index}")
        table.add_row("Lines before", str(result.lines_before))
        table.add_row("Lines after", str(result.lines_after))
        table.add_row("Changed", "Yes" if result.changed else "No")
        return table

    def print(
        self,
        console: Console,
        result: TransformResult,
        fmt: str = "text",
        input_path: str | None = None,
    ) -> None:
        """Print a report to the given console."""
        if fmt == "json":
            console.print_json(self.format_json(result, input_path))
        else:
            console.print(self.build_table(result))
