"""Aligned, left-justified markdown tables."""

from __future__ import annotations

from typing import Sequence

from rich.cells import cell_len

_MIN_WIDTH = 3


def escape_cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


def _pad(cell: str, width: int) -> str:
    return cell + " " * (width - cell_len(cell))


def markdown_table(rows: Sequence[Sequence[str]]) -> str:
    """Render ``rows`` (header first) as a padded markdown table."""
    if not rows:
        return ""
    column_count = max(len(row) for row in rows)
    normalized = [list(row) + [""] * (column_count - len(row)) for row in rows]
    widths = [
        max(_MIN_WIDTH, *(cell_len(row[index]) for row in normalized))
        for index in range(column_count)
    ]

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(_pad(cell, width) for cell, width in zip(cells, widths)) + " |"

    delimiter = "| " + " | ".join(":" + "-" * (width - 1) for width in widths) + " |"
    lines = [_line(normalized[0]), delimiter]
    lines.extend(_line(row) for row in normalized[1:])
    return "\n".join(lines)
