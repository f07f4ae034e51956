# roc/table.py
"""
Plain text tables and column layouts for terminal output.

Cells are left justified. Rows can only be appended; column widths are
tracked as rows come in so rendering happens in a single pass.
"""
from __future__ import annotations
from typing import Iterable, Sequence

from rich.console import Console

from roc import config
from roc.errors import TableShapeError


def terminal_width() -> int:
    """
    Width of the attached terminal, or the configured default without one.
    """
    console = Console()
    if console.is_terminal:
        return console.size.width
    return config.DEFAULT_TERM_WIDTH


def header(title: str) -> str:
    """
    title underlined with dashes.
    """
    return f"{title}\n{'-' * len(title)}"


def pprint_as_columns(elems: Sequence[str], max_width: int | None = None) -> str:
    """
    Lay out short strings in as many equal width columns as fit on a line.
    """
    if not elems:
        return ""
    max_width = max_width or terminal_width()
    col_width = max(len(e) for e in elems)
    per_row = max(1, max_width // (col_width + 1))

    lines = []
    for start in range(0, len(elems), per_row):
        chunk = elems[start : start + per_row]
        lines.append(" ".join(e.ljust(col_width) for e in chunk).rstrip())
    return "\n".join(lines)


class Table:
    """
    A very simple plain text table that knows the width of each of its columns.
    """

    def __init__(self, max_width: int | None = None) -> None:
        self.rows: list[list[str]] = []
        self.column_widths: list[int] = []
        self.max_width = max_width or terminal_width()

    @classmethod
    def from_rows(
        cls, rows: Iterable[Sequence[str]], max_width: int | None = None
    ) -> "Table":
        table = cls(max_width=max_width)
        for row in rows:
            table.add_row(row)
        return table

    def add_row(self, cells: Sequence[str]) -> None:
        """
        Append a row, widening the tracked columns as needed.
        """
        cells = list(cells)
        missing = len(cells) - len(self.column_widths)
        if missing > 0:
            self.column_widths.extend([0] * missing)

        for i, cell in enumerate(cells):
            self.column_widths[i] = max(len(cell), self.column_widths[i])

        self.rows.append(cells)

    def _formatted(self, cells: list[str]) -> str:
        padded = (cell.ljust(width) for cell, width in zip(cells, self.column_widths))
        return config.SPACER.join(padded).rstrip()

    def _two_column_wrapped(self, cells: list[str]) -> str:
        """
        Render a name + description row, wrapping the description under
        itself when the row does not fit in max_width. If the name column
        alone fills max_width, the name gets a line of its own and the
        description wraps unindented below it.
        """
        if len(cells) != 2:
            raise TableShapeError(
                f"two column layout used on a row with {len(cells)} columns"
            )

        name_width = self.column_widths[0]
        if name_width + self.column_widths[1] + len(config.SPACER) <= self.max_width:
            return self._formatted(cells)

        indent = name_width + len(config.SPACER)
        lines: list[str] = []
        if indent >= self.max_width:
            lines.append(cells[0])
            indent = 0
            current = ""
        else:
            current = cells[0].ljust(name_width) + config.SPACER

        for word in cells[1].split():
            if len(current) == indent:
                current += word
            elif len(current) + 1 + len(word) <= self.max_width:
                current += " " + word
            else:
                lines.append(current)
                current = " " * indent + word
        if current:
            lines.append(current.rstrip())
        return "\n".join(lines)

    def render(self) -> str:
        """
        Convert the table to a left justified, column aligned string.
        """
        return "\n".join(self._two_column_wrapped(row) for row in self.rows)

    def __str__(self) -> str:
        return self.render()
