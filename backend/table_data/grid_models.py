"""Normalized table body model shared by loaders, the detector and the extractor."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Cell:
    """A single body cell.

    Parameters
    ----------
    text:
        Raw text content of the cell, untrimmed.
    row_span:
        Number of rows the cell covers, at least 1.
    col_span:
        Number of columns the cell covers. Informational only.
    is_block_cell:
        Set by :func:`~table_data.block_detector.detect_multidimensional`
        when the cell heads a block of rows.
    """

    text: str = ""
    row_span: int = 1
    col_span: int = 1
    is_block_cell: bool = False

    def __post_init__(self) -> None:
        if self.row_span < 1:
            raise ValueError("row_span must be at least 1")


@dataclass(slots=True)
class Row:
    """Ordered cells of one body row."""

    cells: list[Cell] = field(default_factory=list)
    first_in_block: bool = False


@dataclass(slots=True)
class Grid:
    """Body rows of a table, header rows excluded."""

    rows: list[Row] = field(default_factory=list)

    @classmethod
    def from_values(cls, rows: list[list[str]]) -> "Grid":
        """Build a grid of single-span cells from plain text rows."""

        return cls(rows=[Row(cells=[Cell(text=value) for value in row]) for row in rows])

    def clear_tags(self) -> None:
        """Drop block markers so the grid can be detected again."""

        for row in self.rows:
            row.first_in_block = False
            for cell in row.cells:
                cell.is_block_cell = False


__all__ = ["Cell", "Grid", "Row"]
