"""Strategies that turn a single grid cell into an output value."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Protocol

from .grid_models import Cell

Scalar = int | float | str | None

_number_re = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_integer_re = re.compile(r"[+-]?\d+")


class CellReader(Protocol):
    def __call__(self, cell: Cell, row_index: int, column_index: int) -> Any: ...


@dataclass(slots=True)
class CellRecord:
    """A cell value together with the cell and its position."""

    cell: Cell
    data: Scalar
    row_index: int
    column_index: int


def to_scalar(text: str | None) -> Scalar:
    """Return a number, the trimmed text, or ``None`` for blank content."""

    value = (text or "").strip()
    if not value:
        return None
    if _integer_re.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            # Longer than the interpreter's int conversion limit.
            pass
    if _number_re.fullmatch(value):
        number = float(value)
        if math.isfinite(number):
            return number
    return value


def prepare_data_cell(cell: Cell, row_index: int, column_index: int) -> Scalar:
    """Default reader: the cell's text converted with :func:`to_scalar`."""

    return to_scalar(cell.text)


def tagged_cell_reader(cell: Cell, row_index: int, column_index: int) -> CellRecord:
    return CellRecord(
        cell=cell,
        data=to_scalar(cell.text),
        row_index=row_index,
        column_index=column_index,
    )


__all__ = [
    "CellReader",
    "CellRecord",
    "Scalar",
    "prepare_data_cell",
    "tagged_cell_reader",
    "to_scalar",
]
