"""Service for stripping values off a table body by rows or by columns."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, List, Literal, Optional, Union

from table_data.cell_reader import CellReader, prepare_data_cell
from table_data.exceptions import EmptyBodyError, InvalidDirectionError, InvalidSourceError
from table_data.grid_models import Cell, Grid, Row

logger = logging.getLogger(__name__)

Direction = Literal["row", "column"]
IndexSelection = Union[int, Sequence[int], None]

DIRECTIONS = ("row", "column")


@dataclass
class ExtractionConfig:
    """Options controlling how data is stripped off a grid.

    ``exclude_rows`` and ``exclude_columns`` take a single index or a
    sequence of indices counted over body rows and over the cells of each
    row. Negative indices count from the end.
    """

    source: Optional[Grid]
    direction: Direction = "row"
    exclude_block: bool = True
    exclude_columns: IndexSelection = None
    exclude_rows: IndexSelection = None
    multidimensional: bool = False


class TableDataExtractor:
    """Turn a grid into row-major or column-major lists of cell values."""

    def __init__(self, cell_reader: Optional[CellReader] = None) -> None:
        self._read_cell = cell_reader or prepare_data_cell

    # ------------------------------------------------------------------
    def get_data(self, config: ExtractionConfig) -> List[Any]:
        """Extract values from ``config.source``.

        Returns a list of rows (``direction="row"``) or of columns
        (``direction="column"``). For multidimensional grids the rows or
        columns are additionally grouped into one list per block.
        """

        self._validate(config)
        rows = self._exclude(config.source.rows, config.exclude_rows)
        logger.debug(
            "Extracting %s row(s) by %s (multidimensional=%s)",
            len(rows),
            config.direction,
            config.multidimensional,
        )

        data: List[Any] = []
        block: List[Any] = []
        for row_index, row in enumerate(rows):
            if config.multidimensional and row.first_in_block:
                if block:
                    data.append(block)
                block = []

            if config.direction == "row":
                block.append([])

            shift = 1 if config.multidimensional and not row.first_in_block else 0
            cells = self._exclude(row.cells, config.exclude_columns, shift=shift)

            for column_index, cell in enumerate(cells):
                if config.multidimensional and config.exclude_block and cell.row_span > 1:
                    continue
                if config.direction == "row":
                    block[-1].append(self._read_cell(cell, row_index, column_index))
                else:
                    self._place_in_column(block, config, row, cell, row_index, column_index)

        if config.multidimensional:
            if block:
                data.append(block)
            return data
        return block

    # ------------------------------------------------------------------
    @staticmethod
    def _validate(config: ExtractionConfig) -> None:
        source = getattr(config, "source", None)
        if not isinstance(source, Grid):
            raise InvalidSourceError("source must be defined and be a table grid")
        if config.direction not in DIRECTIONS:
            raise InvalidDirectionError(
                f"direction has to be 'row' or 'column', not {config.direction!r}"
            )
        for name in ("exclude_rows", "exclude_columns"):
            value = getattr(config, name)
            if value is None or _is_index(value):
                continue
            if isinstance(value, Sequence) and all(_is_index(item) for item in value):
                continue
            raise TypeError(f"{name} must be an index or a sequence of indices, not {value!r}")
        if not source.rows:
            raise EmptyBodyError("table body must contain rows")

    @staticmethod
    def _exclude(items: Sequence[Any], selection: IndexSelection, *, shift: int = 0) -> List[Any]:
        """Return ``items`` without the selected positions.

        Negative indices are resolved against the original length, then the
        positions are removed from the highest down so earlier removals do
        not move the ones still pending. ``shift`` is added to non-negative
        indices only.
        """

        remaining = list(items)
        if selection is None:
            return remaining

        indices = [selection] if _is_index(selection) else list(selection)
        length = len(remaining)
        positions = set()
        for index in indices:
            position = length + index if index < 0 else index + shift
            if 0 <= position < length:
                positions.add(position)
            else:
                logger.debug("Ignoring index %s outside of %s item(s)", index, length)

        for position in sorted(positions, reverse=True):
            del remaining[position]
        return remaining

    def _place_in_column(
        self,
        columns: List[Any],
        config: ExtractionConfig,
        row: Row,
        cell: Cell,
        row_index: int,
        column_index: int,
    ) -> None:
        real_index = column_index
        if config.multidimensional:
            # First rows of a block carry the block cell ahead of the data.
            if row.first_in_block:
                real_index -= 1
        if real_index < 0:
            logger.debug("Dropping cell of row %s without a column position", row_index)
            return

        while len(columns) <= real_index:
            columns.append([])
        columns[real_index].append(self._read_cell(cell, row_index, real_index))


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def get_data(config: ExtractionConfig, cell_reader: Optional[CellReader] = None) -> List[Any]:
    """Shortcut for :meth:`TableDataExtractor.get_data`."""

    return TableDataExtractor(cell_reader).get_data(config)


__all__ = ["DIRECTIONS", "Direction", "ExtractionConfig", "TableDataExtractor", "get_data"]
