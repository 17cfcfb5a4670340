"""Detection of row-spanning block cells in the first column."""
from __future__ import annotations

import logging

from .grid_models import Grid

logger = logging.getLogger(__name__)


def detect_multidimensional(grid: Grid) -> bool:
    """Tag block cells and their rows, returning whether any were found.

    A first-column cell spanning more than one row groups the following rows
    under a shared heading. Each such cell gets ``is_block_cell`` and the row
    holding it gets ``first_in_block``. Tags are left untouched when the grid
    has no blocks.
    """

    blocks = [
        row
        for row in grid.rows
        if row.cells and row.cells[0].row_span > 1
    ]
    if not blocks:
        return False

    for row in blocks:
        row.cells[0].is_block_cell = True
        row.first_in_block = True
    logger.debug("Detected %s block(s) in %s row(s)", len(blocks), len(grid.rows))
    return True


__all__ = ["detect_multidimensional"]
