"""Strip typed values off table bodies, by rows or by columns."""

from table_data.block_detector import detect_multidimensional
from table_data.cell_reader import CellRecord, prepare_data_cell, tagged_cell_reader, to_scalar
from table_data.exceptions import (
    EmptyBodyError,
    InvalidDirectionError,
    InvalidSourceError,
    TableDataError,
    TableNotFoundError,
    UnsupportedDocumentError,
)
from table_data.grid_loader import grid_from_docx, grid_from_html
from table_data.grid_models import Cell, Grid, Row
from table_data.services.table_extractor import ExtractionConfig, TableDataExtractor, get_data

__version__ = "0.1.0"
__all__ = [
    "Cell",
    "CellRecord",
    "EmptyBodyError",
    "ExtractionConfig",
    "Grid",
    "InvalidDirectionError",
    "InvalidSourceError",
    "Row",
    "TableDataError",
    "TableDataExtractor",
    "TableNotFoundError",
    "UnsupportedDocumentError",
    "detect_multidimensional",
    "get_data",
    "grid_from_docx",
    "grid_from_html",
    "prepare_data_cell",
    "tagged_cell_reader",
    "to_scalar",
]
