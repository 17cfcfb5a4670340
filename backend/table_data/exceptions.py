"""Errors raised while loading grids and extracting table data."""
from __future__ import annotations


class TableDataError(Exception):
    """Base class for invalid extraction input."""


class InvalidSourceError(TableDataError, TypeError):
    """Raised when the extraction source is missing or is not a grid."""


class EmptyBodyError(TableDataError, ValueError):
    """Raised when the grid has no body rows."""


class InvalidDirectionError(TableDataError, TypeError):
    """Raised when the direction is neither ``row`` nor ``column``."""


class TableNotFoundError(ValueError):
    """Raised when a document does not contain the requested table."""


class UnsupportedDocumentError(RuntimeError):
    """Raised when a document cannot be parsed."""


__all__ = [
    "EmptyBodyError",
    "InvalidDirectionError",
    "InvalidSourceError",
    "TableDataError",
    "TableNotFoundError",
    "UnsupportedDocumentError",
]
