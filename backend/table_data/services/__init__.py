"""Service layer for the application."""

from table_data.services.table_extractor import ExtractionConfig, TableDataExtractor, get_data

__all__ = [
    "ExtractionConfig",
    "TableDataExtractor",
    "get_data",
]
