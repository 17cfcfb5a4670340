"""Common dependency functions for API routes."""

from functools import lru_cache

from table_data.core.config import Settings, get_settings
from table_data.services.table_extractor import TableDataExtractor


@lru_cache
def get_table_data_extractor() -> TableDataExtractor:
    return TableDataExtractor()


def get_app_settings() -> Settings:
    return get_settings()
