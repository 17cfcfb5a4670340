"""Schemas for table data extraction endpoints."""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field

IndexSelection = Optional[Union[int, List[int]]]


class ExtractionOptions(BaseModel):
    direction: Optional[Literal["row", "column"]] = Field(
        default=None,
        description="'row' strips values row by row, 'column' column by column. Defaults to the configured direction.",
    )
    exclude_block: bool = Field(
        default=True,
        description="Leave row-spanning block cells out of the data.",
    )
    exclude_columns: IndexSelection = Field(
        default=None,
        description="Cell index or indices to skip in every row, negative values count from the end.",
    )
    exclude_rows: IndexSelection = Field(
        default=None,
        description="Body row index or indices to skip, negative values count from the end.",
    )
    multidimensional: Optional[bool] = Field(
        default=None,
        description="Whether rows are grouped into blocks. Detected from the table when omitted.",
    )


class ExtractHtmlRequest(ExtractionOptions):
    html: str = Field(..., description="Markup containing the table")
    table_id: Optional[str] = Field(
        default=None,
        description="Id of the table to read. The first table is used when omitted.",
    )


class TableDataResponse(BaseModel):
    multidimensional: bool = Field(..., description="Whether the data is grouped into blocks")
    direction: Literal["row", "column"] = Field(..., description="Direction the data was stripped in")
    row_count: int = Field(..., description="Number of body rows in the source table")
    data: List[Any] = Field(default_factory=list, description="Extracted values")


class TableDataFileResponse(TableDataResponse):
    filename: str = Field(..., description="Original uploaded file name")
