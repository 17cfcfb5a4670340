"""Endpoints that strip data off HTML and DOCX tables."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from table_data.api.deps import get_app_settings, get_table_data_extractor
from table_data.block_detector import detect_multidimensional
from table_data.core.config import Settings
from table_data.exceptions import TableDataError, TableNotFoundError, UnsupportedDocumentError
from table_data.grid_loader import grid_from_docx, grid_from_html
from table_data.grid_models import Grid
from table_data.schemas.table_data import (
    ExtractHtmlRequest,
    ExtractionOptions,
    TableDataFileResponse,
    TableDataResponse,
)
from table_data.services.table_extractor import ExtractionConfig, TableDataExtractor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/table-data", tags=["table-data"])


def _extract(
    grid: Grid,
    options: ExtractionOptions,
    extractor: TableDataExtractor,
    settings: Settings,
) -> TableDataResponse:
    detected = detect_multidimensional(grid)
    multidimensional = options.multidimensional
    if multidimensional is None:
        multidimensional = detected and settings.auto_detect_blocks
    direction = options.direction or settings.default_direction

    config = ExtractionConfig(
        source=grid,
        direction=direction,
        exclude_block=options.exclude_block,
        exclude_columns=options.exclude_columns,
        exclude_rows=options.exclude_rows,
        multidimensional=multidimensional,
    )
    try:
        data = extractor.get_data(config)
    except TableDataError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to extract data from a table of %s row(s)", len(grid.rows))
        raise HTTPException(status_code=400, detail="Failed to extract table data") from exc
    return TableDataResponse(
        multidimensional=multidimensional,
        direction=direction,
        row_count=len(grid.rows),
        data=data,
    )


@router.post("/html", response_model=TableDataResponse)
def extract_from_html(
    payload: ExtractHtmlRequest,
    extractor: TableDataExtractor = Depends(get_table_data_extractor),
    settings: Settings = Depends(get_app_settings),
) -> TableDataResponse:
    try:
        grid = grid_from_html(payload.html, payload.table_id)
    except TableNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _extract(grid, payload, extractor, settings)


@router.post("/docx", response_model=TableDataFileResponse)
async def extract_from_docx(
    file: UploadFile = File(...),
    table_index: int = Form(0),
    header_rows: int = Form(0),
    direction: Optional[str] = Form(None),
    exclude_block: bool = Form(True),
    exclude_columns: Optional[List[int]] = Form(None),
    exclude_rows: Optional[List[int]] = Form(None),
    multidimensional: Optional[bool] = Form(None),
    extractor: TableDataExtractor = Depends(get_table_data_extractor),
    settings: Settings = Depends(get_app_settings),
) -> TableDataFileResponse:
    if direction not in (None, "row", "column"):
        raise HTTPException(status_code=422, detail=f"direction has to be 'row' or 'column', not {direction!r}")
    options = ExtractionOptions(
        direction=direction,
        exclude_block=exclude_block,
        exclude_columns=exclude_columns,
        exclude_rows=exclude_rows,
        multidimensional=multidimensional,
    )

    contents = await file.read()
    try:
        grid = grid_from_docx(contents, table_index=table_index, header_rows=header_rows)
    except UnsupportedDocumentError as exc:
        raise HTTPException(status_code=415, detail=str(exc)) from exc
    except TableNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.exception("Failed to read document '%s'", file.filename)
        raise HTTPException(status_code=400, detail="Failed to process the document") from exc

    result = _extract(grid, options, extractor, settings)
    return TableDataFileResponse(filename=file.filename or "table.docx", **result.model_dump())
