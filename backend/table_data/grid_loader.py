"""Helpers for reading table bodies from HTML markup and DOCX documents."""
from __future__ import annotations

from io import BytesIO
from zipfile import BadZipFile
import logging

from bs4 import BeautifulSoup, Tag
from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table, _Cell

from .exceptions import TableNotFoundError, UnsupportedDocumentError
from .grid_models import Cell, Grid, Row

logger = logging.getLogger(__name__)


def _span(value: object) -> int:
    """Read a ``rowspan``/``colspan`` attribute the way browsers do."""

    try:
        span = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return span if span > 0 else 1


def _find_table(soup: BeautifulSoup, table_id: str | None) -> Tag:
    if table_id:
        table = soup.find("table", id=table_id)
        if table is None:
            raise TableNotFoundError(f"Table #{table_id} was not found")
        return table
    table = soup.find("table")
    if table is None:
        raise TableNotFoundError("Markup does not contain a table")
    return table


def _body_rows(table: Tag) -> list[Tag]:
    """Rows of the table body, ignoring ``thead``/``tfoot`` and nested tables."""

    bodies = table.find_all("tbody", recursive=False)
    if bodies:
        return [tr for body in bodies for tr in body.find_all("tr", recursive=False)]
    return table.find_all("tr", recursive=False)


def _html_row(tr: Tag) -> Row:
    cells = [
        Cell(
            text=cell.get_text(),
            row_span=_span(cell.get("rowspan", 1)),
            col_span=_span(cell.get("colspan", 1)),
        )
        for cell in tr.find_all(["td", "th"], recursive=False)
    ]
    return Row(cells=cells)


def grid_from_html(html: str, table_id: str | None = None) -> Grid:
    """Return the body of a table in ``html`` as a :class:`Grid`.

    The table is looked up by ``table_id`` when given, otherwise the first
    table in the markup is used.
    """

    soup = BeautifulSoup(html or "", "html.parser")
    table = _find_table(soup, table_id)
    rows = [_html_row(tr) for tr in _body_rows(table)]
    logger.debug("Read %s body row(s) from HTML table %s", len(rows), table_id or "")
    return Grid(rows=rows)


def _docx_row_cells(table: Table, tr, tr_index: int) -> list[Cell]:
    """Physical cells of a DOCX row, merged continuations dropped."""

    cells: list[Cell] = []
    for tc in tr.tc_lst:
        if tc.vMerge == "continue":
            continue
        cells.append(
            Cell(
                text=_Cell(tc, table).text,
                row_span=tc.bottom - tr_index,
                col_span=tc.grid_span,
            )
        )
    return cells


def grid_from_docx(payload: bytes, table_index: int = 0, header_rows: int = 0) -> Grid:
    """Return the body of a DOCX table as a :class:`Grid`.

    Vertically merged cells become a single cell whose ``row_span`` covers
    the merged rows. The first ``header_rows`` rows are left out.
    """

    try:
        document = Document(BytesIO(payload))
    except (BadZipFile, PackageNotFoundError, KeyError, ValueError) as exc:
        raise UnsupportedDocumentError("Document is not a readable DOCX file") from exc

    tables = document.tables
    if not -len(tables) <= table_index < len(tables):
        raise TableNotFoundError(
            f"Table {table_index} was not found, document has {len(tables)} table(s)"
        )
    table = tables[table_index]

    rows: list[Row] = []
    for tr_index, tr in enumerate(table._tbl.tr_lst):
        if tr_index < header_rows:
            continue
        rows.append(Row(cells=_docx_row_cells(table, tr, tr_index)))
    logger.debug("Read %s body row(s) from DOCX table %s", len(rows), table_index)
    return Grid(rows=rows)


__all__ = ["grid_from_docx", "grid_from_html"]
