"""Shared grid and document builders for the test-suite."""

from __future__ import annotations

from io import BytesIO

import pytest
from docx import Document

from table_data.grid_models import Cell, Grid, Row

BLOCK_TABLE_HTML = """
<table id="sales">
  <thead>
    <tr><th>Region</th><th>Units</th><th>Product</th></tr>
  </thead>
  <tbody>
    <tr><td rowspan="2">North</td><td>1</td><td>a</td></tr>
    <tr><td>2</td><td>b</td></tr>
    <tr><td rowspan="2">South</td><td>3</td><td>c</td></tr>
    <tr><td>4</td><td>d</td></tr>
  </tbody>
</table>
"""


def build_block_grid() -> Grid:
    """Two blocks of two rows, each row holding a number and a letter."""

    return Grid(
        rows=[
            Row(cells=[Cell("X", row_span=2), Cell("1"), Cell("a")]),
            Row(cells=[Cell("2"), Cell("b")]),
            Row(cells=[Cell("Y", row_span=2), Cell("3"), Cell("c")]),
            Row(cells=[Cell("4"), Cell("d")]),
        ]
    )


def build_docx_table(header: list[str], body: list[list[str]], merge_first_column: list[tuple[int, int]]) -> bytes:
    """Return a DOCX payload with a single table.

    ``merge_first_column`` lists inclusive body row ranges whose first
    column cells are merged vertically. The top cell keeps its text.
    """

    document = Document()
    document.add_paragraph("Quarterly report")
    columns = len(header)
    table = document.add_table(rows=len(body) + 1, cols=columns)
    for column, value in enumerate(header):
        table.cell(0, column).text = value
    for start, end in merge_first_column:
        table.cell(start + 1, 0).merge(table.cell(end + 1, 0))
    for row_index, row in enumerate(body, start=1):
        for column, value in enumerate(row):
            if value:
                table.cell(row_index, column).text = value

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def block_grid() -> Grid:
    return build_block_grid()


@pytest.fixture
def block_table_html() -> str:
    return BLOCK_TABLE_HTML


@pytest.fixture
def block_table_docx() -> bytes:
    return build_docx_table(
        header=["Region", "Units", "Product"],
        body=[
            ["North", "1", "a"],
            ["", "2", "b"],
            ["South", "3", "c"],
            ["", "4", "d"],
        ],
        merge_first_column=[(0, 1), (2, 3)],
    )


@pytest.fixture
def docx_table_builder():
    return build_docx_table
