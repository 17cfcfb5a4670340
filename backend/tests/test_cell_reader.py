"""Unit tests for converting cells into values."""

from __future__ import annotations

import pytest

from table_data.cell_reader import CellRecord, prepare_data_cell, tagged_cell_reader, to_scalar
from table_data.grid_models import Cell


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("-7", -7),
        (" 12 ", 12),
        ("3.25", 3.25),
        ("+1e3", 1000.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("-2.5E-1", -0.25),
        ("1,5", "1,5"),
        ("12%", "12%"),
        ("nan", "nan"),
        ("Infinity", "Infinity"),
        ("1" * 5000, "1" * 5000),
        ("1e999", "1e999"),
        ("1" * 5000 + ".5", "1" * 5000 + ".5"),
        ("  North ", "North"),
        ("", None),
        ("   ", None),
        ("\n\t", None),
        (None, None),
    ],
)
def test_to_scalar(text: str | None, expected: object) -> None:
    value = to_scalar(text)

    assert value == expected
    assert type(value) is type(expected)


def test_prepare_data_cell_reads_text() -> None:
    assert prepare_data_cell(Cell(" 8 "), 3, 1) == 8


def test_tagged_reader_keeps_position() -> None:
    cell = Cell("abc")

    record = tagged_cell_reader(cell, 2, 4)

    assert record == CellRecord(cell=cell, data="abc", row_index=2, column_index=4)
