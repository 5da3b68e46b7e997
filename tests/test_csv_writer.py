import pytest

from sheet2csv.core.table.grid import Grid
from sheet2csv.core.table.csv_writer import CsvWriter, CsvWriterConfig
from sheet2csv.core.table.exceptions import InvalidGridAccessError


def test_default_format_uses_tabs():
    grid = Grid([["a", "b\tc"], [None, "d"]])
    assert grid.to_csv() == "a\tb    c\n\td\n"


def test_separator_and_newline_replacement():
    grid = Grid([["1,5", "two\nlines"], ["x", None]])
    assert grid.to_csv(",", ";", "-") == "1;5,two lines\nx,-\n"


@pytest.mark.parametrize("cell, expected", [
    ("a\r\nb", "a b"),
    ("a\rb", "a b"),
    ("a\n\nb", "a  b"),
    ("a\r\n\rb", "a  b"),
])
def test_every_line_break_kind_is_replaced(cell, expected):
    assert Grid([[cell, "x"]]).to_csv(",", ";", "") == expected + ",x\n"


def test_single_column_has_no_separator():
    grid = Grid([["a"], ["b"]])
    assert grid.to_csv(",", ";", "") == "a\nb\n"


def test_multi_character_separator():
    grid = Grid([["a||b", "c"]])
    assert grid.to_csv("||", "/", "") == "a/b||c\n"


def test_non_text_cells_use_str():
    grid = Grid([[1, 2.5, None]])
    assert CsvWriter(CsvWriterConfig(separator=",")).write(grid) == "1,2.5,\n"


def test_transposed_grid_is_written_in_view_order():
    grid = Grid([["a", "b"], ["c", "d"]])
    grid.transpose()
    assert grid.to_csv(",", ";", "") == "a,c\nb,d\n"


def test_invalid_grid_is_reported():
    with pytest.raises(InvalidGridAccessError):
        CsvWriter().write(Grid())
