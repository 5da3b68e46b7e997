import pytest

from sheet2csv.core.table.grid import Grid


@pytest.fixture
def sales_rows():
    return [
        ["Sales", None, None],
        ["Jan", "100", None],
        ["Feb", "200", None],
    ]


@pytest.fixture
def block_grid():
    # two tables side by side, a third one below the left one
    return Grid([
        ["a", "b", None, "x"],
        ["c", "d", None, "y"],
        [None, None, None, None],
        ["e", None, None, None],
        ["f", "g", None, None],
    ])
