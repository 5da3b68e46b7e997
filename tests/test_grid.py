import pytest

from sheet2csv.core.table.grid import Grid
from sheet2csv.core.table.exceptions import InvalidGridAccessError
from sheet2csv.core.table.empty_predicate import BlankTextEmptyPredicate


# --- construction / validity ---

def test_ragged_rows_are_padded():
    grid = Grid([["a"], ["b", "c", "d"], []])
    assert grid.row_count() == 3
    assert grid.column_count() == 3
    assert grid.to_rows() == [
        ["a", None, None],
        ["b", "c", "d"],
        [None, None, None],
    ]


@pytest.mark.parametrize("data", [None, [], [[], []]])
def test_empty_input_gives_invalid_grid(data):
    grid = Grid(data)
    assert not grid.is_valid()
    assert grid.to_rows() == []
    assert repr(grid) == "Grid(<empty>)"


@pytest.mark.parametrize("operation", [
    lambda g: g.get(0, 0),
    lambda g: g.set(0, 0, "x"),
    lambda g: g.row_count(),
    lambda g: g.column_count(),
    lambda g: g.row(0),
    lambda g: g.column(0),
    lambda g: g.row_iterator(),
    lambda g: g.column_iterator(),
    lambda g: g.transpose(),
    lambda g: g.copy(),
    lambda g: g.delete_row(0),
    lambda g: g.delete_column(0),
    lambda g: g.trim(),
    lambda g: g.is_empty(),
    lambda g: g.to_csv(),
])
def test_invalid_grid_rejects_access(operation):
    with pytest.raises(InvalidGridAccessError):
        operation(Grid())


def test_construction_copies_input(sales_rows):
    grid = Grid(sales_rows)
    sales_rows[0][0] = "changed"
    assert grid.get(0, 0) == "Sales"


# --- cell access ---

def test_out_of_range_reads_are_empty(sales_rows):
    grid = Grid(sales_rows)
    assert grid.get(grid.row_count(), 0) is None
    assert grid.get(0, grid.column_count()) is None
    assert grid.get(-1, 0) is None


def test_out_of_range_writes_are_dropped(sales_rows):
    grid = Grid(sales_rows)
    before = grid.to_rows()
    grid.set(3, 0, "x")
    grid.set(0, 3, "x")
    grid.set(-1, 0, "x")
    assert grid.to_rows() == before


def test_set_and_clear(sales_rows):
    grid = Grid(sales_rows)
    grid.set(0, 2, "Total")
    assert grid.get(0, 2) == "Total"
    grid.clear(0, 2)
    assert grid.get(0, 2) is None


# --- transpose ---

def test_transpose_swaps_coordinates():
    grid = Grid([["a", "b", "c"], ["d", "e", "f"]])
    grid.transpose()
    assert grid.is_transposed()
    assert grid.row_count() == 3
    assert grid.column_count() == 2
    assert grid.get(2, 1) == "f"
    assert grid.row(0) == ["a", "d"]
    assert grid.column(1) == ["d", "e", "f"]
    assert grid.to_rows() == [["a", "d"], ["b", "e"], ["c", "f"]]


def test_double_transpose_restores_view(block_grid):
    before = block_grid.to_rows()
    block_grid.transpose()
    block_grid.transpose()
    assert not block_grid.is_transposed()
    for r in range(block_grid.row_count()):
        for c in range(block_grid.column_count()):
            assert block_grid.get(r, c) == before[r][c]


def test_set_on_transposed_grid():
    grid = Grid([["a", "b", "c"], ["d", "e", "f"]])
    grid.transpose()
    grid.set(2, 0, "z")
    grid.transpose()
    assert grid.get(0, 2) == "z"


# --- rows / columns ---

def test_row_and_column_are_snapshots(sales_rows):
    grid = Grid(sales_rows)
    row = grid.row(1)
    row[0] = "changed"
    assert grid.get(1, 0) == "Jan"
    assert grid.column(1) == [None, "100", "200"]


def test_lines_past_extent_are_empty(sales_rows):
    grid = Grid(sales_rows)
    assert grid.row(10) == [None, None, None]
    assert grid.column(10) == [None, None, None]


def test_iterators_are_fresh_per_call(sales_rows):
    grid = Grid(sales_rows)
    first = grid.row_iterator()
    assert next(first) == ["Sales", None, None]
    assert list(grid.row_iterator()) == sales_rows
    assert list(first) == sales_rows[1:]
    assert list(first) == []
    assert list(grid.column_iterator()) == [
        ["Sales", "Jan", "Feb"],
        [None, "100", "200"],
        [None, None, None],
    ]


def test_iterator_does_not_see_structural_edits(sales_rows):
    grid = Grid(sales_rows)
    rows = grid.row_iterator()
    grid.delete_row(0)
    assert len(list(rows)) == 3
    assert grid.row_count() == 2


def test_iterator_sees_cell_values_set_later(sales_rows):
    grid = Grid(sales_rows)
    rows = grid.row_iterator()
    assert next(rows) == ["Sales", None, None]
    grid.set(1, 2, "x")
    assert next(rows) == ["Jan", "100", "x"]

    grid.transpose()
    columns = grid.column_iterator()
    grid.set(2, 2, "y")
    assert list(columns)[2] == ["Feb", "200", "y"]


# --- copy ---

def test_copy_sub_range(block_grid):
    sub = block_grid.copy(3, 4, 0, 1)
    assert sub.to_rows() == [["e", None], ["f", "g"]]


def test_copy_is_independent(block_grid):
    sub = block_grid.copy()
    sub.set(0, 0, "changed")
    assert block_grid.get(0, 0) == "a"


def test_copy_with_end_before_start_is_invalid():
    grid = Grid([["a", "b"], ["c", "d"], ["e", "f"]])
    sub = grid.copy(2, 1, 0, 0)
    assert not sub.is_valid()
    with pytest.raises(InvalidGridAccessError):
        sub.get(0, 0)


def test_copy_with_negative_bound_is_usage_error():
    grid = Grid([["a", "b"], ["c", "d"]])
    with pytest.raises(ValueError):
        grid.copy(-1, 1, 0, 1)


def test_copy_beyond_extent_pads_empty_cells():
    grid = Grid([["a", "b"], ["c", "d"]])
    sub = grid.copy(1, 2, 1, 2)
    assert sub.to_rows() == [["d", None], [None, None]]


def test_copy_of_transposed_grid_is_untransposed():
    grid = Grid([["a", "b", "c"], ["d", "e", "f"]])
    grid.transpose()
    sub = grid.copy(1, 2, 0, 1)
    assert not sub.is_transposed()
    assert sub.to_rows() == [["b", "e"], ["c", "f"]]


# --- deletion ---

def test_delete_row_shifts_following_rows(block_grid):
    before = block_grid.to_rows()
    block_grid.delete_row(1)
    assert block_grid.row_count() == len(before) - 1
    assert block_grid.row(0) == before[0]
    for index in range(1, block_grid.row_count()):
        assert block_grid.row(index) == before[index + 1]


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_delete_row_out_of_range_is_noop(block_grid, index):
    before = block_grid.to_rows()
    block_grid.delete_row(index)
    assert block_grid.to_rows() == before


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_delete_column_out_of_range_is_noop(block_grid, index):
    before = block_grid.to_rows()
    block_grid.delete_column(index)
    assert block_grid.to_rows() == before
    assert block_grid.column_count() == 4


def test_delete_column_shifts_following_columns(block_grid):
    block_grid.delete_column(2)
    assert block_grid.column_count() == 3
    assert block_grid.row(0) == ["a", "b", "x"]
    assert block_grid.column(2) == ["x", "y", None, None, None]


def test_delete_first_and_last_column():
    grid = Grid([["a", "b", "c"], ["d", "e", "f"]])
    grid.delete_column(0)
    grid.delete_column(1)
    assert grid.to_rows() == [["b"], ["e"]]


def test_delete_only_row_invalidates_grid():
    grid = Grid([["a", "b"]])
    grid.delete_row(0)
    assert not grid.is_valid()


def test_delete_only_column_invalidates_grid():
    grid = Grid([["a"], ["b"]])
    grid.delete_column(0)
    assert not grid.is_valid()


def test_delete_row_on_transposed_grid_keeps_view():
    grid = Grid([["a", "b", "c"], ["d", "e", "f"]])
    grid.transpose()
    grid.delete_row(1)
    assert grid.to_rows() == [["a", "d"], ["c", "f"]]


@pytest.mark.parametrize("edit, expected", [
    (lambda grid: grid.delete_row(1), [["a", "d", "g"], ["c", "f", "i"]]),
    (lambda grid: grid.delete_column(1), [["a", "g"], [None, None], ["c", "i"]]),
    (lambda grid: grid.trim(), [["a", "d", "g"], ["c", "f", "i"]]),
])
def test_structural_edit_on_transposed_grid_resets_flag(edit, expected):
    grid = Grid([["a", None, "c"], ["d", None, "f"], ["g", None, "i"]])
    grid.transpose()
    edit(grid)
    assert not grid.is_transposed()
    assert grid.to_rows() == expected


# --- trim / is_empty ---

def test_trim_removes_interior_and_boundary_blanks():
    grid = Grid([
        [None, None, None, None],
        ["a", None, "b", None],
        [None, None, None, None],
        ["c", None, "d", None],
    ])
    grid.trim()
    assert grid.to_rows() == [["a", "b"], ["c", "d"]]


def test_trim_is_idempotent(block_grid):
    block_grid.trim()
    once = block_grid.to_rows()
    block_grid.trim()
    assert block_grid.to_rows() == once


def test_trim_all_empty_grid_invalidates_it():
    grid = Grid([[None, None], [None, None]])
    assert grid.is_empty()
    grid.trim()
    assert not grid.is_valid()


def test_trim_with_blank_text_predicate():
    grid = Grid([["a", "  "], [" ", None], ["b", None]])
    grid.trim(BlankTextEmptyPredicate())
    assert grid.to_rows() == [["a"], ["b"]]


def test_is_empty(sales_rows):
    assert not Grid(sales_rows).is_empty()
    assert Grid([[None]]).is_empty()


def test_str_lists_rows():
    assert str(Grid([["a", None]])) == "['a', None]"
    assert str(Grid()) == "EmptyGrid"
