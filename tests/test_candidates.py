from __future__ import annotations

from logic_solver import DeductionLimits
from logic_solver.candidates import (
    columns_containing,
    possible_columns_in_row,
    possible_coordinates_in_block,
    possible_rows_in_column,
    rows_containing,
)
from logic_solver.grid import Grid, set_cell

from samples import SOLVED


def _grid_with(*cells: tuple[int, int, int]) -> Grid:
    grid = Grid.empty()
    for row, col, digit in cells:
        grid = set_cell(grid, row, col, digit)
    return grid


def _row_of(digits: str, row: int = 0, grid: Grid | None = None) -> Grid:
    grid = grid or Grid.empty()
    for col, char in enumerate(digits):
        if char != ".":
            grid = set_cell(grid, row, col, int(char))
    return grid


def test_locked_column_in_vertical_sibling_narrows_block() -> None:
    # block (1, 0) can only take 1 in its middle column, so block (0, 0)
    # loses that column and keeps the first one.
    grid = _grid_with((3, 0, 2), (4, 0, 3), (5, 0, 4), (6, 2, 1))

    assert possible_coordinates_in_block(grid, (0, 0), 1) == {(0, 0), (1, 0), (2, 0)}


def test_depth_cap_disables_refinement() -> None:
    grid = _grid_with((3, 0, 2), (4, 0, 3), (5, 0, 4), (6, 2, 1))

    assert possible_coordinates_in_block(grid, (0, 0), 1, depth=3) == {
        (0, 0),
        (1, 0),
        (2, 0),
        (0, 1),
        (1, 1),
        (2, 1),
    }
    shallow = DeductionLimits(max_depth=1)
    assert len(possible_coordinates_in_block(grid, (0, 0), 1, limits=shallow)) == 6


def test_locked_row_in_lateral_sibling_narrows_block() -> None:
    # block (0, 2) takes row 2 and block (0, 1) is left with row 1 for the
    # digit 1, so block (0, 0) keeps only its top row.
    grid = _grid_with((0, 3, 2), (0, 4, 3), (0, 5, 4), (2, 6, 1))

    assert possible_coordinates_in_block(grid, (0, 0), 1) == {(0, 0), (0, 1), (0, 2)}
    assert possible_coordinates_in_block(grid, (0, 0), 1, depth=3) == {
        (0, 0),
        (0, 1),
        (0, 2),
        (1, 0),
        (1, 1),
        (1, 2),
    }


def test_other_digits_reserve_block_cells() -> None:
    # Empty the top-left block and two cells of its right neighbour.  The
    # siblings pin every other digit to one cell, except 3 which keeps two
    # corners of the right column, so 6 takes the middle one away from 9.
    grid = Grid.from_string(SOLVED)
    for row in range(3):
        for col in range(3):
            grid = set_cell(grid, row, col, 0)
    grid = set_cell(set_cell(grid, 1, 5, 0), 2, 5, 0)

    assert possible_coordinates_in_block(grid, (0, 0), 9) == {(2, 2)}
    no_subsets = DeductionLimits(subset_cap=0)
    assert possible_coordinates_in_block(grid, (0, 0), 9, limits=no_subsets) == {(1, 2), (2, 2)}


def test_block_with_one_free_cell() -> None:
    grid = _row_of("123", 0)
    grid = _row_of("456", 1, grid)
    grid = _row_of("78", 2, grid)

    assert possible_coordinates_in_block(grid, (0, 0), 9) == {(2, 2)}


def test_row_candidate_for_present_digit_is_its_column() -> None:
    grid = _row_of("1234567")

    assert possible_columns_in_row(grid, 0, 3) == {2}


def test_crossing_column_removes_row_candidate() -> None:
    grid = set_cell(_row_of("1234567"), 5, 7, 8)

    assert possible_columns_in_row(grid, 0, 8) == {8}
    # 8 now owns column 8, so 9 is left with column 7
    assert possible_columns_in_row(grid, 0, 9) == {7}
    assert possible_columns_in_row(grid, 0, 9, limits=DeductionLimits(max_depth=1)) == {7, 8}


def test_other_digits_reserve_row_cells() -> None:
    # 9 is confined to column 7, which leaves column 8 for 8
    grid = set_cell(_row_of("1234567"), 4, 8, 9)

    assert possible_columns_in_row(grid, 0, 9) == {7}
    assert possible_columns_in_row(grid, 0, 8) == {8}
    assert possible_columns_in_row(grid, 0, 8, limits=DeductionLimits(max_depth=1)) == {7, 8}


def test_column_candidates_mirror_rows() -> None:
    grid = Grid.empty()
    for row, digit in enumerate(range(1, 8)):
        grid = set_cell(grid, row, 0, digit)
    grid = set_cell(grid, 7, 5, 8)

    assert possible_rows_in_column(grid, 0, 8) == {8}
    assert possible_rows_in_column(grid, 0, 4) == {3}


def test_lines_containing_digit() -> None:
    grid = _grid_with((0, 3, 5), (6, 8, 5), (2, 2, 7))

    assert columns_containing(grid, 5) == {3, 8}
    assert rows_containing(grid, 5) == {0, 6}
    assert columns_containing(grid, 9) == frozenset()


def test_candidates_are_memoised_per_limits() -> None:
    grid = _grid_with((3, 0, 2), (4, 0, 3), (5, 0, 4), (6, 2, 1))

    first = possible_coordinates_in_block(grid, (0, 0), 1, limits=DeductionLimits())
    again = possible_coordinates_in_block(grid, (0, 0), 1, limits=DeductionLimits())
    shallow = possible_coordinates_in_block(grid, (0, 0), 1, limits=DeductionLimits(max_depth=1))

    assert first is again
    assert first != shallow
