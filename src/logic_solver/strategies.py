"""Assignment strategies: commit a digit once a single candidate is left."""

from __future__ import annotations

from typing import Optional

from .candidates import possible_columns_in_row, possible_coordinates_in_block, possible_rows_in_column
from .grid import EMPTY, Block, Grid, block_contains, cell_at, global_coordinates, set_cell
from .limits import DeductionLimits
from .placement import Placement, Strategy


def _single(candidates: frozenset):
    if len(candidates) != 1:
        return None
    return next(iter(candidates))


def locate_digit_in_block(
    grid: Grid, block: Block, digit: int, *, limits: Optional[DeductionLimits] = None
) -> Optional[Placement]:
    if block_contains(grid, block, digit):
        return None
    local = _single(possible_coordinates_in_block(grid, block, digit, limits=limits))
    if local is None:
        return None
    row, col = global_coordinates(block, local)
    return Placement.at(row, col, digit, Strategy.BLOCK)


def locate_digit_in_row(
    grid: Grid, row: int, digit: int, *, limits: Optional[DeductionLimits] = None
) -> Optional[Placement]:
    col = _single(possible_columns_in_row(grid, row, digit, limits=limits))
    if col is None or cell_at(grid, row, col) != EMPTY:
        return None
    return Placement.at(row, col, digit, Strategy.ROW)


def locate_digit_in_column(
    grid: Grid, col: int, digit: int, *, limits: Optional[DeductionLimits] = None
) -> Optional[Placement]:
    row = _single(possible_rows_in_column(grid, col, digit, limits=limits))
    if row is None or cell_at(grid, row, col) != EMPTY:
        return None
    return Placement.at(row, col, digit, Strategy.COLUMN)


def apply_placement(grid: Grid, placement: Optional[Placement]) -> Grid:
    if placement is None:
        return grid
    return set_cell(grid, placement.row, placement.col, placement.digit)


def assign_digit_in_block(
    grid: Grid, block: Block, digit: int, *, limits: Optional[DeductionLimits] = None
) -> Grid:
    """Place ``digit`` in ``block`` when exactly one coordinate remains."""

    return apply_placement(grid, locate_digit_in_block(grid, block, digit, limits=limits))


def assign_digit_in_row(grid: Grid, row: int, digit: int, *, limits: Optional[DeductionLimits] = None) -> Grid:
    """Place ``digit`` in ``row`` when exactly one column remains."""

    return apply_placement(grid, locate_digit_in_row(grid, row, digit, limits=limits))


def assign_digit_in_column(
    grid: Grid, col: int, digit: int, *, limits: Optional[DeductionLimits] = None
) -> Grid:
    """Place ``digit`` in ``col`` when exactly one row remains."""

    return apply_placement(grid, locate_digit_in_column(grid, col, digit, limits=limits))


__all__ = [
    "apply_placement",
    "assign_digit_in_block",
    "assign_digit_in_column",
    "assign_digit_in_row",
    "locate_digit_in_block",
    "locate_digit_in_column",
    "locate_digit_in_row",
]
