"""Candidate set algebra for blocks and whole lines.

Every routine answers "where could ``digit`` still go?" for one location,
starting from plain occupancy and refining with the elimination rules while
more than one candidate remains.  Refinements look at sibling blocks (or the
other digits of a line), whose candidates are computed by the same routine
one level deeper; ``DeductionLimits.max_depth`` stops the mutual recursion.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Iterable, Optional

from .eliminations import (
    COLUMN_AXIS,
    ROW_AXIS,
    reserved_coordinates,
    reserved_within_unit,
    simple_candidates,
)
from .grid import (
    DIGITS,
    EMPTY,
    SIZE,
    Block,
    Coord,
    Grid,
    block_contains,
    column_values,
    lateral_siblings,
    row_values,
    vertical_siblings,
)
from .limits import DeductionLimits

_DEFAULT_LIMITS = DeductionLimits()
_CACHE_SIZE = 1 << 16

Refinement = Callable[[], frozenset]


def _refine(candidates: frozenset, depth: int, limits: DeductionLimits, steps: Iterable[Refinement]) -> frozenset:
    for step in steps:
        if len(candidates) > 1 and depth < limits.max_depth:
            candidates = candidates - step()
    return candidates


def _sibling_reservations(
    grid: Grid,
    siblings: Iterable[Block],
    digit: int,
    depth: int,
    axis: int,
    limits: DeductionLimits,
) -> frozenset[Coord]:
    sibling_sets = [
        _block_candidates(grid, sibling, digit, depth + 1, limits)
        for sibling in siblings
        if not block_contains(grid, sibling, digit)
    ]
    return reserved_coordinates(sibling_sets, axis)


@lru_cache(maxsize=_CACHE_SIZE)
def _block_candidates(grid: Grid, block: Block, digit: int, depth: int, limits: DeductionLimits) -> frozenset[Coord]:
    def from_vertical_siblings() -> frozenset[Coord]:
        return _sibling_reservations(grid, vertical_siblings(block), digit, depth + 1, COLUMN_AXIS, limits)

    def from_lateral_siblings() -> frozenset[Coord]:
        return _sibling_reservations(grid, lateral_siblings(block), digit, depth + 1, ROW_AXIS, limits)

    def from_other_digits() -> frozenset[Coord]:
        others = (simple_candidates(grid, block, other) for other in DIGITS if other != digit)
        return reserved_within_unit(others, subset_cap=limits.subset_cap)

    return _refine(
        simple_candidates(grid, block, digit),
        depth,
        limits,
        (from_vertical_siblings, from_lateral_siblings, from_other_digits),
    )


def possible_coordinates_in_block(
    grid: Grid,
    block: Block,
    digit: int,
    depth: int = 1,
    *,
    limits: Optional[DeductionLimits] = None,
) -> frozenset[Coord]:
    """Local coordinates of ``block`` where ``digit`` may still be placed.

    Starting from the simple candidate set, the routine subtracts locked
    rows/columns derived from the vertical siblings, then from the lateral
    siblings, then the coordinates reserved by the simple candidate sets of
    the other eight digits in the block.  Each refinement runs only while
    more than one candidate is left and ``depth`` is below the configured
    cap.
    """

    return _block_candidates(grid, block, digit, depth, limits or _DEFAULT_LIMITS)


def columns_containing(grid: Grid, digit: int) -> frozenset[int]:
    return frozenset(col for col in range(SIZE) if digit in column_values(grid, col))


def rows_containing(grid: Grid, digit: int) -> frozenset[int]:
    return frozenset(row for row in range(SIZE) if digit in row_values(grid, row))


def _line_candidates(
    values: tuple,
    digit: int,
    depth: int,
    limits: DeductionLimits,
    crossing: Refinement,
    other_digit_candidates: Callable[[int], frozenset[int]],
) -> frozenset[int]:
    if digit in values:
        return frozenset({values.index(digit)})

    def from_other_digits() -> frozenset[int]:
        others = (other_digit_candidates(other) for other in DIGITS if other != digit)
        return reserved_within_unit(others, subset_cap=limits.subset_cap)

    free = frozenset(index for index, value in enumerate(values) if value == EMPTY)
    return _refine(free, depth, limits, (crossing, from_other_digits))


@lru_cache(maxsize=_CACHE_SIZE)
def _row_candidates(grid: Grid, row: int, digit: int, depth: int, limits: DeductionLimits) -> frozenset[int]:
    return _line_candidates(
        row_values(grid, row),
        digit,
        depth,
        limits,
        lambda: columns_containing(grid, digit),
        lambda other: _row_candidates(grid, row, other, depth + 1, limits),
    )


@lru_cache(maxsize=_CACHE_SIZE)
def _column_candidates(grid: Grid, col: int, digit: int, depth: int, limits: DeductionLimits) -> frozenset[int]:
    return _line_candidates(
        column_values(grid, col),
        digit,
        depth,
        limits,
        lambda: rows_containing(grid, digit),
        lambda other: _column_candidates(grid, col, other, depth + 1, limits),
    )


def possible_columns_in_row(
    grid: Grid,
    row: int,
    digit: int,
    depth: int = 1,
    *,
    limits: Optional[DeductionLimits] = None,
) -> frozenset[int]:
    """Column indices of ``row`` where ``digit`` may go (its own column if already placed)."""

    return _row_candidates(grid, row, digit, depth, limits or _DEFAULT_LIMITS)


def possible_rows_in_column(
    grid: Grid,
    col: int,
    digit: int,
    depth: int = 1,
    *,
    limits: Optional[DeductionLimits] = None,
) -> frozenset[int]:
    """Row indices of ``col`` where ``digit`` may go (its own row if already placed)."""

    return _column_candidates(grid, col, digit, depth, limits or _DEFAULT_LIMITS)


def clear_caches() -> None:
    """Drop memoised candidate sets, e.g. between large batches."""

    _block_candidates.cache_clear()
    _row_candidates.cache_clear()
    _column_candidates.cache_clear()
    simple_candidates.cache_clear()


__all__ = [
    "clear_caches",
    "columns_containing",
    "possible_columns_in_row",
    "possible_coordinates_in_block",
    "possible_rows_in_column",
    "rows_containing",
]
