"""Logical (guess-free) solver for the classic 9x9 Sudoku."""

from __future__ import annotations

from .candidates import (
    clear_caches,
    possible_columns_in_row,
    possible_coordinates_in_block,
    possible_rows_in_column,
)
from .errors import UnsolvableByDeductionError
from .grid import (
    BLOCKS,
    DIGITS,
    EMPTY,
    Grid,
    block_of,
    cell_at,
    lateral_siblings,
    set_cell,
    vertical_siblings,
)
from .limits import DeductionLimits, resolve_limits
from .placement import Placement, PlacementValidationError, Strategy
from .solver import SolveState, is_complete, solve, state_after_sweep, sweep
from .strategies import assign_digit_in_block, assign_digit_in_column, assign_digit_in_row
from .trace import SolveTrace, SweepRecord, TraceValidationError, state_hash

__all__ = [
    "BLOCKS",
    "DIGITS",
    "DeductionLimits",
    "EMPTY",
    "Grid",
    "Placement",
    "PlacementValidationError",
    "SolveState",
    "SolveTrace",
    "Strategy",
    "SweepRecord",
    "TraceValidationError",
    "UnsolvableByDeductionError",
    "assign_digit_in_block",
    "assign_digit_in_column",
    "assign_digit_in_row",
    "block_of",
    "cell_at",
    "clear_caches",
    "is_complete",
    "lateral_siblings",
    "possible_columns_in_row",
    "possible_coordinates_in_block",
    "possible_rows_in_column",
    "resolve_limits",
    "set_cell",
    "solve",
    "state_after_sweep",
    "state_hash",
    "sweep",
    "vertical_siblings",
]
