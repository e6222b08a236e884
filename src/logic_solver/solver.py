"""Fixed-point solver loop."""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import List, Optional, Tuple

from .errors import UnsolvableByDeductionError
from .grid import BLOCKS, DIGITS, EMPTY, Grid, block_index
from .limits import DeductionLimits
from .placement import Placement
from .strategies import apply_placement, locate_digit_in_block, locate_digit_in_column, locate_digit_in_row
from .trace import SolveTrace, SweepRecord, state_hash

_LOGGER = logging.getLogger(__name__)


class SolveState(str, Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    STALLED = "stalled"


def is_complete(grid: Grid) -> bool:
    """``True`` when no cell is empty; uniqueness is not re-verified."""

    return all(value != EMPTY for row in grid.rows for value in row)


def state_after_sweep(before: Grid, after: Grid) -> SolveState:
    """Classify the outcome of one sweep that turned *before* into *after*."""

    if is_complete(after):
        return SolveState.SOLVED
    if after == before:
        return SolveState.STALLED
    return SolveState.IN_PROGRESS


def _sweep(grid: Grid, limits: DeductionLimits) -> Tuple[Grid, List[Placement]]:
    placements: List[Placement] = []
    for block in BLOCKS:
        line = block_index(block)
        # block, then column, then row; each sees the previous result
        locators = (
            (locate_digit_in_block, block),
            (locate_digit_in_column, line),
            (locate_digit_in_row, line),
        )
        for digit in DIGITS:
            for locate, where in locators:
                placement = locate(grid, where, digit, limits=limits)
                if placement is not None:
                    grid = apply_placement(grid, placement)
                    placements.append(placement)
    return grid, placements


def sweep(grid: Grid, *, limits: Optional[DeductionLimits] = None) -> Grid:
    """Run one pass of all strategies over every (block, digit) pair."""

    updated, _ = _sweep(grid, limits or DeductionLimits())
    return updated


def solve(
    grid: Grid,
    *,
    limits: Optional[DeductionLimits] = None,
    trace: Optional[SolveTrace] = None,
) -> Grid:
    """Sweep until the grid is complete or a sweep changes nothing.

    Parameters
    ----------
    grid:
        Starting grid; it is never modified.
    limits:
        Deduction thresholds.  Defaults to the tuned values (depth 3,
        subset cap 20).
    trace:
        Optional accumulator receiving one :class:`SweepRecord` per sweep.

    Raises
    ------
    UnsolvableByDeductionError
        When a sweep leaves an incomplete grid unchanged.  The exception
        carries that grid.
    """

    limits = limits or DeductionLimits()
    if is_complete(grid):
        return grid

    current = grid
    sweeps = 0
    state = SolveState.IN_PROGRESS
    while state is SolveState.IN_PROGRESS:
        started = time.perf_counter_ns()
        updated, placements = _sweep(current, limits)
        sweeps += 1
        if trace is not None:
            trace.append(
                SweepRecord(
                    sweep=sweeps,
                    placements=placements,
                    filled_before=current.filled_count(),
                    filled_after=updated.filled_count(),
                    state_hash_before=state_hash(current),
                    state_hash_after=state_hash(updated),
                    time_us=(time.perf_counter_ns() - started) // 1000,
                )
            )
        state = state_after_sweep(current, updated)
        _LOGGER.debug(
            "sweep %d placed %d digit(s); %d cells filled; %s",
            sweeps,
            len(placements),
            updated.filled_count(),
            state.value,
        )
        current = updated

    if state is SolveState.STALLED:
        _LOGGER.warning("stalled after %d sweep(s) with %d cells filled", sweeps, current.filled_count())
        raise UnsolvableByDeductionError(current, sweeps=sweeps)
    _LOGGER.info("solved after %d sweep(s)", sweeps)
    return current


__all__ = ["SolveState", "is_complete", "solve", "state_after_sweep", "sweep"]
