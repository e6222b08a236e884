"""Failure raised when logical deduction runs out of moves."""

from __future__ import annotations

from .grid import SIZE, Grid


class UnsolvableByDeductionError(RuntimeError):
    """A full sweep made no progress while cells were still empty.

    The puzzle is either ambiguous, needs trial and error, or was already
    contradictory.  Retrying is pointless: the engine is deterministic.  The
    partially solved grid is kept on the exception for diagnostics.
    """

    def __init__(self, grid: Grid, *, sweeps: int) -> None:
        self.grid = grid
        self.sweeps = sweeps
        self.filled = grid.filled_count()
        super().__init__(
            f"Could not solve puzzle by deduction: stalled after {sweeps} sweep(s) "
            f"with {self.filled}/{SIZE * SIZE} cells filled"
        )


__all__ = ["UnsolvableByDeductionError"]
