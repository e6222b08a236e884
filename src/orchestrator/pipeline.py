"""Parse → solve → render pipeline used by the command line tools."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from logic_solver import (
    DeductionLimits,
    Grid,
    SolveState,
    SolveTrace,
    UnsolvableByDeductionError,
    solve,
    state_hash,
)
from puzzle_io import parse, render

from . import log as event_log

_LOGGER = logging.getLogger(__name__)

EVENT_TYPE = "sudoku.solve_run.v1"


def run_grid(
    grid: Grid,
    *,
    limits: Optional[DeductionLimits] = None,
    name: Optional[str] = None,
    record_trace: bool = False,
) -> Dict[str, Any]:
    """Solve *grid* and summarise the outcome as a JSON-ready mapping.

    A stall is a normal outcome here: the summary carries status
    ``"stalled"`` and the partial grid instead of raising.
    """

    limits = limits or DeductionLimits()
    trace = SolveTrace()
    started = time.perf_counter()
    try:
        result = solve(grid, limits=limits, trace=trace)
        status = SolveState.SOLVED
        message = None
    except UnsolvableByDeductionError as exc:
        result = exc.grid
        status = SolveState.STALLED
        message = str(exc)
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    summary: Dict[str, Any] = {
        "name": name,
        "status": status.value,
        "sweeps": len(trace.records),
        "filled_before": grid.filled_count(),
        "filled_after": result.filled_count(),
        "puzzle_digest": state_hash(grid),
        "result_digest": state_hash(result),
        "trace_digest": trace.digest(),
        "limits": limits.to_payload(),
        "time_ms": elapsed_ms,
        "grid": render(result),
        "message": message,
    }
    if record_trace:
        summary["trace"] = trace.to_payload()

    _LOGGER.info(
        "%s: %s after %d sweep(s), %d -> %d cells",
        name or "puzzle",
        status.value,
        summary["sweeps"],
        summary["filled_before"],
        summary["filled_after"],
    )
    if event_log.is_configured():
        event = {key: value for key, value in summary.items() if key not in ("grid", "trace")}
        event["type"] = EVENT_TYPE
        event_log.append_event(event)

    summary["result"] = result
    return summary


def run_puzzle(
    text: str,
    *,
    limits: Optional[DeductionLimits] = None,
    name: Optional[str] = None,
    record_trace: bool = False,
) -> Dict[str, Any]:
    """Parse *text* and hand the grid to :func:`run_grid`."""

    return run_grid(parse(text), limits=limits, name=name, record_trace=record_trace)


def public_summary(summary: Dict[str, Any]) -> Dict[str, Any]:
    """Drop in-memory objects so the summary can be dumped as JSON."""

    return {key: value for key, value in summary.items() if key != "result"}


__all__ = ["EVENT_TYPE", "public_summary", "run_grid", "run_puzzle"]
