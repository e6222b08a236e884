"""Run orchestration: pipeline execution and event logging."""

from . import log
from .pipeline import EVENT_TYPE, public_summary, run_grid, run_puzzle

__all__ = [
    "EVENT_TYPE",
    "log",
    "public_summary",
    "run_grid",
    "run_puzzle",
]
