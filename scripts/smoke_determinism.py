#!/usr/bin/env python3
"""Smoke-test deterministic behaviour of the solve pipeline."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from logic_solver import clear_caches, resolve_limits
from orchestrator.pipeline import run_puzzle
from puzzle_io.schema_validator import validate_document

PUZZLE_DIR = ROOT / "puzzles"
_KEYS = ("status", "sweeps", "result_digest", "trace_digest")


def _run(path: Path) -> dict:
    clear_caches()
    summary = run_puzzle(path.read_text("utf-8"), limits=resolve_limits(), name=path.stem, record_trace=True)
    validate_document(summary["trace"], "solve_trace")
    return summary


def main() -> int:
    puzzles = sorted(PUZZLE_DIR.glob("*.txt"))
    if not puzzles:
        print(f"no puzzles found under {PUZZLE_DIR}")
        return 1

    for path in puzzles:
        first = _run(path)
        second = _run(path)
        for key in _KEYS:
            if first[key] != second[key]:
                print(f"determinism failed for {path.name} {key}: {first[key]} vs {second[key]}")
                return 1
        print(f"{path.name}: {first['status']} in {first['sweeps']} sweep(s)")

    print("Determinism smoke-test passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
