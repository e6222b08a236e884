from __future__ import annotations

import json

import pytest

from logic_solver import Placement, SolveTrace, Strategy, SweepRecord, TraceValidationError, solve
from logic_solver.grid import Grid
from logic_solver.trace import state_hash
from puzzle_io import parse
from puzzle_io.schema_validator import validate_document

from samples import SOLVED

_HASH_A = "a" * 64
_HASH_B = "b" * 64


def _record(sweep: int = 1, **overrides) -> SweepRecord:
    fields = dict(
        sweep=sweep,
        placements=[Placement(10, 4, Strategy.ROW), Placement(2, 7, Strategy.BLOCK)],
        filled_before=30,
        filled_after=32,
        state_hash_before=_HASH_A,
        state_hash_after=_HASH_B,
        time_us=15,
    )
    fields.update(overrides)
    return SweepRecord(**fields)


def test_state_hash_is_sha256_of_grid_string() -> None:
    grid = Grid.from_string(SOLVED)

    assert len(state_hash(grid)) == 64
    assert state_hash(grid) == state_hash(Grid.from_string(SOLVED))
    assert state_hash(grid) != state_hash(Grid.empty())


def test_record_canonicalises_placements() -> None:
    record = _record()

    assert [p.cell for p in record.placements] == [2, 10]
    assert record.progressed


@pytest.mark.parametrize(
    "overrides",
    [
        {"sweep": 0},
        {"filled_after": 29, "placements": []},
        {"filled_after": 33},
        {"time_us": -1},
    ],
)
def test_inconsistent_records_are_rejected(overrides) -> None:
    with pytest.raises(TraceValidationError):
        _record(**overrides)


def test_trace_requires_increasing_sweeps() -> None:
    trace = SolveTrace()
    trace.append(_record(1))

    with pytest.raises(TraceValidationError):
        trace.append(_record(1))


def test_trace_accepts_payload_mappings() -> None:
    trace = SolveTrace()
    trace.append(_record(1).to_payload())

    assert trace.snapshot() == [_record(1)]
    assert [p.strategy for p in trace.placements()] == [Strategy.BLOCK, Strategy.ROW]


def test_digest_ignores_timing() -> None:
    fast, slow = SolveTrace(), SolveTrace()
    fast.append(_record(1, time_us=1))
    slow.append(_record(1, time_us=9000))

    assert fast.digest() == slow.digest()
    assert fast.to_payload() != slow.to_payload()


def test_solver_trace_matches_schema(easy_text: str) -> None:
    trace = SolveTrace()
    solve(parse(easy_text), trace=trace)

    payload = json.loads(trace.to_json())
    validate_document(payload, "solve_trace")
    assert payload[0]["filled_before"] == 36
    assert payload[-1]["filled_after"] == 81
    assert sum(len(item["placements"]) for item in payload) == 45
