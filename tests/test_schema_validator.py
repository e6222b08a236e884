from __future__ import annotations

import json
from pathlib import Path

import pytest

from logic_solver.grid import Grid
from puzzle_io.schema_validator import (
    SchemaValidationError,
    load_puzzle_document,
    load_schema,
    validate_document,
)

from samples import SOLVED


def test_bundled_puzzle_document_loads(puzzles_dir: Path, easy_text: str) -> None:
    from puzzle_io import parse

    grid, name = load_puzzle_document(puzzles_dir / "easy.json")

    assert name == "easy"
    assert grid == parse(easy_text)


def test_document_without_name(tmp_path: Path) -> None:
    path = tmp_path / "p.json"
    path.write_text(json.dumps({"grid": SOLVED}), encoding="utf-8")

    grid, name = load_puzzle_document(path)

    assert grid == Grid.from_string(SOLVED)
    assert name is None


@pytest.mark.parametrize(
    "document, fragment",
    [
        ({}, "'grid' is a required property"),
        ({"grid": "123"}, "/grid"),
        ({"grid": SOLVED, "extra": 1}, "Additional properties"),
        ({"grid": SOLVED, "solution": "0" * 81}, "/solution"),
    ],
)
def test_invalid_puzzle_documents(document, fragment: str) -> None:
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_document(document, "puzzle")

    assert excinfo.value.code == "schema-violation"
    assert fragment in excinfo.value.detail


def test_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SchemaValidationError) as excinfo:
        load_puzzle_document(path)

    assert excinfo.value.code == "invalid-json"


def test_unknown_schema_kind() -> None:
    with pytest.raises(SchemaValidationError) as excinfo:
        load_schema("generator_report")

    assert excinfo.value.code == "schema-not-found"


def test_trace_schema_rejects_unknown_strategy() -> None:
    record = {
        "sweep": 1,
        "placements": [{"cell": 0, "digit": 1, "strategy": "guess"}],
        "filled_before": 0,
        "filled_after": 1,
        "state_hash_before": "0" * 64,
        "state_hash_after": "1" * 64,
    }

    with pytest.raises(SchemaValidationError, match="/0/placements/0/strategy"):
        validate_document([record], "solve_trace")
