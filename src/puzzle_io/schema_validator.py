"""JSON Schema validation for puzzle and trace documents."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import jsonschema

from logic_solver.grid import Grid


class SchemaValidationError(RuntimeError):
    """Exception raised when a document fails validation."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"
_SCHEMAS = {
    "puzzle": "puzzle.schema.json",
    "solve_trace": "solve_trace.schema.json",
}


@lru_cache(maxsize=None)
def load_schema(kind: str) -> Dict[str, Any]:
    """Load the schema registered for *kind*."""

    if kind not in _SCHEMAS:
        raise SchemaValidationError("schema-not-found", kind)
    path = _SCHEMA_ROOT / _SCHEMAS[kind]
    try:
        return json.loads(path.read_text("utf-8"))
    except FileNotFoundError as exc:  # pragma: no cover - packaging error
        raise SchemaValidationError("schema-not-found", str(path)) from exc


@lru_cache(maxsize=None)
def _validator(kind: str) -> jsonschema.Draft202012Validator:
    schema = load_schema(kind)
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


def _format_path(error: jsonschema.ValidationError) -> str:
    parts = [str(part) for part in error.absolute_path]
    return "/" + "/".join(parts)


def validate_document(document: Any, kind: str) -> None:
    """Raise :class:`SchemaValidationError` unless *document* matches *kind*.

    When several violations exist the one with the lexicographically smallest
    JSON path is reported so that messages are stable across runs.
    """

    errors = sorted(_validator(kind).iter_errors(document), key=lambda err: [str(p) for p in err.absolute_path])
    if errors:
        first = errors[0]
        raise SchemaValidationError("schema-violation", f"{_format_path(first)}: {first.message}")


def load_puzzle_document(path: str | Path) -> Tuple[Grid, Optional[str]]:
    """Read a JSON puzzle document and return its grid and optional name."""

    try:
        document = json.loads(Path(path).read_text("utf-8"))
    except json.JSONDecodeError as exc:
        raise SchemaValidationError("invalid-json", f"{path}: {exc.msg}") from exc
    validate_document(document, "puzzle")
    return Grid.from_string(document["grid"]), document.get("name")


__all__ = ["SchemaValidationError", "load_puzzle_document", "load_schema", "validate_document"]
