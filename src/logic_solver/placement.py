"""Placement records emitted by the assignment strategies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Tuple

from .grid import SIZE


class PlacementValidationError(ValueError):
    """Raised when a placement payload is out of range or malformed."""


class Strategy(str, Enum):
    """Assignment strategy that committed a digit."""

    BLOCK = "block"
    COLUMN = "column"
    ROW = "row"

    @classmethod
    def from_value(cls, value: str) -> "Strategy":
        try:
            return cls(value)
        except ValueError as exc:
            raise PlacementValidationError(f"Unsupported strategy: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class Placement:
    """A single digit committed to a cell (``cell`` is ``9 * row + col``)."""

    cell: int
    digit: int
    strategy: Strategy

    def __post_init__(self) -> None:
        if not isinstance(self.strategy, Strategy):
            object.__setattr__(self, "strategy", Strategy.from_value(str(self.strategy)))
        if not 0 <= int(self.cell) < SIZE * SIZE:
            raise PlacementValidationError(f"cell must be in [0, 80], got {self.cell!r}")
        if not 1 <= int(self.digit) <= SIZE:
            raise PlacementValidationError(f"digit must be in [1, 9], got {self.digit!r}")

    @classmethod
    def at(cls, row: int, col: int, digit: int, strategy: Strategy) -> "Placement":
        return cls(SIZE * row + col, digit, strategy)

    @property
    def row(self) -> int:
        return self.cell // SIZE

    @property
    def col(self) -> int:
        return self.cell % SIZE

    def sort_key(self) -> Tuple[int, int]:
        return (int(self.cell), int(self.digit))

    def to_payload(self) -> dict:
        return {"cell": int(self.cell), "digit": int(self.digit), "strategy": self.strategy.value}

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "Placement":
        try:
            return cls(int(payload["cell"]), int(payload["digit"]), Strategy.from_value(str(payload["strategy"])))
        except KeyError as exc:
            raise PlacementValidationError("placement mapping is missing required keys") from exc


def canonicalise_placements(placements: Iterable[Placement]) -> Tuple[Placement, ...]:
    """Return placements ordered by cell, then digit."""

    return tuple(sorted(placements, key=Placement.sort_key))


__all__ = [
    "Placement",
    "PlacementValidationError",
    "Strategy",
    "canonicalise_placements",
]
