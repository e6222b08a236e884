"""Immutable 9×9 grid value and block addressing helpers.

Cells hold ``0`` when empty and a digit ``1``–``9`` otherwise.  Blocks are
addressed by ``(block_row, block_col)`` and cells inside a block by a local
``(local_row, local_col)`` pair, both ranging over ``0..2``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

SIZE = 9
BLOCK_SIZE = 3
EMPTY = 0
DIGITS: Tuple[int, ...] = tuple(range(1, SIZE + 1))

Coord = Tuple[int, int]
Block = Tuple[int, int]

LOCAL_COORDS: frozenset[Coord] = frozenset(
    (r, c) for r in range(BLOCK_SIZE) for c in range(BLOCK_SIZE)
)
BLOCKS: Tuple[Block, ...] = tuple(
    (br, bc) for br in range(BLOCK_SIZE) for bc in range(BLOCK_SIZE)
)


@dataclass(frozen=True)
class Grid:
    """Immutable snapshot of a Sudoku grid.

    Instances compare and hash by value, so the solver can detect a sweep
    without progress with a plain ``==`` and memoise candidate computations
    keyed on the grid itself.
    """

    rows: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(int(value) for value in row) for row in self.rows)
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"grid must have {SIZE} rows of {SIZE} cells")
        for row in rows:
            for value in row:
                if not EMPTY <= value <= SIZE:
                    raise ValueError(f"cell value must be in [0, {SIZE}], got {value!r}")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def empty(cls) -> "Grid":
        return cls(tuple((EMPTY,) * SIZE for _ in range(SIZE)))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Optional[int]]]) -> "Grid":
        """Build a grid from nested sequences, treating ``None`` as empty."""

        return cls(tuple(tuple(EMPTY if value is None else value for value in row) for row in rows))

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Build a grid from the canonical 81-character form (``0`` or ``.`` for empty)."""

        compact = "".join(text.split())
        if len(compact) != SIZE * SIZE:
            raise ValueError(f"expected {SIZE * SIZE} characters, got {len(compact)}")
        values = [int(ch) if ch.isdigit() else EMPTY for ch in compact]
        return cls(tuple(tuple(values[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)))

    def to_string(self) -> str:
        """Return the canonical 81-character form, ``0`` marking empty cells."""

        return "".join(str(value) for row in self.rows for value in row)

    def filled_count(self) -> int:
        return sum(1 for row in self.rows for value in row if value != EMPTY)


def cell_at(grid: Grid, row: int, col: int) -> int:
    return grid.rows[row][col]


def set_cell(grid: Grid, row: int, col: int, digit: int) -> Grid:
    """Return a new grid with ``digit`` written at ``(row, col)``."""

    updated = grid.rows[row][:col] + (digit,) + grid.rows[row][col + 1:]
    return Grid(grid.rows[:row] + (updated,) + grid.rows[row + 1:])


def row_values(grid: Grid, row: int) -> Tuple[int, ...]:
    return grid.rows[row]


def column_values(grid: Grid, col: int) -> Tuple[int, ...]:
    return tuple(row[col] for row in grid.rows)


def global_coordinates(block: Block, local: Coord) -> Tuple[int, int]:
    return BLOCK_SIZE * block[0] + local[0], BLOCK_SIZE * block[1] + local[1]


def block_index(block: Block) -> int:
    """Flatten a block address to ``0..8`` in row-major order."""

    return BLOCK_SIZE * block[0] + block[1]


def block_of(grid: Grid, block: Block) -> Dict[int, Optional[Coord]]:
    """Project a block onto ``{digit: local coordinate or None}``."""

    projection: Dict[int, Optional[Coord]] = {digit: None for digit in DIGITS}
    for local in LOCAL_COORDS:
        value = cell_at(grid, *global_coordinates(block, local))
        if value != EMPTY:
            projection[value] = local
    return projection


def block_contains(grid: Grid, block: Block, digit: int) -> bool:
    return block_of(grid, block)[digit] is not None


def occupied_coordinates(grid: Grid, block: Block) -> frozenset[Coord]:
    return frozenset(
        local for local in LOCAL_COORDS if cell_at(grid, *global_coordinates(block, local)) != EMPTY
    )


def _other_indices(index: int) -> Tuple[int, ...]:
    return tuple(i for i in range(BLOCK_SIZE) if i != index)


def lateral_siblings(block: Block) -> Tuple[Block, ...]:
    """Blocks sharing the horizontal band of ``block``."""

    return tuple((block[0], bc) for bc in _other_indices(block[1]))


def vertical_siblings(block: Block) -> Tuple[Block, ...]:
    """Blocks sharing the vertical stack of ``block``."""

    return tuple((br, block[1]) for br in _other_indices(block[0]))


__all__ = [
    "BLOCKS",
    "BLOCK_SIZE",
    "Block",
    "Coord",
    "DIGITS",
    "EMPTY",
    "Grid",
    "LOCAL_COORDS",
    "SIZE",
    "block_contains",
    "block_index",
    "block_of",
    "cell_at",
    "column_values",
    "global_coordinates",
    "lateral_siblings",
    "occupied_coordinates",
    "row_values",
    "set_cell",
    "vertical_siblings",
]
