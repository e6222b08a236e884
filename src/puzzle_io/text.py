"""Plain-text codec for 9×9 grids."""

from __future__ import annotations

from typing import Iterable, List, Optional

from logic_solver.grid import EMPTY, SIZE, Grid
from project_config import get_section

DEFAULT_PLACEHOLDERS = frozenset(".0_-*x ")
RENDER_PLACEHOLDER = "."


class GridFormatError(ValueError):
    """Raised when text cannot be read as a 9×9 grid."""

    def __init__(self, msg: str, *, line: Optional[int] = None) -> None:
        self.line = line
        super().__init__(msg if line is None else f"line {line}: {msg}")


def configured_placeholders() -> frozenset[str]:
    value = get_section("io.placeholders", None)
    if isinstance(value, list) and value:
        return frozenset(str(item) for item in value if isinstance(item, str) and len(item) == 1)
    return DEFAULT_PLACEHOLDERS


def _grid_lines(text: str) -> List[str]:
    # Spaces may be placeholders: a whitespace-only line is a grid row only at full width.
    lines = [
        line
        for line in text.splitlines()
        if (line.strip() or len(line) >= SIZE) and not line.lstrip().startswith("#")
    ]
    if len(lines) == 1 and len(lines[0]) == SIZE * SIZE:
        flat = lines[0]
        return [flat[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]
    return lines


def _parse_cell(ch: str, placeholders: Iterable[str], line_no: int) -> int:
    if ch in "123456789":
        return int(ch)
    if ch in placeholders:
        return EMPTY
    raise GridFormatError(f"unexpected character {ch!r}", line=line_no)


def parse(text: str, *, placeholders: Optional[Iterable[str]] = None) -> Grid:
    """Read 9 lines of 9 characters (or one line of 81) into a :class:`Grid`.

    Blank lines and ``#`` comments are skipped.  A line shorter than 9
    characters is padded with spaces so that editors stripping trailing
    blanks do not break puzzles using spaces as placeholders.
    """

    allowed = frozenset(placeholders) if placeholders is not None else configured_placeholders()
    lines = _grid_lines(text)
    if len(lines) != SIZE:
        raise GridFormatError(f"expected {SIZE} grid lines, got {len(lines)}")

    rows = []
    for line_no, line in enumerate(lines, start=1):
        if len(line) > SIZE:
            line = line.rstrip()
        if len(line) > SIZE:
            raise GridFormatError(f"expected {SIZE} characters, got {len(line)}", line=line_no)
        padded = line.ljust(SIZE)
        if len(line) < SIZE and " " not in allowed:
            raise GridFormatError(f"expected {SIZE} characters, got {len(line)}", line=line_no)
        rows.append(tuple(_parse_cell(ch, allowed, line_no) for ch in padded))
    return Grid(tuple(rows))


def render(grid: Grid) -> str:
    """Render 9 lines of 9 characters, ``.`` marking empty cells."""

    return "\n".join(
        "".join(RENDER_PLACEHOLDER if value == EMPTY else str(value) for value in row) for row in grid.rows
    )


def render_boxed(grid: Grid) -> str:
    """Render with block separators for terminal display."""

    border = "+-------+-------+-------+"
    lines = []
    for r, row in enumerate(grid.rows):
        if r % 3 == 0:
            lines.append(border)
        cells = [RENDER_PLACEHOLDER if value == EMPTY else str(value) for value in row]
        lines.append("| " + " | ".join(" ".join(cells[c:c + 3]) for c in range(0, SIZE, 3)) + " |")
    lines.append(border)
    return "\n".join(lines)


__all__ = ["DEFAULT_PLACEHOLDERS", "GridFormatError", "configured_placeholders", "parse", "render", "render_boxed"]
