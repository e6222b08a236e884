from __future__ import annotations

import pytest

from logic_solver.grid import Grid, cell_at
from puzzle_io import GridFormatError, parse, render, render_boxed
from puzzle_io.text import DEFAULT_PLACEHOLDERS

from samples import SOLVED


def test_parse_reads_nine_lines(easy_text: str) -> None:
    grid = parse(easy_text)

    assert grid.filled_count() == 36
    assert cell_at(grid, 0, 2) == 8
    assert cell_at(grid, 0, 0) == 0
    assert cell_at(grid, 8, 6) == 4


def test_parse_accepts_single_flat_line() -> None:
    flat = SOLVED.replace("1", ".", 1)
    grid = parse(flat + "\n")

    assert cell_at(grid, 0, 0) == 0
    assert grid.filled_count() == 80


@pytest.mark.parametrize("placeholder", sorted(DEFAULT_PLACEHOLDERS - {" "}))
def test_every_placeholder_means_empty(placeholder: str) -> None:
    text = "\n".join([placeholder * 9] * 9)

    assert parse(text) == Grid.empty()


def test_short_lines_are_padded_with_spaces() -> None:
    text = "\n".join(["12"] + ["........."] * 8)
    grid = parse(text)

    assert cell_at(grid, 0, 1) == 2
    assert cell_at(grid, 0, 2) == 0


def test_comments_and_blank_lines_are_skipped(ambiguous_text: str) -> None:
    grid = parse("\n" + ambiguous_text + "\n\n")

    assert grid.filled_count() == 77


def test_render_round_trip(easy_text: str) -> None:
    grid = parse(easy_text)

    assert render(grid) == easy_text.strip()
    assert parse(render(grid)) == grid


def test_render_boxed_draws_block_borders() -> None:
    lines = render_boxed(Grid.from_string(SOLVED)).splitlines()

    assert len(lines) == 13
    assert lines[0] == "+-------+-------+-------+"
    assert lines[1] == "| 1 2 3 | 4 5 6 | 7 8 9 |"
    assert lines[4] == lines[0]


def test_wrong_line_count() -> None:
    with pytest.raises(GridFormatError, match="expected 9 grid lines, got 8"):
        parse("\n".join(["........."] * 8))


def test_bad_character_reports_line() -> None:
    lines = ["........."] * 9
    lines[3] = "....?...."

    with pytest.raises(GridFormatError) as excinfo:
        parse("\n".join(lines))

    assert excinfo.value.line == 4
    assert "'?'" in str(excinfo.value)


def test_overlong_line_is_rejected() -> None:
    lines = ["........."] * 9
    lines[0] = ".........1"

    with pytest.raises(GridFormatError, match="line 1"):
        parse("\n".join(lines))


def test_short_line_rejected_without_space_placeholder() -> None:
    text = "\n".join(["12"] + ["........."] * 8)

    with pytest.raises(GridFormatError, match="line 1"):
        parse(text, placeholders=".")
