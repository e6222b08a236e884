"""Render puzzles and their deduced grids to a landscape PDF."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from logic_solver.grid import EMPTY, SIZE, Grid
from project_config import get_section

INCH_PER_CM = 0.3937007874


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class PageLayout:
    width_cm: float = 29.7
    height_cm: float = 21.0
    margin_cm: float = 2.0
    gap_cm: float = 2.0
    font_scale_factor: float = 0.65
    given_color: str = "black"
    deduced_color: str = "tab:blue"

    @classmethod
    def from_config(cls) -> "PageLayout":
        cfg = _as_dict(get_section("pdf", {}))
        defaults = cls()
        return cls(
            width_cm=float(cfg.get("width_cm", defaults.width_cm)),
            height_cm=float(cfg.get("height_cm", defaults.height_cm)),
            margin_cm=float(cfg.get("margin_cm", defaults.margin_cm)),
            gap_cm=float(cfg.get("gap_cm", defaults.gap_cm)),
            font_scale_factor=float(cfg.get("font_scale_factor", defaults.font_scale_factor)),
            given_color=str(cfg.get("given_color", defaults.given_color)),
            deduced_color=str(cfg.get("deduced_color", defaults.deduced_color)),
        )


@dataclass(frozen=True)
class PdfPage:
    """One page: the puzzle on the left, the (possibly partial) result on the right."""

    puzzle: Grid
    result: Grid
    title: str = ""


def _draw_grid(fig, layout: PageLayout, puzzle: Grid, shown: Grid, left_in: float, bottom_in: float, size_in: float):
    page_w_in = layout.width_cm * INCH_PER_CM
    page_h_in = layout.height_cm * INCH_PER_CM
    ax = fig.add_axes(
        [left_in / page_w_in, bottom_in / page_h_in, size_in / page_w_in, size_in / page_h_in],
        frameon=False,
    )
    for idx in range(SIZE + 1):
        linewidth = 1.0 if idx % 3 else 2.5
        ax.axvline(idx / SIZE, color="k", linewidth=linewidth)
        ax.axhline(idx / SIZE, color="k", linewidth=linewidth)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")
    font_size = max(1, int(layout.font_scale_factor * size_in * 72 / SIZE))
    for r in range(SIZE):
        for c in range(SIZE):
            value = shown.rows[r][c]
            if value == EMPTY:
                continue
            color = layout.given_color if puzzle.rows[r][c] != EMPTY else layout.deduced_color
            x = (c + 0.5) / SIZE
            y = 1 - (r + 0.5) / SIZE
            ax.text(x, y, str(value), ha="center", va="center", fontsize=font_size, color=color)
    return ax


def render_pdf(pages: Sequence[PdfPage], out_path: str | Path, *, layout: Optional[PageLayout] = None) -> Path:
    """Write one landscape page per entry of *pages* and return the output path."""

    from matplotlib.backends.backend_pdf import PdfPages
    from matplotlib.figure import Figure

    if not pages:
        raise ValueError("render_pdf needs at least one page")

    layout = layout or PageLayout.from_config()
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    page_w_in = layout.width_cm * INCH_PER_CM
    page_h_in = layout.height_cm * INCH_PER_CM
    margin_in = layout.margin_cm * INCH_PER_CM
    gap_in = layout.gap_cm * INCH_PER_CM
    grid_size = min((page_w_in - 2 * margin_in - gap_in) / 2, page_h_in - 2 * margin_in)
    if grid_size <= 0:
        raise ValueError("page margins leave no room for the grids")
    bottom = (page_h_in - grid_size) / 2

    with PdfPages(out) as pdf:
        for page in pages:
            fig = Figure(figsize=(page_w_in, page_h_in))
            _draw_grid(fig, layout, page.puzzle, page.puzzle, margin_in, bottom, grid_size)
            _draw_grid(fig, layout, page.puzzle, page.result, margin_in + grid_size + gap_in, bottom, grid_size)
            if page.title:
                fig.text(0.5, 1 - (margin_in / 2) / page_h_in, page.title, ha="center", va="center", fontsize=12)
            filled = page.result.filled_count()
            footer = f"{filled}/{SIZE * SIZE} cells filled"
            fig.text(0.5, (margin_in / 2) / page_h_in, footer, ha="center", va="center", fontsize=8)
            pdf.savefig(fig)
    return out


__all__ = ["PageLayout", "PdfPage", "render_pdf"]
