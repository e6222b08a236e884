from __future__ import annotations

from pathlib import Path

import pytest

import project_config
from logic_solver import clear_caches
from orchestrator import log as event_log

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def _isolated_state():
    project_config.reload()
    event_log.reset()
    clear_caches()
    yield
    project_config.reload()
    event_log.reset()


@pytest.fixture
def puzzles_dir() -> Path:
    return REPO_ROOT / "puzzles"


@pytest.fixture
def easy_text(puzzles_dir: Path) -> str:
    return (puzzles_dir / "easy.txt").read_text("utf-8")


@pytest.fixture
def ambiguous_text(puzzles_dir: Path) -> str:
    return (puzzles_dir / "ambiguous.txt").read_text("utf-8")


@pytest.fixture
def naked_single_text(puzzles_dir: Path) -> str:
    return (puzzles_dir / "naked_single.txt").read_text("utf-8")


@pytest.fixture
def deep_stall_text(puzzles_dir: Path) -> str:
    return (puzzles_dir / "deep_stall.txt").read_text("utf-8")
