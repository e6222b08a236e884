"""Format conversion collaborators for the logical solver."""

from __future__ import annotations

from .text import GridFormatError, parse, render, render_boxed

__all__ = ["GridFormatError", "parse", "render", "render_boxed"]
