"""Deduction thresholds and their configuration precedence."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from project_config import get_section

DEFAULT_MAX_DEPTH = 3
DEFAULT_SUBSET_CAP = 20

_ENV_KEYS = {
    "max_depth": "LOGIC_SOLVER_MAX_DEPTH",
    "subset_cap": "LOGIC_SOLVER_SUBSET_CAP",
}


@dataclass(frozen=True)
class DeductionLimits:
    """Bounds on the deductive look-ahead.

    ``max_depth`` caps the mutual recursion between sibling blocks (and between
    digits of one line); ``subset_cap`` is the largest combined size of the
    candidate sets the subset rule will enumerate.  Raising either makes the
    engine stronger and slower; the defaults are the tuned values.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    subset_cap: int = DEFAULT_SUBSET_CAP

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth!r}")
        if self.subset_cap < 0:
            raise ValueError(f"subset_cap must be >= 0, got {self.subset_cap!r}")

    def to_payload(self) -> dict:
        return {"max_depth": self.max_depth, "subset_cap": self.subset_cap}


def _parse_int(value: Any) -> Optional[int]:
    try:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip():
            return int(value)
    except (TypeError, ValueError):
        return None
    return None


def _apply_overrides(limits: DeductionLimits, overrides: Mapping[str, Any]) -> DeductionLimits:
    changes = {}
    if "max_depth" in overrides:
        maybe = _parse_int(overrides["max_depth"])
        if maybe is not None and maybe >= 1:
            changes["max_depth"] = maybe
    if "subset_cap" in overrides:
        maybe = _parse_int(overrides["subset_cap"])
        if maybe is not None and maybe >= 0:
            changes["subset_cap"] = maybe
    return replace(limits, **changes) if changes else limits


def _env_overrides(env: Mapping[str, str]) -> dict:
    return {field: env[key] for field, key in _ENV_KEYS.items() if key in env}


def resolve_limits(
    env: Mapping[str, str] | None = None,
    cli: Mapping[str, Any] | None = None,
) -> DeductionLimits:
    """Resolve limits with precedence defaults < TOML < environment < CLI.

    Values that fail to parse or fall out of range are ignored so that a bad
    override never weakens the engine below a valid lower layer.
    """

    limits = DeductionLimits()
    section = get_section("solver", {})
    if isinstance(section, dict):
        limits = _apply_overrides(limits, section)
    limits = _apply_overrides(limits, _env_overrides(os.environ if env is None else env))
    if cli:
        limits = _apply_overrides(limits, {k: v for k, v in cli.items() if v is not None})
    return limits


__all__ = ["DEFAULT_MAX_DEPTH", "DEFAULT_SUBSET_CAP", "DeductionLimits", "resolve_limits"]
