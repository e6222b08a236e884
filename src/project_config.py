"""Access to ``config.toml`` settings shared by the solver, I/O and CLI layers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]


CONFIG_ENV_VAR = "SUDOKU_LOGIC_CONFIG"
_DEFAULT_LOCATION = Path(__file__).resolve().parents[1] / "config.toml"
_MISSING = object()


def _config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else _DEFAULT_LOCATION


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Parsed configuration, read once per process.

    Without a config file every lookup falls through to the caller's default.
    """
    path = _config_path()
    if not path.is_file():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def reload() -> None:
    """Forget the cached configuration so the next lookup re-reads the file."""

    get_config.cache_clear()


def get_section(path: str, default: Any = _MISSING) -> Any:
    """Look up ``"section.key"``; raise ``KeyError`` unless a default is given."""

    node: Any = get_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            if default is _MISSING:
                raise KeyError(f"Configuration path '{path}' not found")
            return default
        node = node[key]
    return node


__all__ = ["CONFIG_ENV_VAR", "get_config", "get_section", "reload"]
