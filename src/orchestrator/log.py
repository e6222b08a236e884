"""JSONL run-event log, one directory per UTC day, rotated by size.

Event logging is off until :func:`configure` names a directory.  Files are
``<base>/<YYYYMMDD>/solve_NN.jsonl``; a file that reached ``max_bytes`` is
left alone and the next free number is used.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

__all__ = ["EventLog", "configure", "append_event", "current_log_path", "is_configured", "reset"]

DEFAULT_MAX_BYTES = 10 * 1024 * 1024
FILE_PREFIX = "solve"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventLog:
    """Appends JSON objects to the current day's rotating log file."""

    def __init__(self, base_dir: str | Path, *, max_bytes: Optional[int] = None) -> None:
        self.base_dir = Path(base_dir)
        self.max_bytes = max_bytes or DEFAULT_MAX_BYTES
        self.current_path: Optional[Path] = None
        self._lock = threading.Lock()

    def _has_room(self, path: Path) -> bool:
        return not path.exists() or path.stat().st_size < self.max_bytes

    def _target(self) -> Path:
        day_dir = self.base_dir / _utc_now().strftime("%Y%m%d")
        day_dir.mkdir(parents=True, exist_ok=True)
        current = self.current_path
        if current is not None and current.parent == day_dir and self._has_room(current):
            return current
        index = 0
        while not self._has_room(day_dir / f"{FILE_PREFIX}_{index:02d}.jsonl"):
            index += 1
        self.current_path = day_dir / f"{FILE_PREFIX}_{index:02d}.jsonl"
        return self.current_path

    def append(self, event: Dict[str, Any]) -> Path:
        record = {"ts": _utc_now().isoformat(timespec="milliseconds"), **event}
        line = json.dumps(record, sort_keys=True, ensure_ascii=False)
        with self._lock:
            path = self._target()
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return path


_ACTIVE: Optional[EventLog] = None


def configure(base_dir: str | Path, *, max_bytes: Optional[int] = None) -> EventLog:
    """Send subsequent events to ``base_dir``."""

    global _ACTIVE
    _ACTIVE = EventLog(base_dir, max_bytes=max_bytes)
    return _ACTIVE


def reset() -> None:
    """Turn event logging off."""

    global _ACTIVE
    _ACTIVE = None


def is_configured() -> bool:
    return _ACTIVE is not None


def append_event(event: Dict[str, Any]) -> Path:
    """Append ``event`` (plus a ``ts`` field unless given) and return the file written."""

    if _ACTIVE is None:
        raise RuntimeError("event log is not configured; call configure() first")
    return _ACTIVE.append(event)


def current_log_path() -> Optional[Path]:
    return None if _ACTIVE is None else _ACTIVE.current_path
