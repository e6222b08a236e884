"""Per-sweep solve trace."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import List, Mapping, MutableSequence, Sequence

from .grid import Grid
from .placement import Placement, canonicalise_placements


class TraceValidationError(ValueError):
    """Raised when a sweep record is inconsistent."""


def state_hash(grid: Grid) -> str:
    """sha256 of the canonical 81-character grid string."""

    return hashlib.sha256(grid.to_string().encode("ascii")).hexdigest()


@dataclass(frozen=True, slots=True)
class SweepRecord:
    """Immutable summary of one solver sweep."""

    sweep: int
    placements: Sequence[Placement]
    filled_before: int
    filled_after: int
    state_hash_before: str
    state_hash_after: str
    time_us: int | None = None

    def __post_init__(self) -> None:
        if self.sweep < 1:
            raise TraceValidationError("sweep must be >= 1")
        if self.filled_after < self.filled_before:
            raise TraceValidationError("filled cell count must not decrease")
        if self.filled_after - self.filled_before != len(self.placements):
            raise TraceValidationError("placements must account for every newly filled cell")
        if self.time_us is not None and self.time_us < 0:
            raise TraceValidationError("time_us must be >= 0 when provided")
        object.__setattr__(self, "placements", canonicalise_placements(self.placements))

    @property
    def progressed(self) -> bool:
        return self.state_hash_before != self.state_hash_after

    def to_payload(self, *, include_timing: bool = True) -> dict:
        payload = {
            "sweep": int(self.sweep),
            "placements": [placement.to_payload() for placement in self.placements],
            "filled_before": int(self.filled_before),
            "filled_after": int(self.filled_after),
            "state_hash_before": str(self.state_hash_before),
            "state_hash_after": str(self.state_hash_after),
        }
        if include_timing:
            payload["time_us"] = None if self.time_us is None else int(self.time_us)
        return payload


@dataclass
class SolveTrace:
    """Mutable accumulator of :class:`SweepRecord` entries."""

    records: MutableSequence[SweepRecord] = field(default_factory=list)

    def append(self, record: SweepRecord | Mapping[str, object]) -> None:
        if isinstance(record, Mapping):
            payload = dict(record)
            payload["placements"] = [
                item if isinstance(item, Placement) else Placement.from_payload(item)
                for item in payload.get("placements", [])
            ]
            record = SweepRecord(**payload)
        if self.records and record.sweep <= self.records[-1].sweep:
            raise TraceValidationError("trace sweeps must be strictly increasing")
        self.records.append(record)

    def snapshot(self) -> List[SweepRecord]:
        return list(self.records)

    def placements(self) -> List[Placement]:
        return [placement for record in self.records for placement in record.placements]

    def to_payload(self, *, include_timing: bool = True) -> list:
        return [record.to_payload(include_timing=include_timing) for record in self.records]

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_payload(), ensure_ascii=False, separators=(",", ":"), indent=indent)

    def digest(self) -> str:
        """sha256 over the canonical JSON of the trace, timings excluded."""

        canonical = json.dumps(
            self.to_payload(include_timing=False), sort_keys=True, separators=(",", ":"), ensure_ascii=False
        )
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


__all__ = ["SolveTrace", "SweepRecord", "TraceValidationError", "state_hash"]
