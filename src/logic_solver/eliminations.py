"""Elimination rules shared by the candidate computations.

Three rules live here:

* sibling elimination removes the local rows/columns of a block already
  covered by the digit in a lateral or vertical sibling block;
* locked-candidate elimination reserves whole rows/columns of a band or
  stack once sibling candidates are confined to them (pointing pairs);
* subset elimination reserves the coordinates a group of candidate sets
  cannot do without (naked/hidden subsets), tested by brute-force search for
  a system of distinct representatives.

All functions are pure; the grid-based ones are memoised on the grid value.
"""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from itertools import product
from typing import Hashable, Iterable, List, Sequence, Tuple, TypeVar

from .grid import (
    LOCAL_COORDS,
    Block,
    Coord,
    Grid,
    block_of,
    lateral_siblings,
    occupied_coordinates,
    vertical_siblings,
)
from .limits import DEFAULT_SUBSET_CAP

T = TypeVar("T", bound=Hashable)

ROW_AXIS = 0
COLUMN_AXIS = 1


def _sibling_positions(grid: Grid, siblings: Sequence[Block], digit: int) -> List[Coord]:
    positions = []
    for sibling in siblings:
        local = block_of(grid, sibling)[digit]
        if local is not None:
            positions.append(local)
    return positions


def eliminated_by_lateral_siblings(grid: Grid, block: Block, digit: int) -> frozenset[Coord]:
    """Local coordinates whose global row already holds ``digit`` in a lateral sibling."""

    rows = {local[0] for local in _sibling_positions(grid, lateral_siblings(block), digit)}
    return frozenset(coord for coord in LOCAL_COORDS if coord[0] in rows)


def eliminated_by_vertical_siblings(grid: Grid, block: Block, digit: int) -> frozenset[Coord]:
    """Local coordinates whose global column already holds ``digit`` in a vertical sibling."""

    cols = {local[1] for local in _sibling_positions(grid, vertical_siblings(block), digit)}
    return frozenset(coord for coord in LOCAL_COORDS if coord[1] in cols)


def sibling_eliminated_coordinates(grid: Grid, block: Block, digit: int) -> frozenset[Coord]:
    return eliminated_by_lateral_siblings(grid, block, digit) | eliminated_by_vertical_siblings(
        grid, block, digit
    )


@lru_cache(maxsize=8192)
def simple_candidates(grid: Grid, block: Block, digit: int) -> frozenset[Coord]:
    """Free coordinates of ``block`` not ruled out for ``digit`` by its siblings."""

    return LOCAL_COORDS - occupied_coordinates(grid, block) - sibling_eliminated_coordinates(
        grid, block, digit
    )


def has_distinct_representatives(candidate_sets: Sequence[frozenset[T]]) -> bool:
    """Return ``True`` when one pairwise-distinct pick per set exists."""

    if any(not candidates for candidates in candidate_sets):
        return False
    expected = len(candidate_sets)
    return any(len(set(pick)) == expected for pick in product(*candidate_sets))


def reserved_within_unit(
    candidate_sets: Iterable[Iterable[T]],
    *,
    subset_cap: int = DEFAULT_SUBSET_CAP,
) -> frozenset[T]:
    """Coordinates that the given candidate sets collectively cannot spare.

    A coordinate ``u`` is reserved when removing it from every set leaves no
    system of distinct representatives.  Enumeration is exponential, so the
    rule gives up (returns an empty reservation) once the combined size of
    the sets exceeds ``subset_cap``.
    """

    sets = [frozenset(candidates) for candidates in candidate_sets]
    if sum(len(candidates) for candidates in sets) > subset_cap:
        return frozenset()
    universe = frozenset().union(*sets)
    reserved = set()
    for coordinate in universe:
        reduced = [candidates - {coordinate} for candidates in sets]
        if not has_distinct_representatives(reduced):
            reserved.add(coordinate)
    return frozenset(reserved)


def _project(coords: Iterable[Coord], axis: int) -> frozenset[int]:
    return frozenset(coord[axis] for coord in coords)


def reserved_lines(candidate_sets: Iterable[Iterable[Coord]], axis: int) -> frozenset[int]:
    """Local rows (``ROW_AXIS``) or columns (``COLUMN_AXIS``) locked by sibling candidates.

    Pass one reserves every line that is the sole projection of a candidate
    set.  Pass two discards those lines, then reserves line pairs shared by
    exactly two candidate sets.
    """

    sets: Tuple[frozenset[Coord], ...] = tuple(frozenset(candidates) for candidates in candidate_sets)

    singles = frozenset(
        line for projection in (_project(s, axis) for s in sets) if len(projection) == 1 for line in projection
    )

    remaining = [_project((coord for coord in s if coord[axis] not in singles), axis) for s in sets]
    pair_counts = Counter(projection for projection in remaining if len(projection) == 2)
    pairs = frozenset(line for projection, count in pair_counts.items() if count == 2 for line in projection)

    return singles | pairs


def reserved_coordinates(candidate_sets: Iterable[Iterable[Coord]], axis: int) -> frozenset[Coord]:
    """Expand :func:`reserved_lines` to every local coordinate on those lines."""

    lines = reserved_lines(candidate_sets, axis)
    return frozenset(coord for coord in LOCAL_COORDS if coord[axis] in lines)


__all__ = [
    "COLUMN_AXIS",
    "ROW_AXIS",
    "eliminated_by_lateral_siblings",
    "eliminated_by_vertical_siblings",
    "has_distinct_representatives",
    "reserved_coordinates",
    "reserved_lines",
    "reserved_within_unit",
    "sibling_eliminated_coordinates",
    "simple_candidates",
]
