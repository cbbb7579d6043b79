"""Grapheme Index — cluster boundaries and position resolution for any str.

Invariants:
    - boundaries(s) always starts with 0 and ends with len(s), strictly increasing
    - cluster_count(s) == len(boundaries(s)) - 1
    - resolve() never raises: out-of-range positions clamp to the nearest boundary
    - Positions are 1-based; position n + 1 is the end-of-string insertion point

Design Decisions:
    - regex \\X over unicodedata heuristics: full extended grapheme cluster rules
      (emoji ZWJ sequences, modifiers, Hangul, regional indicators)
    - boundaries() memoized with lru_cache: the only non-trivial cost in the
      string layer, and its result is an immutable tuple safe to share
"""

from bisect import bisect_left
from functools import lru_cache
from typing import NamedTuple

import regex

from formalisms.core.domain_types import Offset, Position

BOUNDARY_CACHE_SIZE: int = 1024

_CLUSTER = regex.compile(r"\X")


class Resolution(NamedTuple):
    """Storage offset for a position, and whether a cluster starts there."""
    offset: Offset
    exists: bool


@lru_cache(maxsize=BOUNDARY_CACHE_SIZE)
def boundaries(s: str) -> tuple[int, ...]:
    """Offsets at which grapheme clusters begin, plus the end-of-string offset."""
    offsets = [0]
    offsets.extend(m.end() for m in _CLUSTER.finditer(s))
    return tuple(offsets)


def cluster_count(s: str) -> int:
    return len(boundaries(s)) - 1


def clusters(s: str) -> tuple[str, ...]:
    """The grapheme clusters of s, in order."""
    bounds = boundaries(s)
    return tuple(s[lo:hi] for lo, hi in zip(bounds, bounds[1:]))


def clamp_position(position: int, count: int) -> Position:
    """Clamp a 1-based position into [1, count + 1]."""
    if position < 1:
        return Position(1)
    if position > count + 1:
        return Position(count + 1)
    return Position(position)


def resolve(s: str, position: int) -> Resolution:
    """Map a 1-based grapheme position to a storage offset.

    Positions inside the string report exists=True. The insertion point
    (count + 1) and every clamped position report exists=False.
    """
    bounds = boundaries(s)
    count = len(bounds) - 1
    clamped = clamp_position(position, count)
    exists = clamped == position and position <= count
    return Resolution(Offset(bounds[clamped - 1]), exists)


def is_boundary(s: str, offset: int) -> bool:
    bounds = boundaries(s)
    i = bisect_left(bounds, offset)
    return i < len(bounds) and bounds[i] == offset


def position_of(s: str, offset: int) -> Position:
    """1-based position of the cluster starting at (or containing) offset."""
    bounds = boundaries(s)
    i = bisect_left(bounds, offset)
    if i < len(bounds) and bounds[i] == offset:
        return Position(i + 1)
    return Position(max(i, 1))
