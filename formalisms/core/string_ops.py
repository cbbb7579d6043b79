"""String Operations — total, pure string functions over grapheme positions.

Invariants:
    - Every length and position counts grapheme clusters (see grapheme_index)
    - Every operation is total: empty input, out-of-range positions and
      not-found searches return a safe value, never raise
    - Literal matches are cluster-aligned: an occurrence must start and end on
      a grapheme boundary of the searched string
    - Empty pattern: found at position 1 by index_of/contains, never found by replace

Design Decisions:
    - All positions go through grapheme_index.resolve() (explicit clamping),
      never through native str indexing with caller-supplied numbers
    - Module-level functions over a class: no state to carry between calls
"""

import regex

from formalisms.core.grapheme_index import (
    boundaries,
    cluster_count,
    clusters,
    is_boundary,
    position_of,
    resolve,
)

NOT_FOUND: int = 0

_WHITESPACE_CLUSTER = regex.compile(r"\p{White_Space}+")


def _find_aligned(s: str, sub: str, start: int = 0) -> int:
    """Offset of the first cluster-aligned occurrence of sub at or after start, or -1."""
    i = s.find(sub, start)
    while i != -1:
        if is_boundary(s, i) and is_boundary(s, i + len(sub)):
            return i
        i = s.find(sub, i + 1)
    return -1


def _occurrences(s: str, sub: str) -> list[int]:
    """Offsets of non-overlapping aligned occurrences, scanning left to right."""
    found = []
    i = _find_aligned(s, sub)
    while i != -1:
        found.append(i)
        i = _find_aligned(s, sub, i + len(sub))
    return found


# ─── Construction & Measurement ──────────────────────────────────

def concat(a: str, b: str) -> str:
    """Concatenate a then b. Identity element is ""."""
    return a + b


def length(s: str) -> int:
    """Number of grapheme clusters in s."""
    return cluster_count(s)


def is_empty(s: str) -> bool:
    return length(s) == 0


# ─── Positional ──────────────────────────────────────────────────

def substring(s: str, start: int, end: int) -> str:
    """Clusters start..end (1-based, inclusive). Bounds are clamped.

    substring("Hello World", 7, 11) == "World"; start > end yields "".
    """
    if start > end:
        return ""
    lo = resolve(s, start).offset
    hi = resolve(s, end + 1).offset
    if hi <= lo:
        return ""
    return s[lo:hi]


def index_of(s: str, sub: str) -> int:
    """1-based position of the first occurrence of sub, or 0 if absent.

    The empty pattern is found at position 1 for every s, including "".
    """
    if not sub:
        return 1
    offset = _find_aligned(s, sub)
    if offset == -1:
        return NOT_FOUND
    return position_of(s, offset)


# ─── Predicates ──────────────────────────────────────────────────

def contains(s: str, sub: str) -> bool:
    if not sub:
        return True
    return index_of(s, sub) != NOT_FOUND


def starts_with(s: str, prefix: str) -> bool:
    """True iff the first length(prefix) clusters of s equal prefix."""
    k = cluster_count(prefix)
    if k > cluster_count(s):
        return False
    return s[:resolve(s, k + 1).offset] == prefix


def ends_with(s: str, suffix: str) -> bool:
    """True iff the last length(suffix) clusters of s equal suffix."""
    k = cluster_count(suffix)
    n = cluster_count(s)
    if k > n:
        return False
    return s[resolve(s, n - k + 1).offset:] == suffix


# ─── Transformation ──────────────────────────────────────────────

def to_uppercase(s: str) -> str:
    """Default Unicode upper-case mapping, applied cluster by cluster."""
    return "".join(c.upper() for c in clusters(s))


def to_lowercase(s: str) -> str:
    """Default Unicode lower-case mapping, applied cluster by cluster."""
    return "".join(c.lower() for c in clusters(s))


def _is_whitespace_cluster(cluster: str) -> bool:
    return _WHITESPACE_CLUSTER.fullmatch(cluster) is not None


def trim(s: str) -> str:
    """Strip leading and trailing whitespace clusters; interior is kept."""
    parts = clusters(s)
    lo, hi = 0, len(parts)
    while lo < hi and _is_whitespace_cluster(parts[lo]):
        lo += 1
    while hi > lo and _is_whitespace_cluster(parts[hi - 1]):
        hi -= 1
    if lo == hi:
        return ""
    bounds = boundaries(s)
    return s[bounds[lo]:bounds[hi]]


def split(s: str, delimiter: str) -> list[str]:
    """Split on literal delimiter; empty segments are preserved.

    An empty delimiter splits s into its grapheme clusters.
    """
    if not delimiter:
        return list(clusters(s))
    segments = []
    prev = 0
    for offset in _occurrences(s, delimiter):
        segments.append(s[prev:offset])
        prev = offset + len(delimiter)
    segments.append(s[prev:])
    return segments


def join(parts: list[str], separator: str) -> str:
    """Concatenate parts with separator between consecutive elements."""
    return separator.join(parts)


def replace(s: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of old, left to right.

    Unlike index_of, the empty pattern is never found here: s comes back
    unchanged.
    """
    if not old:
        return s
    found = _occurrences(s, old)
    if not found:
        return s
    out = []
    prev = 0
    for offset in found:
        out.append(s[prev:offset])
        out.append(new)
        prev = offset + len(old)
    out.append(s[prev:])
    return "".join(out)
