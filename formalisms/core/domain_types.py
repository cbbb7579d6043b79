"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Position is 1-based and counts grapheme clusters, never code points
    - Offset is a storage index into a Python str (code point index)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (HTTP responses, reports)
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Position = NewType("Position", int)   # 1-based grapheme position
Offset = NewType("Offset", int)       # 0-based code point offset


# ─── Enums ───────────────────────────────────────────────────────

class OperationModule(str, Enum):
    """Operation families of the common library."""
    ARITHMETIC = "arithmetic"
    COMPARISON = "comparison"
    LOGICAL = "logical"
    STRING = "string"


class ArgKind(str, Enum):
    """Accepted argument kinds — checked at the dispatch boundary."""
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"
    STRING_LIST = "string_list"


class CaseOutcome(str, Enum):
    """Result of running one conformance case."""
    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"
