"""Wire Values — canonical JSON-safe form of operation results and their comparison.

Invariants:
    - to_wire() output is always JSON-serializable (no inf/nan floats, no tuples)
    - values_match() never treats a bool as equal to a number (True != 1)
    - Float tolerance is absolute and only applies to finite numbers

Design Decisions:
    - Non-finite floats as strings ("Infinity", "-Infinity", "NaN"): the spellings
      other ports' JSON encoders already emit for these values
    - Compare on wire form so cases parsed from JSON and cases written in Python
      agree on what "equal" means
"""

import math
from typing import Any

INFINITY = "Infinity"
NEG_INFINITY = "-Infinity"
NAN = "NaN"


def to_wire(value: Any) -> Any:
    """Convert a result to its JSON-safe canonical form."""
    if isinstance(value, float):
        if math.isnan(value):
            return NAN
        if math.isinf(value):
            return INFINITY if value > 0 else NEG_INFINITY
        return value
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def values_match(expected: Any, actual: Any, tolerance: float | None = None) -> bool:
    """Wire-level equality, with optional absolute tolerance for finite numbers."""
    expected, actual = to_wire(expected), to_wire(actual)
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual
    if _is_number(expected) and _is_number(actual):
        if tolerance is not None:
            return abs(expected - actual) <= tolerance
        return expected == actual
    if isinstance(expected, list) and isinstance(actual, list):
        return len(expected) == len(actual) and all(
            values_match(e, a, tolerance) for e, a in zip(expected, actual)
        )
    return type(expected) is type(actual) and expected == actual
