"""Comparison — relational predicates over ordered numeric operands.

Invariants:
    - Each predicate returns a bool and never raises for numeric input
    - less_equal(a, b) == less_than(a, b) or equal(a, b) for non-nan operands
"""

Number = int | float


def less_than(a: Number, b: Number) -> bool:
    return a < b


def greater_than(a: Number, b: Number) -> bool:
    return a > b


def equal(a: Number, b: Number) -> bool:
    return a == b


def not_equal(a: Number, b: Number) -> bool:
    return a != b


def less_equal(a: Number, b: Number) -> bool:
    return a <= b


def greater_equal(a: Number, b: Number) -> bool:
    return a >= b
