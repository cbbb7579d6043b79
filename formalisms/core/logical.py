"""Logical — boolean algebra over bool operands.

Invariants:
    - De Morgan: logical_not(logical_and(a, b)) == logical_or(logical_not(a), logical_not(b))
    - Excluded middle: logical_or(a, logical_not(a)) is True
    - Non-contradiction: logical_and(a, logical_not(a)) is False
"""


def logical_and(a: bool, b: bool) -> bool:
    return a and b


def logical_or(a: bool, b: bool) -> bool:
    return a or b


def logical_not(a: bool) -> bool:
    return not a
