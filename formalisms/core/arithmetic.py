"""Arithmetic — numeric operations shared with the other language ports.

Invariants:
    - add/subtract/multiply follow native Python numeric semantics
    - divide is true division; a zero divisor yields signed infinity (nan for 0/0)
    - modulo is the truncated remainder: sign follows the dividend
    - modulo by zero raises ZeroDivisionError (the only raising operation)

Design Decisions:
    - divide follows IEEE 754 instead of Python's ZeroDivisionError so every
      port reports the same value for a zero divisor
    - modulo mirrors rem semantics (modulo(-10, 3) == -1), not Python's floored %
"""

import math

Number = int | float


def add(a: Number, b: Number) -> Number:
    return a + b


def subtract(a: Number, b: Number) -> Number:
    return a - b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def divide(a: Number, b: Number) -> float:
    """Quotient a / b. divide(1, 0) == inf, divide(-1, 0) == -inf, divide(0, 0) is nan."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def modulo(a: int, b: int) -> int:
    """Remainder of a / b truncated toward zero. Raises ZeroDivisionError when b == 0."""
    if b == 0:
        raise ZeroDivisionError("integer modulo by zero")
    r = abs(a) % abs(b)
    return -r if a < 0 else r
