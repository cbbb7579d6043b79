"""Arithmetic — tests for numeric operations.

Tests cover:
    - add/subtract/multiply basic values and algebraic laws
    - divide: true division, signed infinity and nan for a zero divisor
    - modulo: truncated remainder (sign follows dividend), zero divisor raises
"""

import math

import pytest

from formalisms.core.arithmetic import add, divide, modulo, multiply, subtract


# ─── add / subtract / multiply ───────────────────────────────────

def test_add():
    assert add(2, 3) == 5
    assert add(-5, 3) == -2
    assert add(1.5, 2.5) == 4.0
    assert add(-10.0, -20.0) == -30.0


def test_add_is_commutative_and_associative():
    assert add(5, 3) == add(3, 5)
    assert add(add(1, 2), 3) == add(1, add(2, 3))
    assert add(42, 0) == 42


def test_subtract():
    assert subtract(10, 3) == 7
    assert subtract(5, 8) == -3
    assert subtract(10.5, 3.2) == pytest.approx(7.3)
    assert subtract(42, 0) == 42


def test_subtract_is_not_commutative():
    assert subtract(10, 3) != subtract(3, 10)


def test_multiply():
    assert multiply(4, 5) == 20
    assert multiply(-3, 7) == -21
    assert multiply(2.5, 4.0) == 10.0
    assert multiply(42, 0) == 0
    assert multiply(42, 1) == 42


def test_multiply_distributes_over_add():
    assert multiply(3, add(4, 5)) == add(multiply(3, 4), multiply(3, 5))


# ─── divide ──────────────────────────────────────────────────────

def test_divide():
    assert divide(10, 2) == 5.0
    assert divide(7, 2) == 3.5
    assert divide(10.5, 2) == 5.25
    assert divide(5, -2) == -2.5
    assert divide(42, 1) == 42.0


def test_divide_by_zero_is_signed_infinity():
    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert divide(1.0, -0.0) == -math.inf


def test_divide_zero_by_zero_is_nan():
    assert math.isnan(divide(0.0, 0.0))


# ─── modulo ──────────────────────────────────────────────────────

def test_modulo():
    assert modulo(10, 3) == 1
    assert modulo(15, 4) == 3
    assert modulo(7, 7) == 0


def test_modulo_sign_follows_dividend():
    assert modulo(-10, 3) == -1
    assert modulo(10, -3) == 1
    assert modulo(-10, -3) == -1


def test_modulo_division_relation():
    for a, b in ((17, 5), (-17, 5), (17, -5), (-17, -5)):
        quotient = int(a / b)
        assert a == quotient * b + modulo(a, b)


def test_modulo_by_zero_raises_arithmetic_error():
    with pytest.raises(ArithmeticError):
        modulo(5, 0)
