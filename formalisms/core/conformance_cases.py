"""Conformance Cases — the canonical cases every language port must reproduce.

Invariants:
    - Case ids are unique and stable (ports report results by id)
    - Every string-module edge case (empty input, reversed range, not found,
      empty pattern) has at least one case
    - Cases are plain dicts: validated into ConformanceCase at the service boundary

Design Decisions:
    - Data lives in core (pure, no IO) so tests and the HTTP shell share one catalogue
    - Expected non-finite floats written as Python floats; compared in wire form
"""

import math

ARITHMETIC_ERROR = "ARITHMETIC_ERROR"


def _case(case_id: str, module: str, operation: str, args: list, expected=None, **extra) -> dict:
    case = {
        "id": case_id,
        "module": module,
        "operation": operation,
        "args": args,
        "expected": expected,
    }
    case.update(extra)
    return case


_ARITHMETIC = (
    _case("add-positive", "arithmetic", "add", [2.0, 3.0], 5.0),
    _case("add-mixed-sign", "arithmetic", "add", [-5.0, 3.0], -2.0),
    _case("add-fractions", "arithmetic", "add", [1.5, 2.5], 4.0),
    _case("subtract-basic", "arithmetic", "subtract", [10.0, 3.0], 7.0),
    _case("subtract-fractions", "arithmetic", "subtract", [10.5, 3.2], 7.3, tolerance=1e-4),
    _case("multiply-basic", "arithmetic", "multiply", [4.0, 5.0], 20.0),
    _case("multiply-negatives", "arithmetic", "multiply", [-2.0, -3.0], 6.0),
    _case("divide-basic", "arithmetic", "divide", [10.0, 2.0], 5.0),
    _case("divide-fraction", "arithmetic", "divide", [7.0, 2.0], 3.5),
    _case("divide-negative-divisor", "arithmetic", "divide", [5.0, -2.0], -2.5),
    _case("divide-by-zero", "arithmetic", "divide", [1.0, 0.0], math.inf),
    _case("divide-negative-by-zero", "arithmetic", "divide", [-1.0, 0.0], -math.inf),
    _case("modulo-basic", "arithmetic", "modulo", [10, 3], 1),
    _case("modulo-exact", "arithmetic", "modulo", [7, 7], 0),
    _case("modulo-negative-dividend", "arithmetic", "modulo", [-10, 3], -1),
    _case("modulo-by-zero", "arithmetic", "modulo", [5, 0], expect_error=ARITHMETIC_ERROR),
)

_COMPARISON = (
    _case("less-than-true", "comparison", "less_than", [2.0, 3.0], True),
    _case("less-than-equal-operands", "comparison", "less_than", [5.0, 5.0], False),
    _case("greater-than-true", "comparison", "greater_than", [5.0, 3.0], True),
    _case("greater-than-equal-operands", "comparison", "greater_than", [2.0, 2.0], False),
    _case("equal-true", "comparison", "equal", [2.5, 2.5], True),
    _case("equal-false", "comparison", "equal", [3.0, 7.0], False),
    _case("not-equal-true", "comparison", "not_equal", [2.5, 2.6], True),
    _case("less-equal-equal-operands", "comparison", "less_equal", [1.5, 1.5], True),
    _case("greater-equal-false", "comparison", "greater_equal", [2.0, 10.0], False),
)

_LOGICAL = (
    _case("and-true-true", "logical", "logical_and", [True, True], True),
    _case("and-true-false", "logical", "logical_and", [True, False], False),
    _case("or-false-false", "logical", "logical_or", [False, False], False),
    _case("or-false-true", "logical", "logical_or", [False, True], True),
    _case("not-true", "logical", "logical_not", [True], False),
    _case("not-false", "logical", "logical_not", [False], True),
)

_STRING = (
    _case("concat-basic", "string", "concat", ["Hello", " World"], "Hello World"),
    _case("concat-left-identity", "string", "concat", ["", "test"], "test"),
    _case("concat-right-identity", "string", "concat", ["test", ""], "test"),
    _case("length-ascii", "string", "string_length", ["Hello"], 5),
    _case("length-empty", "string", "string_length", [""], 0),
    _case("length-emoji", "string", "string_length", ["\U0001F389"], 1),
    _case("length-emoji-zwj-family", "string", "string_length",
          ["\U0001F468\u200d\U0001F469\u200d\U0001F467"], 1),
    _case("length-skin-tone-modifier", "string", "string_length", ["\U0001F44D\U0001F3FD"], 1),
    _case("length-combining-accent", "string", "string_length", ["cafe\u0301"], 4),
    _case("substring-prefix", "string", "substring", ["Hello World", 1, 5], "Hello"),
    _case("substring-suffix", "string", "substring", ["Hello World", 7, 11], "World"),
    _case("substring-single", "string", "substring", ["Test", 1, 1], "T"),
    _case("substring-reversed-range", "string", "substring", ["Test", 3, 2], ""),
    _case("substring-end-clamped", "string", "substring", ["Test", 2, 99], "est"),
    _case("substring-start-clamped", "string", "substring", ["Test", -3, 2], "Te"),
    _case("substring-past-end", "string", "substring", ["Test", 9, 12], ""),
    _case("substring-empty-source", "string", "substring", ["", 1, 1], ""),
    _case("substring-grapheme", "string", "substring", ["a\U0001F44D\U0001F3FDb", 2, 2],
          "\U0001F44D\U0001F3FD"),
    _case("index-of-found", "string", "index_of", ["Hello World", "World"], 7),
    _case("index-of-first", "string", "index_of", ["Hello World", "o"], 5),
    _case("index-of-missing", "string", "index_of", ["Test", "xyz"], 0),
    _case("index-of-empty-pattern", "string", "index_of", ["Test", ""], 1),
    _case("index-of-empty-both", "string", "index_of", ["", ""], 1),
    _case("index-of-after-emoji", "string", "index_of", ["\U0001F389party", "party"], 2),
    _case("contains-found", "string", "string_contains", ["Hello World", "World"], True),
    _case("contains-missing", "string", "string_contains", ["Hello World", "xyz"], False),
    _case("contains-empty-pattern", "string", "string_contains", ["Test", ""], True),
    _case("contains-empty-both", "string", "string_contains", ["", ""], True),
    _case("contains-in-empty", "string", "string_contains", ["", "Test"], False),
    _case("starts-with-true", "string", "starts_with", ["Hello World", "Hello"], True),
    _case("starts-with-false", "string", "starts_with", ["Hello World", "World"], False),
    _case("starts-with-empty-both", "string", "starts_with", ["", ""], True),
    _case("starts-with-longer-prefix", "string", "starts_with", ["", "Test"], False),
    _case("ends-with-true", "string", "ends_with", ["Hello World", "World"], True),
    _case("ends-with-false", "string", "ends_with", ["Hello World", "Hello"], False),
    _case("ends-with-empty-both", "string", "ends_with", ["", ""], True),
    _case("upper-basic", "string", "to_uppercase", ["Hello World"], "HELLO WORLD"),
    _case("upper-accent", "string", "to_uppercase", ["café"], "CAFÉ"),
    _case("lower-basic", "string", "to_lowercase", ["Hello World"], "hello world"),
    _case("lower-accent", "string", "to_lowercase", ["CAFÉ"], "café"),
    _case("trim-spaces", "string", "string_trim", ["  Hello World  "], "Hello World"),
    _case("trim-control-whitespace", "string", "string_trim", ["\n\tTest\n"], "Test"),
    _case("trim-all-whitespace", "string", "string_trim", ["   "], ""),
    _case("trim-no-whitespace", "string", "string_trim", ["NoSpaces"], "NoSpaces"),
    _case("split-basic", "string", "string_split", ["a,b,c", ","], ["a", "b", "c"]),
    _case("split-words", "string", "string_split", ["Hello World", " "], ["Hello", "World"]),
    _case("split-no-delimiter", "string", "string_split", ["test", ","], ["test"]),
    _case("split-empty-segment", "string", "string_split", ["a,,b", ","], ["a", "", "b"]),
    _case("split-graphemes", "string", "string_split", ["abc", ""], ["a", "b", "c"]),
    _case("join-basic", "string", "string_join", [["a", "b", "c"], ","], "a,b,c"),
    _case("join-single", "string", "string_join", [["test"], ","], "test"),
    _case("join-empty", "string", "string_join", [[], ","], ""),
    _case("replace-word", "string", "string_replace", ["Hello World", "World", "Universe"],
          "Hello Universe"),
    _case("replace-all", "string", "string_replace", ["test test", "test", "demo"], "demo demo"),
    _case("replace-missing", "string", "string_replace", ["Hello", "xyz", "abc"], "Hello"),
    _case("replace-delete", "string", "string_replace", ["Hello", "l", ""], "Heo"),
    _case("replace-empty-pattern", "string", "string_replace", ["Hello", "", "x"], "Hello"),
    _case("is-empty-true", "string", "is_empty", [""], True),
    _case("is-empty-false", "string", "is_empty", ["test"], False),
    _case("is-empty-space", "string", "is_empty", [" "], False),
)

BUILTIN_CASES: tuple[dict, ...] = _ARITHMETIC + _COMPARISON + _LOGICAL + _STRING
