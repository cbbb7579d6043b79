"""Conformance Runner — tests for case execution and report aggregation.

Tests cover:
    - The built-in catalogue validates and passes completely
    - Case ids in the catalogue are unique
    - Mismatched expectations are FAILED, dispatch errors are ERRORED
    - An expected error code counts as PASSED; a missing expected error is FAILED
    - fail_fast stops after the first non-passing case
    - find_builtin_case raises UnknownCaseError for unknown ids
"""

import pytest

from formalisms.core.domain_types import CaseOutcome
from formalisms.core.errors import UnknownCaseError
from formalisms.schemas.conformance import ConformanceCase
from formalisms.services.conformance_runner import (
    find_builtin_case,
    load_builtin_cases,
    run_case,
    run_conformance,
)
from formalisms.services.operation_dispatch import OperationDispatch


def _case(**kwargs) -> ConformanceCase:
    data = {"id": "t", "module": "string", "operation": "string_length", "args": ["abc"]}
    data.update(kwargs)
    return ConformanceCase.model_validate(data)


# ─── built-in catalogue ──────────────────────────────────────────

def test_builtin_catalogue_passes():
    report = run_conformance(load_builtin_cases(), OperationDispatch())
    failures = [r for r in report.results if r.outcome is not CaseOutcome.PASSED]
    assert failures == []
    assert report.ok
    assert report.passed == report.total


def test_builtin_case_ids_are_unique():
    ids = [c.id for c in load_builtin_cases()]
    assert len(ids) == len(set(ids))


def test_find_builtin_case():
    case = find_builtin_case("length-emoji")
    assert case.operation == "string_length"


def test_find_builtin_case_unknown():
    with pytest.raises(UnknownCaseError):
        find_builtin_case("does-not-exist")


# ─── run_case outcomes ───────────────────────────────────────────

def test_run_case_passed():
    result = run_case(_case(expected=3), OperationDispatch())
    assert result.outcome is CaseOutcome.PASSED
    assert result.actual == 3


def test_run_case_failed_on_mismatch():
    result = run_case(_case(expected=4), OperationDispatch())
    assert result.outcome is CaseOutcome.FAILED
    assert result.actual == 3
    assert result.expected == 4


def test_run_case_errored_on_unknown_operation():
    result = run_case(_case(operation="reverse", expected="cba"), OperationDispatch())
    assert result.outcome is CaseOutcome.ERRORED
    assert result.error_code == "UNKNOWN_OPERATION"


def test_run_case_expected_error_passes():
    case = _case(module="arithmetic", operation="modulo", args=[1, 0],
                 expect_error="ARITHMETIC_ERROR")
    result = run_case(case, OperationDispatch())
    assert result.outcome is CaseOutcome.PASSED
    assert result.error_code == "ARITHMETIC_ERROR"


def test_run_case_missing_expected_error_fails():
    case = _case(module="arithmetic", operation="modulo", args=[4, 2],
                 expect_error="ARITHMETIC_ERROR")
    result = run_case(case, OperationDispatch())
    assert result.outcome is CaseOutcome.FAILED
    assert result.actual == 0


def test_run_case_reports_non_finite_in_wire_form():
    case = _case(module="arithmetic", operation="divide", args=[-1.0, 0.0],
                 expected=float("-inf"))
    result = run_case(case, OperationDispatch())
    assert result.outcome is CaseOutcome.PASSED
    assert result.actual == "-Infinity"


# ─── run_conformance aggregation ─────────────────────────────────

def test_run_conformance_counts():
    cases = [
        _case(id="ok", expected=3),
        _case(id="bad", expected=9),
        _case(id="err", args=[], expected=0),
    ]
    report = run_conformance(cases, OperationDispatch())
    assert (report.total, report.passed, report.failed, report.errored) == (3, 1, 1, 1)
    assert not report.ok


def test_run_conformance_fail_fast_stops_early():
    cases = [
        _case(id="ok", expected=3),
        _case(id="bad", expected=9),
        _case(id="never-run", expected=3),
    ]
    report = run_conformance(cases, OperationDispatch(), fail_fast=True)
    assert report.total == 2
    assert [r.id for r in report.results] == ["ok", "bad"]


def test_run_conformance_overflowing_case_is_errored_not_raised():
    cases = [
        _case(id="huge", module="arithmetic", operation="divide",
              args=[10**400, 3], expected=1.0),
        _case(id="after", expected=3),
    ]
    report = run_conformance(cases, OperationDispatch())
    assert report.total == 2
    assert report.results[0].outcome is CaseOutcome.ERRORED
    assert report.results[0].error_code == "ARITHMETIC_ERROR"
    assert report.results[1].outcome is CaseOutcome.PASSED
