"""Conformance Runner — executes conformance cases through OperationDispatch.

Invariants:
    - Every case yields exactly one CaseResult (passed, failed or errored)
    - A FormalismsError whose code equals expect_error counts as passed
    - Results are recorded in wire form (JSON-safe) regardless of outcome
    - fail_fast stops after the first non-passing case; counts cover executed cases only

Design Decisions:
    - Typed errors caught here, not in dispatch: dispatch stays a thin router
    - Failures logged at WARNING with case_id, summary at INFO (observability
      without a report store)
"""

import logging

from formalisms.core.conformance_cases import BUILTIN_CASES
from formalisms.core.domain_types import CaseOutcome
from formalisms.core.errors import FormalismsError, UnknownCaseError
from formalisms.core.wire_values import to_wire, values_match
from formalisms.schemas.conformance import (
    CaseResult,
    ConformanceCase,
    ConformanceReport,
)
from formalisms.services.operation_dispatch import OperationDispatch

logger = logging.getLogger(__name__)


def load_builtin_cases() -> list[ConformanceCase]:
    """Validate the built-in catalogue into ConformanceCase models."""
    return [ConformanceCase.model_validate(c) for c in BUILTIN_CASES]


def find_builtin_case(case_id: str) -> ConformanceCase:
    for case in load_builtin_cases():
        if case.id == case_id:
            return case
    raise UnknownCaseError(case_id)


def run_case(case: ConformanceCase, dispatch: OperationDispatch) -> CaseResult:
    """Run one case. Never raises for operation errors — they become outcomes."""
    base = {
        "id": case.id,
        "module": case.module,
        "operation": case.operation,
        "expected": to_wire(case.expected),
    }
    try:
        actual = dispatch.execute(case.module, case.operation, case.args)
    except FormalismsError as e:
        if case.expect_error == e.code:
            return CaseResult(**base, outcome=CaseOutcome.PASSED, error_code=e.code)
        return CaseResult(
            **base, outcome=CaseOutcome.ERRORED,
            error_code=e.code, message=e.message,
        )

    if case.expect_error is not None:
        return CaseResult(
            **base, outcome=CaseOutcome.FAILED, actual=to_wire(actual),
            message=f"expected error {case.expect_error}, got a result",
        )
    if values_match(case.expected, actual, case.tolerance):
        return CaseResult(**base, outcome=CaseOutcome.PASSED, actual=to_wire(actual))
    return CaseResult(
        **base, outcome=CaseOutcome.FAILED, actual=to_wire(actual),
        message="result does not match expected value",
    )


def run_conformance(
    cases: list[ConformanceCase],
    dispatch: OperationDispatch,
    fail_fast: bool = False,
) -> ConformanceReport:
    """Run cases in order and aggregate a report."""
    report = ConformanceReport()
    for case in cases:
        result = run_case(case, dispatch)
        report.results.append(result)
        report.total += 1
        if result.outcome is CaseOutcome.PASSED:
            report.passed += 1
            continue
        if result.outcome is CaseOutcome.FAILED:
            report.failed += 1
        else:
            report.errored += 1
        logger.warning(
            f"Conformance case {case.id} {result.outcome.value}: {result.message}",
            extra={
                "case_id": case.id,
                "module_name": case.module.value,
                "operation": case.operation,
                "error_code": result.error_code,
            },
        )
        if fail_fast:
            break

    logger.info(
        f"Conformance run: {report.passed}/{report.total} passed, "
        f"{report.failed} failed, {report.errored} errored",
    )
    return report
