"""Conformance Routes — run the built-in catalogue or caller-supplied cases.

Invariants:
    - GET /api/v1/conformance/ runs every built-in case and returns the report
    - GET /api/v1/conformance/cases/{case_id} runs one built-in case (404 if unknown)
    - POST /api/v1/conformance/ runs the cases in the request body, in order
    - A failing report is still 200: failures are data, not transport errors

Design Decisions:
    - fail_fast from settings, overridable per request via query parameter
"""

from fastapi import APIRouter, Depends

from formalisms.config import Settings, get_settings
from formalisms.schemas.conformance import (
    CaseResult,
    ConformanceReport,
    ConformanceRunRequest,
)
from formalisms.services.conformance_runner import (
    find_builtin_case,
    load_builtin_cases,
    run_case,
    run_conformance,
)
from formalisms.services.operation_dispatch import OperationDispatch, get_dispatch

router = APIRouter(prefix="/api/v1/conformance", tags=["conformance"])


@router.get("/", response_model=ConformanceReport)
async def run_builtin_suite(
    fail_fast: bool | None = None,
    dispatch: OperationDispatch = Depends(get_dispatch),
    settings: Settings = Depends(get_settings),
):
    """Run the built-in conformance catalogue."""
    stop_early = settings.conformance_fail_fast if fail_fast is None else fail_fast
    return run_conformance(load_builtin_cases(), dispatch, fail_fast=stop_early)


@router.get("/cases/{case_id}", response_model=CaseResult)
async def run_builtin_case(
    case_id: str, dispatch: OperationDispatch = Depends(get_dispatch),
):
    """Run a single built-in case by id."""
    return run_case(find_builtin_case(case_id), dispatch)


@router.post("/", response_model=ConformanceReport)
async def run_supplied_cases(
    body: ConformanceRunRequest,
    fail_fast: bool | None = None,
    dispatch: OperationDispatch = Depends(get_dispatch),
    settings: Settings = Depends(get_settings),
):
    """Run caller-supplied cases (e.g. a port's shared case file)."""
    stop_early = settings.conformance_fail_fast if fail_fast is None else fail_fast
    return run_conformance(body.cases, dispatch, fail_fast=stop_early)
