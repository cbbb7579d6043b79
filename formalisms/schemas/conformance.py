"""Conformance Schemas — cases, per-case results and the run report.

Invariants:
    - ConformanceCase.id: 1-100 chars, stripped, non-empty
    - A case states either an expected value or an expected error code
    - ConformanceReport counts always sum to total

Design Decisions:
    - expected is Any: results span numbers, bools, strings and string lists
    - model_validator for cross-field rules (expectation present, tolerance
      never paired with expect_error)
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from formalisms.core.domain_types import CaseOutcome, OperationModule


class ConformanceCase(BaseModel):
    """One canonical input/expectation pair, shared by every port."""
    id: str = Field(min_length=1, max_length=100)
    module: OperationModule
    operation: str = Field(min_length=1, max_length=64)
    args: list[Any] = Field(default_factory=list)
    expected: Any = None
    expect_error: str | None = Field(None, pattern=r"^[A-Z_]+$")
    tolerance: float | None = Field(None, ge=0.0)

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("id cannot be empty or whitespace")
        return v

    @model_validator(mode="after")
    def check_expectation(self) -> "ConformanceCase":
        if self.expect_error is None and self.expected is None:
            raise ValueError("case needs an expected value or expect_error")
        if self.tolerance is not None and self.expect_error is not None:
            raise ValueError("tolerance cannot be combined with expect_error")
        return self


class CaseResult(BaseModel):
    """Outcome of a single case."""
    id: str
    module: OperationModule
    operation: str
    outcome: CaseOutcome
    expected: Any = None
    actual: Any = None
    error_code: str | None = None
    message: str | None = None


class ConformanceReport(BaseModel):
    """Aggregate result of a conformance run."""
    total: int = 0
    passed: int = 0
    failed: int = 0
    errored: int = 0
    results: list[CaseResult] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.errored == 0


class ConformanceRunRequest(BaseModel):
    """Caller-supplied cases for POST /api/v1/conformance/."""
    cases: list[ConformanceCase] = Field(min_length=1, max_length=1000)
