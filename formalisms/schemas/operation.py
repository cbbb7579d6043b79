"""Operation Schemas — evaluation request/response bodies.

Invariants:
    - EvaluateRequest.args is a JSON array; per-argument kinds are checked by the
      registry, not here (one error shape for HTTP and harness callers)
    - EvaluateResponse.result is always in wire form (see core.wire_values)
"""

from typing import Any

from pydantic import BaseModel, Field

from formalisms.core.domain_types import OperationModule


class EvaluateRequest(BaseModel):
    """Positional arguments for one operation call."""
    args: list[Any] = Field(default_factory=list)


class EvaluateResponse(BaseModel):
    module: OperationModule
    operation: str
    result: Any


class OperationDescription(BaseModel):
    module: OperationModule
    name: str
    params: list[str]


class OperationListing(BaseModel):
    count: int
    operations: list[OperationDescription]
