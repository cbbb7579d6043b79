"""Operation Routes — list registered operations and evaluate one call.

Invariants:
    - POST /api/v1/operations/{module}/{operation} returns the result in wire form
    - settings.max_request_args is a request-size guard: it runs after the operation
      resolves and before any argument is type-checked, so an oversized args list
      is rejected with 400 without walking its elements
    - Unknown operations → 404, malformed arguments → 400, modulo by zero → 422
      (all via the global FormalismsError handler)
"""

from fastapi import APIRouter, Depends

from formalisms.config import Settings, get_settings
from formalisms.core.errors import OperationArgumentError
from formalisms.core.wire_values import to_wire
from formalisms.schemas.operation import (
    EvaluateRequest,
    EvaluateResponse,
    OperationListing,
)
from formalisms.services.operation_dispatch import OperationDispatch, get_dispatch

router = APIRouter(prefix="/api/v1/operations", tags=["operations"])


@router.get("/", response_model=OperationListing)
async def list_operations(dispatch: OperationDispatch = Depends(get_dispatch)):
    """Every registered operation with its parameter kinds."""
    operations = dispatch.describe()
    return {"count": len(operations), "operations": operations}


@router.post("/{module}/{operation}", response_model=EvaluateResponse)
async def evaluate_operation(
    module: str,
    operation: str,
    body: EvaluateRequest,
    dispatch: OperationDispatch = Depends(get_dispatch),
    settings: Settings = Depends(get_settings),
):
    """Evaluate one operation with positional arguments."""
    signature = dispatch.resolve(module, operation)
    if len(body.args) > settings.max_request_args:
        raise OperationArgumentError(
            signature.module.value, operation,
            f"at most {settings.max_request_args} arguments accepted",
        )
    result = dispatch.execute(signature.module, operation, body.args)
    return EvaluateResponse(
        module=signature.module, operation=operation, result=to_wire(result),
    )
