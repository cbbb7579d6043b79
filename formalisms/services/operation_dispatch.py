"""Operation Dispatch — explicit routing from (module, name) to a registered operation.

Invariants:
    - Every mapping comes from core.operation_registry.OPERATIONS, no auto-discovery
    - Unknown operations raise UnknownOperationError (404)
    - Malformed arguments raise OperationArgumentError (400) before the call
    - ArithmeticError (modulo by zero, float overflow) surfaces as
      ArithmeticOperationError (422)
    - Every call logged at DEBUG with module/operation extras

Design Decisions:
    - Validation at the dispatch boundary: the string core stays total and never
      needs to inspect argument types itself
    - Raises typed errors (not error dicts): the HTTP layer maps them through the
      global handlers, the conformance runner records them as outcomes
"""

import logging
from typing import Any

from formalisms.core.domain_types import OperationModule
from formalisms.core.errors import (
    ArithmeticOperationError,
    OperationArgumentError,
    UnknownOperationError,
)
from formalisms.core.operation_registry import (
    OPERATIONS,
    OperationSignature,
    check_arguments,
)

logger = logging.getLogger(__name__)


class OperationDispatch:
    """Routes (module, name) -> operation. Explicit registration, no auto-discovery."""

    def __init__(self, operations: tuple[OperationSignature, ...] = OPERATIONS):
        self._operations = {(op.module, op.name): op for op in operations}

    def resolve(self, module: OperationModule | str, name: str) -> OperationSignature:
        """Look up a registered operation, raising UnknownOperationError if absent."""
        try:
            key = OperationModule(module)
        except ValueError:
            raise UnknownOperationError(str(module), name) from None
        signature = self._operations.get((key, name))
        if signature is None:
            raise UnknownOperationError(key.value, name)
        return signature

    def execute(self, module: OperationModule | str, name: str, args: list[Any]) -> Any:
        """Validate args and invoke the operation. Returns the raw Python result."""
        signature = self.resolve(module, name)
        reason = check_arguments(signature, args)
        if reason is not None:
            raise OperationArgumentError(signature.module.value, name, reason)

        logger.debug(
            f"Dispatching {signature.module.value}.{name}",
            extra={"module_name": signature.module.value, "operation": name},
        )
        try:
            return signature.func(*args)
        except ArithmeticError as e:
            raise ArithmeticOperationError(signature.module.value, name, str(e)) from e

    def describe(self) -> list[dict]:
        """All registered signatures, in registration order."""
        return [op.describe() for op in self._operations.values()]


def get_dispatch() -> OperationDispatch:
    """Dispatch over the full registry (FastAPI dependency)."""
    return _DEFAULT_DISPATCH


_DEFAULT_DISPATCH = OperationDispatch()
