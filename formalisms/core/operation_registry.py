"""Operation Registry — canonical cross-language names mapped to Python callables.

Invariants:
    - Every (module, name) -> function mapping is visible here, no getattr magic
    - Canonical names match the other language ports (string_length, not length)
    - check_arguments is PURE: returns an error message or None, never raises
    - bool is never accepted where a number is expected
    - Strings with unpaired surrogates are rejected: results must encode as UTF-8

Design Decisions:
    - Explicit table over reflection: adding an operation requires editing OPERATIONS
    - Signatures carry ArgKind tuples so the HTTP shell can reject malformed calls
      before they reach the total string core
"""

from dataclasses import dataclass
from typing import Any, Callable

from formalisms.core import arithmetic, comparison, logical, string_ops
from formalisms.core.domain_types import ArgKind, OperationModule


@dataclass(frozen=True)
class OperationSignature:
    """One registered operation and its argument kinds."""
    module: OperationModule
    name: str
    func: Callable[..., Any]
    params: tuple[ArgKind, ...]

    @property
    def arity(self) -> int:
        return len(self.params)

    def describe(self) -> dict:
        return {
            "module": self.module.value,
            "name": self.name,
            "params": [p.value for p in self.params],
        }


_N, _I, _B = ArgKind.NUMBER, ArgKind.INTEGER, ArgKind.BOOLEAN
_S, _SL = ArgKind.STRING, ArgKind.STRING_LIST

_A, _C = OperationModule.ARITHMETIC, OperationModule.COMPARISON
_L, _STR = OperationModule.LOGICAL, OperationModule.STRING


OPERATIONS: tuple[OperationSignature, ...] = (
    # Arithmetic (5)
    OperationSignature(_A, "add", arithmetic.add, (_N, _N)),
    OperationSignature(_A, "subtract", arithmetic.subtract, (_N, _N)),
    OperationSignature(_A, "multiply", arithmetic.multiply, (_N, _N)),
    OperationSignature(_A, "divide", arithmetic.divide, (_N, _N)),
    OperationSignature(_A, "modulo", arithmetic.modulo, (_I, _I)),

    # Comparison (6)
    OperationSignature(_C, "less_than", comparison.less_than, (_N, _N)),
    OperationSignature(_C, "greater_than", comparison.greater_than, (_N, _N)),
    OperationSignature(_C, "equal", comparison.equal, (_N, _N)),
    OperationSignature(_C, "not_equal", comparison.not_equal, (_N, _N)),
    OperationSignature(_C, "less_equal", comparison.less_equal, (_N, _N)),
    OperationSignature(_C, "greater_equal", comparison.greater_equal, (_N, _N)),

    # Logical (3)
    OperationSignature(_L, "logical_and", logical.logical_and, (_B, _B)),
    OperationSignature(_L, "logical_or", logical.logical_or, (_B, _B)),
    OperationSignature(_L, "logical_not", logical.logical_not, (_B,)),

    # String (14)
    OperationSignature(_STR, "concat", string_ops.concat, (_S, _S)),
    OperationSignature(_STR, "string_length", string_ops.length, (_S,)),
    OperationSignature(_STR, "substring", string_ops.substring, (_S, _I, _I)),
    OperationSignature(_STR, "index_of", string_ops.index_of, (_S, _S)),
    OperationSignature(_STR, "string_contains", string_ops.contains, (_S, _S)),
    OperationSignature(_STR, "starts_with", string_ops.starts_with, (_S, _S)),
    OperationSignature(_STR, "ends_with", string_ops.ends_with, (_S, _S)),
    OperationSignature(_STR, "to_uppercase", string_ops.to_uppercase, (_S,)),
    OperationSignature(_STR, "to_lowercase", string_ops.to_lowercase, (_S,)),
    OperationSignature(_STR, "string_trim", string_ops.trim, (_S,)),
    OperationSignature(_STR, "string_split", string_ops.split, (_S, _S)),
    OperationSignature(_STR, "string_join", string_ops.join, (_SL, _S)),
    OperationSignature(_STR, "string_replace", string_ops.replace, (_S, _S, _S)),
    OperationSignature(_STR, "is_empty", string_ops.is_empty, (_S,)),
)


def _matches_kind(value: Any, kind: ArgKind) -> bool:
    if kind is ArgKind.BOOLEAN:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if kind is ArgKind.NUMBER:
        return isinstance(value, (int, float))
    if kind is ArgKind.INTEGER:
        return isinstance(value, int)
    if kind is ArgKind.STRING:
        return isinstance(value, str)
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def _has_lone_surrogate(value: Any) -> bool:
    texts = value if isinstance(value, (list, tuple)) else (value,)
    return any(
        "\ud800" <= ch <= "\udfff"
        for text in texts if isinstance(text, str)
        for ch in text
    )


def check_arguments(signature: OperationSignature, args: list[Any]) -> str | None:
    """Validate arity and argument kinds. Pure — returns a reason or None."""
    if len(args) != signature.arity:
        return f"expected {signature.arity} argument(s), got {len(args)}"
    for i, (value, kind) in enumerate(zip(args, signature.params)):
        if not _matches_kind(value, kind):
            return (
                f"argument {i + 1} must be {kind.value}, "
                f"got {type(value).__name__}"
            )
        if kind in (ArgKind.STRING, ArgKind.STRING_LIST) and _has_lone_surrogate(value):
            return f"argument {i + 1} contains an unpaired surrogate code point"
    return None
