from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union
from typing_extensions import TypeAlias, TypeGuard

# ---------- Value Model (result of untyped evaluation) ----------

@dataclass(frozen=True)
class IntValue:
    value: int
    def __repr__(self) -> str:
        return f"Left {self.value}"

@dataclass(frozen=True)
class BoolValue:
    value: bool
    def __repr__(self) -> str:
        return f"Right {self.value}"

Value: TypeAlias = Union[IntValue, BoolValue]

_VALUE_TYPES: Tuple[type, ...] = (IntValue, BoolValue)

def is_value(value: object) -> TypeGuard[Value]:
    return isinstance(value, _VALUE_TYPES)

def unwrap(value: Value) -> Union[int, bool]:
    """Strip the Int/Bool tag from an untyped result."""
    return value.value

def render_value(value: Optional[Value]) -> str:
    if value is None:
        return "ill-typed"

    if not is_value(value):
        raise GexpTypeError(f"Unexpected value type {type(value).__name__}")

    if isinstance(value, BoolValue):
        return "true" if value.value else "false"

    return str(value.value)

# ---------- Exceptions (keep Gexp* canonical) ----------

class GexpError(Exception):
    pass

class GexpTypeError(GexpError):
    """Raised when a typed expression node is built from mismatched children."""

class GexpParseError(GexpError):
    line: Optional[int]
    column: Optional[int]

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:  # pragma: no cover - trivial formatting
        msg = super().__str__()

        if self.line is None:
            return msg

        if self.column is None:
            return f"{msg} (line {self.line})"

        return f"{msg} (line {self.line}, col {self.column})"

class GexpEmptyListError(GexpError):
    def __init__(self, message: str = "head of empty list"):
        super().__init__(message)
