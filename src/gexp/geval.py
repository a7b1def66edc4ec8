from __future__ import annotations

from typing import TypeVar

from .gexp import GAdd, GBool, GExp, GIf, GInt, GIsZero

T = TypeVar("T")

def gevaluate(expr: GExp[T]) -> T:
    """Evaluate a typed expression.

    Total: the operand checks ``oevaluate`` performs on every call were already
    settled when the tree was built, so each case uses its children directly.
    """
    match expr:
        case GInt(value=i):
            return i  # type: ignore[return-value]
        case GBool(value=b):
            return b  # type: ignore[return-value]
        case GAdd(lhs=lhs, rhs=rhs):
            return gevaluate(lhs) + gevaluate(rhs)  # type: ignore[return-value]
        case GIsZero(operand=operand):
            return gevaluate(operand) == 0  # type: ignore[return-value]
        case GIf(cond=cond, then=then, orelse=orelse):
            return gevaluate(then) if gevaluate(cond) else gevaluate(orelse)

    raise TypeError(f"Not a typed expression: {type(expr).__name__}")
