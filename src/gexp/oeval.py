from __future__ import annotations

from typing import Optional

from .oexp import OAdd, OBool, OExp, OIf, OInt, OIsZero
from .types import BoolValue, IntValue, Value

# ---------------- Public API ----------------

def oevaluate(expr: OExp) -> Optional[Value]:
    """Evaluate an untyped expression.

    Returns ``None`` when the tree combines operands of the wrong kind. That is
    the only failure signal: callers learn *that* evaluation failed, never which
    subterm was at fault.
    """
    return _eval_node(expr)

# ---------------- Core evaluator ----------------

def _eval_node(n: OExp) -> Optional[Value]:
    match n:
        case OInt(value=i):
            return IntValue(i)
        case OBool(value=b):
            return BoolValue(b)
        case OAdd(lhs=lhs, rhs=rhs):
            return _eval_add(lhs, rhs)
        case OIsZero(operand=operand):
            return _eval_iszero(operand)
        case OIf(cond=cond, then=then, orelse=orelse):
            return _eval_if(cond, then, orelse)

    raise TypeError(f"Not an expression: {type(n).__name__}")

def _eval_add(lhs: OExp, rhs: OExp) -> Optional[Value]:
    match (_eval_node(lhs), _eval_node(rhs)):
        case (IntValue(value=a), IntValue(value=b)):
            return IntValue(a + b)
        case _:
            return None

def _eval_iszero(operand: OExp) -> Optional[Value]:
    match _eval_node(operand):
        case IntValue(value=i):
            return BoolValue(i == 0)
        case _:
            return None

def _eval_if(cond: OExp, then: OExp, orelse: OExp) -> Optional[Value]:
    # Both branches are evaluated before one is picked, so a bad branch fails
    # the whole conditional even when it is not the one selected.
    match (_eval_node(cond), _eval_node(then), _eval_node(orelse)):
        case (BoolValue(value=b), x, y) if x is not None and y is not None:
            return x if b else y
        case _:
            return None
