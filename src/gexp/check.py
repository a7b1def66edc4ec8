"""Moving between the untyped and typed expression trees."""
from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

from .gexp import GAdd, GBool, GExp, GIf, GInt, GIsZero
from .oexp import OAdd, OBool, OExp, OIf, OInt, OIsZero
from .types import GexpTypeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

def typecheck(expr: OExp) -> Optional[GExp[Any]]:
    """Rebuild ``expr`` as a typed tree, or return ``None`` if it is ill-typed.

    The typed constructors do the actual checking; a rejected node anywhere in
    the tree rejects the whole expression. This is stricter than
    ``oevaluate``: branches of a conditional must agree even though only one
    of them is ever selected.
    """
    try:
        return _elaborate(expr)
    except GexpTypeError as exc:
        logger.debug("typecheck rejected %r: %s", expr, exc)
        return None

def _elaborate(n: OExp) -> GExp[Any]:
    match n:
        case OInt(value=i):
            return GInt(i)
        case OBool(value=b):
            return GBool(b)
        case OAdd(lhs=lhs, rhs=rhs):
            return GAdd(_elaborate(lhs), _elaborate(rhs))
        case OIsZero(operand=operand):
            return GIsZero(_elaborate(operand))
        case OIf(cond=cond, then=then, orelse=orelse):
            return GIf(_elaborate(cond), _elaborate(then), _elaborate(orelse))

    raise TypeError(f"Not an expression: {type(n).__name__}")

def forget(expr: GExp[T]) -> OExp:
    """The untyped tree with the same shape as ``expr``."""
    match expr:
        case GInt(value=i):
            return OInt(i)
        case GBool(value=b):
            return OBool(b)
        case GAdd(lhs=lhs, rhs=rhs):
            return OAdd(forget(lhs), forget(rhs))
        case GIsZero(operand=operand):
            return OIsZero(forget(operand))
        case GIf(cond=cond, then=then, orelse=orelse):
            return OIf(forget(cond), forget(then), forget(orelse))

    raise TypeError(f"Not a typed expression: {type(expr).__name__}")
