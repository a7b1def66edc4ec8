"""Untyped integer/boolean expression tree.

Nothing here stops a tree from mixing operand kinds: ``OAdd(OBool(True),
OInt(1))`` is a perfectly good value. Catching that is left to ``oevaluate``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from typing_extensions import TypeAlias

@dataclass(frozen=True)
class OInt:
    value: int
    def __repr__(self) -> str:
        return f"OInt {self.value}" if self.value >= 0 else f"OInt ({self.value})"

@dataclass(frozen=True)
class OBool:
    value: bool
    def __repr__(self) -> str:
        return f"OBool {self.value}"

@dataclass(frozen=True)
class OAdd:
    lhs: 'OExp'
    rhs: 'OExp'
    def __repr__(self) -> str:
        return f"OAdd ({self.lhs!r}) ({self.rhs!r})"

@dataclass(frozen=True)
class OIsZero:
    operand: 'OExp'
    def __repr__(self) -> str:
        return f"OIsZero ({self.operand!r})"

@dataclass(frozen=True)
class OIf:
    cond: 'OExp'
    then: 'OExp'
    orelse: 'OExp'
    def __repr__(self) -> str:
        return f"OIf ({self.cond!r}) ({self.then!r}) ({self.orelse!r})"

OExp: TypeAlias = Union[OInt, OBool, OAdd, OIsZero, OIf]

def render(expr: OExp) -> str:
    """Print ``expr`` back in the surface syntax accepted by ``gexp.parser``."""
    match expr:
        case OBool(value=b):
            return "true" if b else "false"
        case OInt(value=i):
            return str(i)
        case OAdd(lhs=lhs, rhs=rhs):
            # '+' is left-associative; only a right operand that is itself a
            # sum, conditional or zero-test needs brackets.
            rhs_text = render(rhs)
            if isinstance(rhs, (OAdd, OIf)):
                rhs_text = f"({rhs_text})"
            lhs_text = render(lhs)
            if isinstance(lhs, OIf):
                lhs_text = f"({lhs_text})"
            return f"{lhs_text} + {rhs_text}"
        case OIsZero(operand=operand):
            inner = render(operand)
            if isinstance(operand, (OAdd, OIf)):
                inner = f"({inner})"
            return f"iszero {inner}"
        case OIf(cond=cond, then=then, orelse=orelse):
            return f"if {render(cond)} then {render(then)} else {render(orelse)}"

    raise TypeError(f"Not an expression: {type(expr).__name__}")
