"""Typed expression tree.

``GExp[T]`` is indexed by the Python type the expression evaluates to. The
index lives in the type parameter only: no node stores it. Each constructor
fixes its own index and demands specific indices of its children::

    GInt(int)                             -> GExp[int]
    GBool(bool)                           -> GExp[bool]
    GAdd(GExp[int], GExp[int])            -> GExp[int]
    GIsZero(GExp[int])                    -> GExp[bool]
    GIf(GExp[bool], GExp[T], GExp[T])     -> GExp[T]

A static checker enforces this at every call site. Python itself does not,
so each node also checks its children once, when it is built, and raises
``GexpTypeError`` on a mismatch. A finished tree is never checked again.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .types import GexpTypeError

T = TypeVar("T")

class GExp(Generic[T]):
    __slots__ = ()

@dataclass(frozen=True)
class GInt(GExp[int]):
    value: int
    def __post_init__(self) -> None:
        if type(self.value) is not int:
            raise GexpTypeError(f"GInt expects an int; got {type(self.value).__name__}")
    def __repr__(self) -> str:
        return f"GInt {self.value}" if self.value >= 0 else f"GInt ({self.value})"

@dataclass(frozen=True)
class GBool(GExp[bool]):
    value: bool
    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise GexpTypeError(f"GBool expects a bool; got {type(self.value).__name__}")
    def __repr__(self) -> str:
        return f"GBool {self.value}"

@dataclass(frozen=True)
class GAdd(GExp[int]):
    lhs: GExp[int]
    rhs: GExp[int]
    def __post_init__(self) -> None:
        _require(self.lhs, int, "GAdd")
        _require(self.rhs, int, "GAdd")
    def __repr__(self) -> str:
        return f"GAdd ({self.lhs!r}) ({self.rhs!r})"

@dataclass(frozen=True)
class GIsZero(GExp[bool]):
    operand: GExp[int]
    def __post_init__(self) -> None:
        _require(self.operand, int, "GIsZero")
    def __repr__(self) -> str:
        return f"GIsZero ({self.operand!r})"

@dataclass(frozen=True)
class GIf(GExp[T]):
    cond: GExp[bool]
    then: GExp[T]
    orelse: GExp[T]
    def __post_init__(self) -> None:
        _require(self.cond, bool, "GIf condition")
        _require(self.then, None, "GIf")
        _require(self.orelse, index_of(self.then), "GIf branches")
    def __repr__(self) -> str:
        return f"GIf ({self.cond!r}) ({self.then!r}) ({self.orelse!r})"

def index_of(expr: GExp[T]) -> type:
    """Recover the result type a node was built with."""
    match expr:
        case GInt() | GAdd():
            return int
        case GBool() | GIsZero():
            return bool
        case GIf(then=then):
            return index_of(then)

    raise GexpTypeError(f"Not a typed expression: {type(expr).__name__}")

def _require(child: object, index: type | None, context: str) -> None:
    if not isinstance(child, GExp):
        raise GexpTypeError(f"{context} expects a typed expression; got {type(child).__name__}")

    if index is None:
        return

    actual = index_of(child)
    if actual is not index:
        raise GexpTypeError(f"{context} expects GExp[{index.__name__}]; got GExp[{actual.__name__}]")
