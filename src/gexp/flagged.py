"""Lists whose emptiness is part of their type.

``FList[F, A]`` is indexed by a flag ``F`` (``Empty`` or ``NonEmpty``) and an
element type ``A``. There are exactly two variants and each one fixes the
flag, so the variant class *is* the flag and nothing else records it:

    Nil()                   -> FList[Empty, A]
    Cons(A, FList[Any, A])  -> FList[NonEmpty, A]

Functions that only make sense on a nonempty list (``safe_head``, ``foldr1``)
take a ``Cons`` and have no branch for ``Nil``; a type checker refuses the
call instead. Where the flag of a result depends on data (``ffilter``) the
list comes back inside a ``SomeList``, and ``is_nonempty`` recovers the flag
by looking.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar, overload

from .types import GexpEmptyListError, GexpTypeError

A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")

class Empty:
    """Flag for lists with no elements."""

class NonEmpty:
    """Flag for lists with at least one element."""

class FList(Generic[F, A]):
    __slots__ = ()

    def __iter__(self) -> Iterator[A]:
        node: FList[Any, A] = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FList):
            return NotImplemented
        return type(self) is type(other) and list(self) == list(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self)))

    def __repr__(self) -> str:
        rendered = "Nil"
        for item in reversed(list(self)):
            tail = rendered if rendered == "Nil" else f"({rendered})"
            shown = f"({item!r})" if _is_negative(item) else repr(item)
            rendered = f"Cons {shown} {tail}"
        return rendered

def _is_negative(item: object) -> bool:
    return isinstance(item, (int, float)) and not isinstance(item, bool) and item < 0

@dataclass(frozen=True, eq=False, repr=False)
class Nil(FList[Empty, A]):
    def __bool__(self) -> bool:
        return False

@dataclass(frozen=True, eq=False, repr=False)
class Cons(FList[NonEmpty, A]):
    head: A
    tail: FList[Any, A]
    def __post_init__(self) -> None:
        if not isinstance(self.tail, FList):
            raise GexpTypeError(f"Cons tail must be a flagged list; got {type(self.tail).__name__}")
    def __bool__(self) -> bool:
        return True

@dataclass(frozen=True)
class SomeList(Generic[A]):
    """A flagged list whose flag is not known until it is inspected."""
    inner: FList[Any, A]
    def __iter__(self) -> Iterator[A]:
        return iter(self.inner)
    def __len__(self) -> int:
        return len(self.inner)
    def __repr__(self) -> str:
        inner = repr(self.inner)
        return "OL Nil" if inner == "Nil" else f"OL ({inner})"

# ---------- Construction ----------

def from_iterable(items: Iterable[A]) -> FList[Any, A]:
    acc: FList[Any, A] = Nil()
    for item in reversed(list(items)):
        acc = Cons(item, acc)
    return acc

@overload
def flist() -> Nil[Any]: ...
@overload
def flist(first: A, *rest: A) -> Cons[A]: ...

def flist(*items: Any) -> FList[Any, Any]:
    return from_iterable(items)

def to_list(xs: FList[Any, A]) -> List[A]:
    return list(xs)

def length(xs: FList[Any, A]) -> int:
    return len(xs)

# ---------- Folds ----------

def foldr(f: Callable[[A, B], B], z: B, xs: FList[Any, A]) -> B:
    """Right fold over either flag: ``foldr(f, z, [a, b]) == f(a, f(b, z))``."""
    acc = z
    for item in reversed(list(xs)):
        acc = f(item, acc)
    return acc

def foldr1(f: Callable[[A, A], A], xs: Cons[A]) -> A:
    """Right fold seeded with the last element; only nonempty lists qualify."""
    *init, acc = xs
    for item in reversed(init):
        acc = f(item, acc)
    return acc

# ---------- Map / head ----------

@overload
def fmap(f: Callable[[A], B], xs: Nil[A]) -> Nil[B]: ...
@overload
def fmap(f: Callable[[A], B], xs: Cons[A]) -> Cons[B]: ...
@overload
def fmap(f: Callable[[A], B], xs: FList[F, A]) -> FList[F, B]: ...

def fmap(f: Callable[[A], B], xs: FList[Any, A]) -> FList[Any, B]:
    # One Cons out for every Cons in, ending in the same Nil shape.
    return from_iterable(f(item) for item in xs)

def safe_head(xs: Cons[A]) -> A:
    return xs.head

def unsafe_head(seq: Sequence[A]) -> A:
    """Head of an ordinary sequence; aborts on empty input."""
    if not seq:
        raise GexpEmptyListError("unsafe_head: empty sequence")
    return seq[0]

# ---------- Erasure ----------

def erase(xs: FList[Any, A]) -> SomeList[A]:
    return SomeList(xs)

def is_nonempty(erased: SomeList[A]) -> Optional[Cons[A]]:
    match erased.inner:
        case Cons() as xs:
            return xs
        case _:
            return None

def ffilter(pred: Callable[[A], bool], xs: FList[Any, A]) -> SomeList[A]:
    """Keep the elements satisfying ``pred``.

    Even a nonempty input can filter down to nothing, so the flag of the result
    is only known at run time and it comes back erased.
    """
    acc: FList[Any, A] = Nil()
    # Filter the tail first, then decide whether to prepend each head.
    for item in reversed(list(xs)):
        if pred(item):
            acc = Cons(item, acc)
    return SomeList(acc)
