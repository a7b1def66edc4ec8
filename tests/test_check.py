from __future__ import annotations

from itertools import product
from typing import List

import pytest

from gexp.check import forget, typecheck
from gexp.gexp import GAdd, GBool, GIf, GInt, GIsZero
from gexp.geval import gevaluate
from gexp.oeval import oevaluate
from gexp.oexp import OAdd, OBool, OExp, OIf, OInt, OIsZero
from gexp.types import unwrap

ATOMS: List[OExp] = [OInt(0), OInt(1), OInt(-1), OBool(True), OBool(False)]


def _grow(pool: List[OExp], limit: int) -> List[OExp]:
    head = pool[:limit]
    grown: List[OExp] = list(pool)
    grown += [OAdd(a, b) for a, b in product(head, repeat=2)]
    grown += [OIsZero(a) for a in head]
    grown += [OIf(c, t, e) for c, t, e in product(head, repeat=3)]
    return grown


DEPTH_ONE = _grow(ATOMS, len(ATOMS))
# keep the second level bounded; the first level already covers every shape
DEPTH_TWO = _grow(DEPTH_ONE[::7], 9)


def test_typecheck_builds_typed_tree() -> None:
    expr = OIf(OIsZero(OAdd(OInt(3), OInt(-3))), OInt(3), OInt(4))

    assert typecheck(expr) == GIf(GIsZero(GAdd(GInt(3), GInt(-3))), GInt(3), GInt(4))


@pytest.mark.parametrize(
    "expr",
    [
        pytest.param(OAdd(OBool(True), OInt(1)), id="add-bool"),
        pytest.param(OIf(OInt(1), OBool(True), OInt(3)), id="int-guard"),
        pytest.param(OIf(OBool(True), OInt(1), OBool(True)), id="branch-mismatch"),
        pytest.param(OIsZero(OIsZero(OInt(0))), id="iszero-of-bool"),
        pytest.param(OInt(True), id="bool-smuggled-into-int"),
    ],
)
def test_typecheck_rejects(expr: OExp) -> None:
    assert typecheck(expr) is None


def test_forget_restores_shape() -> None:
    typed = GIf(GBool(False), GInt(1), GAdd(GInt(2), GInt(3)))

    assert forget(typed) == OIf(OBool(False), OInt(1), OAdd(OInt(2), OInt(3)))


@pytest.mark.parametrize("expr", DEPTH_ONE + DEPTH_TWO)
def test_typed_and_untyped_agree(expr: OExp) -> None:
    typed = typecheck(expr)
    if typed is None:
        return

    untyped = oevaluate(forget(typed))

    assert forget(typed) == expr
    assert untyped is not None
    value = gevaluate(typed)
    assert unwrap(untyped) == value
    assert type(unwrap(untyped)) is type(value)


def test_every_well_typed_tree_evaluates() -> None:
    accepted = [e for e in DEPTH_ONE + DEPTH_TWO if typecheck(e) is not None]

    assert accepted
    assert all(oevaluate(e) is not None for e in accepted)
