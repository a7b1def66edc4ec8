from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from lark import Lark, Token, Transformer, UnexpectedInput, v_args

from .oexp import OAdd, OBool, OExp, OIf, OInt, OIsZero
from .types import GexpParseError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).resolve().with_name("grammar.lark")

@v_args(inline=True)
class ToOExp(Transformer):
    """Turn the lark parse tree into ``OExp`` nodes, bottom-up."""

    def int_lit(self, tok: Token) -> OInt:
        return OInt(int(tok))

    def true_lit(self) -> OBool:
        return OBool(True)

    def false_lit(self) -> OBool:
        return OBool(False)

    def add(self, lhs: OExp, rhs: OExp) -> OAdd:
        return OAdd(lhs, rhs)

    def iszero(self, operand: OExp) -> OIsZero:
        return OIsZero(operand)

    def if_expr(self, cond: OExp, then: OExp, orelse: OExp) -> OIf:
        return OIf(cond, then, orelse)

def _read_grammar(grammar_path: Optional[str]) -> str:
    if grammar_path:
        p = Path(grammar_path)
        if p.exists():
            return p.read_text(encoding="utf-8")
        raise FileNotFoundError(f"grammar file not found: {grammar_path}")

    return GRAMMAR_PATH.read_text(encoding="utf-8")

@lru_cache(maxsize=None)
def make_parser(grammar_path: Optional[str]=None) -> Lark:
    logger.debug("building LALR parser from %s", grammar_path or GRAMMAR_PATH)
    return Lark(
        _read_grammar(grammar_path),
        parser="lalr",
        start="start",
        maybe_placeholders=False,
        propagate_positions=True,
    )

def parse(src: str, grammar_path: Optional[str]=None) -> OExp:
    parser = make_parser(grammar_path)

    try:
        tree = parser.parse(src)
    except UnexpectedInput as exc:
        line = getattr(exc, "line", None)
        column = getattr(exc, "column", None)
        # lark reports -1 or '?' for positions past the end of input
        if not isinstance(line, int) or line < 0:
            line = column = None
        elif not isinstance(column, int) or column < 0:
            column = None
        raise GexpParseError(_describe(exc), line=line, column=column) from exc

    expr = ToOExp().transform(tree)
    logger.debug("parsed %r", expr)
    return expr

def _describe(exc: UnexpectedInput) -> str:
    token = getattr(exc, "token", None)

    if token is not None and getattr(token, "type", None) == "$END":
        return "Unexpected end of input"

    if token is not None:
        return f"Unexpected token {str(token)!r}"

    char = getattr(exc, "char", None)
    if char is not None:
        return f"Unexpected character {char!r}"

    return "Syntax error"
