from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional, Union

from .check import typecheck
from .geval import gevaluate
from .oeval import oevaluate
from .parser import parse
from .types import BoolValue, GexpError, GexpTypeError, IntValue, Value, render_value
from .utils import configure_logging, debug_py_trace_enabled

logger = logging.getLogger(__name__)

RunResult = Union[Optional[Value], int, bool]

def run(src: str, typed: bool=False, grammar_path: Optional[str]=None) -> RunResult:
    """Parse ``src`` and evaluate it.

    Untyped mode returns whatever ``oevaluate`` returns, ``None`` included.
    Typed mode has no absent result: an expression that does not typecheck
    raises ``GexpTypeError`` before evaluation starts, and the value comes back
    as a plain ``int`` or ``bool``.
    """
    expr = parse(src, grammar_path=grammar_path)

    if not typed:
        result = oevaluate(expr)
        logger.debug("untyped result for %r: %r", expr, result)
        return result

    checked = typecheck(expr)
    if checked is None:
        raise GexpTypeError("Expression is ill-typed")

    value = gevaluate(checked)
    logger.debug("typed result for %r: %r", checked, value)
    return value

def render_result(result: RunResult) -> str:
    if result is None or isinstance(result, (IntValue, BoolValue)):
        return render_value(result)

    if isinstance(result, bool):
        return "true" if result else "false"

    return str(result)

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing path => read file contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    if candidate.exists():
        return candidate.read_text(encoding="utf-8")

    return arg

def main(argv: Optional[list[str]]=None) -> None:
    configure_logging()

    typed = False
    start_repl = False
    grammar_path = None
    arg = None
    it = iter(sys.argv[1:] if argv is None else argv)

    for token in it:
        if token == "--typed":
            typed = True
            continue

        if token == "--repl":
            start_repl = True
            continue

        if token.startswith("--grammar="):
            grammar_path = token.split("=", 1)[1]
            continue

        if token == "--grammar":
            try:
                grammar_path = next(it)
            except StopIteration:
                raise SystemExit("--grammar flag requires a path") from None
            continue

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    if start_repl:
        from .repl import repl  # prompt_toolkit only needed here
        repl(typed=typed)
        return

    source = _load_source(arg or "-")

    try:
        result = run(source, typed=typed, grammar_path=grammar_path)
    except GexpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if debug_py_trace_enabled():
            print("\nPython traceback:", file=sys.stderr)
            print("".join(traceback.format_tb(exc.__traceback__)), file=sys.stderr, end="")
        raise SystemExit(1) from None

    print(render_result(result))

if __name__ == "__main__":
    main()
