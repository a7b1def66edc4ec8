"""Typed and untyped expression evaluators plus emptiness-flagged lists."""

__all__ = [
    "types",
    "oexp",
    "oeval",
    "gexp",
    "geval",
    "check",
    "flagged",
    "parser",
    "runner",
    "repl",
    "utils",
]
