"""Interactive REPL for gexp expressions, powered by prompt_toolkit."""

from __future__ import annotations

import re
import sys
import traceback
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.shortcuts import clear

from .runner import render_result, run
from .types import GexpError
from .utils import debug_py_trace_enabled, set_debug_py_trace

# Zero-width and invisible characters to strip from input.
_INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\ufeff\u00a0\r]")

# Slash commands: name => (description, argument_hint).
_SLASH_CMDS = {
    "/clear": ("Clear the terminal screen", ""),
    "/py-traceback": ("Toggle Python traceback on errors", "[on|off]"),
    "/typed": ("Typecheck, then evaluate with the typed evaluator", ""),
    "/untyped": ("Evaluate with the untyped evaluator", ""),
}


class _SlashCompleter(Completer):
    """Autocomplete slash commands on the prompt."""

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        if not text.startswith("/"):
            return

        for cmd, (desc, hint) in _SLASH_CMDS.items():
            if cmd.startswith(text):
                yield Completion(
                    cmd,
                    start_position=-len(text),
                    display_meta=desc,
                )


def _handle_slash(line: str, mode_box: list[bool]) -> bool:
    """Handle slash commands. Returns True if the line was a command."""
    stripped = line.strip()
    if not stripped.startswith("/"):
        return False

    parts = stripped.split(None, 1)
    cmd = parts[0]
    arg = parts[1] if len(parts) > 1 else ""

    if cmd == "/clear":
        clear()
        return True

    if cmd == "/py-traceback":
        if arg.lower() in ("on", "1", "true", "yes"):
            set_debug_py_trace(True)
        elif arg.lower() in ("off", "0", "false", "no"):
            set_debug_py_trace(False)
        elif arg == "":
            set_debug_py_trace(not debug_py_trace_enabled())
        else:
            print("Usage: /py-traceback [on|off]", file=sys.stderr)
            return True

        state = "on" if debug_py_trace_enabled() else "off"
        print(f"Python traceback: {state}")
        return True

    if cmd in ("/typed", "/untyped"):
        mode_box[0] = cmd == "/typed"
        print(f"Mode: {cmd[1:]}")
        return True

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return True


def _normalize(text: str) -> str:
    """Strip invisible characters from input."""
    return _INVISIBLE_RE.sub("", text)


def _eval_line(text: str, typed: bool) -> None:
    try:
        result = run(text, typed=typed)
    except GexpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if debug_py_trace_enabled():
            print("\nPython traceback:", file=sys.stderr)
            print(
                "".join(traceback.format_tb(exc.__traceback__)),
                file=sys.stderr,
                end="",
            )
        return

    print(render_result(result))


def repl(typed: bool = False) -> None:
    """Interactive read-eval-print loop with prompt_toolkit."""
    # Use a mutable box so /typed and /untyped can flip the mode.
    mode_box: list[bool] = [typed]

    session: PromptSession[str] = PromptSession(
        history=InMemoryHistory(),
        completer=_SlashCompleter(),
        complete_while_typing=True,
    )

    print("gexp repl, Ctrl-D to exit, / for commands")

    while True:
        try:
            text = session.prompt("typed> " if mode_box[0] else ">>> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("KeyboardInterrupt")
            continue

        text = _normalize(text)
        if not text.strip():
            continue

        if _handle_slash(text, mode_box):
            continue

        _eval_line(text, mode_box[0])


if __name__ == "__main__":
    repl()
