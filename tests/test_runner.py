from __future__ import annotations

import io
import logging

import pytest

from gexp import runner
from gexp.runner import main, render_result
from gexp.types import BoolValue, IntValue
from gexp.utils import configure_logging, debug_py_trace_enabled, log_level

from tests.support.harness import GexpParseError, run_program


@pytest.mark.parametrize(
    "result, expected",
    [
        pytest.param(IntValue(4), "4", id="int-value"),
        pytest.param(BoolValue(False), "false", id="bool-value"),
        pytest.param(None, "ill-typed", id="absent"),
        pytest.param(True, "true", id="typed-bool"),
        pytest.param(-7, "-7", id="typed-int"),
    ],
)
def test_render_result(result, expected: str) -> None:
    assert render_result(result) == expected


def test_main_prints_untyped_result(capsys: pytest.CaptureFixture[str]) -> None:
    main(["1 + 3"])

    assert capsys.readouterr().out == "4\n"


def test_main_prints_absent_result(capsys: pytest.CaptureFixture[str]) -> None:
    main(["true + 1"])

    assert capsys.readouterr().out == "ill-typed\n"


def test_main_typed_error_exits_nonzero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--typed", "if true then 1 else false"])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Error: Expression is ill-typed")
    assert "Python traceback" not in captured.err


def test_main_traceback_when_enabled(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("GEXP_DEBUG_PY_TRACE", "1")

    with pytest.raises(SystemExit):
        main(["1 +"])

    assert "Python traceback" in capsys.readouterr().err


def test_main_reads_file(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "prog.gexp"
    src.write_text("if iszero 0 then false else true\n", encoding="utf-8")

    main(["--typed", str(src)])

    assert capsys.readouterr().out == "false\n"


def test_main_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("2 + 2"))

    main(["-"])

    assert capsys.readouterr().out == "4\n"


def test_main_rejects_extra_arguments() -> None:
    with pytest.raises(SystemExit):
        main(["1", "2"])


def test_main_grammar_flag_requires_path() -> None:
    with pytest.raises(SystemExit):
        main(["--grammar"])


def test_main_repl_flag_dispatches(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr("gexp.repl.repl", lambda typed=False: calls.append(typed))

    main(["--typed", "--repl"])

    assert calls == [True]


def test_main_repl_flag_order_does_not_matter(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr("gexp.repl.repl", lambda typed=False: calls.append(typed))

    main(["--repl", "--typed"])
    main(["--repl"])

    assert calls == [True, False]


def test_run_surfaces_parse_errors() -> None:
    with pytest.raises(GexpParseError):
        run_program("if then")


def test_run_logs_results(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger=runner.__name__):
        run_program("1 + 1", typed=True)

    assert any("typed result" in rec.getMessage() for rec in caplog.records)


def test_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    assert not debug_py_trace_enabled()
    assert log_level() is None

    monkeypatch.setenv("GEXP_DEBUG_PY_TRACE", "yes")
    monkeypatch.setenv("GEXP_LOG_LEVEL", "debug")

    assert debug_py_trace_enabled()
    assert log_level() == logging.DEBUG

    monkeypatch.setenv("GEXP_LOG_LEVEL", "chatty")
    assert log_level() is None
    configure_logging()


def test_package_lists_every_submodule() -> None:
    import importlib
    from pathlib import Path

    import gexp

    on_disk = {p.stem for p in Path(gexp.__file__).parent.glob("*.py") if p.stem != "__init__"}

    assert set(gexp.__all__) == on_disk
    for name in gexp.__all__:
        importlib.import_module(f"gexp.{name}")
