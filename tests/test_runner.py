from __future__ import annotations

import io
import logging

import pytest

from lox_ref.runner import report_runtime_error, run
from lox_ref.tree import Stmt
from tests.support.harness import (
    Binary,
    Block,
    ExpressionStmt,
    LoxTypeError,
    PrintStmt,
    assign,
    binary,
    declare,
    lit,
    op,
    run_program,
    show,
    var,
)


class _Unknown(Stmt):
    pass


def test_end_to_end_addition() -> None:
    result = run_program([declare("x", 10), show(binary(var("x"), "+", 5))])

    assert result.completed
    assert result.stdout == "15\n"


def test_print_nil() -> None:
    result = run_program([PrintStmt(lit(None))])
    assert result.stdout == "nil\n"


@pytest.mark.parametrize(
    "value, text",
    [
        pytest.param(True, "true", id="true"),
        pytest.param(False, "false", id="false"),
        pytest.param(-3, "-3", id="negative"),
        pytest.param(2.5, "2.5", id="float"),
        pytest.param("verbatim text", "verbatim text", id="string"),
        pytest.param("", "", id="empty-string"),
    ],
)
def test_print_textual_forms(value, text: str) -> None:
    assert run_program([show(value)]).lines == [text]


def test_print_evaluates_once() -> None:
    result = run_program([
        declare("n", 0),
        show(assign("n", binary(var("n"), "+", 1))),
        show(var("n")),
    ])

    assert result.lines == ["1", "1"]


def test_runtime_error_halts_remaining_statements() -> None:
    result = run_program([
        show("before"),
        show(binary(1, "+", "a")),
        show("after"),
    ])

    assert not result.completed
    assert result.interpreter.had_runtime_error
    assert result.lines == ["before"]
    assert result.stderr.startswith("LoxTypeError: Cannot add string to number")


def test_error_report_includes_position() -> None:
    stream = io.StringIO()
    err = LoxTypeError(op("-", line=2, column=5), "Operands must be a number")

    report_runtime_error(err, stream)

    assert stream.getvalue() == "LoxTypeError: Operands must be a number (line 2, col 5)\n"


def test_undefined_variable_report() -> None:
    result = run_program([show(var("nope"))])
    assert result.stderr == "LoxUndefinedVariable: Undefined variable 'nope' (line 1, col 1)\n"


def test_run_uses_given_streams() -> None:
    out = io.StringIO()
    err = io.StringIO()

    interpreter = run(
        [declare("greeting", "hi"), show(var("greeting")), show(binary(1, "/", 0))],
        stdout=out,
        stderr=err,
    )

    assert out.getvalue() == "hi\n"
    assert err.getvalue().startswith("LoxDivisionByZero: Dividing by zero is not allowed")
    assert interpreter.had_runtime_error


def test_run_shares_globals_between_sessions() -> None:
    first = run([declare("count", 1)], stdout=io.StringIO())
    out = io.StringIO()

    run([ExpressionStmt(assign("count", 2)), show(var("count"))], stdout=out, globals_frame=first.globals)

    assert out.getvalue() == "2\n"
    assert first.globals.get("count").value == 2


def test_run_defaults_to_sys_streams(capsys) -> None:
    run([show("to stdout"), show(var("missing"))])

    captured = capsys.readouterr()
    assert captured.out == "to stdout\n"
    assert "Undefined variable 'missing'" in captured.err


def test_runtime_error_is_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="lox_ref"):
        run_program([Block([show(binary(1, "/", 0))])])

    messages = [record.getMessage() for record in caplog.records]
    assert any("runtime error" in message for message in messages)
    assert any("enter scope" in message for message in messages)


def test_unknown_statement_node_is_reported() -> None:
    result = run_program([ExpressionStmt(lit(1)), _Unknown()])

    assert not result.completed
    assert "Unsupported statement node _Unknown" in result.stderr


class _EmptyLookingStream(io.StringIO):
    """A stream whose truthiness is False, like any sized buffer with no items."""

    def __len__(self) -> int:
        return 0


def test_falsy_streams_are_still_used(capsys) -> None:
    out = _EmptyLookingStream()
    err = _EmptyLookingStream()

    run([show("kept"), show(var("missing"))], stdout=out, stderr=err)

    captured = capsys.readouterr()
    assert out.getvalue() == "kept\n"
    assert "Undefined variable 'missing'" in err.getvalue()
    assert captured.out == ""
    assert captured.err == ""


def test_huge_integers_print_in_full() -> None:
    # 3 ** (2 ** 14) has 7818 digits, past the host's default int-to-str limit
    squarings = [ExpressionStmt(assign("x", binary(var("x"), "*", var("x")))) for _ in range(14)]
    result = run_program([declare("x", 3), *squarings, show(var("x"))])

    assert result.completed, result.stderr
    (line,) = result.lines
    expected = 3 ** (2 ** 14)
    assert len(line) == 7818
    assert line.isdigit()
    assert line[-20:] == str(expected % 10 ** 20).zfill(20)
    assert line[-1010:-990] == str((expected // 10 ** 990) % 10 ** 20).zfill(20)


def test_numeric_overflow_is_a_runtime_error() -> None:
    plus = op("+", line=3, column=8)
    result = run_program([
        show(Binary(lit(10 ** 400), plus, lit(0.5))),
        show("after"),
    ])

    assert not result.completed
    assert result.interpreter.had_runtime_error
    assert result.lines == []
    assert result.stderr.startswith("LoxOverflowError: Numeric result out of range")
    assert result.stderr.endswith("(line 3, col 8)\n")
