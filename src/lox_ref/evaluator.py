from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Iterable, Optional, TextIO

from .runtime import (
    Frame,
    LoxNil,
    LoxRuntimeError,
    LoxValue,
    lox_value,
)
from .tree import (
    Assignment,
    Binary,
    Block,
    Expr,
    ExpressionStmt,
    For,
    Grouping,
    IfStmt,
    Literal,
    Logical,
    PrintStmt,
    Stmt,
    Ternary,
    Unary,
    VarDecl,
    Variable,
    While,
)
from .utils import stringify

from .eval.blocks import eval_block
from .eval.expr import (
    eval_assignment,
    eval_binary,
    eval_logical,
    eval_ternary,
    eval_unary,
)
from .eval.loops import eval_for_stmt, eval_if_stmt, eval_while_stmt

logger = logging.getLogger(__name__)

# ---------------- Expressions ----------------

def eval_expr(n: Expr, frame: Frame) -> LoxValue:
    """Evaluate an expression against `frame`; expressions never switch scopes."""
    match n:
        case Literal(value=value):
            return lox_value(value)
        case Grouping(expression=inner):
            return eval_expr(inner, frame)
        case Variable(name=name):
            return frame.get(name)

    handler = _EXPR_DISPATCH.get(type(n))
    if handler is not None:
        return handler(n, frame, eval_expr)

    raise LoxRuntimeError(None, f"Unsupported expression node {type(n).__name__}")

_EXPR_DISPATCH: Dict[type, Callable[..., LoxValue]] = {
    Unary: eval_unary,
    Binary: eval_binary,
    Logical: eval_logical,
    Ternary: eval_ternary,
    Assignment: eval_assignment,
}

# ---------------- Statements ----------------

class Interpreter:
    """Executes statements against one live frame chain.

    `frame` is the active scope. Blocks and `for` loops swap it for a child
    frame and always restore it on the way out, errors included.
    """

    def __init__(self, stdout: Optional[TextIO]=None, stderr: Optional[TextIO]=None, globals_frame: Optional[Frame]=None):
        self.globals = globals_frame if globals_frame is not None else Frame()
        self.frame = self.globals
        self.stdout = stdout
        self.stderr = stderr
        self.had_runtime_error = False

    def evaluate(self, expr: Expr) -> LoxValue:
        return eval_expr(expr, self.frame)

    def execute(self, stmt: Stmt) -> None:
        match stmt:
            case ExpressionStmt(expression=expr):
                self.evaluate(expr)
            case PrintStmt(expression=expr):
                value = self.evaluate(expr)
                print(stringify(value), file=self.stdout if self.stdout is not None else sys.stdout)
            case VarDecl(name=name, initializer=init):
                value = self.evaluate(init) if init is not None else LoxNil()
                self.frame.define(name, value)
            case Block():
                eval_block(stmt, self)
            case IfStmt():
                eval_if_stmt(stmt, self)
            case While():
                eval_while_stmt(stmt, self)
            case For():
                eval_for_stmt(stmt, self)
            case _:
                raise LoxRuntimeError(None, f"Unsupported statement node {type(stmt).__name__}")

    def interpret(self, statements: Iterable[Stmt]) -> bool:
        """Run a statement sequence, stopping at the first runtime error.

        The error is reported on the error stream instead of propagating, and
        the globals survive for the next call. Returns False if the sequence
        was cut short.
        """
        from .runner import report_runtime_error  # local import to avoid cycle

        try:
            for stmt in statements:
                self.execute(stmt)
        except LoxRuntimeError as err:
            self.had_runtime_error = True
            logger.debug("runtime error at %r: %s", err.token, err.message)
            report_runtime_error(err, self.stderr if self.stderr is not None else sys.stderr)
            return False

        return True
