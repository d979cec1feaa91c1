from __future__ import annotations

import logging
from typing import Iterable, Optional, TextIO

from .evaluator import Interpreter
from .runtime import Frame, LoxRuntimeError
from .tree import Stmt

logger = logging.getLogger(__name__)

def report_runtime_error(err: LoxRuntimeError, stream: TextIO) -> None:
    """Write one `<ErrorClass>: <message> (line L, col C)` line to `stream`."""
    print(f"{type(err).__name__}: {err}", file=stream)

def run(statements: Iterable[Stmt], stdout: Optional[TextIO]=None, stderr: Optional[TextIO]=None,
        globals_frame: Optional[Frame]=None) -> Interpreter:
    """Interpret one statement sequence on a fresh interpreter and hand it back.

    Runtime errors halt the sequence and are reported on `stderr`; inspect
    `had_runtime_error` on the result to tell the two outcomes apart.
    """
    interpreter = Interpreter(stdout=stdout, stderr=stderr, globals_frame=globals_frame)
    completed = interpreter.interpret(list(statements))

    if not completed:
        logger.debug("statement sequence halted by a runtime error")

    return interpreter
