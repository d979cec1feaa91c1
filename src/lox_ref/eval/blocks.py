from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator

from typing_extensions import Protocol

from ..runtime import Frame, LoxValue
from ..tree import Block, Expr, Stmt

logger = logging.getLogger(__name__)

class Executor(Protocol):
    """Anything holding the active frame that can evaluate and execute nodes."""
    frame: Frame

    def evaluate(self, expr: Expr) -> LoxValue: ...

    def execute(self, stmt: Stmt) -> None: ...

@contextmanager
def scope(owner: Executor, frame: Frame) -> Iterator[Frame]:
    """Make `frame` active for the duration; the previous frame comes back on every exit."""
    previous = owner.frame
    owner.frame = frame
    logger.debug("enter scope depth=%d", frame.depth)

    try:
        yield frame
    finally:
        owner.frame = previous
        logger.debug("leave scope, back to depth=%d", previous.depth)

def execute_block(statements: Iterable[Stmt], frame: Frame, owner: Executor) -> None:
    with scope(owner, frame):
        for stmt in statements:
            owner.execute(stmt)

def eval_block(n: Block, owner: Executor) -> None:
    execute_block(n.statements, Frame(parent=owner.frame), owner)
