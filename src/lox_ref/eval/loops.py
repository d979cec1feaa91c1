from __future__ import annotations

from ..runtime import Frame
from ..tree import For, IfStmt, While
from .blocks import Executor, scope
from .helpers import is_truthy as _is_truthy

def eval_if_stmt(n: IfStmt, owner: Executor) -> None:
    if _is_truthy(owner.evaluate(n.condition)):
        owner.execute(n.then_branch)
    elif n.else_branch is not None:
        owner.execute(n.else_branch)

def eval_while_stmt(n: While, owner: Executor) -> None:
    while _is_truthy(owner.evaluate(n.condition)):
        owner.execute(n.body)

def eval_for_stmt(n: For, owner: Executor) -> None:
    """Desugared `for`: the initializer's bindings live in one scope wrapping the loop."""
    with scope(owner, Frame(parent=owner.frame)):
        if n.initializer is not None:
            owner.execute(n.initializer)

        while n.condition is None or _is_truthy(owner.evaluate(n.condition)):
            owner.execute(n.body)

            if n.increment is not None:
                owner.evaluate(n.increment)
