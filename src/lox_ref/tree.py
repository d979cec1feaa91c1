"""AST node classes consumed by the evaluator.

Nodes are produced by an external parser. Operators and variable names are
carried as Lark tokens so runtime errors can point back at source positions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

from lark import Token
from typing_extensions import TypeAlias

OpToken: TypeAlias = Union[Token, str]
NameToken: TypeAlias = Union[Token, str]


class Expr:
    """Base class for expression nodes."""
    __slots__ = ()


class Stmt:
    """Base class for statement nodes."""
    __slots__ = ()

# ---------------- Expressions ----------------

@dataclass(frozen=True)
class Literal(Expr):
    value: Any

@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

@dataclass(frozen=True)
class Unary(Expr):
    operator: OpToken
    right: Expr

@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: OpToken
    right: Expr

@dataclass(frozen=True)
class Logical(Expr):
    left: Expr
    operator: OpToken
    right: Expr

@dataclass(frozen=True)
class Ternary(Expr):
    condition: Expr
    first: Expr
    second: Expr

@dataclass(frozen=True)
class Variable(Expr):
    name: NameToken

@dataclass(frozen=True)
class Assignment(Expr):
    name: NameToken
    expression: Expr

# ---------------- Statements ----------------

@dataclass(frozen=True)
class ExpressionStmt(Stmt):
    expression: Expr

@dataclass(frozen=True)
class PrintStmt(Stmt):
    expression: Expr

@dataclass(frozen=True)
class VarDecl(Stmt):
    name: NameToken
    initializer: Optional[Expr] = None

@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # parsers hand over lists; keep the node hashable
        object.__setattr__(self, "statements", tuple(self.statements))

@dataclass(frozen=True)
class IfStmt(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt] = None

@dataclass(frozen=True)
class While(Stmt):
    condition: Expr
    body: Stmt

@dataclass(frozen=True)
class For(Stmt):
    initializer: Optional[Stmt]
    condition: Optional[Expr]
    increment: Optional[Expr]
    body: Stmt
