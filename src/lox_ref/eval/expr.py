from __future__ import annotations

from typing import Callable

from lark import Token

from ..runtime import (
    Frame,
    LoxBool,
    LoxNumber,
    LoxString,
    LoxValue,
    LoxDivisionByZero,
    LoxOverflowError,
    LoxRuntimeError,
    LoxTypeError,
)
from ..tree import Assignment, Binary, Expr, Logical, OpToken, Ternary, Unary
from ..utils import lox_equals, stringify
from .common import is_zero, require_number, require_number_or_string
from .helpers import is_truthy

EvalFunc = Callable[[Expr, Frame], LoxValue]

def eval_unary(n: Unary, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    op = n.operator
    rhs = eval_func(n.right, frame)

    match op:
        case Token(type='MINUS') | '-':
            require_number(op, rhs)
            return LoxNumber(-rhs.value)
        case Token(type='BANG') | '!':
            return LoxBool(not is_truthy(rhs))
        case _:
            raise LoxRuntimeError(op, f"Unsupported unary op {op}")

def eval_binary(n: Binary, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    lhs = eval_func(n.left, frame)
    rhs = eval_func(n.right, frame)

    return apply_binary_operator(n.operator, lhs, rhs)

def eval_logical(n: Logical, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    op = n.operator
    lhs = eval_func(n.left, frame)

    match op:
        case Token(type='OR') | 'or':
            if is_truthy(lhs):
                return lhs
        case Token(type='AND') | 'and':
            if not is_truthy(lhs):
                return lhs
        case _:
            raise LoxRuntimeError(op, f"Unknown logical operator {op}")

    return eval_func(n.right, frame)

def eval_ternary(n: Ternary, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    if is_truthy(eval_func(n.condition, frame)):
        return eval_func(n.first, frame)

    return eval_func(n.second, frame)

def eval_assignment(n: Assignment, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    value = eval_func(n.expression, frame)

    return frame.assign(n.name, value)

def apply_binary_operator(op: OpToken, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    try:
        return _apply_binary(op, lhs, rhs)
    except (OverflowError, ValueError) as exc:
        raise LoxOverflowError(op, f"Numeric result out of range: {exc}") from exc

def _apply_binary(op: OpToken, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    match op:
        case Token(type='MINUS' | 'MINUS_EQUAL') | '-' | '-=':
            require_number(op, lhs, rhs)
            return LoxNumber(lhs.value - rhs.value)
        case Token(type='SLASH') | '/':
            require_number(op, lhs, rhs)

            if is_zero(rhs):
                raise LoxDivisionByZero(op)
            return LoxNumber(_divide(lhs.value, rhs.value))
        case Token(type='STAR') | '*':
            require_number(op, lhs, rhs)
            return LoxNumber(lhs.value * rhs.value)
        case Token(type='PLUS' | 'PLUS_EQUAL') | '+' | '+=':
            return _add(op, lhs, rhs)
        case Token(type='GREATER') | '>':
            require_number(op, lhs, rhs)
            return LoxBool(lhs.value > rhs.value)
        case Token(type='GREATER_EQUAL') | '>=':
            require_number(op, lhs, rhs)
            return LoxBool(lhs.value >= rhs.value)
        case Token(type='LESS') | '<':
            require_number(op, lhs, rhs)
            return LoxBool(lhs.value < rhs.value)
        case Token(type='LESS_EQUAL') | '<=':
            require_number(op, lhs, rhs)
            return LoxBool(lhs.value <= rhs.value)
        case Token(type='EQUAL_EQUAL') | '==':
            return LoxBool(lox_equals(lhs, rhs))
        case Token(type='BANG_EQUAL') | '!=':
            return LoxBool(not lox_equals(lhs, rhs))

    raise LoxRuntimeError(op, f"Unknown operator {op}")

def _add(op: OpToken, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    require_number_or_string(op, lhs, rhs)

    match (lhs, rhs):
        case (LoxString(value=s), LoxNumber()):
            return LoxString(s + stringify(rhs))
        case (LoxNumber(), LoxString()):
            raise LoxTypeError(op, "Cannot add string to number")
        case (LoxNumber(value=a), LoxNumber(value=b)):
            return LoxNumber(a + b)
        case (LoxString(value=a), LoxString(value=b)):
            return LoxString(a + b)

    raise LoxTypeError(op, "Operands must be a number or string")

def _divide(a: int | float, b: int | float) -> int | float:
    # integers never promote to floats
    if isinstance(a, int) and isinstance(b, int):
        return a // b

    return a / b
