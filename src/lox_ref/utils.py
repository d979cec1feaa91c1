from __future__ import annotations

from .types import (
    LoxValue,
    LoxNil,
    LoxBool,
    LoxNumber,
    LoxString,
    number_text,
)


def lox_equals(lhs: LoxValue, rhs: LoxValue) -> bool:
    """Equal iff both sides carry the same tag and the same content."""
    match (lhs, rhs):
        case (LoxNil(), LoxNil()):
            return True
        case (LoxNumber(value=a), LoxNumber(value=b)):
            return a == b
        case (LoxString(value=a), LoxString(value=b)):
            return a == b
        case (LoxBool(value=a), LoxBool(value=b)):
            return a == b
        case _:
            return False


def stringify(value: LoxValue) -> str:
    match value:
        case LoxNil():
            return "nil"
        case LoxBool(value=b):
            return "true" if b else "false"
        case LoxNumber(value=num):
            return number_text(num)
        case LoxString(value=s):
            return s
        case _:
            return str(value)
