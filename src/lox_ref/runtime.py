from __future__ import annotations

import logging
from typing import Any

from .types import (
    LoxNil, LoxBool, LoxNumber, LoxString,
    LoxValue, Frame,
    LoxRuntimeError, LoxTypeError, LoxOverflowError, LoxDivisionByZero, LoxUndefinedVariable,
    is_lox_value, number_text,
)

__all__ = [
    "LoxNil", "LoxBool", "LoxNumber", "LoxString", "LoxValue", "Frame",
    "LoxRuntimeError", "LoxTypeError", "LoxOverflowError", "LoxDivisionByZero",
    "LoxUndefinedVariable", "is_lox_value", "lox_value", "number_text",
]

# silent unless the host configures logging
logging.getLogger("lox_ref").addHandler(logging.NullHandler())

def lox_value(value: Any) -> LoxValue:
    """Coerce a host literal (as a parser would embed it) into a runtime value."""
    if is_lox_value(value):
        return value

    match value:
        case None:
            return LoxNil()
        case bool():
            return LoxBool(value)
        case int() | float():
            return LoxNumber(value)
        case str():
            return LoxString(value)

    raise LoxTypeError(None, f"Unsupported literal type {type(value).__name__}")
