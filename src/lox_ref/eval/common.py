from __future__ import annotations

from ..runtime import LoxNumber, LoxString, LoxTypeError, LoxValue
from ..tree import OpToken

def require_number(op: OpToken, *operands: LoxValue) -> None:
    if not all(isinstance(value, LoxNumber) for value in operands):
        message = "Operand must be a number" if len(operands) == 1 else "Operands must be a number"
        raise LoxTypeError(op, message)

def require_number_or_string(op: OpToken, *operands: LoxValue) -> None:
    if not all(isinstance(value, (LoxNumber, LoxString)) for value in operands):
        raise LoxTypeError(op, "Operands must be a number or string")

def is_zero(value: LoxValue) -> bool:
    return isinstance(value, LoxNumber) and value.value == 0
