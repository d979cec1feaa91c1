from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union
from typing_extensions import TypeAlias, TypeGuard

# ---------- Value Model ----------

@dataclass
class LoxNil:
    def __repr__(self) -> str:
        return "nil"

@dataclass
class LoxBool:
    value: bool
    def __repr__(self) -> str:
        return "true" if self.value else "false"

@dataclass
class LoxNumber:
    value: Union[int, float]
    def __repr__(self) -> str:
        return number_text(self.value)

@dataclass
class LoxString:
    value: str
    def __repr__(self) -> str:
        return f'"{self.value}"'

LoxValue: TypeAlias = LoxNil | LoxBool | LoxNumber | LoxString

_INT_CHUNK_DIGITS = 1000
_INT_CHUNK = 10 ** _INT_CHUNK_DIGITS

def number_text(num: Union[int, float]) -> str:
    """Decimal text for a number; big integers are converted a chunk at a time
    so the host's int-to-str digit limit never applies."""
    if isinstance(num, float) or -_INT_CHUNK < num < _INT_CHUNK:
        return str(num)

    sign = "-" if num < 0 else ""
    rest = abs(num)
    chunks = []

    while rest >= _INT_CHUNK:
        rest, low = divmod(rest, _INT_CHUNK)
        chunks.append(str(low).zfill(_INT_CHUNK_DIGITS))
    chunks.append(str(rest))

    return sign + "".join(reversed(chunks))

class Frame:
    """One lexical scope; lookups and assignments walk out through `parent`."""

    def __init__(self, parent: Optional['Frame']=None):
        self.parent = parent
        self.vars: Dict[str, LoxValue] = {}

    @property
    def depth(self) -> int:
        depth = 0
        cur = self.parent

        while cur is not None:
            depth += 1
            cur = cur.parent

        return depth

    def define(self, name: str, val: LoxValue) -> None:
        self.vars[str(name)] = val

    def get(self, name: str) -> LoxValue:
        key = str(name)
        cur: Optional[Frame] = self

        while cur is not None:
            if key in cur.vars:
                return cur.vars[key]
            cur = cur.parent

        raise LoxUndefinedVariable(name)

    def assign(self, name: str, val: LoxValue) -> LoxValue:
        key = str(name)
        cur: Optional[Frame] = self

        while cur is not None:
            if key in cur.vars:
                cur.vars[key] = val
                return val
            cur = cur.parent

        raise LoxUndefinedVariable(name)

    def __repr__(self) -> str:
        return f"Frame(depth={self.depth}, vars={self.vars!r})"

# ---------- Exceptions ----------

class LoxRuntimeError(Exception):
    token: Optional[Any]
    message: str

    def __init__(self, token: Optional[Any], message: str):
        super().__init__(message)
        self.token = token
        self.message = message

    def __str__(self) -> str:
        msg = super().__str__()

        line = getattr(self.token, "line", None)
        col = getattr(self.token, "column", None)

        if line is None:
            return msg

        if col is None:
            return f"{msg} (line {line})"

        return f"{msg} (line {line}, col {col})"

class LoxTypeError(LoxRuntimeError):
    pass

class LoxOverflowError(LoxRuntimeError):
    pass

class LoxDivisionByZero(LoxRuntimeError):
    def __init__(self, token: Optional[Any], message: str = "Dividing by zero is not allowed"):
        super().__init__(token, message)

class LoxUndefinedVariable(LoxRuntimeError):
    def __init__(self, name: Any):
        super().__init__(name, f"Undefined variable '{name}'")
        self.name = str(name)

_LOX_VALUE_TYPES: Tuple[type, ...] = (
    LoxNil,
    LoxBool,
    LoxNumber,
    LoxString,
)

def is_lox_value(value: Any) -> TypeGuard[LoxValue]:
    return isinstance(value, _LOX_VALUE_TYPES)
