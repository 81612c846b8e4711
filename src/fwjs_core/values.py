"""Value types for FWJS Core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .errors import FWJSTypeError

if TYPE_CHECKING:
    from .environment import Environment
    from .nodes import Expression


_INT_BITS = 64
_INT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)


def wrap_int(n: int) -> int:
    """Wrap *n* to a signed 64-bit integer."""
    n &= _INT_MASK
    return n - (1 << _INT_BITS) if n & _INT_SIGN else n


@dataclass(frozen=True)
class VInt:
    value: int

    def __post_init__(self) -> None:
        if self.value != wrap_int(self.value):
            raise FWJSTypeError(f"integer {self.value} is outside the 64-bit range")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, eq=False)
class VClosure:
    params: tuple[str, ...]
    body: "Expression"
    env: "Environment"   # captured by reference, never copied

    def __str__(self) -> str:
        return f"function({', '.join(self.params)})"

    def __repr__(self) -> str:
        return f"VClosure(params={self.params!r}, env_id={id(self.env):#x})"


class _Null:
    """Singleton for the language's null value."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __str__(self) -> str:
        return "null"


class _Undefined:
    """Singleton for references no frame binds."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "undefined"


Null = _Null()
Undefined = _Undefined()

Value = Union[VInt, VBool, VClosure, _Null, _Undefined]


# ---------------------------------------------------------------------------
# Inspection / conversion
# ---------------------------------------------------------------------------

def type_name(value: Value) -> str:
    if isinstance(value, VInt):
        return "int"
    if isinstance(value, VBool):
        return "bool"
    if isinstance(value, VClosure):
        return "function"
    if isinstance(value, _Null):
        return "null"
    if isinstance(value, _Undefined):
        return "undefined"
    return type(value).__name__


def expect_int(value: Value, what: str = "operand") -> int:
    """Unwrap a VInt or raise FWJSTypeError naming *what* was wrong."""
    if isinstance(value, VInt):
        return value.value
    raise FWJSTypeError(f"{what} must be int, not {type_name(value)}")


def expect_bool(value: Value, what: str = "condition") -> bool:
    """Unwrap a VBool or raise FWJSTypeError naming *what* was wrong."""
    if isinstance(value, VBool):
        return value.value
    raise FWJSTypeError(f"{what} must be bool, not {type_name(value)}")


def from_python(obj: object) -> Value:
    """Convert a plain Python ``int``, ``bool`` or ``None`` to a Value.

    ``bool`` is checked before ``int`` since it is a subclass of it.
    """
    if obj is None:
        return Null
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, int):
        return VInt(obj)
    raise FWJSTypeError(f"cannot convert {type(obj).__name__} to a value")
