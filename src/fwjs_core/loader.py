"""Loader: JSON-compatible AST trees → Expression nodes.

Each node is a dict whose ``"type"`` names the node class; the other keys
follow that class's fields::

    {"type": "BinOp", "op": "+",
     "left": {"type": "VarRef", "name": "x"},
     "right": {"type": "Literal", "value": 1}}

A list in expression position is a right-nested ``Seq`` chain.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import FWJSTypeError, LoadError
from .nodes import (
    Assign,
    BinOp,
    Expression,
    FunctionApp,
    FunctionDecl,
    If,
    Literal,
    Op,
    Print,
    Seq,
    VarDecl,
    VarRef,
    While,
    seq,
)
from .values import from_python


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def load(obj: Any) -> Expression:
    """Build an Expression tree from decoded JSON data."""
    if isinstance(obj, list):
        return seq(*(load(item) for item in obj))
    if not isinstance(obj, dict):
        raise LoadError(f"expected a node object, got {type(obj).__name__}")

    kind = obj.get("type")
    builder = _BUILDERS.get(kind) if isinstance(kind, str) else None
    if builder is None:
        raise LoadError(f"unknown node type {kind!r}")
    return builder(obj)


def loads(text: str) -> Expression:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LoadError(f"invalid JSON: {exc}") from exc
    return load(data)


def load_file(path: str | Path) -> Expression:
    return loads(Path(path).read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _required(obj: dict, key: str) -> Any:
    if key not in obj:
        raise LoadError(f"{obj.get('type')} node is missing '{key}'")
    return obj[key]


def _expr(obj: dict, key: str) -> Expression:
    return load(_required(obj, key))


def _optional_expr(obj: dict, key: str) -> Expression | None:
    raw = obj.get(key)
    return None if raw is None else load(raw)


def _name(obj: dict, key: str = "name") -> str:
    name = _required(obj, key)
    if not isinstance(name, str) or not name:
        raise LoadError(f"{obj.get('type')} '{key}' must be a non-empty string")
    return name


def _op(raw: Any) -> Op:
    if isinstance(raw, str):
        if raw in Op.__members__:
            return Op[raw]
        try:
            return Op(raw)
        except ValueError:
            pass
    raise LoadError(f"unknown operator {raw!r}")


# ---------------------------------------------------------------------------
# Per-node builders
# ---------------------------------------------------------------------------

def _literal(obj: dict) -> Expression:
    try:
        return Literal(from_python(_required(obj, "value")))
    except FWJSTypeError as exc:
        raise LoadError(str(exc)) from exc


def _params(obj: dict) -> tuple[str, ...]:
    params = obj.get("params", [])
    if not isinstance(params, list) or not all(isinstance(p, str) for p in params):
        raise LoadError("FunctionDecl 'params' must be a list of strings")
    return tuple(params)


def _args(obj: dict) -> tuple[Expression, ...]:
    args = obj.get("args", [])
    if not isinstance(args, list):
        raise LoadError("FunctionApp 'args' must be a list")
    return tuple(load(a) for a in args)


_BUILDERS = {
    "Literal": _literal,
    "VarRef": lambda o: VarRef(_name(o)),
    "Print": lambda o: Print(_expr(o, "expr")),
    "BinOp": lambda o: BinOp(_op(_required(o, "op")), _expr(o, "left"), _expr(o, "right")),
    "If": lambda o: If(_expr(o, "cond"), _expr(o, "then"), _optional_expr(o, "orelse")),
    "While": lambda o: While(_expr(o, "cond"), _expr(o, "body")),
    "Seq": lambda o: Seq(_optional_expr(o, "first"), _optional_expr(o, "second")),
    "VarDecl": lambda o: VarDecl(_name(o), _optional_expr(o, "init")),
    "Assign": lambda o: Assign(_name(o), _optional_expr(o, "expr")),
    "FunctionDecl": lambda o: FunctionDecl(_params(o), _expr(o, "body")),
    "FunctionApp": lambda o: FunctionApp(_expr(o, "func"), _args(o)),
}
