"""Evaluator: recursive interpretation of an Expression tree."""

from __future__ import annotations

import logging
import sys
from typing import IO

from .document import Document
from .environment import Environment
from .errors import (
    ArityError,
    FWJSArithmeticError,
    FWJSError,
    FWJSRecursionError,
    FWJSTypeError,
)
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
)
from .values import (
    Null,
    Value,
    VBool,
    VClosure,
    VInt,
    expect_bool,
    expect_int,
    type_name,
    wrap_int,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def evaluate(
    root: Expression,
    env: Environment | None = None,
    out: IO[str] | None = None,
) -> Value:
    """Evaluate *root* and return its value.

    Without *env* a fresh global frame is created.  *out* replaces the
    print sink of the global frame; when neither sets one, ``print``
    writes to ``sys.stdout``.
    """
    if env is None:
        env = Environment(out=out)
    elif out is not None:
        env.global_frame.out = out
    return eval_program(root, env)


def run_program(root: Expression, out: IO[str] | None = None) -> Document:
    """Evaluate *root* in a fresh global frame and keep that frame."""
    env = Environment(out=out)
    doc = Document(environment=env)
    doc.result = eval_program(root, env)
    return doc


def eval_program(root: Expression, env: Environment) -> Value:
    """Evaluate *root* in *env*, reporting stack exhaustion as an FWJS error."""
    try:
        return eval_node(root, env)
    except RecursionError as exc:
        raise FWJSRecursionError("maximum call depth exceeded") from exc


def eval_node(expr: Expression, env: Environment) -> Value:
    if isinstance(expr, Literal):
        return expr.value
    if isinstance(expr, VarRef):
        return env.resolve_var(expr.name)
    if isinstance(expr, Print):
        return _eval_print(expr, env)
    if isinstance(expr, BinOp):
        return _eval_binop(expr, env)
    if isinstance(expr, If):
        return _eval_if(expr, env)
    if isinstance(expr, While):
        return _eval_while(expr, env)
    if isinstance(expr, Seq):
        return _eval_seq(expr, env)
    if isinstance(expr, VarDecl):
        return _eval_var_decl(expr, env)
    if isinstance(expr, Assign):
        return _eval_assign(expr, env)
    if isinstance(expr, FunctionDecl):
        return _eval_function_decl(expr, env)
    if isinstance(expr, FunctionApp):
        return _eval_function_app(expr, env)
    raise FWJSError(f"cannot evaluate {type(expr).__name__}")


# ---------------------------------------------------------------------------
# Per-node evaluation
# ---------------------------------------------------------------------------

def _eval_print(expr: Print, env: Environment) -> Value:
    value = eval_node(expr.expr, env)
    sink = env.global_frame.out or sys.stdout
    print(str(value), file=sink)
    return value


def _eval_binop(expr: BinOp, env: Environment) -> Value:
    # Both sides are always evaluated, left first.
    left = eval_node(expr.left, env)
    right = eval_node(expr.right, env)
    a = expect_int(left, f"left operand of '{expr.op.value}'")
    b = expect_int(right, f"right operand of '{expr.op.value}'")
    return apply_op(expr.op, a, b)


def apply_op(op: Op, a: int, b: int) -> Value:
    """Apply *op* to two machine integers."""
    if op is Op.ADD:
        return VInt(wrap_int(a + b))
    if op is Op.SUB:
        return VInt(wrap_int(a - b))
    if op is Op.MUL:
        return VInt(wrap_int(a * b))
    if op is Op.DIV:
        return VInt(wrap_int(_trunc_div(a, b)))
    if op is Op.MOD:
        return VInt(wrap_int(a - b * _trunc_div(a, b)))
    if op is Op.GT:
        return VBool(a > b)
    if op is Op.GE:
        return VBool(a >= b)
    if op is Op.LT:
        return VBool(a < b)
    if op is Op.LE:
        return VBool(a <= b)
    if op is Op.EQ:
        return VBool(a == b)
    raise FWJSError(f"unknown operator {op!r}")


def _trunc_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    if b == 0:
        raise FWJSArithmeticError("division by zero")
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _eval_if(expr: If, env: Environment) -> Value:
    cond = eval_node(expr.cond, env)
    if isinstance(cond, VInt) and cond.value == 0:
        raise FWJSTypeError("if condition must be bool, not int")
    # Each branch gets its own scope so declarations don't leak.
    if isinstance(cond, VBool) and cond.value:
        return eval_node(expr.then, env.child())
    if expr.orelse is None:
        return Null
    return eval_node(expr.orelse, env.child())


def _eval_while(expr: While, env: Environment) -> Value:
    # One scope for the whole loop, not one per iteration.
    while expect_bool(eval_node(expr.cond, env), "while condition"):
        eval_node(expr.body, env)
    return Null


def _eval_seq(expr: Seq, env: Environment) -> Value:
    # Right-nested chains are walked iteratively.
    while True:
        if expr.first is None:
            return Null
        eval_node(expr.first, env)
        second = expr.second
        if second is None:
            return Null
        if not isinstance(second, Seq):
            return eval_node(second, env)
        expr = second


def _eval_var_decl(expr: VarDecl, env: Environment) -> Value:
    value = Null if expr.init is None else eval_node(expr.init, env)
    env.create_var(expr.name, value)
    return value


def _eval_assign(expr: Assign, env: Environment) -> Value:
    if expr.expr is None:
        return Null
    value = eval_node(expr.expr, env)
    env.update_var(expr.name, value)
    return value


def _eval_function_decl(expr: FunctionDecl, env: Environment) -> Value:
    closure = VClosure(tuple(expr.params), expr.body, env)
    logger.debug("closure created: params=%s depth=%d", closure.params, env.depth)
    return closure


def _eval_function_app(expr: FunctionApp, env: Environment) -> Value:
    func = eval_node(expr.func, env)
    if not isinstance(func, VClosure):
        raise FWJSTypeError(f"{type_name(func)} is not a function")
    args = [eval_node(arg, env) for arg in expr.args]
    return apply_closure(func, args)


def apply_closure(closure: VClosure, args: list[Value]) -> Value:
    """Call *closure* with already-evaluated *args*."""
    if len(args) != len(closure.params):
        raise ArityError(len(closure.params), len(args))
    # The call frame hangs off the captured scope, not the caller's.
    frame = closure.env.child()
    for name, value in zip(closure.params, args):
        frame.create_var(name, value)
    logger.debug("apply %s with %d arg(s) at depth %d", closure, len(args), frame.depth)
    return eval_node(closure.body, frame)
