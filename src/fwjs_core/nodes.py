"""Expression AST node types.

Nodes are immutable and carry no behaviour of their own beyond
``evaluate``, which hands off to :func:`fwjs_core.evaluator.eval_node`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .values import Value

if TYPE_CHECKING:
    from .environment import Environment


class Op(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    EQ = "=="


class Expression:
    """Base for all node kinds."""

    __slots__ = ()

    def evaluate(self, env: Environment) -> Value:
        from .evaluator import eval_node
        return eval_node(self, env)


@dataclass(frozen=True)
class Literal(Expression):
    value: Value


@dataclass(frozen=True)
class VarRef(Expression):
    name: str


@dataclass(frozen=True)
class Print(Expression):
    expr: Expression


@dataclass(frozen=True)
class BinOp(Expression):
    op: Op
    left: Expression
    right: Expression


@dataclass(frozen=True)
class If(Expression):
    cond: Expression
    then: Expression
    orelse: Expression | None = None


@dataclass(frozen=True)
class While(Expression):
    cond: Expression
    body: Expression


@dataclass(frozen=True)
class Seq(Expression):
    first: Expression | None
    second: Expression | None


@dataclass(frozen=True)
class VarDecl(Expression):
    name: str
    init: Expression | None = None


@dataclass(frozen=True)
class Assign(Expression):
    name: str
    expr: Expression | None


@dataclass(frozen=True)
class FunctionDecl(Expression):
    params: tuple[str, ...]
    body: Expression


@dataclass(frozen=True)
class FunctionApp(Expression):
    func: Expression
    args: tuple[Expression, ...] = ()


def seq(*exprs: Expression) -> Expression:
    """Chain *exprs* into right-nested Seq nodes: ``seq(a, b, c)`` is ``Seq(a, Seq(b, c))``."""
    if not exprs:
        return Seq(None, None)
    result = exprs[-1]
    for expr in reversed(exprs[:-1]):
        result = Seq(expr, result)
    return result
