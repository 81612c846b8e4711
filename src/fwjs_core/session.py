"""Session: incremental evaluation against one persistent global frame."""

from __future__ import annotations

import logging
from typing import IO

from .environment import Environment
from .evaluator import eval_program
from .loader import load, loads
from .nodes import Expression
from .values import Value

logger = logging.getLogger(__name__)


class Session:
    """Stateful evaluator that keeps global bindings across calls.

    Usage::

        session = Session()
        session.eval({"type": "VarDecl", "name": "x",
                      "init": {"type": "Literal", "value": 3}})
        session.eval('{"type": "VarRef", "name": "x"}')   # → VInt(3)

        session.bindings   # the global frame's bindings
        session.reset()    # clear state
    """

    def __init__(self, out: IO[str] | None = None) -> None:
        self.out = out
        self.env = Environment(out=out)

    def eval(self, source: Expression | str | dict | list) -> Value:
        """Evaluate *source* in the global frame and return its value.

        *source* may be an Expression, decoded JSON data, or JSON text.
        Bindings made before an error are kept.
        """
        if isinstance(source, str):
            expr = loads(source)
        elif isinstance(source, Expression):
            expr = source
        else:
            expr = load(source)
        return eval_program(expr, self.env)

    @property
    def bindings(self) -> dict[str, Value]:
        return self.env.bindings

    def reset(self) -> None:
        logger.debug("session reset (%d binding(s) dropped)", len(self.env.bindings))
        self.env = Environment(out=self.out)
