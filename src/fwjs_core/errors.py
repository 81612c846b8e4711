"""Exception hierarchy for FWJS Core."""

from __future__ import annotations


class FWJSError(Exception):
    """Base class for every error raised while loading or evaluating FWJS."""


class FWJSTypeError(FWJSError, TypeError):
    """An operand or condition had the wrong kind of value."""


class FWJSArithmeticError(FWJSError, ZeroDivisionError):
    """Division or modulo by zero."""


class DuplicateDeclaration(FWJSError):
    """A name was declared twice in the same frame."""

    def __init__(self, name: str) -> None:
        super().__init__(f"'{name}' already exists in this scope")
        self.name = name


class ArityError(FWJSError, TypeError):
    """A function was applied to the wrong number of arguments."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"function expects {expected} argument(s), got {got}")
        self.expected = expected
        self.got = got


class LoadError(FWJSError, ValueError):
    """Malformed AST input handed to the loader."""


class FWJSRecursionError(FWJSError, RecursionError):
    """Evaluation nested deeper than the host stack allows."""
