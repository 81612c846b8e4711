"""FWJS Core — tree-walking evaluator for a featherweight JavaScript dialect."""

from .document import Document
from .environment import Environment
from .errors import (
    ArityError,
    DuplicateDeclaration,
    FWJSArithmeticError,
    FWJSError,
    FWJSRecursionError,
    FWJSTypeError,
    LoadError,
)
from .evaluator import apply_closure, evaluate, run_program
from .loader import load, load_file, loads
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
from .session import Session
from .values import (
    Null,
    Undefined,
    Value,
    VBool,
    VClosure,
    VInt,
    _Null,
    _Undefined,
)

__all__ = [
    "evaluate",
    "run_program",
    "apply_closure",
    "Document",
    "Environment",
    "Session",
    "load",
    "loads",
    "load_file",
    "Value",
    "VInt",
    "VBool",
    "VClosure",
    "Null",
    "Undefined",
    "Expression",
    "Literal",
    "VarRef",
    "Print",
    "BinOp",
    "Op",
    "If",
    "While",
    "Seq",
    "seq",
    "VarDecl",
    "Assign",
    "FunctionDecl",
    "FunctionApp",
    "FWJSError",
    "FWJSTypeError",
    "FWJSArithmeticError",
    "FWJSRecursionError",
    "DuplicateDeclaration",
    "ArityError",
    "LoadError",
]
