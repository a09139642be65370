"""
VECALC - line-oriented calculator for scalars and 2D vectors.
"""

from importlib.metadata import PackageNotFoundError, version

from vecalc.core.errors import (
    DivisionByZero,
    EvaluationError,
    ExpressionSyntaxError,
    InvalidStatement,
    MalformedNumber,
    UndefinedVariable,
    UnsupportedOperation,
    VecalcError,
)
from vecalc.core.expression_lang import Bindings, clear_bindings, evaluate, parse
from vecalc.core.interpreter import Interpreter
from vecalc.core.ir import Scalar, Value, Vector

try:
    __version__ = version("vecalc")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "Bindings",
    "DivisionByZero",
    "EvaluationError",
    "ExpressionSyntaxError",
    "Interpreter",
    "InvalidStatement",
    "MalformedNumber",
    "Scalar",
    "UndefinedVariable",
    "UnsupportedOperation",
    "Value",
    "VecalcError",
    "Vector",
    "__version__",
    "clear_bindings",
    "evaluate",
    "parse",
]
