"""
VECALC intermediate representation: values and expression trees.
"""

from vecalc.core.ir.expressions import (
    Assignment,
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    Statement,
    VariableRef,
)
from vecalc.core.ir.values import Scalar, Value, ValueKind, Vector, format_number

__all__ = [
    "Assignment",
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
    "Scalar",
    "Statement",
    "Value",
    "ValueKind",
    "VariableRef",
    "Vector",
    "format_number",
]
