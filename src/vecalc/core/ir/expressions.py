"""
Expression tree types for VECALC.

The parser produces one of these per input line:
- Literal: a Scalar or Vector value
- VariableRef: a name looked up in the bindings at evaluation time
- BinaryExpr: +, -, *, / over two subtrees
- Assignment: name = expression

Nodes are frozen; a tree never shares subtrees.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from vecalc.core.ir.values import Value

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A literal Scalar or Vector."""

    value: Value = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class VariableRef(BaseModel):
    """Reference to a variable; resolved only when evaluated."""

    name: str = Field(description="Variable name")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class Assignment(BaseModel):
    """Assignment of an expression's value to a variable."""

    target: str = Field(description="Variable being assigned")
    value: Expr = Field(description="Right-hand side")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.target} = {self.value}"


# ---------------------------------------------------------------------------
# Union types
# ---------------------------------------------------------------------------

Expr = Literal | VariableRef | BinaryExpr

Statement = Assignment | Expr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
Assignment.model_rebuild()
