"""
Expression evaluator for the VECALC expression language.

Walks a parsed tree against a Bindings instance. Only Assignment nodes
write to the bindings; everything else is read-only.
"""

from __future__ import annotations

from vecalc.core.errors import EvaluationError
from vecalc.core.expression_lang.arithmetic import apply_binary_op
from vecalc.core.expression_lang.bindings import Bindings
from vecalc.core.ir.expressions import Assignment, BinaryExpr, Literal, Statement, VariableRef
from vecalc.core.ir.values import Value


def evaluate(expr: Statement, bindings: Bindings) -> Value:
    """Evaluate a statement against a binding environment.

    Args:
        expr: Parsed statement (expression tree or assignment).
        bindings: Session variables; updated only by assignments.

    Returns:
        The computed Value.

    Raises:
        EvaluationError: UndefinedVariable, UnsupportedOperation,
            DivisionByZero, or a tree nested too deeply to walk.
    """
    try:
        return _interpret(expr, bindings)
    except RecursionError:
        raise EvaluationError("Expression nested too deeply") from None


def _interpret(expr: Statement, bindings: Bindings) -> Value:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, VariableRef):
        return bindings.lookup(expr.name)

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr, bindings)

    if isinstance(expr, Assignment):
        return _interpret_assignment(expr, bindings)

    raise EvaluationError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryExpr, bindings: Bindings) -> Value:
    """Evaluate a left-deep operator chain without recursing down its left spine."""
    spine: list[BinaryExpr] = []
    node: Statement = expr
    while isinstance(node, BinaryExpr):
        spine.append(node)
        node = node.left

    # Innermost left operand first, then each right operand in source order
    value = _interpret(node, bindings)
    for op_node in reversed(spine):
        right = _interpret(op_node.right, bindings)
        value = apply_binary_op(op_node.op, value, right)
    return value


def _interpret_assignment(expr: Assignment, bindings: Bindings) -> Value:
    """Evaluate the right-hand side, then bind it."""
    value = _interpret(expr.value, bindings)
    bindings.record(expr.target, value)
    return value
