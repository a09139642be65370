"""
Arithmetic over Values.

Promotion table (same for +, -, *, /):

    Scalar op Scalar  -> Scalar
    Vector op Vector  -> Vector, per axis
    Vector op Scalar  -> Vector, scalar broadcast to both axes
    Scalar op Vector  -> Vector, scalar broadcast to both axes

Broadcasting keeps operand order, so ``2 / [2, 4]`` is ``[1, 0.5]``
while ``[2, 4] / 2`` is ``[1, 2]``. Division by a zero scalar, or by a
vector with a zero axis, raises DivisionByZero instead of producing inf.
"""

from __future__ import annotations

import operator
from collections.abc import Callable

from vecalc.core.errors import DivisionByZero, UnsupportedOperation
from vecalc.core.ir.expressions import BinaryOp
from vecalc.core.ir.values import Scalar, Value, Vector

_OPERATIONS: dict[BinaryOp, Callable[[float, float], float]] = {
    BinaryOp.ADD: operator.add,
    BinaryOp.SUB: operator.sub,
    BinaryOp.MUL: operator.mul,
    BinaryOp.DIV: operator.truediv,
}


def apply_binary_op(op: BinaryOp | str, left: Value, right: Value) -> Value:
    """Apply ``op`` to two values according to the promotion table.

    Raises:
        UnsupportedOperation: For an unknown operator or operand kind.
        DivisionByZero: When dividing by zero (per axis for vectors).
    """
    try:
        bin_op = BinaryOp(op)
    except ValueError:
        raise UnsupportedOperation(str(op), _kind_name(left), _kind_name(right)) from None

    if isinstance(left, Scalar) and isinstance(right, Scalar):
        return Scalar(value=_combine(bin_op, left.value, right.value))

    if isinstance(left, Vector) and isinstance(right, Vector):
        return Vector(
            x=_combine(bin_op, left.x, right.x, axis="x"),
            y=_combine(bin_op, left.y, right.y, axis="y"),
        )

    if isinstance(left, Vector) and isinstance(right, Scalar):
        return Vector(
            x=_combine(bin_op, left.x, right.value),
            y=_combine(bin_op, left.y, right.value),
        )

    if isinstance(left, Scalar) and isinstance(right, Vector):
        return Vector(
            x=_combine(bin_op, left.value, right.x, axis="x"),
            y=_combine(bin_op, left.value, right.y, axis="y"),
        )

    raise UnsupportedOperation(bin_op.value, _kind_name(left), _kind_name(right))


def _combine(op: BinaryOp, left: float, right: float, axis: str | None = None) -> float:
    if op == BinaryOp.DIV and right == 0:
        raise DivisionByZero(op.value, operand="right", axis=axis)
    return _OPERATIONS[op](left, right)


def _kind_name(value: object) -> str:
    if isinstance(value, (Scalar, Vector)):
        return value.kind.value
    return type(value).__name__
