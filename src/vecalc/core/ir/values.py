"""
Runtime values for VECALC.

A Value is exactly one of:
- Scalar: a single float
- Vector: an ordered (x, y) pair of floats

Values are immutable once constructed.
"""

from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Value kinds
# ---------------------------------------------------------------------------


class ValueKind(StrEnum):
    """Variants of the Value union."""

    SCALAR = "scalar"
    VECTOR = "vector"


def format_number(number: float) -> str:
    """Format a float without a trailing ``.0`` when integral."""
    if math.isfinite(number) and number.is_integer():
        return str(int(number))
    return repr(number)


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


class Scalar(BaseModel):
    """A single floating-point magnitude."""

    value: float = Field(description="The magnitude")

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> ValueKind:
        return ValueKind.SCALAR

    def __str__(self) -> str:
        return format_number(self.value)


class Vector(BaseModel):
    """
    A two-dimensional vector.

    Examples:
        - Vector(x=1, y=2) → [1, 2]
        - Vector(x=0.5, y=-3) → [0.5, -3]
    """

    x: float = Field(description="First component")
    y: float = Field(description="Second component")

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> ValueKind:
        return ValueKind.VECTOR

    def __str__(self) -> str:
        return f"[{format_number(self.x)}, {format_number(self.y)}]"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Value = Scalar | Vector
