"""
Error types for VECALC scanning, parsing, and evaluation.
"""

from dataclasses import dataclass
from typing import Optional

END_OF_INPUT = "<end of input>"


class VecalcError(Exception):
    """Base exception for all VECALC errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message} (at position {self.context.position})"
        return self.message

    def report(self) -> str:
        """Multi-line report for display in the shell."""
        if self.context:
            return self.context.format(self.message)
        return f"Message:\t{self.message}"


class ExpressionSyntaxError(VecalcError):
    """
    Raised when an input line cannot be parsed.

    Examples:
    - Missing closing bracket or parenthesis
    - Missing operand after an operator
    - Identifier followed by an unexpected character
    - Trailing input after a complete statement
    """

    @property
    def position(self) -> int:
        return self.context.position if self.context else 0

    @property
    def found(self) -> str | None:
        return self.context.found if self.context else None

    @property
    def expected(self) -> str | None:
        return self.context.expected if self.context else None


class MalformedNumber(ExpressionSyntaxError):
    """
    Raised when a numeric literal breaks the number rules.

    Examples:
    - Leading zero followed by another digit ("007")
    - Second decimal point ("1.2.3")
    - Decimal point without digits after it ("1.")
    - Sign without digits ("-x")
    """


class InvalidStatement(ExpressionSyntaxError):
    """Raised when a line is neither an assignment nor a sum."""


class UnexpectedEndOfInput(ExpressionSyntaxError):
    """Raised when the scanner is asked for a character past the end."""


class EvaluationError(VecalcError):
    """Base class for errors raised while evaluating a tree."""


class UndefinedVariable(EvaluationError):
    """Raised when a variable is read before it was assigned."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable '{name}' is not defined.")


class UnsupportedOperation(EvaluationError):
    """Raised when an operator has no entry for the operand kinds."""

    def __init__(self, op: str, left_kind: str, right_kind: str):
        self.op = op
        self.left_kind = left_kind
        self.right_kind = right_kind
        super().__init__(f"Unsupported operation: {left_kind} {op} {right_kind}")


class DivisionByZero(EvaluationError):
    """
    Raised when the divisor (or one axis of a divisor vector) is zero.

    Attributes:
        op: Operator symbol that failed
        operand: Which operand was zero ("right")
        axis: "x" or "y" for vector divisors, None for scalars
    """

    def __init__(self, op: str, operand: str = "right", axis: str | None = None):
        self.op = op
        self.operand = operand
        self.axis = axis
        where = f"{axis} axis of the {operand} operand" if axis else f"{operand} operand"
        super().__init__(f"Cannot divide by zero: {where} of '{op}' is zero.")


class InvalidMark(VecalcError):
    """Raised when the scanner is reset to a position outside the buffer."""


class ConfigError(VecalcError):
    """Raised when a configuration file or value is invalid."""


@dataclass
class ErrorContext:
    """
    Location information for a syntax error.

    Attributes:
        line: The whitespace-stripped input that was being scanned
        position: Offset into ``line`` (0-indexed)
        found: Character found at ``position``, None at end of input
        expected: Character the scanner expected, if there was one
    """

    line: str
    position: int
    found: str | None = None
    expected: str | None = None

    def format(self, message: str) -> str:
        """
        Format the error as a human-readable report.

        Returns:
            Rows like "Line:", "Received:", "Expected:", "Message:" followed by
            a caret marker under the error position.
        """
        rows = []
        if self.line:
            rows.append(f"Line:\t\t{self.line}")
            rows.append("\t\t" + " " * self.position + "^")
        rows.append(f"Received:\t{_describe(self.found)}")
        if self.expected is not None:
            rows.append(f"Expected:\t'{self.expected}'")
        rows.append(f"Message:\t{message}")
        return "\n".join(rows)


def _describe(char: str | None) -> str:
    if char is None:
        return END_OF_INPUT
    return f"'{char}'"


def make_syntax_error(
    message: str,
    line: str,
    position: int,
    expected: str | None = None,
    error_class: type[ExpressionSyntaxError] = ExpressionSyntaxError,
) -> ExpressionSyntaxError:
    """
    Helper to create a syntax error with context.

    The found character is read from ``line`` at ``position``.

    Args:
        message: Error description
        line: Whitespace-stripped input line
        position: Offset of the offending character
        expected: Optional expected character
        error_class: Subclass of ExpressionSyntaxError to raise

    Returns:
        Error instance with context attached
    """
    found = line[position] if position < len(line) else None
    context = ErrorContext(line=line, position=position, found=found, expected=expected)
    return error_class(message, context)
