"""
Scanner and lexical recognizers for the VECALC expression language.

There is no separate token stream: the parser drives a Scanner directly
and calls the recognizers at the position it wants to try. Each
recognizer either

- returns None with the position unchanged when the current character
  cannot start its token, or
- consumes the whole token and returns a tree node, or
- raises a syntax error once it has committed to its token kind.

Scanner policy at end of input: ``current_char()`` raises
UnexpectedEndOfInput, while the classification predicates simply
return False.
"""

from __future__ import annotations

import string

from vecalc.core.config import LanguageConfig
from vecalc.core.errors import (
    ExpressionSyntaxError,
    InvalidMark,
    MalformedNumber,
    UnexpectedEndOfInput,
    make_syntax_error,
)
from vecalc.core.ir.expressions import Literal, VariableRef
from vecalc.core.ir.values import Scalar, Vector

LETTERS = frozenset(string.ascii_lowercase)
DIGITS = frozenset(string.digits)
NEGATIVE_SIGN = "-"
DECIMAL_POINT = "."

VECTOR_OPEN = "["
VECTOR_CLOSE = "]"
VECTOR_SEPARATOR = ","
GROUP_OPEN = "("
GROUP_CLOSE = ")"

# Characters that may legally follow a variable name (besides operators)
_IDENTIFIER_TERMINATORS = frozenset({GROUP_CLOSE, VECTOR_CLOSE, VECTOR_SEPARATOR})


class Scanner:
    """Character cursor over a whitespace-free input line."""

    __slots__ = ("data", "pos", "language")

    def __init__(self, line: str, language: LanguageConfig | None = None) -> None:
        self.data = "".join(c for c in line if not c.isspace())
        self.pos = 0
        self.language = language or LanguageConfig()

    def __repr__(self) -> str:
        return f"Scanner({self.data!r}, pos={self.pos})"

    # -- Position --

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def current_char(self) -> str:
        if self.at_end():
            raise self.syntax_error("Unexpected end of input", error_class=UnexpectedEndOfInput)
        return self.data[self.pos]

    def peek_next(self) -> str | None:
        idx = self.pos + 1
        if idx < len(self.data):
            return self.data[idx]
        return None

    def advance(self) -> None:
        if self.at_end():
            raise self.syntax_error("Cannot advance past end of input", error_class=UnexpectedEndOfInput)
        self.pos += 1

    def mark(self) -> int:
        """Save the current position for a later reset_to()."""
        return self.pos

    def reset_to(self, mark: int) -> None:
        if not 0 <= mark <= len(self.data):
            raise InvalidMark(f"Mark {mark} is outside [0, {len(self.data)}]")
        self.pos = mark

    def match_char(self, expected: str) -> bool:
        """Consume ``expected`` if it is the current character."""
        if not self.at_end() and self.data[self.pos] == expected:
            self.pos += 1
            return True
        return False

    # -- Classification --

    def _is_in(self, chars: frozenset[str]) -> bool:
        return not self.at_end() and self.data[self.pos] in chars

    def is_letter(self) -> bool:
        return self._is_in(LETTERS)

    def is_digit(self) -> bool:
        return self._is_in(DIGITS)

    def is_negative_sign(self) -> bool:
        return not self.at_end() and self.data[self.pos] == NEGATIVE_SIGN

    def is_decimal_point(self) -> bool:
        return not self.at_end() and self.data[self.pos] == DECIMAL_POINT

    def is_operator(self) -> bool:
        return self._is_in(self.language.operators)

    # -- Errors --

    def syntax_error(
        self,
        message: str,
        expected: str | None = None,
        error_class: type[ExpressionSyntaxError] = ExpressionSyntaxError,
    ) -> ExpressionSyntaxError:
        """Build a syntax error pointing at the current position."""
        return make_syntax_error(message, self.data, self.pos, expected, error_class)


# ---------------------------------------------------------------------------
# Recognizers
# ---------------------------------------------------------------------------


def recognize_number(scanner: Scanner) -> Literal | None:
    """Recognize ``'-'? digit+ ('.' digit+)?`` as a Scalar literal.

    Raises:
        MalformedNumber: If the literal is malformed, see ``_scan_number``.
    """
    number = _scan_number(scanner)
    if number is None:
        return None
    return Literal(value=Scalar(value=number))


def _scan_number(scanner: Scanner) -> float | None:
    """Consume a number literal and return its value.

    Raises:
        MalformedNumber: On a leading zero before another digit, a second
            decimal point, or a sign or decimal point without digits.
    """
    if not (scanner.is_digit() or scanner.is_negative_sign()):
        return None

    start = scanner.mark()
    if scanner.is_negative_sign():
        scanner.advance()
        if not scanner.is_digit():
            raise scanner.syntax_error(
                "Expected a digit after the negative sign", error_class=MalformedNumber
            )

    if scanner.current_char() == "0" and scanner.peek_next() in DIGITS:
        raise scanner.syntax_error("Leading zeros are not allowed", error_class=MalformedNumber)
    _consume_digits(scanner)

    if scanner.is_decimal_point():
        scanner.advance()
        if not scanner.is_digit():
            raise scanner.syntax_error(
                "Expected a digit after the decimal point", error_class=MalformedNumber
            )
        _consume_digits(scanner)
        if scanner.is_decimal_point():
            raise scanner.syntax_error(
                "A number may contain only one decimal point", error_class=MalformedNumber
            )

    # float() ignores the host locale, "." is always the decimal point
    text = scanner.data[start : scanner.pos]
    return float(text)


def _consume_digits(scanner: Scanner) -> None:
    while scanner.is_digit():
        scanner.advance()


def recognize_vector(scanner: Scanner) -> Literal | None:
    """Recognize ``'[' number ',' number ']'`` as a Vector literal.

    Components must be numeric literals; variables are rejected.
    """
    if not scanner.match_char(VECTOR_OPEN):
        return None

    x = _vector_component(scanner)
    _expect(scanner, VECTOR_SEPARATOR)
    y = _vector_component(scanner)
    _expect(scanner, VECTOR_CLOSE)

    return Literal(value=Vector(x=x, y=y))


def _vector_component(scanner: Scanner) -> float:
    number = _scan_number(scanner)
    if number is None:
        raise scanner.syntax_error("Expected a number as vector component")
    return number


def _expect(scanner: Scanner, char: str) -> None:
    if not scanner.match_char(char):
        raise scanner.syntax_error(f"Expected '{char}'", expected=char)


def recognize_identifier(scanner: Scanner) -> VariableRef | None:
    """Recognize a run of lowercase letters as a variable reference.

    The name must be followed by end of input, an operator, ``)``, ``]``
    or ``,``; anything else (``ab3``, ``x(``) is a syntax error.
    """
    if not scanner.is_letter():
        return None

    start = scanner.mark()
    while scanner.is_letter():
        scanner.advance()

    if not (
        scanner.at_end()
        or scanner.is_operator()
        or scanner.current_char() in _IDENTIFIER_TERMINATORS
    ):
        raise scanner.syntax_error("Unexpected character after variable name")

    return VariableRef(name=scanner.data[start : scanner.pos])
