"""Tests for the VECALC scanner and lexical recognizers.

Covers:
- Scanner: whitespace stripping, positions, marks, predicates
- Number recognizer: signs, decimals, leading-zero and decimal rules
- Vector recognizer: literal components only, bracket/comma errors
- Identifier recognizer: lowercase runs and their terminators
"""

from __future__ import annotations

import pytest

from vecalc.core.config import LanguageConfig
from vecalc.core.errors import (
    ExpressionSyntaxError,
    InvalidMark,
    MalformedNumber,
    UnexpectedEndOfInput,
)
from vecalc.core.expression_lang.tokenizer import (
    Scanner,
    recognize_identifier,
    recognize_number,
    recognize_vector,
)
from vecalc.core.ir.expressions import Literal, VariableRef
from vecalc.core.ir.values import Scalar, Vector

# ============================================================================
# Scanner tests
# ============================================================================


class TestScanner:
    """Scanner position handling and classification."""

    def test_whitespace_removed(self) -> None:
        scanner = Scanner("  1 +\t2 ")
        assert scanner.data == "1+2"

    def test_current_char_and_advance(self) -> None:
        scanner = Scanner("ab")
        assert scanner.current_char() == "a"
        scanner.advance()
        assert scanner.current_char() == "b"

    def test_current_char_at_end(self) -> None:
        scanner = Scanner("")
        with pytest.raises(UnexpectedEndOfInput):
            scanner.current_char()

    def test_advance_at_end(self) -> None:
        scanner = Scanner("a")
        scanner.advance()
        assert scanner.at_end()
        with pytest.raises(UnexpectedEndOfInput):
            scanner.advance()

    def test_peek_next(self) -> None:
        scanner = Scanner("ab")
        assert scanner.peek_next() == "b"
        scanner.advance()
        assert scanner.peek_next() is None
        assert scanner.pos == 1

    def test_mark_and_reset(self) -> None:
        scanner = Scanner("abc")
        mark = scanner.mark()
        scanner.advance()
        scanner.advance()
        scanner.reset_to(mark)
        assert scanner.pos == 0

    def test_reset_to_end_is_allowed(self) -> None:
        scanner = Scanner("abc")
        scanner.reset_to(3)
        assert scanner.at_end()

    @pytest.mark.parametrize("mark", [-1, 4])
    def test_reset_out_of_range(self, mark: int) -> None:
        scanner = Scanner("abc")
        with pytest.raises(InvalidMark):
            scanner.reset_to(mark)

    def test_match_char(self) -> None:
        scanner = Scanner("(1")
        assert scanner.match_char("(")
        assert scanner.pos == 1
        assert not scanner.match_char(")")
        assert scanner.pos == 1

    def test_match_char_at_end(self) -> None:
        scanner = Scanner("")
        assert not scanner.match_char(")")

    def test_predicates(self) -> None:
        assert Scanner("q").is_letter()
        assert not Scanner("Q").is_letter()
        assert Scanner("7").is_digit()
        assert Scanner("-").is_negative_sign()
        assert Scanner(".").is_decimal_point()
        for op in "+-*/=":
            assert Scanner(op).is_operator()
        assert not Scanner("%").is_operator()

    def test_predicates_false_at_end(self) -> None:
        scanner = Scanner("")
        assert not scanner.is_letter()
        assert not scanner.is_digit()
        assert not scanner.is_negative_sign()
        assert not scanner.is_decimal_point()
        assert not scanner.is_operator()

    def test_operator_set_follows_assignment_symbol(self) -> None:
        language = LanguageConfig(assignment_symbol=":")
        assert Scanner(":", language).is_operator()
        assert not Scanner("=", language).is_operator()


# ============================================================================
# Number recognizer tests
# ============================================================================


class TestRecognizeNumber:
    """Numbers follow '-'? digit+ ('.' digit+)? without leading zeros."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("42", 42.0),
            ("0", 0.0),
            ("0.5", 0.5),
            ("-3.25", -3.25),
            ("100", 100.0),
            ("-0", 0.0),
            ("10.05", 10.05),
        ],
    )
    def test_valid_numbers(self, source: str, expected: float) -> None:
        scanner = Scanner(source)
        node = recognize_number(scanner)
        assert node == Literal(value=Scalar(value=expected))
        assert scanner.at_end()

    def test_stops_at_operator(self) -> None:
        scanner = Scanner("12+3")
        node = recognize_number(scanner)
        assert node is not None
        assert node.value == Scalar(value=12)
        assert scanner.pos == 2

    @pytest.mark.parametrize("source", ["x", "[1,2]", "(", "+1", ".5", ""])
    def test_no_match_leaves_position(self, source: str) -> None:
        scanner = Scanner(source)
        assert recognize_number(scanner) is None
        assert scanner.pos == 0

    @pytest.mark.parametrize("source", ["007", "01", "-01", "00"])
    def test_leading_zero_rejected(self, source: str) -> None:
        with pytest.raises(MalformedNumber, match="Leading zeros"):
            recognize_number(Scanner(source))

    def test_second_decimal_point_rejected(self) -> None:
        with pytest.raises(MalformedNumber, match="one decimal point"):
            recognize_number(Scanner("1.2.3"))

    @pytest.mark.parametrize("source", ["1.", "1.+2"])
    def test_decimal_point_needs_digit(self, source: str) -> None:
        with pytest.raises(MalformedNumber, match="after the decimal point"):
            recognize_number(Scanner(source))

    @pytest.mark.parametrize("source", ["-", "-x", "-(1)"])
    def test_sign_needs_digit(self, source: str) -> None:
        with pytest.raises(MalformedNumber, match="after the negative sign"):
            recognize_number(Scanner(source))

    def test_error_carries_position(self) -> None:
        with pytest.raises(MalformedNumber) as exc_info:
            recognize_number(Scanner("12.x"))
        assert exc_info.value.position == 3
        assert exc_info.value.found == "x"


# ============================================================================
# Vector recognizer tests
# ============================================================================


class TestRecognizeVector:
    """Vectors are '[' number ',' number ']'."""

    def test_vector(self) -> None:
        scanner = Scanner("[1, -2.5]")
        node = recognize_vector(scanner)
        assert node == Literal(value=Vector(x=1, y=-2.5))
        assert scanner.at_end()

    def test_no_match(self) -> None:
        scanner = Scanner("(1,2)")
        assert recognize_vector(scanner) is None
        assert scanner.pos == 0

    def test_missing_comma(self) -> None:
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            recognize_vector(Scanner("[1;2]"))
        assert exc_info.value.expected == ","
        assert exc_info.value.found == ";"

    def test_missing_close_bracket(self) -> None:
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            recognize_vector(Scanner("[1,2"))
        assert exc_info.value.expected == "]"
        assert exc_info.value.found is None

    def test_variable_component_rejected(self) -> None:
        with pytest.raises(ExpressionSyntaxError, match="Expected a number") as exc_info:
            recognize_vector(Scanner("[x,1]"))
        assert exc_info.value.found == "x"

    def test_second_component_variable_rejected(self) -> None:
        with pytest.raises(ExpressionSyntaxError, match="Expected a number") as exc_info:
            recognize_vector(Scanner("[1,y]"))
        assert exc_info.value.found == "y"
        assert exc_info.value.context is not None

    def test_components_are_floats(self) -> None:
        node = recognize_vector(Scanner("[0.5, 3]"))
        assert node is not None
        assert isinstance(node.value, Vector)
        assert (node.value.x, node.value.y) == (0.5, 3.0)
        assert isinstance(node.value.y, float)

    def test_empty_vector_rejected(self) -> None:
        with pytest.raises(ExpressionSyntaxError, match="Expected a number"):
            recognize_vector(Scanner("[]"))

    def test_malformed_component(self) -> None:
        with pytest.raises(MalformedNumber):
            recognize_vector(Scanner("[01,2]"))


# ============================================================================
# Identifier recognizer tests
# ============================================================================


class TestRecognizeIdentifier:
    """Identifiers are lowercase runs followed by a legal terminator."""

    @pytest.mark.parametrize(
        ("source", "name", "end"),
        [
            ("abc", "abc", 3),
            ("x+1", "x", 1),
            ("x=2", "x", 1),
            ("speed)", "speed", 5),
            ("y]", "y", 1),
            ("a,b", "a", 1),
        ],
    )
    def test_identifier(self, source: str, name: str, end: int) -> None:
        scanner = Scanner(source)
        assert recognize_identifier(scanner) == VariableRef(name=name)
        assert scanner.pos == end

    @pytest.mark.parametrize("source", ["1", "X", "_a", "(x)", ""])
    def test_no_match(self, source: str) -> None:
        scanner = Scanner(source)
        assert recognize_identifier(scanner) is None
        assert scanner.pos == 0

    @pytest.mark.parametrize("source", ["ab3", "x(", "xY", "a.b"])
    def test_bad_terminator(self, source: str) -> None:
        with pytest.raises(ExpressionSyntaxError, match="after variable name"):
            recognize_identifier(Scanner(source))
