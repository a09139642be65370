"""
Recursive descent parser for the VECALC expression language.

Grammar (precedence low to high):
    statement   → assignment | sum
    assignment  → identifier "=" sum            (input fully consumed)
    sum         → product (("+"|"-") product)*
    product     → term (("*"|"/") term)*
    term        → number | vector | identifier | "(" sum ")"
    number      → "-"? digit+ ("." digit+)?
    vector      → "[" number "," number "]"
    identifier  → [a-z]+

Every rule returns None, with the scanner back where it started, when
the input cannot begin that rule. Once a rule has consumed its defining
token (an operator, "=", "(" or "[") any further failure is a syntax
error instead.

Assignments are committed while parsing: when ``parse`` is given a
Bindings instance, a successfully parsed assignment is evaluated and
bound before the tree is returned.
"""

from __future__ import annotations

from vecalc.core.config import LanguageConfig
from vecalc.core.errors import InvalidStatement
from vecalc.core.expression_lang.bindings import Bindings
from vecalc.core.expression_lang.evaluator import evaluate
from vecalc.core.expression_lang.tokenizer import (
    GROUP_CLOSE,
    GROUP_OPEN,
    Scanner,
    recognize_identifier,
    recognize_number,
    recognize_vector,
)
from vecalc.core.ir.expressions import Assignment, BinaryExpr, BinaryOp, Expr, Statement


class _Parser:
    """Recursive descent parser driving a Scanner."""

    def __init__(self, scanner: Scanner, bindings: Bindings | None = None) -> None:
        self.scanner = scanner
        self.bindings = bindings
        self.assign_symbol = scanner.language.assignment_symbol

    def match_operator(self, *ops: BinaryOp) -> BinaryOp | None:
        for op in ops:
            if self.scanner.match_char(op.value):
                return op
        return None

    # -- Grammar rules --

    def parse_statement(self) -> Statement:
        """assignment | sum, consuming the whole line."""
        stmt: Statement | None = self.parse_assignment()
        if stmt is None:
            stmt = self.parse_sum()
        if stmt is None:
            raise self.scanner.syntax_error(
                "Expected an assignment or an expression", error_class=InvalidStatement
            )
        if not self.scanner.at_end():
            raise self.scanner.syntax_error(
                "Unexpected input after expression", error_class=InvalidStatement
            )
        return stmt

    def parse_assignment(self) -> Assignment | None:
        """identifier '=' sum, with nothing after the sum."""
        mark = self.scanner.mark()
        target = recognize_identifier(self.scanner)
        if target is None or not self.scanner.match_char(self.assign_symbol):
            self.scanner.reset_to(mark)
            return None

        value = self.parse_sum()
        if value is None:
            raise self.scanner.syntax_error(
                f"Expected an expression after '{self.assign_symbol}'"
            )
        if not self.scanner.at_end():
            raise self.scanner.syntax_error("Unexpected input after assignment")

        node = Assignment(target=target.name, value=value)
        if self.bindings is not None:
            evaluate(node, self.bindings)
        return node

    def parse_sum(self) -> Expr | None:
        """product (('+' | '-') product)*"""
        left = self.parse_product()
        if left is None:
            return None
        while op := self.match_operator(BinaryOp.ADD, BinaryOp.SUB):
            right = self.parse_product()
            if right is None:
                raise self.scanner.syntax_error(f"Expected an operand after '{op.value}'")
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_product(self) -> Expr | None:
        """term (('*' | '/') term)*"""
        left = self.parse_term()
        if left is None:
            return None
        while op := self.match_operator(BinaryOp.MUL, BinaryOp.DIV):
            right = self.parse_term()
            if right is None:
                raise self.scanner.syntax_error(f"Expected an operand after '{op.value}'")
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_term(self) -> Expr | None:
        """number | vector | identifier | group"""
        return (
            recognize_number(self.scanner)
            or recognize_vector(self.scanner)
            or recognize_identifier(self.scanner)
            or self.parse_group()
        )

    def parse_group(self) -> Expr | None:
        """'(' sum ')'"""
        if not self.scanner.match_char(GROUP_OPEN):
            return None
        expr = self.parse_sum()
        if expr is None:
            raise self.scanner.syntax_error(f"Expected an expression after '{GROUP_OPEN}'")
        if not self.scanner.match_char(GROUP_CLOSE):
            raise self.scanner.syntax_error(f"Expected '{GROUP_CLOSE}'", expected=GROUP_CLOSE)
        return expr


def parse(
    line: str,
    bindings: Bindings | None = None,
    language: LanguageConfig | None = None,
) -> Statement:
    """Parse one input line into a statement tree.

    Args:
        line: Input line; whitespace is ignored.
        bindings: When given, a parsed assignment is evaluated and bound
            immediately. Without bindings nothing is evaluated.
        language: Grammar settings (assignment symbol).

    Returns:
        An Assignment or an expression tree.

    Raises:
        ExpressionSyntaxError: If the line is not a valid statement, or is
            nested too deeply to parse.
        EvaluationError: If an assignment's right-hand side fails to
            evaluate (only when ``bindings`` is given).
    """
    scanner = Scanner(line, language)
    parser = _Parser(scanner, bindings)
    try:
        return parser.parse_statement()
    except RecursionError:
        raise scanner.syntax_error("Expression nested too deeply") from None
