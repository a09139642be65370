"""
Interpreter session.

An Interpreter owns one Bindings instance, so independent sessions never
see each other's variables.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from vecalc.core.config import VecalcConfig
from vecalc.core.expression_lang.bindings import Bindings, clear_bindings
from vecalc.core.expression_lang.evaluator import evaluate
from vecalc.core.expression_lang.parser import parse
from vecalc.core.ir.expressions import Assignment
from vecalc.core.ir.values import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """Parse and evaluate lines against session-local variables."""

    def __init__(self, config: VecalcConfig | None = None, bindings: Bindings | None = None):
        self.config = config or VecalcConfig()
        self.bindings = bindings if bindings is not None else Bindings()

    def execute(self, line: str) -> Value:
        """Run one line and return its value.

        Assignments are bound while parsing, so their recorded value is
        returned instead of evaluating the right-hand side a second time.
        """
        logger.debug("Executing %r", line)
        stmt = parse(line, self.bindings, self.config.language)
        if isinstance(stmt, Assignment):
            return self.bindings.lookup(stmt.target)
        return evaluate(stmt, self.bindings)

    def clear(self) -> None:
        clear_bindings(self.bindings)

    def variables(self) -> Mapping[str, Value]:
        return self.bindings.snapshot()
