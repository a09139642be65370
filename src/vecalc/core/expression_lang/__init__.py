"""
VECALC expression language.

Scanner, parser, arithmetic and evaluator for scalar/vector expressions.

Usage:
    from vecalc.core.expression_lang import Bindings, evaluate, parse

    bindings = Bindings()
    parse("x = 3 + 4", bindings)  # binds x -> 7
    result = evaluate(parse("x * [1, 2]"), bindings)
    # str(result) == "[7, 14]"
"""

from vecalc.core.expression_lang.arithmetic import apply_binary_op
from vecalc.core.expression_lang.bindings import Bindings, clear_bindings
from vecalc.core.expression_lang.evaluator import evaluate
from vecalc.core.expression_lang.parser import parse
from vecalc.core.expression_lang.tokenizer import Scanner

__all__ = ["Bindings", "Scanner", "apply_binary_op", "clear_bindings", "evaluate", "parse"]
