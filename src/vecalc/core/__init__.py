"""
VECALC core: values, expression trees, parser and evaluator.
"""
