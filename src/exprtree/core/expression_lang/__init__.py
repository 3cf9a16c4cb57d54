"""
exprtree expression language.

Tokenizer, parser and evaluator for arithmetic expressions over
named float variables.

Usage:
    from exprtree.core.expression_lang import parse, evaluate

    expr = parse("box1 + box2 * 2")
    result = evaluate(expr, {"box1": 100, "box2": 50})
    # result == 200.0
"""

from exprtree.core.expression_lang.engine import evaluate_text
from exprtree.core.expression_lang.evaluator import evaluate
from exprtree.core.expression_lang.parser import parse
from exprtree.core.expression_lang.tokenizer import Token, TokenKind, Tokenizer, tokenize

__all__ = [
    "Token",
    "TokenKind",
    "Tokenizer",
    "evaluate",
    "evaluate_text",
    "parse",
    "tokenize",
]
