"""
Text-to-value entry point for the expression language.

Usage:
    from exprtree.core.expression_lang.engine import evaluate_text

    evaluate_text("10 + x", {"x": 12})
    # result == 22.0
"""

from __future__ import annotations

from collections.abc import Mapping

from exprtree.core.expression_lang.evaluator import evaluate
from exprtree.core.expression_lang.parser import parse


def evaluate_text(source: str, variables: Mapping[str, float] | None = None) -> float:
    """Parse ``source`` and evaluate it against ``variables``.

    Both failure phases surface as ``ExprError`` subclasses: ``ParseError``
    when the text is malformed, ``EvalError`` when a variable is missing.
    """
    tree = parse(source)
    return evaluate(tree, variables if variables is not None else {})
