"""
Expression evaluator for the exprtree expression language.

Evaluates expression tree nodes against a mapping of variable values.
Pure evaluation: no I/O, no side effects, and no use of Python's eval().
Arithmetic follows IEEE-754 double precision, including division by zero.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from exprtree.core.errors import EvalError, NoValue
from exprtree.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    Negate,
    Variable,
)

logger = logging.getLogger(__name__)


def evaluate(expr: Expr, variables: Mapping[str, float]) -> float:
    """Evaluate an expression tree against a variable mapping.

    Args:
        expr: Parsed expression tree.
        variables: Mapping of variable name -> value. Read, never modified.

    Returns:
        The computed value.

    Raises:
        NoValue: If the tree references a variable missing from ``variables``.
    """
    return _interpret(expr, variables)


def _interpret(expr: Expr, variables: Mapping[str, float]) -> float:
    """Post-order walk with an explicit stack, left operands first.

    Each node is pushed once to schedule its children and, for Negate and
    BinaryExpr, once more to combine their values. Stack depth grows with
    the tree, not the Python call stack.
    """
    values: list[float] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, ready = pending.pop()

        if isinstance(node, Literal):
            values.append(node.value)
        elif isinstance(node, Variable):
            values.append(_interpret_variable(node, variables))
        elif isinstance(node, Negate):
            if ready:
                values.append(-values.pop())
            else:
                pending.append((node, True))
                pending.append((node.operand, False))
        elif isinstance(node, BinaryExpr):
            if ready:
                right = values.pop()
                left = values.pop()
                values.append(_apply_binary(node.op, left, right))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        else:
            raise EvalError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _interpret_variable(expr: Variable, variables: Mapping[str, float]) -> float:
    if expr.name not in variables:
        logger.debug("No value for variable %r", expr.name)
        raise NoValue(expr.name)
    return float(variables[expr.name])


def _apply_binary(op: BinaryOp, left: float, right: float) -> float:
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right
    if op == BinaryOp.MUL:
        return left * right
    if op == BinaryOp.DIV:
        return _divide(left, right)

    raise EvalError(f"Unknown binary op: {op}")


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is nan."""
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)
