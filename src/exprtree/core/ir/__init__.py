"""Expression tree types."""

from exprtree.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    Negate,
    Variable,
    render,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
    "Negate",
    "Variable",
    "render",
]
