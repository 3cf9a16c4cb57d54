"""
exprtree - arithmetic expression evaluation over named variables.

Text is tokenized, parsed by recursive descent into an immutable
expression tree, and evaluated against a mapping of variable values.
"""

from __future__ import annotations

from ._version import __version__
from .core.errors import (
    EvalError,
    ExprError,
    InvalidNumber,
    NestingTooDeep,
    NoValue,
    ParseError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .core.expression_lang import (
    Token,
    TokenKind,
    Tokenizer,
    evaluate,
    evaluate_text,
    parse,
    tokenize,
)
from .core.ir import BinaryExpr, BinaryOp, Expr, Literal, Negate, Variable, render

__all__ = [
    "__version__",
    # Pipeline
    "tokenize",
    "Tokenizer",
    "Token",
    "TokenKind",
    "parse",
    "evaluate",
    "evaluate_text",
    # Tree
    "Expr",
    "Literal",
    "Variable",
    "Negate",
    "BinaryExpr",
    "BinaryOp",
    "render",
    # Errors
    "ExprError",
    "ParseError",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "InvalidNumber",
    "NestingTooDeep",
    "EvalError",
    "NoValue",
]
