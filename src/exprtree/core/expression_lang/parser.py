"""
Predictive recursive descent parser for the exprtree expression language.

Grammar (precedence low to high):
    expr    → term (("+" | "-") term)*
    term    → factor (("*" | "/") factor)*
    factor  → ("-" | "+")? (NUMBER | IDENT | "(" expr ")")

Binary operators fold to the left, so ``a - b - c`` parses as
``(a - b) - c``. A factor takes at most one sign: ``x--3`` is
``x - (-3)`` but ``--x`` is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from exprtree.core.errors import NestingTooDeep, UnexpectedEndOfInput, UnexpectedToken
from exprtree.core.expression_lang.tokenizer import Token, TokenKind, Tokenizer
from exprtree.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    Negate,
    Variable,
)

logger = logging.getLogger(__name__)

# Each level of parentheses costs three Python frames (factor, expr, term)
MAX_NESTING_DEPTH = 200

_FACTOR_EXPECTED = "number, identifier or '('"

_ADDITIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


class _Parser:
    """Recursive descent parser with a single token of lookahead."""

    def __init__(self, tokens: Iterator[Token]) -> None:
        self.tokens = tokens
        self._lookahead: Token | None = None
        self._filled = False
        self.depth = 0

    def peek(self) -> Token | None:
        """Return the next token without consuming it, or None at end of input."""
        if not self._filled:
            self._lookahead = next(self.tokens, None)
            self._filled = True
        return self._lookahead

    def advance(self) -> Token | None:
        """Consume and return the next token, or None at end of input."""
        tok = self.peek()
        self._filled = False
        self._lookahead = None
        return tok

    def expect_token(self, rule: str, expected: str) -> Token:
        tok = self.advance()
        if tok is None:
            raise UnexpectedEndOfInput(rule, expected)
        return tok

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """term (('+' | '-') term)*"""
        logger.debug("expr: enter")
        left = self.parse_term()
        while (tok := self.peek()) is not None and tok.kind in _ADDITIVE:
            logger.debug("expr: read %r", tok)
            self.advance()
            right = self.parse_term()
            left = BinaryExpr(op=_ADDITIVE[tok.kind], left=left, right=right)
        logger.debug("expr: leave")
        return left

    def parse_term(self) -> Expr:
        """factor (('*' | '/') factor)*"""
        logger.debug("term: enter")
        left = self.parse_factor()
        while (tok := self.peek()) is not None and tok.kind in _MULTIPLICATIVE:
            logger.debug("term: read %r", tok)
            self.advance()
            right = self.parse_factor()
            left = BinaryExpr(op=_MULTIPLICATIVE[tok.kind], left=left, right=right)
        logger.debug("term: leave")
        return left

    def parse_factor(self) -> Expr:
        """('-' | '+')? (NUMBER | IDENT | '(' expr ')')"""
        logger.debug("factor: enter")
        tok = self.expect_token("factor", f"sign, {_FACTOR_EXPECTED}")

        negate = False
        if tok.kind in (TokenKind.MINUS, TokenKind.PLUS):
            negate = tok.kind == TokenKind.MINUS
            tok = self.expect_token("factor", _FACTOR_EXPECTED)

        logger.debug("factor: read %r", tok)
        expr: Expr
        if tok.kind == TokenKind.NUMBER:
            expr = Literal(value=tok.number)
        elif tok.kind == TokenKind.IDENT:
            expr = Variable(name=tok.value)
        elif tok.kind == TokenKind.LPAREN:
            if self.depth >= MAX_NESTING_DEPTH:
                raise NestingTooDeep(tok, MAX_NESTING_DEPTH)
            self.depth += 1
            expr = self.parse_expr()
            self.depth -= 1
            close = self.expect_token("factor", "')'")
            if close.kind != TokenKind.RPAREN:
                raise UnexpectedToken(close, "factor", "')'")
        else:
            raise UnexpectedToken(tok, "factor", _FACTOR_EXPECTED)

        if negate:
            expr = Negate(operand=expr)
        logger.debug("factor: leave with %s", expr)
        return expr


def parse(source: str) -> Expr:
    """Parse an expression string into an expression tree.

    Args:
        source: Expression string (e.g., "10 + x * 2")

    Returns:
        Parsed expression tree.

    Raises:
        UnexpectedEndOfInput: If the input stops while a rule needs a token.
        UnexpectedToken: If a token does not fit the grammar, including any
            token left over after a complete expression.
        InvalidNumber: If a numeric literal is malformed.
        NestingTooDeep: If parentheses nest deeper than MAX_NESTING_DEPTH.
    """
    logger.debug("Starting parse of %r", source)
    parser = _Parser(iter(Tokenizer(source)))
    expr = parser.parse_expr()

    # Ensure all tokens consumed
    leftover = parser.advance()
    if leftover is not None:
        raise UnexpectedToken(leftover, "expr", "end of input")

    logger.debug("Finished parse: %s", expr)
    return expr
