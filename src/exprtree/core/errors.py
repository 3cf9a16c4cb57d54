"""
Error types for expression parsing and evaluation.

Every failure raised by the core derives from ExprError. The two phases
are told apart by ParseError and EvalError, each of which keeps the
structured detail (rule, token, variable name) as attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from exprtree.core.expression_lang.tokenizer import Token


class ExprError(Exception):
    """Base exception for all exprtree errors."""

    phase: ClassVar[str] = "expression"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def display(self) -> str:
        """Format the error with a prefix naming the failing phase."""
        return f"{self.phase.capitalize()} error: {self.message}"


class ParseError(ExprError):
    """
    Raised when expression text cannot be parsed.

    Examples:
    - Input ends while a rule still needs a token
    - A token does not fit the rule being parsed
    - A numeric literal that is not a valid float
    - Parentheses nested past the parser limit
    """

    phase: ClassVar[str] = "parse"

    def __init__(self, message: str, rule: str) -> None:
        self.rule = rule
        super().__init__(message)


class UnexpectedEndOfInput(ParseError):
    """Input was exhausted while ``rule`` still required a token."""

    def __init__(self, rule: str, expected: str) -> None:
        self.expected = expected
        super().__init__(
            f"unexpected end of input when parsing {rule} (expected {expected})",
            rule,
        )


class UnexpectedToken(ParseError):
    """A token was present but did not match what ``rule`` required."""

    def __init__(self, token: Token, rule: str, expected: str) -> None:
        self.token = token
        self.expected = expected
        super().__init__(
            f"unexpected token '{token}' at position {token.pos} "
            f"when parsing {rule} (expected {expected})",
            rule,
        )


class InvalidNumber(ParseError):
    """A run of digits and dots that does not form a float, e.g. ``1.2.3``."""

    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        self.pos = pos
        super().__init__(f"invalid number '{text}' at position {pos}", "number")


class NestingTooDeep(ParseError):
    """Parentheses nested deeper than the parser's limit."""

    def __init__(self, token: Token, limit: int) -> None:
        self.token = token
        self.limit = limit
        super().__init__(
            f"parentheses nested deeper than {limit} levels at position {token.pos}",
            "factor",
        )


class EvalError(ExprError):
    """Raised when a parsed expression cannot be evaluated."""

    phase: ClassVar[str] = "evaluation"


class NoValue(EvalError):
    """A variable referenced by the expression is missing from the mapping."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"no value for variable '{name}'")
