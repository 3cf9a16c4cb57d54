"""
Expression tree types for exprtree.

Supports:
- Numeric literals: 10, 0.5, 13.
- Variable references: x, rate_2
- Negation: -x
- Arithmetic: +, -, *, /
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class Variable(BaseModel):
    """Reference to a variable, resolved against the mapping at evaluation time."""

    name: str = Field(description="Variable name")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class Negate(BaseModel):
    """Unary minus applied to an operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | Variable | Negate | BinaryExpr

# Rebuild models for recursive forward references
Negate.model_rebuild()
BinaryExpr.model_rebuild()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render(expr: Expr) -> str:
    """Render a tree in fully parenthesized form.

    Every binary node is wrapped in parentheses and a negated negation is
    written ``-(-x)``, since a factor takes a single sign. The walk uses an
    explicit stack, so depth is bounded only by memory.
    """
    parts: list[str] = []
    pending: list[Expr | str] = [expr]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, BinaryExpr):
            pending.extend([")", item.right, f" {item.op.value} ", item.left, "("])
        elif isinstance(item, Negate):
            if isinstance(item.operand, Negate):
                pending.extend([")", item.operand, "-("])
            else:
                pending.extend([item.operand, "-"])
        else:
            parts.append(str(item))
    return "".join(parts)
