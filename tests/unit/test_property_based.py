"""
Property-based tests using Hypothesis.

Random expressions drawn from the grammar are checked against an
independent shunting-yard evaluator, and arbitrary text is checked to
fail only with the documented error types.
"""

from __future__ import annotations

import math
import operator
import re
from collections.abc import Callable

from hypothesis import given, settings
from hypothesis import strategies as st

from exprtree.core.errors import InvalidNumber, NoValue, ParseError
from exprtree.core.expression_lang.engine import evaluate_text
from exprtree.core.expression_lang.parser import parse
from exprtree.core.expression_lang.tokenizer import tokenize

# =============================================================================
# Reference evaluator (shunting-yard)
# =============================================================================


def _ieee_div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


_BINARY: dict[str, tuple[int, Callable[[float, float], float]]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, _ieee_div),
}
_UNARY = {"neg": operator.neg, "pos": operator.pos}
_UNARY_PRECEDENCE = 3
_REF_TOKEN_RE = re.compile(r"[0-9][0-9.]*|[-+*/()]")


def _precedence(op: str) -> int:
    return _UNARY_PRECEDENCE if op in _UNARY else _BINARY[op][0]


def reference_eval(text: str) -> float:
    """Evaluate literals, + - * /, unary signs and parentheses by shunting-yard."""
    output: list[float] = []
    ops: list[str] = []

    def apply(op: str) -> None:
        if op in _UNARY:
            output.append(_UNARY[op](output.pop()))
            return
        right = output.pop()
        left = output.pop()
        output.append(_BINARY[op][1](left, right))

    prev: str | None = None
    for tok in _REF_TOKEN_RE.findall(text):
        if tok[0].isdigit():
            output.append(float(tok))
        elif tok == "(":
            ops.append(tok)
        elif tok == ")":
            while ops[-1] != "(":
                apply(ops.pop())
            ops.pop()
        elif prev is None or prev == "(" or prev in _BINARY:
            ops.append("neg" if tok == "-" else "pos")
        else:
            prec = _BINARY[tok][0]
            while ops and ops[-1] != "(" and _precedence(ops[-1]) >= prec:
                apply(ops.pop())
            ops.append(tok)
        prev = tok

    while ops:
        apply(ops.pop())
    assert len(output) == 1
    return output[0]


def _same_float(a: float, b: float) -> bool:
    return a == b or (math.isnan(a) and math.isnan(b))


# =============================================================================
# Strategies
# =============================================================================

numbers = st.one_of(
    st.integers(min_value=0, max_value=10_000).map(str),
    st.tuples(st.integers(0, 999), st.integers(0, 999)).map(lambda p: f"{p[0]}.{p[1]}"),
)


def _chain(operand: st.SearchStrategy[str], operators: list[str]) -> st.SearchStrategy[str]:
    return st.tuples(
        operand,
        st.lists(st.tuples(st.sampled_from(operators), operand), max_size=3),
    ).map(lambda t: " ".join([t[0], *(f"{op} {rhs}" for op, rhs in t[1])]))


def _expression(children: st.SearchStrategy[str]) -> st.SearchStrategy[str]:
    factor = st.tuples(
        st.sampled_from(["", "-", "+"]),
        st.one_of(numbers, children.map(lambda e: f"({e})")),
    ).map("".join)
    term = _chain(factor, ["*", "/"])
    return _chain(term, ["+", "-"])


expressions = st.recursive(numbers, _expression, max_leaves=20)

# A short run of operator and operand pairs repeated many times after a first
# number, giving flat chains thousands of terms long.
long_chains = st.tuples(
    numbers,
    st.lists(st.tuples(st.sampled_from(["+", "-", "*", "/"]), numbers), min_size=1, max_size=5),
    st.integers(min_value=200, max_value=1000),
).map(lambda t: t[0] + " " + " ".join(f"{op} {rhs}" for op, rhs in t[1] * t[2]))


# =============================================================================
# Properties
# =============================================================================


class TestEvaluationProperties:
    """Tree evaluation agrees with an independent evaluator."""

    @given(expressions)
    @settings(max_examples=300)
    def test_matches_reference_evaluator(self, text: str) -> None:
        """Invariant: precedence, associativity and signs match shunting-yard."""
        assert _same_float(evaluate_text(text, {}), reference_eval(text))

    @given(expressions)
    @settings(max_examples=100)
    def test_evaluation_is_repeatable(self, text: str) -> None:
        """Invariant: same text and mapping give the same value."""
        assert _same_float(evaluate_text(text, {}), evaluate_text(text, {}))

    @given(expressions)
    @settings(max_examples=100)
    def test_parse_is_pure(self, text: str) -> None:
        """Invariant: parsing twice yields equal trees."""
        assert parse(text) == parse(text)

    @given(expressions)
    @settings(max_examples=100)
    def test_rendered_tree_reparses(self, text: str) -> None:
        """Invariant: the parenthesized rendering parses back to the same tree."""
        tree = parse(text)
        assert parse(str(tree)) == tree

    @given(long_chains)
    @settings(max_examples=25, deadline=None)
    def test_long_chains_match_reference_evaluator(self, text: str) -> None:
        """Invariant: flat chains of any length fold left like shunting-yard."""
        assert _same_float(evaluate_text(text, {}), reference_eval(text))

    @given(
        st.text(alphabet=st.sampled_from("abcxyz_"), min_size=1, max_size=8).filter(
            lambda s: s[0] != "_"
        ),
        st.floats(allow_nan=False),
    )
    @settings(max_examples=100)
    def test_variable_substitution(self, name: str, value: float) -> None:
        """Invariant: a bare name evaluates to its bound value."""
        assert evaluate_text(name, {name: value}) == value
        assert evaluate_text(f"-{name}", {name: value}) == -value


class TestRobustnessProperties:
    """Arbitrary text fails only with documented errors."""

    @given(st.text(max_size=100))
    @settings(max_examples=300)
    def test_tokenize_never_crashes(self, text: str) -> None:
        """Invariant: tokenize raises nothing but InvalidNumber."""
        try:
            tokenize(text)
        except InvalidNumber:
            pass

    @given(st.text(alphabet=st.sampled_from("0123456789.xy+-*/^() "), max_size=60))
    @settings(max_examples=300)
    def test_evaluate_text_fails_cleanly(self, text: str) -> None:
        """Invariant: only ParseError or NoValue escape evaluate_text."""
        try:
            evaluate_text(text, {"x": 1.0})
        except (ParseError, NoValue):
            pass
