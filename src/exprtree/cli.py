"""
exprtree CLI - Entry point.

Evaluates a single expression given on the command line:

    expr "10 + x * 2" x=12
    expr --tree "(a - b) / 2" a=1 b=3

Expressions that start with '-' must follow '--' so they are not read as
options: ``expr -- "-x + 1" x=2``.
"""

from __future__ import annotations

import logging
import sys

import typer

from exprtree._version import get_version
from exprtree.core.environment import LogLevel, get_log_level
from exprtree.core.errors import ExprError
from exprtree.core.expression_lang.evaluator import evaluate
from exprtree.core.expression_lang.parser import parse

logger = logging.getLogger(__name__)


class AssignmentError(ValueError):
    """A NAME=VALUE argument that cannot be turned into a variable binding."""


def parse_assignments(assignments: list[str]) -> dict[str, float]:
    """Build the variable mapping from ``NAME=VALUE`` strings.

    The first '=' separates name from value; later assignments to the same
    name win.

    Raises:
        AssignmentError: If an item has no '=', an empty name, or a value
            that is not a number.
    """
    variables: dict[str, float] = {}
    for item in assignments:
        name, sep, raw = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise AssignmentError(f"invalid assignment '{item}' (expected NAME=VALUE)")
        try:
            variables[name] = float(raw)
        except ValueError:
            raise AssignmentError(
                f"invalid assignment '{item}' ('{raw}' is not a number)"
            ) from None
    return variables


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"exprtree {get_version()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    level = LogLevel.DEBUG if verbose else get_log_level()
    logging.basicConfig(
        level=level.as_logging_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


app = typer.Typer(
    help="Evaluate an arithmetic expression with optional NAME=VALUE variables.",
    add_completion=False,
)


@app.command()
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '10 + x'"),
    assignments: list[str] | None = typer.Argument(  # noqa: B008
        None, help="Variable bindings in NAME=VALUE form"
    ),
    tree: bool = typer.Option(False, "--tree", help="Print the parsed expression tree"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Evaluate EXPRESSION and print the result.

    Exits with status 1 on a malformed assignment, a parse error, or a
    variable without a value.

    Parsing and evaluation run as two calls rather than through
    evaluate_text so the tree is at hand for --tree; the result and the
    errors are the same.
    """
    _configure_logging(verbose)

    try:
        variables = parse_assignments(assignments or [])
    except AssignmentError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.debug("Evaluating %r with %d variable(s)", expression, len(variables))
    try:
        parsed = parse(expression)
        if tree:
            typer.echo(str(parsed))
        result = evaluate(parsed, variables)
    except ExprError as e:
        typer.echo(e.display(), err=True)
        raise typer.Exit(code=1)

    typer.echo(str(result))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
