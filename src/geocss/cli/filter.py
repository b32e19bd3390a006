"""CLI command: geocss filter -- print the normalised filter of expressions."""

from __future__ import annotations

import sys
from typing import Sequence

import click

from geocss.errors import ParseError
from geocss.filter.base import PredicateFactory
from geocss.filter.factory import Filters
from geocss.selector import (
    AndSelector,
    ExpressionSelector,
    NotSelector,
    OrSelector,
    Selector,
    filter_opt,
)


def build_selector(
    expressions: Sequence[str],
    filters: PredicateFactory,
    any_: bool = False,
    negate: bool = False,
) -> Selector:
    """Parse each expression and combine them into one compound selector."""
    children = tuple(ExpressionSelector.parse(e, filters) for e in expressions)
    combined: Selector = OrSelector(children) if any_ else AndSelector(children)
    if negate:
        combined = NotSelector(combined)
    return combined


@click.command("filter")
@click.argument("expressions", nargs=-1, required=True)
@click.option("--any", "any_", is_flag=True, help="OR the expressions instead of AND-ing them.")
@click.option("--negate", is_flag=True, help="Negate the combined filter.")
def filter_command(expressions: tuple[str, ...], any_: bool, negate: bool) -> None:
    """Combine filter EXPRESSIONS and print the simplified result.

    INCLUDE and EXCLUDE are folded away, so
    ``geocss filter "a = 1" INCLUDE`` prints ``a = 1``.
    """
    filters = Filters()
    try:
        selector = build_selector(expressions, filters, any_=any_, negate=negate)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(str(filter_opt(selector, filters)))
