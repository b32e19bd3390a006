"""Lark Transformer that converts ECQL-style filter text into predicates."""

from __future__ import annotations

import functools
import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from geocss.errors import ParseError
from geocss.filter.predicates import (
    ALWAYS,
    NEVER,
    Between,
    Comparison,
    Conjunction,
    Disjunction,
    FeatureIdIn,
    InList,
    IsNull,
    Like,
    Negation,
    Predicate,
    Scalar,
)

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


def _unquote(token: Token) -> str:
    """Strip single quotes and collapse doubled quotes inside a string literal."""
    return str(token)[1:-1].replace("''", "'")


class ExpressionTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a predicate tree."""

    # ---- values ----

    def number(self, items: list[Token]) -> Scalar:
        raw = str(items[0])
        if any(c in raw for c in ".eE"):
            return float(raw)
        return int(raw)

    def string(self, items: list[Token]) -> str:
        return _unquote(items[0])

    def attribute(self, items: list[Token]) -> str:
        raw = str(items[0])
        if raw.startswith('"'):
            return raw[1:-1]
        return raw

    # ---- atoms ----

    def include(self, items: list[object]) -> Predicate:
        return ALWAYS

    def exclude(self, items: list[object]) -> Predicate:
        return NEVER

    def id_in(self, items: list[Token]) -> Predicate:
        return FeatureIdIn(tuple(_unquote(t) for t in items))

    def compare(self, items: list[object]) -> Predicate:
        name, op, value = items
        return Comparison(str(name), str(op), value)  # type: ignore[arg-type]

    def is_null(self, items: list[object]) -> Predicate:
        return IsNull(str(items[0]))

    def is_not_null(self, items: list[object]) -> Predicate:
        return Negation(IsNull(str(items[0])))

    def like(self, items: list[object]) -> Predicate:
        return Like(str(items[0]), _unquote(items[1]))  # type: ignore[arg-type]

    def not_like(self, items: list[object]) -> Predicate:
        return Negation(self.like(items))

    def between(self, items: list[object]) -> Predicate:
        name, lower, upper = items
        return Between(str(name), lower, upper)  # type: ignore[arg-type]

    def in_list(self, items: list[object]) -> Predicate:
        return InList(str(items[0]), tuple(items[1:]))  # type: ignore[arg-type]

    def not_in_list(self, items: list[object]) -> Predicate:
        return Negation(self.in_list(items))

    # ---- logical ----

    def negation(self, items: list[Predicate]) -> Predicate:
        return Negation(items[0])

    def and_expr(self, items: list[Predicate]) -> Predicate:
        return Conjunction(tuple(items))

    def or_expr(self, items: list[Predicate]) -> Predicate:
        return Disjunction(tuple(items))


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_expression(text: str) -> Predicate:
    """Parse ECQL-style filter text into a predicate.

    Raises ParseError (with line/column when Lark reports them) on malformed
    input, including empty text.
    """
    try:
        tree = _parser().parse(text)
        predicate = ExpressionTransformer().transform(tree)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(
            f"Invalid filter expression: {e}", expression=text, line=line, column=column
        ) from e
    logger.debug("Parsed filter expression %r as %s", text, predicate)
    return predicate
