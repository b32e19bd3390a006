"""Default predicate factory backed by :mod:`geocss.filter.predicates`."""

from __future__ import annotations

from typing import Sequence

from geocss.filter.parser import parse_expression
from geocss.filter.predicates import (
    ALWAYS,
    NEVER,
    Conjunction,
    Disjunction,
    FeatureIdIn,
    Negation,
    Predicate,
)


class Filters:
    """Builds in-memory predicates that can be evaluated against features."""

    @property
    def always(self) -> Predicate:
        return ALWAYS

    @property
    def never(self) -> Predicate:
        return NEVER

    def negate(self, predicate: Predicate) -> Predicate:
        return Negation(predicate)

    def and_(self, predicates: Sequence[Predicate]) -> Predicate:
        return Conjunction(tuple(predicates))

    def or_(self, predicates: Sequence[Predicate]) -> Predicate:
        return Disjunction(tuple(predicates))

    def by_feature_id(self, feature_id: str) -> Predicate:
        return FeatureIdIn((feature_id,))

    def parse_expression(self, text: str) -> Predicate:
        return parse_expression(text)
