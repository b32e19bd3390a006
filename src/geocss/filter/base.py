"""Protocol for the predicate-construction capability used by selectors."""

from __future__ import annotations

from typing import Protocol, Sequence

from geocss.filter.predicates import Predicate


class PredicateFactory(Protocol):
    """Builds predicates on behalf of the selector algebra.

    ``always`` and ``never`` must compare equal (``==``) to the predicates the
    factory treats as the constant-true and constant-false filters.
    """

    @property
    def always(self) -> Predicate: ...

    @property
    def never(self) -> Predicate: ...

    def negate(self, predicate: Predicate) -> Predicate: ...

    def and_(self, predicates: Sequence[Predicate]) -> Predicate: ...

    def or_(self, predicates: Sequence[Predicate]) -> Predicate: ...

    def by_feature_id(self, feature_id: str) -> Predicate: ...

    def parse_expression(self, text: str) -> Predicate: ...
