"""Selector algebra: the condition tree of a style rule and its filter.

Selectors come in three families:

* data selectors (``*``, ``#id``, ``[expr]``, wrapped predicates) always reduce
  to a predicate;
* meta selectors (type names, ``@`` pseudo selectors, ``:pseudo`` contexts)
  carry styling metadata and never reduce to a predicate;
* compound selectors (NOT / AND / OR) reduce to a predicate only when every
  child does.

:func:`filter_opt` performs the reduction and keeps the result minimal:
``ALWAYS`` and ``NEVER`` are absorbed or elided so callers can compare the
result against them to skip filtering altogether.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from geocss.filter.base import PredicateFactory
from geocss.filter.predicates import Predicate


# ---------------------------------------------------------------------------
# Data selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AcceptSelector:
    """Matches every feature (``*``)."""

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True)
class IdSelector:
    """Matches the feature with the given id (``#id``)."""

    id: str

    def __str__(self) -> str:
        return f"#{self.id}"


@dataclass(frozen=True)
class ExpressionSelector:
    """A filter expression (``[population > 1000]``).

    Build through :meth:`parse` so malformed text fails immediately rather
    than when the rule's filter is requested.
    """

    expression: str
    predicate: Predicate = field(compare=False, repr=False)

    @classmethod
    def parse(cls, expression: str, filters: PredicateFactory) -> ExpressionSelector:
        return cls(expression, filters.parse_expression(expression))

    def __str__(self) -> str:
        return self.expression


@dataclass(frozen=True)
class PredicateSelector:
    """Wraps a predicate that was built elsewhere."""

    predicate: Predicate

    def __str__(self) -> str:
        return str(self.predicate)


# ---------------------------------------------------------------------------
# Meta selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TypenameSelector:
    """Restricts a rule to a feature type (layer) by name."""

    typename: str

    def __str__(self) -> str:
        return self.typename


@dataclass(frozen=True)
class PseudoSelector:
    """Rendering-time condition such as ``@scale < 50000``."""

    property: str
    operator: str
    value: str

    def __str__(self) -> str:
        return f"@{self.property}{self.operator}{self.value}"


@dataclass(frozen=True)
class PseudoClass:
    """Context scoping properties to a symbolizer, e.g. ``:stroke``."""

    name: str

    def __str__(self) -> str:
        return f":{self.name}"


@dataclass(frozen=True)
class ParameterizedPseudoClass:
    """Context scoping properties to the n-th symbol, e.g. ``:nth-stroke(2)``."""

    name: str
    param: str

    def __str__(self) -> str:
        return f":{self.name}({self.param})"


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


def _group(selector: Selector) -> str:
    if isinstance(selector, (AndSelector, OrSelector)):
        return f"({selector})"
    return str(selector)


@dataclass(frozen=True)
class NotSelector:
    selector: Selector

    def __str__(self) -> str:
        return f"NOT {_group(self.selector)}"


@dataclass(frozen=True)
class AndSelector:
    children: tuple[Selector, ...]

    def __str__(self) -> str:
        return " AND ".join(_group(c) for c in self.children)


@dataclass(frozen=True)
class OrSelector:
    children: tuple[Selector, ...]

    def __str__(self) -> str:
        return " OR ".join(_group(c) for c in self.children)


Context = Union[PseudoClass, ParameterizedPseudoClass]

Selector = Union[
    AcceptSelector,
    IdSelector,
    ExpressionSelector,
    PredicateSelector,
    TypenameSelector,
    PseudoSelector,
    PseudoClass,
    ParameterizedPseudoClass,
    NotSelector,
    AndSelector,
    OrSelector,
]

_META = (TypenameSelector, PseudoSelector, PseudoClass, ParameterizedPseudoClass)


def is_meta(selector: Selector) -> bool:
    """True for selectors that only carry styling metadata."""
    return isinstance(selector, _META)


# The canonical "never satisfiable" selector.
EXCLUDE: Selector = NotSelector(AcceptSelector())


# ---------------------------------------------------------------------------
# Reduction
# ---------------------------------------------------------------------------


def _operands(
    children: Iterable[Selector], filters: PredicateFactory
) -> list[Predicate] | None:
    operands = []
    for child in children:
        predicate = filter_opt(child, filters)
        if predicate is None:
            return None
        operands.append(predicate)
    return operands


def filter_opt(selector: Selector, filters: PredicateFactory) -> Predicate | None:
    """Reduce *selector* to a predicate, or ``None`` for styling metadata.

    Compound selectors return ``None`` as soon as any child does.  ``NEVER``
    absorbs a conjunction and ``ALWAYS`` absorbs a disjunction; the identity
    element of each is dropped, and a single remaining operand is returned
    unwrapped.  A double negation cancels out instead of stacking.
    """
    if isinstance(selector, AcceptSelector):
        return filters.always
    if isinstance(selector, IdSelector):
        return filters.by_feature_id(selector.id)
    if isinstance(selector, (ExpressionSelector, PredicateSelector)):
        return selector.predicate
    if isinstance(selector, _META):
        return None

    if isinstance(selector, NotSelector):
        if isinstance(selector.selector, NotSelector):
            return filter_opt(selector.selector.selector, filters)
        inner = filter_opt(selector.selector, filters)
        if inner is None:
            return None
        if inner == filters.always:
            return filters.never
        if inner == filters.never:
            return filters.always
        return filters.negate(inner)

    if isinstance(selector, AndSelector):
        operands = _operands(selector.children, filters)
        if operands is None:
            return None
        if any(p == filters.never for p in operands):
            return filters.never
        operands = [p for p in operands if p != filters.always]
        if not operands:
            return filters.always
        if len(operands) == 1:
            return operands[0]
        return filters.and_(operands)

    if isinstance(selector, OrSelector):
        operands = _operands(selector.children, filters)
        if operands is None:
            return None
        if any(p == filters.always for p in operands):
            return filters.always
        operands = [p for p in operands if p != filters.never]
        if not operands:
            return filters.never
        if len(operands) == 1:
            return operands[0]
        return filters.or_(operands)

    raise TypeError(f"Not a selector: {selector!r}")


def simplify(selectors: Iterable[Selector], filters: PredicateFactory) -> tuple[Selector, ...]:
    """Collapse an implicitly AND-ed selector sequence that can never match.

    If any element reduces to ``NEVER`` the whole sequence becomes
    ``(EXCLUDE,)``; otherwise it is returned unchanged.
    """
    selectors = tuple(selectors)
    if any(filter_opt(s, filters) == filters.never for s in selectors):
        return (EXCLUDE,)
    return selectors
