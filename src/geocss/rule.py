"""Style rules and their cascade operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from geocss.config import DEFAULT_CONFIG, StyleConfig
from geocss.errors import UnresolvedSelectorError
from geocss.filter.base import PredicateFactory
from geocss.filter.predicates import Predicate
from geocss.model.description import Description
from geocss.model.value import Property
from geocss.selector import (
    EXCLUDE,
    AndSelector,
    Context,
    NotSelector,
    OrSelector,
    ParameterizedPseudoClass,
    PseudoClass,
    Selector,
    filter_opt,
    is_meta,
    simplify,
)

logger = logging.getLogger(__name__)

ContextEntry = tuple[Optional[Context], tuple[Property, ...]]


@dataclass(frozen=True)
class Rule:
    """A style rule: which features it matches and what it declares.

    The selectors are implicitly AND-ed.  Each context entry pairs an
    optional pseudo-class key with the property bundle declared under it;
    ``None`` keys hold the rule's plain properties.
    """

    description: Description = Description.EMPTY
    selectors: tuple[Selector, ...] = ()
    contexts: tuple[ContextEntry, ...] = ()

    def merge(
        self, other: Rule, filters: PredicateFactory, config: StyleConfig = DEFAULT_CONFIG
    ) -> Rule:
        """Combine two rules into one that matches features both match.

        Descriptions are combined (this rule first), selectors concatenated
        and simplified, and context entries concatenated in order.
        """
        selectors = simplify(self.selectors + other.selectors, filters)
        if selectors == (EXCLUDE,):
            logger.debug("Merged rule can never match: %s + %s", self, other)
        return Rule(
            description=Description.combine(self.description, other.description, config),
            selectors=selectors,
            contexts=self.contexts + other.contexts,
        )

    @property
    def is_satisfiable(self) -> bool:
        return EXCLUDE not in self.selectors

    def get_filter(self, filters: PredicateFactory) -> Predicate:
        """Return the predicate of the rule's data selectors.

        Plain meta selectors (type names, pseudo classes) are skipped.  A
        compound selector that mixes in meta selectors cannot be reduced and
        raises UnresolvedSelectorError: its contexts should have been moved
        into the context table first.
        """
        data: list[Selector] = []
        unresolved: list[Selector] = []
        for selector in self.selectors:
            if filter_opt(selector, filters) is not None:
                data.append(selector)
            elif not is_meta(selector):
                unresolved.append(selector)
        if unresolved:
            raise UnresolvedSelectorError(
                "Selectors do not reduce to a filter: "
                + ", ".join(str(s) for s in unresolved),
                unresolved,
            )
        return filter_opt(AndSelector(tuple(data)), filters)  # type: ignore[return-value]

    def negated_selector(self) -> Selector:
        """Selector matching every feature this rule does not match."""
        return OrSelector(tuple(NotSelector(s) for s in self.selectors))

    @property
    def properties(self) -> tuple[Property, ...]:
        """Properties declared outside any pseudo-class context."""
        return tuple(p for key, props in self.contexts if key is None for p in props)

    def context(
        self, symbol: str, order: int, config: StyleConfig = DEFAULT_CONFIG
    ) -> tuple[Property, ...]:
        """Properties that apply to the *order*-th *symbol* symbolizer.

        Entries keyed ``:nth-<symbol>(order)``, ``:nth-symbol(order)``,
        ``:<symbol>`` or ``:symbol`` all apply, in declaration order.
        """
        fallback = config.symbol_fallback
        keys = (
            ParameterizedPseudoClass(config.nth_prefix + symbol, str(order)),
            ParameterizedPseudoClass(config.nth_prefix + fallback, str(order)),
            PseudoClass(symbol),
            PseudoClass(fallback),
        )
        return tuple(p for key, props in self.contexts if key in keys for p in props)

    def __str__(self) -> str:
        selectors = " ".join(str(s) for s in self.selectors) or "*"
        entries = []
        for key, props in self.contexts:
            declarations = "; ".join(str(p) for p in props)
            entries.append(declarations if key is None else f"{key} {{ {declarations} }}")
        body = "; ".join(entries)
        return f"{selectors} {{ {body} }}"


EMPTY_RULE = Rule(Description.EMPTY, (), ())
