"""Feature predicates, the default predicate factory and the ECQL parser."""

from geocss.filter.base import PredicateFactory
from geocss.filter.factory import Filters
from geocss.filter.parser import parse_expression
from geocss.filter.predicates import (
    ALWAYS,
    NEVER,
    Always,
    Between,
    Comparison,
    Conjunction,
    Disjunction,
    Feature,
    FeatureIdIn,
    InList,
    IsNull,
    Like,
    Negation,
    Never,
    Predicate,
)

__all__ = [
    # capability
    "PredicateFactory",
    "Filters",
    "parse_expression",
    # predicates
    "Predicate",
    "Feature",
    "ALWAYS",
    "NEVER",
    "Always",
    "Never",
    "Negation",
    "Conjunction",
    "Disjunction",
    "FeatureIdIn",
    "Comparison",
    "IsNull",
    "Like",
    "Between",
    "InList",
]
