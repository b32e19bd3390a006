"""geocss -- CSS-style cartographic rules reduced to feature filters."""

__version__ = "0.1.0"

from geocss.config import DEFAULT_CONFIG, StyleConfig  # noqa: E402
from geocss.errors import ParseError, UnresolvedSelectorError  # noqa: E402
from geocss.filter import Feature, Filters, PredicateFactory, parse_expression  # noqa: E402
from geocss.model import Description, FunctionCall, Literal, Property, RawExpression  # noqa: E402
from geocss.rule import EMPTY_RULE, Rule  # noqa: E402
from geocss.selector import (  # noqa: E402
    EXCLUDE,
    AcceptSelector,
    AndSelector,
    ExpressionSelector,
    IdSelector,
    NotSelector,
    OrSelector,
    ParameterizedPseudoClass,
    PredicateSelector,
    PseudoClass,
    PseudoSelector,
    TypenameSelector,
    filter_opt,
    is_meta,
    simplify,
)

__all__ = [
    "__version__",
    # config / errors
    "StyleConfig",
    "DEFAULT_CONFIG",
    "ParseError",
    "UnresolvedSelectorError",
    # predicates
    "Feature",
    "Filters",
    "PredicateFactory",
    "parse_expression",
    # model
    "Description",
    "Literal",
    "FunctionCall",
    "RawExpression",
    "Property",
    # selectors
    "AcceptSelector",
    "IdSelector",
    "ExpressionSelector",
    "PredicateSelector",
    "TypenameSelector",
    "PseudoSelector",
    "PseudoClass",
    "ParameterizedPseudoClass",
    "NotSelector",
    "AndSelector",
    "OrSelector",
    "EXCLUDE",
    "filter_opt",
    "is_meta",
    "simplify",
    # rules
    "Rule",
    "EMPTY_RULE",
]
