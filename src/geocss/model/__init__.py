"""geocss model layer -- public type re-exports."""

from geocss.model.description import Description
from geocss.model.value import FunctionCall, Literal, Property, RawExpression, Value

__all__ = [
    # description
    "Description",
    # values
    "Value",
    "Literal",
    "FunctionCall",
    "RawExpression",
    "Property",
]
