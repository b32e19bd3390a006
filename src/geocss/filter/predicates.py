"""Feature predicates: the filter values that selectors reduce to.

Predicates are immutable and compare structurally, so ``p == ALWAYS`` and
``p == NEVER`` are the checks the selector algebra relies on.  Each predicate
can be evaluated against a :class:`Feature` and renders as ECQL-like text.
"""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

Scalar = str | int | float


@dataclass(frozen=True, eq=False)
class Feature:
    """A dataset record: an identifier plus its attribute values.

    Features compare and hash by identity; the attribute dict stays mutable
    for the reader that builds it.
    """

    id: str
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Feature:
        """Build a feature from a GeoJSON-like ``{"id", "properties"}`` mapping."""
        return cls(id=str(data.get("id", "")), attributes=dict(data.get("properties") or {}))


class Predicate:
    """Base class for all feature predicates."""

    def evaluate(self, feature: Feature) -> bool:
        raise NotImplementedError


def _literal(value: Scalar) -> str:
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    return str(value)


def _group(predicate: Predicate) -> str:
    if isinstance(predicate, (Conjunction, Disjunction)):
        return f"({predicate})"
    return str(predicate)


_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
_KEYWORDS = {"AND", "OR", "NOT", "IS", "NULL", "LIKE", "BETWEEN", "IN", "INCLUDE", "EXCLUDE"}


def _name(name: str) -> str:
    """Render an attribute name, double-quoting it unless it is a bare word."""
    if _NAME_RE.fullmatch(name) and name.upper() not in _KEYWORDS:
        return name
    return f'"{name}"'


def _align(actual: Any, expected: Scalar) -> tuple[Any, Any] | None:
    """Pair an attribute value with a literal so the two can be compared.

    Numeric strings on either side are read as floats when the other side is
    a number.  Returns None when one side is numeric and the other is not.
    """
    actual_numeric = isinstance(actual, (int, float))
    expected_numeric = isinstance(expected, (int, float))
    try:
        if expected_numeric and not actual_numeric:
            return float(actual), expected
        if actual_numeric and not expected_numeric:
            return actual, float(expected)
    except (TypeError, ValueError):
        return None
    return actual, expected


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Always(Predicate):
    """Matches every feature."""

    def evaluate(self, feature: Feature) -> bool:
        return True

    def __str__(self) -> str:
        return "INCLUDE"


@dataclass(frozen=True)
class Never(Predicate):
    """Matches no feature."""

    def evaluate(self, feature: Feature) -> bool:
        return False

    def __str__(self) -> str:
        return "EXCLUDE"


ALWAYS = Always()
NEVER = Never()


# ---------------------------------------------------------------------------
# Logical operators
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Negation(Predicate):
    operand: Predicate

    def evaluate(self, feature: Feature) -> bool:
        return not self.operand.evaluate(feature)

    def __str__(self) -> str:
        return f"NOT ({self.operand})"


@dataclass(frozen=True)
class Conjunction(Predicate):
    operands: tuple[Predicate, ...]

    def evaluate(self, feature: Feature) -> bool:
        return all(p.evaluate(feature) for p in self.operands)

    def __str__(self) -> str:
        return " AND ".join(_group(p) for p in self.operands)


@dataclass(frozen=True)
class Disjunction(Predicate):
    operands: tuple[Predicate, ...]

    def evaluate(self, feature: Feature) -> bool:
        return any(p.evaluate(feature) for p in self.operands)

    def __str__(self) -> str:
        return " OR ".join(_group(p) for p in self.operands)


# ---------------------------------------------------------------------------
# Atoms
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FeatureIdIn(Predicate):
    """Matches features whose id is one of *ids*."""

    ids: tuple[str, ...]

    def evaluate(self, feature: Feature) -> bool:
        return feature.id in self.ids

    def __str__(self) -> str:
        return "IN (" + ", ".join(_literal(i) for i in self.ids) + ")"


_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "=": operator.eq,
    "<>": operator.ne,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


@dataclass(frozen=True)
class Comparison(Predicate):
    """Binary comparison between an attribute and a literal.

    A missing attribute, or one that cannot be ordered against the literal,
    never matches.
    """

    property: str
    operator: str
    value: Scalar

    def __post_init__(self) -> None:
        if self.operator not in _OPERATORS:
            raise ValueError(f"Unknown comparison operator: {self.operator!r}")

    def evaluate(self, feature: Feature) -> bool:
        actual = feature.attributes.get(self.property)
        if actual is None:
            return False
        pair = _align(actual, self.value)
        if pair is None:
            return False
        try:
            return _OPERATORS[self.operator](*pair)
        except TypeError:
            return False

    def __str__(self) -> str:
        return f"{_name(self.property)} {self.operator} {_literal(self.value)}"


@dataclass(frozen=True)
class IsNull(Predicate):
    property: str

    def evaluate(self, feature: Feature) -> bool:
        return feature.attributes.get(self.property) is None

    def __str__(self) -> str:
        return f"{_name(self.property)} IS NULL"


@dataclass(frozen=True)
class Like(Predicate):
    """SQL-style pattern match: ``%`` is any run of characters, ``_`` one."""

    property: str
    pattern: str

    def _regex(self) -> str:
        parts = []
        for char in self.pattern:
            if char == "%":
                parts.append(".*")
            elif char == "_":
                parts.append(".")
            else:
                parts.append(re.escape(char))
        return "".join(parts)

    def evaluate(self, feature: Feature) -> bool:
        actual = feature.attributes.get(self.property)
        if actual is None:
            return False
        return re.fullmatch(self._regex(), str(actual), re.DOTALL) is not None

    def __str__(self) -> str:
        return f"{_name(self.property)} LIKE {_literal(self.pattern)}"


@dataclass(frozen=True)
class Between(Predicate):
    """Inclusive range test."""

    property: str
    lower: Scalar
    upper: Scalar

    def evaluate(self, feature: Feature) -> bool:
        actual = feature.attributes.get(self.property)
        if actual is None:
            return False
        low = _align(actual, self.lower)
        high = _align(actual, self.upper)
        if low is None or high is None:
            return False
        try:
            return low[1] <= low[0] and high[0] <= high[1]
        except TypeError:
            return False

    def __str__(self) -> str:
        return f"{_name(self.property)} BETWEEN {_literal(self.lower)} AND {_literal(self.upper)}"


@dataclass(frozen=True)
class InList(Predicate):
    property: str
    values: tuple[Scalar, ...]

    def evaluate(self, feature: Feature) -> bool:
        actual = feature.attributes.get(self.property)
        if actual is None:
            return False
        pairs = (_align(actual, v) for v in self.values)
        return any(pair is not None and pair[0] == pair[1] for pair in pairs)

    def __str__(self) -> str:
        return f"{_name(self.property)} IN (" + ", ".join(_literal(v) for v in self.values) + ")"
