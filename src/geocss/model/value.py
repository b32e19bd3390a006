"""Property values and declarations attached to style rules."""

from __future__ import annotations

from dataclasses import dataclass


class Value:
    """Base class for a single value in a property declaration."""


@dataclass(frozen=True)
class Literal(Value):
    """A bare token such as ``2``, ``#ff0000`` or ``round``."""

    body: str

    def __str__(self) -> str:
        return self.body


@dataclass(frozen=True)
class FunctionCall(Value):
    """A function-style value such as ``url(pin.svg)`` or ``rgb(0,0,255)``."""

    name: str
    parameters: tuple[Value, ...] = ()

    def __str__(self) -> str:
        return f"{self.name}({','.join(str(p) for p in self.parameters)})"


@dataclass(frozen=True)
class RawExpression(Value):
    """An embedded expression evaluated per feature, written ``[expr]``."""

    body: str

    def __str__(self) -> str:
        return f"[{self.body}]"


@dataclass(frozen=True)
class Property:
    """A declaration: a name plus comma-separated groups of values.

    ``stroke: red 2, blue 1`` has two groups, ``(red, 2)`` and ``(blue, 1)``.
    """

    name: str
    values: tuple[tuple[Value, ...], ...] = ()

    def __str__(self) -> str:
        groups = ",".join("[" + ",".join(str(v) for v in group) + "]" for group in self.values)
        return f"{self.name}: {groups}"
