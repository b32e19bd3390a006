"""Error types raised by the selector algebra and the expression parser."""

from __future__ import annotations

from typing import Sequence


class ParseError(Exception):
    """Raised when filter expression text cannot be parsed.

    ``expression`` holds the offending text; ``line`` and ``column`` point
    into it when the parser could locate the problem.
    """

    def __init__(
        self,
        message: str,
        expression: str = "",
        line: int | None = None,
        column: int | None = None,
    ):
        self.expression = expression
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.expression:
            return f"{message} (in {self.expression!r})"
        return message


class UnresolvedSelectorError(Exception):
    """Raised when a rule's selectors cannot be reduced to a single filter.

    This happens when a compound selector still mixes in meta selectors
    (type names, pseudo classes) that should have been split off into the
    rule's context table.
    """

    def __init__(self, message: str, selectors: Sequence[object] = ()):
        self.selectors = tuple(selectors)
        super().__init__(message)
