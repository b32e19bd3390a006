"""Rule descriptions scraped from ``@title`` / ``@abstract`` doc comments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from geocss.config import DEFAULT_CONFIG, StyleConfig


@dataclass(frozen=True)
class Description:
    """Human-readable title and abstract of a rule.

    ``None`` means "not specified"; an empty string is never used for that.
    """

    title: str | None = None
    abstract: str | None = None

    EMPTY: ClassVar[Description]

    @staticmethod
    def extract(comment: str, keyword: str) -> str | None:
        """Return the text following ``@keyword`` in a doc comment.

        Each line loses its leading ``*`` decoration first, so both of these
        lines yield ``"Roads"`` for the ``title`` keyword::

             * @title Roads
            @title: Roads

        Only the first matching line is used.
        """
        pattern = re.compile(r"\s*@" + re.escape(keyword) + r":?\s*")
        for raw in comment.splitlines():
            line = re.sub(r"\s*\*", "", raw, count=1)
            if pattern.match(line):
                return pattern.sub("", line, count=1)
        return None

    @classmethod
    def from_comment(cls, comment: str) -> Description:
        return cls(
            title=cls.extract(comment, "title"),
            abstract=cls.extract(comment, "abstract"),
        )

    @staticmethod
    def combine(
        lhs: Description, rhs: Description, config: StyleConfig = DEFAULT_CONFIG
    ) -> Description:
        """Merge two descriptions field by field.

        Present values on both sides are joined with the configured separator
        word, left side first; a value present on one side only is kept.
        """

        def merge(a: str | None, b: str | None) -> str | None:
            if a is not None and b is not None:
                return f"{a} {config.description_separator} {b}"
            return a if a is not None else b

        return Description(
            title=merge(lhs.title, rhs.title),
            abstract=merge(lhs.abstract, rhs.abstract),
        )


Description.EMPTY = Description()
