"""Style resolution configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleConfig:
    """Knobs for description merging and symbolizer context lookup."""

    description_separator: str = "with"  # "a with b"
    nth_prefix: str = "nth-"  # :nth-stroke(2)
    symbol_fallback: str = "symbol"  # :symbol / :nth-symbol(2)


DEFAULT_CONFIG = StyleConfig()
