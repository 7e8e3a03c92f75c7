from __future__ import annotations

"""Core data types for highlight ranges and excerpt segments."""

from dataclasses import dataclass

Range = tuple[int, int]


@dataclass(frozen=True)
class Segment:
    """Highlighted target with one unit of context on each side."""
    range: Range
    target: str
    previous: str | None
    next: str | None
    context: str


@dataclass(frozen=True)
class HighlightResult:
    """Rendered HTML together with the ranges it was rendered from."""
    html: str
    ranges: list[Range]
    excerpt: bool
