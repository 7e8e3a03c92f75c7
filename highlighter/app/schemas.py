from __future__ import annotations

from pydantic import BaseModel, Field


class HighlightRequest(BaseModel):
    text: str
    ranges: list[tuple[int, int]] = Field(default_factory=list)
    excerpt: bool = False


class HighlightResponse(BaseModel):
    html: str
    excerpt: bool
    range_count: int
