from __future__ import annotations

"""Highlight rendering for full text and condensed excerpts."""

import logging
from collections.abc import Sequence

from highlighter.text.escaping import escape_html
from highlighter.text.ranges import clamp_ranges, normalize_ranges
from highlighter.text.segments import ELLIPSIS, extract_segment
from highlighter.text.types import HighlightResult, Range, Segment

logger = logging.getLogger(__name__)

_SEAM_PREFIX = f"{ELLIPSIS} "


class InvalidInputError(ValueError):
    pass


def highlight_text(text: str, ranges: Sequence[Range]) -> str:
    """Wrap every range of the text in <em> tags, keeping the rest verbatim."""
    if not text or not ranges:
        return ""
    parts: list[str] = []
    cursor = 0
    for start, end in ranges:
        range_text = text[start:end]
        if not range_text:
            continue
        parts.append(text[cursor:start])
        parts.append(f"<em>{range_text}</em>")
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def build_excerpt(text: str, ranges: Sequence[Range]) -> str:
    """Condense the text to highlighted terms with one unit of context each."""
    if not text or not ranges:
        return ""
    segments = [extract_segment(text, range_, index) for index, range_ in enumerate(ranges)]
    return "".join(_seam_contexts(segments)).strip()


def _seam_contexts(segments: list[Segment]) -> list[str]:
    """Return segment contexts with the leading ellipsis dropped after the first."""
    contexts: list[str] = []
    for index, segment in enumerate(segments):
        context = segment.context
        if index > 0 and context.startswith(_SEAM_PREFIX):
            context = " " + context[len(_SEAM_PREFIX):].lstrip()
        contexts.append(context)
    return contexts


def render_highlights(
    text: str,
    ranges: Sequence[Sequence[int]],
    excerpt: bool = False,
) -> HighlightResult:
    """Render escaped text with the given ranges highlighted.

    Ranges are clamped to the text, ordered, deduplicated and merged before
    rendering. With ``excerpt`` set, only the highlighted terms and their
    nearest context are returned, joined by ``[...]`` markers.
    """
    if not text:
        raise InvalidInputError("No text provided to highlight")
    if not ranges:
        raise InvalidInputError("No ranges provided for highlighting")

    processed = normalize_ranges(clamp_ranges(ranges, len(text)))
    escaped = escape_html(text).strip()

    # Escaping can grow the text; a range reaching the end must still do so.
    first_start, first_end = processed[0]
    if first_end == len(text):
        processed[0] = (first_start, len(escaped))

    logger.debug(
        "highlight_rendered",
        extra={
            "mode": "excerpt" if excerpt else "full",
            "range_count": len(processed),
            "text_length": len(text),
        },
    )
    if excerpt:
        html = build_excerpt(escaped, processed)
    else:
        html = highlight_text(escaped, processed)
    return HighlightResult(html=html, ranges=processed, excerpt=excerpt)


def highlight_text_ranges(
    text: str,
    ranges: Sequence[Sequence[int]],
    excerpt: bool = False,
) -> str:
    return render_highlights(text, ranges, excerpt=excerpt).html
