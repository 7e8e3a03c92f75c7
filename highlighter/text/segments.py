from __future__ import annotations

"""Context extraction around a single highlighted range."""

import re
import string

from highlighter.text.types import Range, Segment

ELLIPSIS = "[...]"
PUNCTUATION = frozenset(".,!?")

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
# Punctuation mark (preferred) or word right after the highlight.
_NEXT_RE = re.compile(r"^\W*([.,!?])|^\W*(\w+)", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")


def extract_segment(text: str, range_: Range, index: int) -> Segment:
    """Build the excerpt context for one normalized range of escaped text."""
    start, end = range_
    target = text[start:end].strip()

    previous = _previous_word(text, start)

    after_match = _NEXT_RE.match(text[end:])
    next_ = None
    if after_match:
        next_ = after_match.group(1) or after_match.group(2)

    parts: list[str] = []
    if index > 0:
        parts.append(f"{ELLIPSIS} ")
    if previous:
        parts.append(previous)
    parts.append(f" <em>{target}</em>")
    if next_:
        parts.append(next_ if next_ in PUNCTUATION else f" {next_}")
    if _has_more_content(text, next_, end):
        parts.append(f" {ELLIPSIS} ")

    context = _WHITESPACE_RE.sub(" ", "".join(parts)).strip()
    return Segment(
        range=(start, end),
        target=target,
        previous=previous,
        next=next_,
        context=context,
    )


def _has_more_content(text: str, next_: str | None, end: int) -> bool:
    """Return True when non-blank text follows the first `next_` at or after `end`."""
    if not next_:
        return False
    position = text.find(next_, end)
    return bool(text[position + len(next_):].strip())


def _previous_word(text: str, start: int) -> str | None:
    """Return the last word before `start` with whatever follows it, stripped.

    Scans backwards: skip trailing non-word characters, then the word itself.
    """
    word_end = limit = min(max(start, 0), len(text))
    while word_end > 0 and text[word_end - 1] not in _WORD_CHARS:
        word_end -= 1
    if word_end == 0:
        return None
    word_start = word_end
    while word_start > 0 and text[word_start - 1] in _WORD_CHARS:
        word_start -= 1
    return text[word_start:limit].strip()
