from __future__ import annotations

"""Range normalization: order, sort, deduplicate and merge offset pairs."""

from collections.abc import Callable, Iterable, Sequence
from functools import reduce

from highlighter.text.types import Range

RangeStep = Callable[[list[Range]], list[Range]]


def order_ranges(ranges: Iterable[Sequence[int]]) -> list[Range]:
    """Return ranges as (min, max) pairs sorted by start, then end."""
    ordered = [(min(start, end), max(start, end)) for start, end in ranges]
    return sorted(ordered)


def remove_duplicates(ranges: Iterable[Range]) -> list[Range]:
    """Drop ranges equal to an earlier one, keeping first-occurrence order."""
    seen: set[Range] = set()
    unique: list[Range] = []
    for start, end in ranges:
        pair = (start, end)
        if pair in seen:
            continue
        seen.add(pair)
        unique.append(pair)
    return unique


def merge_ranges(ranges: Iterable[Range]) -> list[Range]:
    """Merge overlapping or touching ranges, e.g. (3, 5) + (5, 7) -> (3, 7).

    Input must already be sorted by start.
    """
    merged: list[Range] = []
    for start, end in ranges:
        if not merged:
            merged.append((start, end))
            continue
        last_start, last_end = merged[-1]
        if start <= last_end:
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


_PIPELINE: tuple[RangeStep, ...] = (order_ranges, remove_duplicates, merge_ranges)


def normalize_ranges(ranges: Iterable[Sequence[int]]) -> list[Range]:
    """Run the full pipeline: order -> dedupe -> merge."""
    return reduce(lambda result, step: step(result), _PIPELINE, list(ranges))


def clamp_ranges(ranges: Iterable[Sequence[int]], length: int) -> list[Range]:
    """Clamp every offset into [0, length]."""
    upper = max(0, length)
    return [
        (min(max(start, 0), upper), min(max(end, 0), upper))
        for start, end in ranges
    ]
