"""Combine chunk-local counts into one global count map."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def merge_counts(partials: Iterable[Mapping[str, int]]) -> Counter[str]:
    """Sum counts per word across all partial maps. Inputs are not mutated."""
    total: Counter[str] = Counter()
    for part in partials:
        for word, n in part.items():
            total[word] += n
    return total


def total_occurrences(counts: Mapping[str, int]) -> int:
    return sum(counts.values())
