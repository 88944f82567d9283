"""Bounded min-heap top-K selection."""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from ._types import WordFrequency

if TYPE_CHECKING:
    from collections.abc import Mapping


class _Entry:
    """Heap entry ordered so the root is the worst-ranked word kept.

    Ranking is count descending, then word ascending; "worse" means lower
    count, or equal count and a later word.
    """

    __slots__ = ("count", "word")

    def __init__(self, count: int, word: str) -> None:
        self.count = count
        self.word = word

    def __lt__(self, other: _Entry) -> bool:
        if self.count != other.count:
            return self.count < other.count
        return self.word > other.word


def rank_key(wf: WordFrequency) -> tuple[int, str]:
    """Sort key for the final ranking: count desc, word asc."""
    return (-wf.count, wf.word)


def top_k(counts: Mapping[str, int], k: int) -> list[WordFrequency]:
    """The k highest-count words, best first.

    O(n log k). Equal counts are ordered by word (code point order), which
    makes the result identical to a full sort on (-count, word).
    """
    if k <= 0 or not counts:
        return []

    heap: list[_Entry] = []
    for word, count in counts.items():
        entry = _Entry(count, word)
        if len(heap) < k:
            heapq.heappush(heap, entry)
        elif heap[0] < entry:
            # Replace only if strictly better than the current worst.
            heapq.heapreplace(heap, entry)

    ranked = [WordFrequency(e.word, e.count) for e in heap]
    ranked.sort(key=rank_key)
    return ranked
