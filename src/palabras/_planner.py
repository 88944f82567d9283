"""Split a file into contiguous byte ranges, one per worker."""

from __future__ import annotations

import os

from ._types import ChunkRange


def default_workers() -> int:
    """Number of hardware execution contexts (1 if unknown)."""
    return os.cpu_count() or 1


def plan_chunks(file_size: int, workers: int) -> list[ChunkRange]:
    """Equal-width slices covering [0, file_size); the last absorbs the remainder.

    Worker count is clamped to file_size so no slice is empty. An empty
    file has no chunks.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if file_size < 0:
        raise ValueError(f"file_size must be >= 0, got {file_size}")
    if file_size == 0:
        return []

    n = min(workers, file_size)
    width = file_size // n
    chunks: list[ChunkRange] = []
    for i in range(n):
        start = i * width
        end = file_size if i == n - 1 else (i + 1) * width
        chunks.append(ChunkRange(index=i, start=start, end=end))
    return chunks
