"""Data structures for palabras."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class ChunkRange:
    index: int
    start: int   # inclusive byte offset
    end: int     # exclusive byte offset

    @property
    def size(self) -> int:
        return self.end - self.start


@dataclass(slots=True, frozen=True)
class ChunkResult:
    chunk: ChunkRange
    counts: Counter[str]
    complete: bool = True
    error: str | None = None   # set when a read error truncated the chunk


@dataclass(slots=True, frozen=True)
class WordFrequency:
    word: str
    count: int


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    total_words: int              # raw occurrences, before filtering
    unique_words: int             # entries surviving the filter
    top_words: list[WordFrequency]
    processing_time_ms: int
    total_time_ms: int
    file_size: int
    words_per_second: float
    workers: int = 0
    complete: bool = True
    failed_chunks: tuple[int, ...] = field(default_factory=tuple)

    @property
    def formatted_file_size(self) -> str:
        if self.file_size < 1024:
            return f"{self.file_size} B"
        if self.file_size < 1024 * 1024:
            return f"{self.file_size / 1024.0:.2f} KB"
        return f"{self.file_size / (1024.0 * 1024.0):.2f} MB"

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping with the field names the web layer renders."""
        return {
            "totalWords": self.total_words,
            "uniqueWords": self.unique_words,
            "topWords": [
                {"word": wf.word, "count": wf.count} for wf in self.top_words
            ],
            "processingTimeMs": self.processing_time_ms,
            "totalTimeMs": self.total_time_ms,
            "fileSize": self.file_size,
            "formattedFileSize": self.formatted_file_size,
            "wordsPerSecond": self.words_per_second,
            "workers": self.workers,
            "complete": self.complete,
            "failedChunks": list(self.failed_chunks),
        }


def words_per_second(total_words: int, total_time_ms: int) -> float:
    """Throughput over the whole call; 0.0 when no time elapsed."""
    if total_time_ms <= 0:
        return 0.0
    return total_words / (total_time_ms / 1000.0)
