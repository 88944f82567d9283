"""Palabras: parallel word-frequency analysis of large text files."""

from __future__ import annotations

from ._analyzer import WordAnalyzer, analyze
from ._codec import pack_result, unpack_result
from ._config import AnalyzerConfig
from ._errors import (
    PalabrasConfigError,
    PalabrasError,
    PalabrasIOError,
    PalabrasNotFoundError,
)
from ._merge import merge_counts
from ._planner import default_workers, plan_chunks
from ._stop_words import STOP_WORDS, filter_counts, is_stopword, keep_word
from ._tokenizer import Tokenizer, TokenStream, normalize, normalize_text
from ._topk import top_k
from ._types import (
    AnalysisResult,
    ChunkRange,
    ChunkResult,
    WordFrequency,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "analyze",
    "AnalysisResult",
    "AnalyzerConfig",
    "ChunkRange",
    "ChunkResult",
    "default_workers",
    "filter_counts",
    "is_stopword",
    "keep_word",
    "merge_counts",
    "normalize",
    "normalize_text",
    "pack_result",
    "PalabrasConfigError",
    "PalabrasError",
    "PalabrasIOError",
    "PalabrasNotFoundError",
    "plan_chunks",
    "STOP_WORDS",
    "Tokenizer",
    "TokenStream",
    "top_k",
    "unpack_result",
    "WordAnalyzer",
    "WordFrequency",
]
