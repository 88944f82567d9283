"""WordAnalyzer: plan, scan in parallel, merge, filter, rank."""

from __future__ import annotations

import logging
import os
import stat
import time
from pathlib import Path

from ._config import AnalyzerConfig
from ._errors import PalabrasIOError, PalabrasNotFoundError
from ._merge import merge_counts, total_occurrences
from ._planner import default_workers, plan_chunks
from ._pool import run_chunks
from ._stop_words import filter_counts
from ._tokenizer import Tokenizer
from ._topk import top_k as select_top_k
from ._types import AnalysisResult, words_per_second

logger = logging.getLogger(__name__)


def _elapsed_ms(since: float) -> int:
    return int((time.perf_counter() - since) * 1000)


def _file_size(path: Path) -> int:
    try:
        st = os.stat(path)
    except FileNotFoundError:
        raise PalabrasNotFoundError(f"File not found: {path}") from None
    except OSError as e:
        raise PalabrasIOError(f"Cannot stat {path}: {e}") from e
    if not stat.S_ISREG(st.st_mode):
        raise PalabrasIOError(f"Not a regular file: {path}")
    return st.st_size


class WordAnalyzer:
    """Main analysis engine. Holds the config and tokenizer."""

    __slots__ = ("_config", "_tokenizer")

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self._config = (config or AnalyzerConfig()).validate()
        self._tokenizer = Tokenizer(self._config.min_length)

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    def analyze(self, path: Path | str) -> AnalysisResult:
        """Word frequencies of the file at `path`.

        Raises PalabrasNotFoundError if it does not exist and PalabrasIOError
        if it cannot be read at all. Chunks that fail mid-read only mark the
        result incomplete.
        """
        started = time.perf_counter()
        cfg = self._config
        path = Path(path)

        file_size = _file_size(path)
        workers = cfg.workers or default_workers()
        logger.info(
            "Analyzing %s (%d bytes) with %d workers", path, file_size, workers,
        )

        chunks = plan_chunks(file_size, workers)
        results = run_chunks(
            path, chunks,
            executor=cfg.executor,
            max_workers=len(chunks) or None,
            tokenizer=self._tokenizer,
        )
        counts = merge_counts(r.counts for r in results)
        processing_ms = _elapsed_ms(started)

        total_words = total_occurrences(counts)
        filtered = filter_counts(counts, cfg.min_length)
        ranked = select_top_k(filtered, cfg.top_k)
        failed = tuple(r.chunk.index for r in results if not r.complete)
        total_ms = _elapsed_ms(started)

        logger.info("Analysis finished in %d ms", total_ms)
        logger.info("Unique words: %d", len(filtered))
        if ranked:
            logger.info("Most frequent: %s (%d)", ranked[0].word, ranked[0].count)
        if failed:
            logger.warning(
                "%d of %d chunks were incomplete: %s",
                len(failed), len(chunks), list(failed),
            )

        return AnalysisResult(
            total_words=total_words,
            unique_words=len(filtered),
            top_words=ranked,
            processing_time_ms=processing_ms,
            total_time_ms=total_ms,
            file_size=file_size,
            words_per_second=words_per_second(total_words, total_ms),
            workers=len(chunks),
            complete=not failed,
            failed_chunks=failed,
        )


def analyze(
    path: Path | str,
    *,
    workers: int | None = None,
    top_k: int = 100,
    min_length: int = 3,
    executor: str = "process",
    config: AnalyzerConfig | None = None,
) -> AnalysisResult:
    """Analyze one file. An explicit `config` overrides the keyword settings."""
    if config is None:
        config = AnalyzerConfig(
            workers=workers, top_k=top_k,
            min_length=min_length, executor=executor,
        )
    return WordAnalyzer(config).analyze(path)
