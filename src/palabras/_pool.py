"""Fork-join dispatch of chunk scans onto a concurrent.futures pool."""

from __future__ import annotations

import logging
from concurrent.futures import (
    FIRST_EXCEPTION,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    wait,
)
from typing import TYPE_CHECKING

from ._errors import PalabrasError, PalabrasIOError
from ._scanner import scan_chunk

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ._tokenizer import Tokenizer
    from ._types import ChunkRange, ChunkResult

logger = logging.getLogger(__name__)

EXECUTORS = ("process", "thread", "serial")


def _log_incomplete(results: list[ChunkResult]) -> None:
    for r in results:
        if not r.complete:
            logger.warning(
                "chunk %d [%d, %d) read failed, keeping %d partial words: %s",
                r.chunk.index, r.chunk.start, r.chunk.end,
                sum(r.counts.values()), r.error,
            )


def _run_serial(
    path: Path | str,
    chunks: Sequence[ChunkRange],
    tokenizer: Tokenizer | None,
) -> list[ChunkResult]:
    return [scan_chunk(path, c, tokenizer) for c in chunks]


def _run_pooled(
    path: Path | str,
    chunks: Sequence[ChunkRange],
    tokenizer: Tokenizer | None,
    executor: str,
    max_workers: int,
) -> list[ChunkResult]:
    pool_cls = ProcessPoolExecutor if executor == "process" else ThreadPoolExecutor
    pool = pool_cls(max_workers=max_workers)
    try:
        futures = [pool.submit(scan_chunk, path, c, tokenizer) for c in chunks]
        done, not_done = wait(futures, return_when=FIRST_EXCEPTION)
        for fut in done:
            exc = fut.exception()
            if exc is not None:
                for pending in not_done:
                    pending.cancel()
                if isinstance(exc, PalabrasError):
                    raise exc
                raise PalabrasIOError(f"Worker failed scanning {path}: {exc}") from exc
        # One result per chunk, in chunk order.
        return [fut.result() for fut in futures]
    finally:
        pool.shutdown(wait=True, cancel_futures=True)


def run_chunks(
    path: Path | str,
    chunks: Sequence[ChunkRange],
    *,
    executor: str = "process",
    max_workers: int | None = None,
    tokenizer: Tokenizer | None = None,
) -> list[ChunkResult]:
    """Scan every chunk concurrently and wait for all of them.

    Any worker raising is fatal: pending scans are cancelled and the error
    surfaces as PalabrasIOError. Chunks that merely hit a read error come
    back incomplete and are logged.
    """
    if executor not in EXECUTORS:
        raise ValueError(f"executor must be one of {EXECUTORS}, got {executor!r}")
    if not chunks:
        return []

    for c in chunks:
        logger.debug("chunk %d: [%d, %d)", c.index, c.start, c.end)

    if executor == "serial" or len(chunks) == 1:
        results = _run_serial(path, chunks, tokenizer)
    else:
        results = _run_pooled(
            path, chunks, tokenizer, executor, max_workers or len(chunks),
        )
    _log_incomplete(results)
    return results
