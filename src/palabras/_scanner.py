"""Chunk scanner: count the tokens of the lines owned by one byte range."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from ._errors import PalabrasIOError
from ._tokenizer import Tokenizer, decode_line
from ._types import ChunkResult

if TYPE_CHECKING:
    from pathlib import Path

    from ._types import ChunkRange

logger = logging.getLogger(__name__)


def _open_at(path: Path | str, start: int):
    """Open `path` positioned on the first line owned by a chunk at `start`.

    A line is owned by the chunk whose range holds its first byte, so for
    start > 0 we step back one byte and discard through the next newline:
    if the previous byte is already a newline nothing of this chunk is lost.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise PalabrasIOError(f"Cannot open {path}: {e}") from e
    try:
        if start > 0:
            f.seek(start - 1)
            f.readline()
    except OSError as e:
        f.close()
        raise PalabrasIOError(f"Cannot seek {path} to {start}: {e}") from e
    return f


def scan_chunk(
    path: Path | str,
    chunk: ChunkRange,
    tokenizer: Tokenizer | None = None,
) -> ChunkResult:
    """Count tokens in every line that starts inside `chunk`.

    Open/seek failures raise PalabrasIOError. A read error after that point
    ends the chunk early: the counts gathered so far come back with
    complete=False.
    """
    if tokenizer is None:
        tokenizer = Tokenizer()
    counts: Counter[str] = Counter()

    f = _open_at(path, chunk.start)
    pos = chunk.start
    with f:
        try:
            pos = f.tell()
            while pos < chunk.end:
                raw = f.readline()
                if not raw:
                    break
                tokenizer.count_into(decode_line(raw), counts)
                pos += len(raw)
        except OSError as e:
            logger.debug(
                "chunk %d [%d, %d) stopped at byte %d: %s",
                chunk.index, chunk.start, chunk.end, pos, e,
            )
            return ChunkResult(chunk, counts, complete=False, error=str(e))

    return ChunkResult(chunk, counts)
