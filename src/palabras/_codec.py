"""msgpack encoding of AnalysisResult for out-of-process consumers."""

from __future__ import annotations

from typing import Any

import msgpack

from ._errors import PalabrasError
from ._types import AnalysisResult, WordFrequency

_FORMAT_VERSION = 1


def pack_result(result: AnalysisResult) -> bytes:
    """Serialize a result; top words travel as [word, count] pairs."""
    payload = {
        "v": _FORMAT_VERSION,
        "total_words": result.total_words,
        "unique_words": result.unique_words,
        "top_words": [[wf.word, wf.count] for wf in result.top_words],
        "processing_time_ms": result.processing_time_ms,
        "total_time_ms": result.total_time_ms,
        "file_size": result.file_size,
        "words_per_second": result.words_per_second,
        "workers": result.workers,
        "complete": result.complete,
        "failed_chunks": list(result.failed_chunks),
    }
    return msgpack.packb(payload, use_bin_type=True)


def unpack_result(data: bytes) -> AnalysisResult:
    try:
        raw: dict[str, Any] = msgpack.unpackb(data, raw=False)
    except (ValueError, msgpack.UnpackException) as e:
        raise PalabrasError(f"Malformed result payload: {e}") from e
    if not isinstance(raw, dict):
        raise PalabrasError("Malformed result payload: not a map")

    version = raw.get("v")
    if version != _FORMAT_VERSION:
        raise PalabrasError(
            f"Expected result format {_FORMAT_VERSION!r}, got {version!r}"
        )
    try:
        return AnalysisResult(
            total_words=raw["total_words"],
            unique_words=raw["unique_words"],
            top_words=[WordFrequency(w, c) for w, c in raw["top_words"]],
            processing_time_ms=raw["processing_time_ms"],
            total_time_ms=raw["total_time_ms"],
            file_size=raw["file_size"],
            words_per_second=raw["words_per_second"],
            workers=raw["workers"],
            complete=raw["complete"],
            failed_chunks=tuple(raw["failed_chunks"]),
        )
    except KeyError as e:
        raise PalabrasError(f"Result payload missing field {e}") from e
