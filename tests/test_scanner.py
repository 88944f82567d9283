"""Tests for the chunk scanner: line ownership and failure handling."""

import io
from collections import Counter

import pytest

from palabras import _scanner
from palabras._errors import PalabrasIOError
from palabras._merge import merge_counts
from palabras._planner import plan_chunks
from palabras._scanner import scan_chunk
from palabras._types import ChunkRange

LINES = "uno dos\ncanción tres\n\nárbol cinco seis\nsiete ocho nueve diez"


class _FlakyFile(io.BytesIO):
    """In-memory file whose readline fails after a number of lines."""

    def __init__(self, data, fail_after):
        super().__init__(data)
        self._left = fail_after

    def readline(self, *args):
        if self._left == 0:
            raise OSError("simulated read error")
        self._left -= 1
        return super().readline(*args)


def _whole(path, size):
    return scan_chunk(path, ChunkRange(0, 0, size)).counts


def test_whole_file(write_corpus):
    path = write_corpus(LINES)
    counts = _whole(path, path.stat().st_size)
    assert counts["cancion"] == 1
    assert counts["arbol"] == 1
    assert counts["uno"] == 1
    assert "dos" in counts


def test_every_split_point_counts_each_line_once(write_corpus):
    """Two chunks split at any byte give the same counts as one chunk."""
    path = write_corpus(LINES)
    size = path.stat().st_size
    expected = _whole(path, size)
    for split in range(1, size):
        left = scan_chunk(path, ChunkRange(0, 0, split)).counts
        right = scan_chunk(path, ChunkRange(1, split, size)).counts
        assert left + right == expected, f"split at byte {split}"


def test_split_exactly_at_line_start(write_corpus):
    """A chunk starting on a line's first byte owns that line."""
    path = write_corpus("aaa bbb\nccc ddd\n")
    first = scan_chunk(path, ChunkRange(0, 0, 8)).counts
    second = scan_chunk(path, ChunkRange(1, 8, 16)).counts
    assert first == Counter({"aaa": 1, "bbb": 1})
    assert second == Counter({"ccc": 1, "ddd": 1})


def test_split_inside_line(write_corpus):
    """The chunk holding a line's first byte reads the whole line."""
    path = write_corpus("aaa bbb\nccc ddd\n")
    first = scan_chunk(path, ChunkRange(0, 0, 3)).counts
    second = scan_chunk(path, ChunkRange(1, 3, 16)).counts
    assert first == Counter({"aaa": 1, "bbb": 1})
    assert second == Counter({"ccc": 1, "ddd": 1})


def test_chunk_inside_one_long_line_is_empty(write_corpus):
    path = write_corpus("palabra " * 50)
    result = scan_chunk(path, ChunkRange(1, 100, 200))
    assert result.counts == Counter()
    assert result.complete


@pytest.mark.parametrize("workers", [2, 3, 5, 8, 13])
def test_planned_chunks_match_single_scan(corpus_file, workers):
    size = corpus_file.stat().st_size
    parts = [scan_chunk(corpus_file, c).counts for c in plan_chunks(size, workers)]
    assert merge_counts(parts) == _whole(corpus_file, size)


def test_multibyte_split(write_corpus):
    """Splitting inside a UTF-8 sequence never corrupts tokens."""
    path = write_corpus("ñandú\npingüino\ncigüeña\n")
    size = path.stat().st_size
    expected = _whole(path, size)
    assert expected == Counter({"nandu": 1, "pinguino": 1, "ciguena": 1})
    for split in range(1, size):
        left = scan_chunk(path, ChunkRange(0, 0, split)).counts
        right = scan_chunk(path, ChunkRange(1, split, size)).counts
        assert left + right == expected


def test_crlf_line_endings(write_corpus):
    path = write_corpus("sol luna\r\nmar tierra\r\n")
    counts = _whole(path, path.stat().st_size)
    assert counts == Counter({"sol": 1, "luna": 1, "mar": 1, "tierra": 1})


def test_open_failure_is_fatal(tmp_path):
    with pytest.raises(PalabrasIOError, match="Cannot open"):
        scan_chunk(tmp_path / "missing.txt", ChunkRange(0, 0, 10))


def test_directory_is_fatal(tmp_path):
    with pytest.raises(PalabrasIOError):
        scan_chunk(tmp_path, ChunkRange(0, 0, 10))


def test_read_error_returns_partial(monkeypatch):
    data = b"sol luna\nmar tierra\nrio lago\n"
    monkeypatch.setattr(
        _scanner, "open", lambda path, mode: _FlakyFile(data, 1), raising=False,
    )
    result = scan_chunk("fake.txt", ChunkRange(0, 0, len(data)))
    assert not result.complete
    assert "simulated" in result.error
    assert result.counts == Counter({"sol": 1, "luna": 1})


def test_read_error_while_aligning_is_fatal(monkeypatch):
    """The first readline positions the chunk; failing there is a seek failure."""
    data = b"sol luna\nmar tierra\n"
    monkeypatch.setattr(
        _scanner, "open", lambda path, mode: _FlakyFile(data, 0), raising=False,
    )
    with pytest.raises(PalabrasIOError, match="Cannot seek"):
        scan_chunk("fake.txt", ChunkRange(1, 5, len(data)))
