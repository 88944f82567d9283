"""Normalize/tokenize pipeline: case folding, accent stripping, letter runs."""

from __future__ import annotations

import unicodedata
from collections import Counter
from typing import TYPE_CHECKING

import regex

if TYPE_CHECKING:
    from collections.abc import Iterator

DEFAULT_MIN_LENGTH = 3

_LETTERS_RE = regex.compile(r"\p{L}+")


def normalize_text(text: str) -> str:
    """Case-fold, decompose (NFD) and drop every mark (Mn, Mc, Me).

    "Canción" -> "cancion". Letters with no accent are left alone, and
    applying it twice gives the same string as applying it once.
    """
    decomposed = unicodedata.normalize("NFD", text.casefold())
    return "".join(
        ch for ch in decomposed if not unicodedata.category(ch).startswith("M")
    )


def decode_line(raw: bytes) -> str:
    """Decode UTF-8, turning invalid bytes into U+FFFD (a non-letter)."""
    return raw.decode("utf-8", errors="replace")


class TokenStream:
    """Lazy, restartable view over the tokens of one text fragment."""

    __slots__ = ("_text", "_min_length")

    def __init__(self, text: str, min_length: int) -> None:
        self._text = normalize_text(text)
        self._min_length = min_length

    def __iter__(self) -> Iterator[str]:
        min_length = self._min_length
        for m in _LETTERS_RE.finditer(self._text):
            token = m.group()
            if len(token) >= min_length:
                yield token

    def __repr__(self) -> str:
        return f"TokenStream({self._text!r}, min_length={self._min_length})"


class Tokenizer:
    __slots__ = ("_min_length",)

    def __init__(self, min_length: int = DEFAULT_MIN_LENGTH) -> None:
        if min_length < 1:
            raise ValueError(f"min_length must be >= 1, got {min_length}")
        self._min_length = min_length

    @property
    def min_length(self) -> int:
        return self._min_length

    def tokenize(self, text: str) -> TokenStream:
        """Tokens of `text` in order of appearance."""
        return TokenStream(text, self._min_length)

    def count_into(self, text: str, counts: Counter[str]) -> int:
        """Add the tokens of `text` to `counts`. Returns tokens added."""
        n = 0
        for token in self.tokenize(text):
            counts[token] += 1
            n += 1
        return n


_DEFAULT = Tokenizer()


def normalize(text: str) -> TokenStream:
    """Tokenize `text` with the default minimum length of 3 letters."""
    return _DEFAULT.tokenize(text)
