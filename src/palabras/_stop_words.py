"""Spanish stop words, pre-normalized to match tokenizer output."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from ._tokenizer import DEFAULT_MIN_LENGTH

if TYPE_CHECKING:
    from collections.abc import Mapping

STOP_WORDS: frozenset[str] = frozenset({
    # Articles and contractions
    "el", "la", "las", "los", "un", "una", "uno", "al", "del", "lo",
    # Prepositions
    "a", "de", "en", "por", "con", "para", "sobre", "hasta", "entre",
    "sin", "desde", "contra", "durante",
    # Conjunctions and relatives
    "y", "que", "pero", "como", "si", "cuando", "donde", "quien",
    # Pronouns and clitics
    "se", "te", "le", "me", "su",
    # Demonstratives
    "este", "esta", "esto", "ese", "esa", "eso",
    # Adverbs and quantifiers
    "no", "mas", "muy", "tanto", "cada", "todo", "asi", "tambien", "ya",
    "aqui", "ahi", "alli",
    # Number words
    "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve",
    "diez",
    # Common verb forms and infinitives
    "es", "son", "da", "ha", "fue", "puede", "ser", "estar", "tener",
    "hacer", "decir", "poder", "ir", "ver", "dar", "saber", "querer",
    "llegar", "pasar", "deber", "poner", "venir", "salir", "volver",
    "seguir", "llevar", "quedar", "traer",
})


def is_stopword(word: str) -> bool:
    return word in STOP_WORDS


def keep_word(word: str, min_length: int = DEFAULT_MIN_LENGTH) -> bool:
    """True if `word` is long enough and not a stop word."""
    return len(word) >= min_length and word not in STOP_WORDS


def filter_counts(
    counts: Mapping[str, int], min_length: int = DEFAULT_MIN_LENGTH
) -> Counter[str]:
    """Drop short words and stop words from a merged count map.

    Applied once after merging so the raw total stays exact.
    """
    return Counter({
        word: n for word, n in counts.items() if keep_word(word, min_length)
    })
