"""Shared fixtures for palabras tests."""

import pytest

SOL_TEXT = "El Sol es una estrella. El Sol da luz."

CORPUS_LINES = [
    "La Luna es el único satélite natural de la Tierra.",
    "El Sol es una estrella de tipo espectral G2 situada en el centro del Sistema Solar.",
    "Madrid es la capital de España y su ciudad más poblada.",
    "",
    "Canción, canciones y CANCIÓN cuentan como la misma palabra.",
    "El río Ebro nace en Fontibre y desemboca en el mar Mediterráneo.",
    "Ñandú, pingüino y cigüeña son aves; el pingüino no vuela.",
    "La estrella más cercana a la Tierra es el Sol.",
    "Sistema Solar: planetas, lunas, asteroides y cometas.",
    "Los números 1234 y 56 no son palabras, pero año sí lo es.",
]


@pytest.fixture
def write_corpus(tmp_path):
    """Write text (str or bytes) to a fresh file and return its path."""
    counter = iter(range(1_000_000))

    def _write(content, name=None):
        path = tmp_path / (name or f"corpus_{next(counter)}.txt")
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def sol_file(write_corpus):
    return write_corpus(SOL_TEXT, "sol.txt")


@pytest.fixture
def corpus_file(write_corpus):
    """A few hundred lines of accented Spanish, with repeated content."""
    text = "\n".join(CORPUS_LINES * 40) + "\n"
    return write_corpus(text, "corpus.txt")
