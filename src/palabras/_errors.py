"""Palabras error types."""


class PalabrasError(Exception):
    """Base error for all palabras failures."""


class PalabrasNotFoundError(PalabrasError):
    """Source file does not exist."""


class PalabrasIOError(PalabrasError):
    """Source file could not be opened, seeked or scanned at all."""


class PalabrasConfigError(PalabrasError):
    """Invalid analyzer configuration."""
