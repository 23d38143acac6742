class CipherError(ValueError):
    """Base class for every input error raised by the cipher."""


class InvalidKey(CipherError):
    """Keyword holds characters outside a-z after normalization."""


class InvalidText(CipherError):
    """Text cannot be turned into digraphs under the chosen policy."""
