import logging
import string
from enum import Enum
from typing import List, NamedTuple

from .errors import InvalidText
from .square import ALPHABET

logger = logging.getLogger(__name__)

FILLER = "x"
ALTERNATE_FILLER = "z"


class Mode(Enum):
    """Direction of every shift: +1 moves right/down, -1 moves left/up."""
    ENCRYPT = 1
    DECRYPT = -1

    def flip(self) -> "Mode":
        return Mode.DECRYPT if self is Mode.ENCRYPT else Mode.ENCRYPT

    @classmethod
    def coerce(cls, value) -> "Mode":
        """Accept a Mode, its value (1 / -1) or its name ("encrypt" / "decrypt")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown mode {value!r}; expected 'encrypt' or 'decrypt'") from None
        return cls(value)


class Digraph(NamedTuple):
    first: str
    second: str
    # True when `second` was inserted by the preprocessor, not taken from the text
    filler: bool = False

    def __str__(self) -> str:
        return self.first + self.second


def normalize(text: str, *, strict: bool = False) -> str:
    """
    Lowercase the text and merge j into i.
    Non-letters are dropped, or rejected with InvalidText when strict is set.
    """
    text = text.lower().replace('j', 'i')
    letters = [ch for ch in text if ch in string.ascii_lowercase]
    if strict and len(letters) != len(text):
        bad = sorted(set(ch for ch in text if ch not in string.ascii_lowercase))
        raise InvalidText(f"Text contains characters outside a-z: {''.join(bad)!r}")
    return ''.join(letters)


def check_filler(filler: str) -> str:
    filler = filler.lower()
    if len(filler) != 1 or filler not in ALPHABET:
        raise InvalidText(f"Filler must be a single letter from {ALPHABET!r}, got {filler!r}")
    return filler


def filler_for(letter: str, filler: str = FILLER) -> str:
    """Pick the filler that keeps `letter` out of a degenerate pair."""
    if letter != filler:
        return filler
    return ALTERNATE_FILLER if filler != ALTERNATE_FILLER else FILLER


def split_digraphs(text: str, mode: Mode, *, filler: str = FILLER, strict: bool = False) -> List[Digraph]:
    """
    Split text into digraphs.

    ENCRYPT: scan left to right; when the two letters to be paired are equal,
    pair the first with a filler and restart pairing at the second. A lone
    trailing letter is padded with a filler as well.
    DECRYPT: the text must already be an even number of letters; pairs are
    taken as they come.
    """
    mode = Mode.coerce(mode)
    letters = normalize(text, strict=strict)
    if mode is Mode.DECRYPT:
        if len(letters) % 2 != 0:
            raise InvalidText(f"Ciphertext must have an even number of letters (got {len(letters)}).")
        return [Digraph(letters[i], letters[i + 1]) for i in range(0, len(letters), 2)]

    filler = check_filler(filler)
    pairs = []
    i = 0
    while i < len(letters):
        a = letters[i]
        if i + 1 < len(letters) and letters[i + 1] != a:
            pairs.append(Digraph(a, letters[i + 1]))
            i += 2
        else:
            pad = filler_for(a, filler)
            pairs.append(Digraph(a, pad, True))
            i += 1
    inserted = sum(1 for pair in pairs if pair.filler)
    if inserted:
        logger.debug(f"Inserted {inserted} filler letter(s) into {len(letters)} letters")
    return pairs
