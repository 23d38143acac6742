import logging

from .digraphs import FILLER, Mode, split_digraphs
from .engine import substitute_pair
from .square import build_key_square

logger = logging.getLogger(__name__)


def substitute(text: str, key: str, mode, *, filler: str = FILLER, strict: bool = False) -> str:
    """
    Encrypt or decrypt text with the Playfair cipher.

    The key square is rebuilt from `key` on every call. Output is lowercase
    letters only. Decrypting an encryption gives back the text with j
    merged into i and any inserted fillers still in place.
    Raises InvalidKey / InvalidText before producing any output.
    """
    mode = Mode.coerce(mode)
    square = build_key_square(key)
    pairs = split_digraphs(text, mode, filler=filler, strict=strict)
    result = ''.join(str(substitute_pair(pair, square, mode)) for pair in pairs)
    logger.debug(f"{mode.name.lower()}: {len(pairs)} digraph(s) -> {len(result)} letters")
    return result


def encrypt(text: str, key: str, **kwargs) -> str:
    return substitute(text, key, Mode.ENCRYPT, **kwargs)


def decrypt(text: str, key: str, **kwargs) -> str:
    return substitute(text, key, Mode.DECRYPT, **kwargs)
